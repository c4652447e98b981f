# src/surfacedock/services/transformation_service.py
"""Service for deriving rigid transformations from matching groups."""

import logging
from typing import List

import numpy as np
from tqdm import tqdm

from ..domain.geometry import (
    build_cloud_from_group,
    cloud_centroid,
    compose_transform,
    normal_alignment_rotation,
)
from ..domain.models.matching import MatchingGroup, MatchingGroups
from ..domain.models.mesh import Graph
from ..domain.models.surface import SurfaceDescriptors
from ..exceptions import EmptyGroupError


class TransformationService:
    """Service for aligning ligand patch groups onto target patch groups."""

    def __init__(self, show_progress: bool = False):
        """
        Initialize service.

        Args:
            show_progress: Display a progress bar over the matching groups
        """
        self.show_progress = show_progress
        self.logger = logging.getLogger(__name__)

    def transformations_from_matching_groups(
        self,
        matching_groups: MatchingGroups,
        target: Graph,
        desc_target: SurfaceDescriptors,
        ligand: Graph,
        desc_ligand: SurfaceDescriptors,
    ) -> List[np.ndarray]:
        """
        Build one rigid transformation per matching group.

        Args:
            matching_groups: Groups of (target, ligand) patch index pairs
            target: Target surface mesh
            desc_target: Target surface descriptors
            ligand: Ligand surface mesh
            desc_ligand: Ligand surface descriptors

        Returns:
            List of 4x4 transforms in the same order as matching_groups, each
            mapping the ligand group onto the target group
        """
        transformations = []

        for group in tqdm(
            matching_groups,
            desc="Aligning matching groups",
            disable=not self.show_progress,
        ):
            transformations.append(
                self.transformation_from_group(
                    group, target, desc_target, ligand, desc_ligand
                )
            )

        return transformations

    def transformation_from_group(
        self,
        group: MatchingGroup,
        target: Graph,
        desc_target: SurfaceDescriptors,
        ligand: Graph,
        desc_ligand: SurfaceDescriptors,
    ) -> np.ndarray:
        """Compute the transformation that docks one ligand group onto its target group."""
        if not group:
            raise EmptyGroupError("Matching group has no patch pairs")

        # TODO: refine the initial alignment with ICP over the two clouds
        target_indices = [t for t, _ in group]
        ligand_indices = [l for _, l in group]

        target_cloud = build_cloud_from_group(
            target_indices, desc_target, target, "target"
        )
        ligand_cloud = build_cloud_from_group(
            ligand_indices, desc_ligand, ligand, "ligand"
        )

        target_centroid = cloud_centroid(target_cloud.points)
        ligand_centroid = cloud_centroid(ligand_cloud.points)

        rotation = normal_alignment_rotation(ligand_cloud.normal, target_cloud.normal)

        self.logger.debug(
            "Group of %d pairs: ligand centroid %s -> target centroid %s",
            len(group),
            ligand_centroid,
            target_centroid,
        )
        return compose_transform(rotation, ligand_centroid, target_centroid)
