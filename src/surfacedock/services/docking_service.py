# src/surfacedock/services/docking_service.py
"""Service running the full patch matching and alignment pipeline."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ..config import DEFAULT_PARAMETERS, DockingParameters
from ..domain.interfaces.patch_distance import PatchDistance
from ..domain.models.matching import MatchingGroups
from ..domain.models.mesh import Graph
from ..domain.models.surface import SurfaceDescriptors
from ..exceptions import EmptyDescriptorsError
from ..utils.benchmarking import Timer
from .matching_service import MatchingService
from .transformation_service import TransformationService


@dataclass
class DockingResult:
    """Contains matching groups and the transformation derived from each."""

    matching_groups: MatchingGroups
    transformations: List[np.ndarray] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.matching_groups)


class DockingService:
    """Service for docking a ligand surface onto a target surface."""

    def __init__(
        self,
        parameters: Optional[DockingParameters] = None,
        target_distance: Optional[PatchDistance] = None,
        ligand_distance: Optional[PatchDistance] = None,
        show_progress: bool = False,
    ):
        """
        Initialize service with docking parameters and distance strategies.

        Args:
            parameters: Similarity cutoff and grouping threshold
            target_distance: Distance strategy between target patches
            ligand_distance: Distance strategy between ligand patches
            show_progress: Display a progress bar while aligning groups
        """
        self.parameters = parameters or DEFAULT_PARAMETERS
        self._matching = MatchingService(
            self.parameters, target_distance, ligand_distance
        )
        self._transformation = TransformationService(show_progress)
        self.logger = logging.getLogger(__name__)

    def build_matching_groups(
        self, desc_target: SurfaceDescriptors, desc_ligand: SurfaceDescriptors
    ) -> MatchingGroups:
        """Group complementary target/ligand patch pairs."""
        return self._matching.build_matching_groups(desc_target, desc_ligand)

    def transformations_from_matching_groups(
        self,
        matching_groups: MatchingGroups,
        target: Graph,
        desc_target: SurfaceDescriptors,
        ligand: Graph,
        desc_ligand: SurfaceDescriptors,
    ) -> List[np.ndarray]:
        """Derive one rigid transformation per matching group."""
        return self._transformation.transformations_from_matching_groups(
            matching_groups, target, desc_target, ligand, desc_ligand
        )

    def dock(
        self,
        target: Graph,
        desc_target: SurfaceDescriptors,
        ligand: Graph,
        desc_ligand: SurfaceDescriptors,
    ) -> DockingResult:
        """
        Match patches and derive candidate docking poses.

        Args:
            target: Target surface mesh
            desc_target: Target surface descriptors
            ligand: Ligand surface mesh
            desc_ligand: Ligand surface descriptors

        Returns:
            DockingResult with index-aligned groups and transformations

        Raises:
            EmptyDescriptorsError: If either descriptor list is empty
        """
        if not desc_target:
            raise EmptyDescriptorsError("Target surface has no patch descriptors")
        if not desc_ligand:
            raise EmptyDescriptorsError("Ligand surface has no patch descriptors")

        with Timer("matching") as timer:
            groups = self.build_matching_groups(desc_target, desc_ligand)
        self.logger.info(
            "Built %d matching groups in %.3fs", len(groups), timer.elapsed()
        )

        with Timer("alignment") as timer:
            transformations = self.transformations_from_matching_groups(
                groups, target, desc_target, ligand, desc_ligand
            )
        self.logger.info(
            "Derived %d transformations in %.3fs",
            len(transformations),
            timer.elapsed(),
        )

        return DockingResult(matching_groups=groups, transformations=transformations)
