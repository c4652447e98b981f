# src/surfacedock/services/matching_service.py
"""Service for pairing complementary patches and grouping the pairs."""

import logging
from typing import List, Optional

from ..config import DEFAULT_PARAMETERS, DockingParameters
from ..domain.interfaces.patch_distance import PatchDistance
from ..domain.implementations.euclidean_distance import EuclideanPatchDistance
from ..domain.models.matching import (
    Candidate,
    MatchingGroup,
    MatchingGroups,
    PatchPair,
)
from ..domain.models.surface import Descriptor, SurfaceDescriptors, get_surface_entry


def dissimilarity(lhs: Descriptor, rhs: Descriptor) -> float:
    """
    Relative curvature mismatch between two descriptors.

    Returns:
        |curv(lhs) - curv(rhs)| / max(curv(lhs), curv(rhs)), or 0.0 when both
        curvatures are zero
    """
    largest = max(lhs.curv, rhs.curv)
    if largest == 0:
        return 0.0
    return abs(lhs.curv - rhs.curv) / largest


class MatchingService:
    """Service for building matching groups of target/ligand patch pairs."""

    def __init__(
        self,
        parameters: Optional[DockingParameters] = None,
        target_distance: Optional[PatchDistance] = None,
        ligand_distance: Optional[PatchDistance] = None,
    ):
        """
        Initialize service.

        Args:
            parameters: Similarity cutoff and grouping threshold
            target_distance: Distance strategy between target patches
            ligand_distance: Distance strategy between ligand patches
        """
        self.parameters = parameters or DEFAULT_PARAMETERS
        self._target_distance = target_distance or EuclideanPatchDistance()
        self._ligand_distance = ligand_distance or EuclideanPatchDistance()
        self.logger = logging.getLogger(__name__)

    def rank_candidates(
        self,
        target_index: int,
        desc_target: SurfaceDescriptors,
        desc_ligand: SurfaceDescriptors,
    ) -> List[Candidate]:
        """
        Rank complementary ligand patches for one target patch.

        Only ligand patches of a different convexity type are considered.

        Args:
            target_index: Index of the target patch
            desc_target: Target surface descriptors
            desc_ligand: Ligand surface descriptors

        Returns:
            At most n_best_pairs candidates, most similar first
        """
        _, t_desc = get_surface_entry(desc_target, target_index, "target")

        candidates = [
            Candidate(dissimilarity(t_desc, l_desc), l)
            for l, (_, l_desc) in enumerate(desc_ligand)
            if t_desc.type != l_desc.type
        ]
        candidates.sort()

        return candidates[: self.parameters.n_best_pairs]

    def build_matching_groups(
        self, desc_target: SurfaceDescriptors, desc_ligand: SurfaceDescriptors
    ) -> MatchingGroups:
        """
        Greedily cluster complementary patch pairs into spatially coherent groups.

        Target patches are visited in index order and their candidates in
        ranking order. A pair joins every existing group whose members all lie
        within g_thresh of it on both surfaces, and starts a new group when no
        group accepts it. The outcome depends on this visiting order.

        Args:
            desc_target: Target surface descriptors
            desc_ligand: Ligand surface descriptors

        Returns:
            List of matching groups, each a list of (target, ligand) indices
        """
        groups: MatchingGroups = []

        for t in range(len(desc_target)):
            for candidate in self.rank_candidates(t, desc_target, desc_ligand):
                pair = (t, candidate.ligand_index)
                added = False

                for group in groups:
                    if self._accepts(group, pair, desc_target, desc_ligand):
                        group.append(pair)
                        added = True

                if not added:
                    groups.append([pair])

        self.logger.debug(
            "Built %d matching groups from %d pairs",
            len(groups),
            sum(len(g) for g in groups),
        )
        return groups

    def _accepts(
        self,
        group: MatchingGroup,
        pair: PatchPair,
        desc_target: SurfaceDescriptors,
        desc_ligand: SurfaceDescriptors,
    ) -> bool:
        """Check the pair against every member of the group."""
        g_thresh = self.parameters.g_thresh
        accepted = True

        for t, l in group:
            if self._target_distance.distance(pair[0], t, desc_target) > g_thresh:
                accepted = False
            if self._ligand_distance.distance(pair[1], l, desc_ligand) > g_thresh:
                accepted = False

        return accepted
