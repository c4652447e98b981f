"""Domain models for patch matching results."""

from dataclasses import dataclass
from typing import List, NamedTuple, Tuple

import numpy as np

# (target patch id, ligand patch id)
PatchPair = Tuple[int, int]
MatchingGroup = List[PatchPair]
MatchingGroups = List[MatchingGroup]


class Candidate(NamedTuple):
    """A ligand patch ranked against a target patch, ordered by score then index."""

    score: float
    ligand_index: int


@dataclass
class GroupCloud:
    """Merged point cloud and average normal of a group of patches."""

    points: np.ndarray
    normal: np.ndarray
    degenerate_normal: bool = False
