#!/usr/bin/env python3
# src/surfacedock/domain/models/surface.py

"""
Domain models for surface patches and their descriptors.
"""

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

from .convexity import Convexity
from ...exceptions import PatchIndexError


@dataclass(frozen=True, eq=False)
class Patch:
    """A connected region of a surface mesh."""

    position: np.ndarray
    normal: np.ndarray
    nodes: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Store vectors as float64 arrays and node indices as a tuple."""
        object.__setattr__(
            self, "position", np.asarray(self.position, dtype=np.float64).reshape(3)
        )
        object.__setattr__(
            self, "normal", np.asarray(self.normal, dtype=np.float64).reshape(3)
        )
        object.__setattr__(self, "nodes", tuple(int(n) for n in self.nodes))


@dataclass(frozen=True)
class Descriptor:
    """Convexity class and curvature magnitude of a patch."""

    type: Convexity
    curv: float

    def __post_init__(self):
        """Reject negative or non-finite curvature."""
        if not math.isfinite(self.curv) or self.curv < 0:
            raise ValueError(f"Curvature must be finite and >= 0, got {self.curv}")


SurfaceEntry = Tuple[Patch, Descriptor]
SurfaceDescriptors = List[SurfaceEntry]


def get_surface_entry(
    descriptors: Sequence[SurfaceEntry], index: int, label: str = "surface"
) -> SurfaceEntry:
    """
    Look up a (Patch, Descriptor) pair by patch index.

    Args:
        descriptors: Surface descriptor list of one molecule
        index: Patch identifier
        label: Name of the molecule, used in error messages

    Returns:
        The (Patch, Descriptor) pair at index

    Raises:
        PatchIndexError: If index is negative or past the end of the list
    """
    if index < 0 or index >= len(descriptors):
        raise PatchIndexError(index, len(descriptors), label)
    return descriptors[index]
