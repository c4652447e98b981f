"""Euclidean distance between patch centroids."""

import numpy as np

from ..interfaces.patch_distance import PatchDistance
from ..models.surface import SurfaceDescriptors, get_surface_entry


class EuclideanPatchDistance(PatchDistance):
    """Approximate geodesic distance by the straight line between patch centroids."""

    def distance(self, lhs: int, rhs: int, descriptors: SurfaceDescriptors) -> float:
        lhs_patch, _ = get_surface_entry(descriptors, lhs)
        rhs_patch, _ = get_surface_entry(descriptors, rhs)
        return float(np.linalg.norm(lhs_patch.position - rhs_patch.position))
