"""Implementations of domain interfaces."""

from .euclidean_distance import EuclideanPatchDistance
from .geodesic_distance import GeodesicPatchDistance

__all__ = ["EuclideanPatchDistance", "GeodesicPatchDistance"]
