"""Core domain models, interfaces and geometry."""

from .models.convexity import Convexity
from .models.surface import Patch, Descriptor, SurfaceDescriptors
from .models.mesh import FaceRef, Node, Graph
from .models.matching import MatchingGroup, MatchingGroups, GroupCloud
from .interfaces.patch_distance import PatchDistance
from .implementations.euclidean_distance import EuclideanPatchDistance
from .implementations.geodesic_distance import GeodesicPatchDistance

__all__ = [
    "Convexity",
    "Patch",
    "Descriptor",
    "SurfaceDescriptors",
    "FaceRef",
    "Node",
    "Graph",
    "MatchingGroup",
    "MatchingGroups",
    "GroupCloud",
    "PatchDistance",
    "EuclideanPatchDistance",
    "GeodesicPatchDistance",
]
