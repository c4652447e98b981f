"""Domain model classes."""

from .convexity import Convexity
from .surface import Patch, Descriptor, SurfaceDescriptors, get_surface_entry
from .mesh import FaceRef, Node, Graph
from .matching import (
    PatchPair,
    MatchingGroup,
    MatchingGroups,
    Candidate,
    GroupCloud,
)

__all__ = [
    "Convexity",
    "Patch",
    "Descriptor",
    "SurfaceDescriptors",
    "get_surface_entry",
    "FaceRef",
    "Node",
    "Graph",
    "PatchPair",
    "MatchingGroup",
    "MatchingGroups",
    "Candidate",
    "GroupCloud",
]
