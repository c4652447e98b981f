"""Surface patch matching and rigid alignment for protein-protein docking."""

from .config import DockingParameters, DEFAULT_PARAMETERS
from .domain.models.convexity import Convexity
from .domain.models.surface import Patch, Descriptor, SurfaceDescriptors
from .domain.models.mesh import FaceRef, Node, Graph
from .domain.models.matching import MatchingGroup, MatchingGroups, GroupCloud
from .domain.interfaces.patch_distance import PatchDistance
from .domain.implementations.euclidean_distance import EuclideanPatchDistance
from .domain.implementations.geodesic_distance import GeodesicPatchDistance
from .domain.geometry import (
    build_cloud_from_group,
    cloud_centroid,
    compare_points,
    normal_alignment_rotation,
    apply_transform,
)
from .services.matching_service import MatchingService
from .services.transformation_service import TransformationService
from .services.docking_service import DockingService, DockingResult
from .exceptions import (
    DockingError,
    PatchIndexError,
    NodeIndexError,
    EmptyGroupError,
    EmptyDescriptorsError,
    InvalidParameterError,
)

__version__ = "0.1.0"

__all__ = [
    "DockingParameters",
    "DEFAULT_PARAMETERS",
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
    "build_cloud_from_group",
    "cloud_centroid",
    "compare_points",
    "normal_alignment_rotation",
    "apply_transform",
    "MatchingService",
    "TransformationService",
    "DockingService",
    "DockingResult",
    "DockingError",
    "PatchIndexError",
    "NodeIndexError",
    "EmptyGroupError",
    "EmptyDescriptorsError",
    "InvalidParameterError",
]
