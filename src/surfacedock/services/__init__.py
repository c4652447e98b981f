"""Docking services."""

from .matching_service import MatchingService, dissimilarity
from .transformation_service import TransformationService
from .docking_service import DockingService, DockingResult

__all__ = [
    "MatchingService",
    "dissimilarity",
    "TransformationService",
    "DockingService",
    "DockingResult",
]
