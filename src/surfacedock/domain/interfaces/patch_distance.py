"""Interface for inter-patch distance strategies."""

from abc import ABC, abstractmethod

from ..models.surface import SurfaceDescriptors


class PatchDistance(ABC):
    """Abstract base class for distances between two patches of one surface."""

    @abstractmethod
    def distance(self, lhs: int, rhs: int, descriptors: SurfaceDescriptors) -> float:
        """
        Compute the distance between two patches.

        Args:
            lhs: Index of the first patch
            rhs: Index of the second patch
            descriptors: Surface descriptors both patches belong to

        Returns:
            Non-negative, symmetric distance

        Raises:
            PatchIndexError: If either index is out of range
        """
        pass
