"""Domain interfaces."""

from .patch_distance import PatchDistance

__all__ = ["PatchDistance"]
