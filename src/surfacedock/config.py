"""Docking parameters shared by the matching and transformation services."""

import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping

from .exceptions import InvalidParameterError


@dataclass(frozen=True)
class DockingParameters:
    """
    Read-only configuration for a docking run.

    Attributes:
        n_best_pairs: Number of most similar ligand patches kept per target patch
        g_thresh: Maximum inter-patch distance for two pairs to share a group
    """

    n_best_pairs: int = 3
    g_thresh: float = 10.0

    def __post_init__(self):
        """Validate parameter ranges."""
        if isinstance(self.n_best_pairs, bool) or not isinstance(
            self.n_best_pairs, int
        ):
            raise InvalidParameterError(
                f"n_best_pairs must be an integer, got {self.n_best_pairs!r}"
            )
        if self.n_best_pairs < 1:
            raise InvalidParameterError(
                f"n_best_pairs must be positive, got {self.n_best_pairs}"
            )
        if not math.isfinite(self.g_thresh) or self.g_thresh <= 0:
            raise InvalidParameterError(
                f"g_thresh must be a positive finite number, got {self.g_thresh}"
            )

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "DockingParameters":
        """
        Build parameters from a mapping, ignoring unknown keys.

        Args:
            values: Mapping of parameter names to values

        Returns:
            DockingParameters instance
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        """Return parameters as a plain dictionary."""
        return asdict(self)


DEFAULT_PARAMETERS = DockingParameters()
