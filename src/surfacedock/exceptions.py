"""Exception hierarchy for surface docking."""


class DockingError(Exception):
    """Base class for all docking errors."""


class PatchIndexError(DockingError, IndexError):
    """Raised when a patch index falls outside a descriptor list."""

    def __init__(self, index: int, size: int, label: str = "surface"):
        self.index = index
        self.size = size
        self.label = label
        super().__init__(
            f"Patch index {index} out of range for {label} descriptors "
            f"(size {size})"
        )


class NodeIndexError(DockingError, IndexError):
    """Raised when a mesh node or face index is out of range."""


class EmptyGroupError(DockingError, ValueError):
    """Raised when an empty matching group reaches cloud building."""


class EmptyDescriptorsError(DockingError, ValueError):
    """Raised when docking is requested with an empty descriptor list."""


class InvalidParameterError(DockingError, ValueError):
    """Raised when docking parameters are out of their valid range."""
