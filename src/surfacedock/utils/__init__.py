from .benchmarking import Timer

__all__ = ["Timer"]
