#!/usr/bin/env python3
# src/surfacedock/domain/models/convexity.py

"""
Convexity classification of surface nodes and patches.
"""

from enum import Enum, auto


class Convexity(Enum):
    """Enumeration of possible surface convexity classes."""

    CONVEX = auto()
    CONCAVE = auto()
    FLAT = auto()
