"""Geodesic distance between patches along the mesh graph."""

import logging
from typing import Dict

import networkx as nx
import numpy as np

from ..interfaces.patch_distance import PatchDistance
from ..models.mesh import Graph
from ..models.surface import Patch, SurfaceDescriptors, get_surface_entry


class GeodesicPatchDistance(PatchDistance):
    """
    Shortest-path distance over the surface mesh.

    Each patch is anchored at its node closest to the patch centroid, and the
    distance between two patches is the Dijkstra path length between their
    anchors, with edges weighted by Euclidean length. Anchors in disconnected
    components are at infinite distance.
    """

    def __init__(self, mesh: Graph):
        """
        Initialize the strategy for one mesh.

        Args:
            mesh: Surface mesh the patches were extracted from
        """
        self._mesh = mesh
        self._graph = mesh.to_networkx()
        self._lengths: Dict[int, Dict[int, float]] = {}
        self.logger = logging.getLogger(__name__)

    def distance(self, lhs: int, rhs: int, descriptors: SurfaceDescriptors) -> float:
        lhs_patch, _ = get_surface_entry(descriptors, lhs)
        rhs_patch, _ = get_surface_entry(descriptors, rhs)

        source = self._anchor(lhs_patch)
        target = self._anchor(rhs_patch)
        if source == target:
            return 0.0

        lengths = self._lengths.get(source)
        if lengths is None:
            lengths = nx.single_source_dijkstra_path_length(
                self._graph, source, weight="weight"
            )
            self._lengths[source] = lengths
            self.logger.debug(
                "Computed shortest paths from node %d (%d reachable)",
                source,
                len(lengths),
            )

        return float(lengths.get(target, float("inf")))

    def _anchor(self, patch: Patch) -> int:
        """Return the patch node closest to the patch centroid."""
        if not patch.nodes:
            raise ValueError("Cannot anchor a patch with no mesh nodes")
        positions = np.array([self._mesh.position_of(n) for n in patch.nodes])
        offsets = np.linalg.norm(positions - patch.position, axis=1)
        return patch.nodes[int(np.argmin(offsets))]
