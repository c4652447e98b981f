#!/usr/bin/env python3
# src/surfacedock/domain/models/mesh.py

"""
Domain model representing a molecular surface mesh as a graph of nodes.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

import networkx as nx
import numpy as np

from .convexity import Convexity
from ...exceptions import NodeIndexError


class FaceRef(NamedTuple):
    """The two neighbour node indices of an incident triangular face."""

    first: int
    second: int


def _vector(values) -> np.ndarray:
    return np.asarray(values, dtype=np.float64).reshape(3)


@dataclass(eq=False)
class Node:
    """A vertex of the surface mesh."""

    position: np.ndarray
    normal: np.ndarray
    curvature: np.ndarray = field(default_factory=lambda: np.zeros(3))
    convexity: Optional[Convexity] = None
    color: np.ndarray = field(default_factory=lambda: np.zeros(3))  # rendering only
    faces: List[FaceRef] = field(default_factory=list)

    def __post_init__(self):
        """Normalize vector attributes to float64 arrays."""
        self.position = _vector(self.position)
        self.normal = _vector(self.normal)
        self.curvature = _vector(self.curvature)
        self.color = _vector(self.color)

    def push_triangular_face(self, adj1: int, adj2: int) -> None:
        """Register a triangle formed by this node and two neighbours."""
        self.faces.append(FaceRef(adj1, adj2))

    def n_incident_faces(self) -> int:
        return len(self.faces)

    def get_face(self, index: int) -> FaceRef:
        if index < 0 or index >= len(self.faces):
            raise NodeIndexError(
                f"Face index {index} out of range ({len(self.faces)} faces)"
            )
        return self.faces[index]

    def transform_node(self, transform: np.ndarray) -> None:
        """
        Apply a 4x4 rigid transformation to this node.

        The position is transformed as a point and the normal as a direction.

        Args:
            transform: 4x4 homogeneous transformation matrix
        """
        transform = np.asarray(transform, dtype=np.float64)
        self.position = transform[:3, :3] @ self.position + transform[:3, 3]
        normal = transform[:3, :3] @ self.normal
        norm = np.linalg.norm(normal)
        self.normal = normal / norm if norm > 0 else normal


class Graph:
    """Surface mesh holding nodes addressable by index."""

    def __init__(self, nodes: Optional[List[Node]] = None):
        """
        Initialize a Graph.

        Args:
            nodes: Optional list of Node objects
        """
        self.nodes: List[Node] = list(nodes) if nodes else []

    def __len__(self) -> int:
        return len(self.nodes)

    def add_node(self, node: Node) -> int:
        """Append a node and return its index."""
        self.nodes.append(node)
        return len(self.nodes) - 1

    def get_node(self, index: int) -> Node:
        if index < 0 or index >= len(self.nodes):
            raise NodeIndexError(
                f"Node index {index} out of range (mesh has {len(self.nodes)} nodes)"
            )
        return self.nodes[index]

    def position_of(self, index: int) -> np.ndarray:
        return self.get_node(index).position

    def transform(self, transform: np.ndarray) -> None:
        """Apply a 4x4 rigid transformation to every node in place."""
        for node in self.nodes:
            node.transform_node(transform)

    def to_networkx(self) -> nx.Graph:
        """
        Build an undirected graph of mesh edges from the incident faces.

        Returns:
            networkx Graph whose edges carry a 'weight' equal to the
            Euclidean length of the edge
        """
        graph = nx.Graph()
        graph.add_nodes_from(range(len(self.nodes)))

        for i, node in enumerate(self.nodes):
            for face in node.faces:
                for a, b in ((i, face.first), (i, face.second), face):
                    pos_a = self.position_of(a)
                    pos_b = self.position_of(b)
                    graph.add_edge(a, b, weight=float(np.linalg.norm(pos_a - pos_b)))

        return graph
