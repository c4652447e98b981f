import numpy as np
import pytest

from surfacedock import Convexity, Descriptor, Graph, Node, Patch


def make_graph(positions, normal=(0.0, 0.0, 1.0)):
    """Build a mesh with one node per position, all sharing a normal."""
    return Graph([Node(position=p, normal=normal) for p in positions])


def make_patch(mesh, nodes, normal=(0.0, 0.0, 1.0)):
    """Build a patch positioned at the centroid of its nodes."""
    position = np.mean([mesh.position_of(n) for n in nodes], axis=0)
    return Patch(position=position, normal=normal, nodes=nodes)


@pytest.fixture
def target_mesh():
    return make_graph(
        [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 1.0, 0.0)]
    )


@pytest.fixture
def ligand_mesh():
    return make_graph(
        [(5.0, 5.0, 3.0), (6.0, 5.0, 3.0), (5.0, 6.0, 3.0), (6.0, 6.0, 3.0)],
        normal=(1.0, 0.0, 0.0),
    )


@pytest.fixture
def desc_target(target_mesh):
    """Two overlapping target patches: convex (curv 1.0) and concave (curv 2.0)."""
    return [
        (make_patch(target_mesh, (0, 1, 2)), Descriptor(Convexity.CONVEX, 1.0)),
        (make_patch(target_mesh, (1, 2, 3)), Descriptor(Convexity.CONCAVE, 2.0)),
    ]


@pytest.fixture
def desc_ligand(ligand_mesh):
    """Two overlapping ligand patches: concave (curv 1.5) and convex (curv 3.0)."""
    return [
        (
            make_patch(ligand_mesh, (0, 1, 2), normal=(1.0, 0.0, 0.0)),
            Descriptor(Convexity.CONCAVE, 1.5),
        ),
        (
            make_patch(ligand_mesh, (1, 2, 3), normal=(1.0, 0.0, 0.0)),
            Descriptor(Convexity.CONVEX, 3.0),
        ),
    ]


def line_descriptors(xs, convexity, curv=1.0):
    """Patches with no nodes placed along the x axis."""
    return [
        (Patch(position=(x, 0.0, 0.0), normal=(0.0, 0.0, 1.0)), Descriptor(convexity, curv))
        for x in xs
    ]
