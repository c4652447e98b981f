import numpy as np
import pytest

from surfacedock import FaceRef, Graph, Node, NodeIndexError

from conftest import make_graph


class TestNode:
    """Tests for mesh nodes."""

    def test_faces(self):
        node = Node(position=(0, 0, 0), normal=(0, 0, 1))
        node.push_triangular_face(1, 2)
        node.push_triangular_face(2, 3)

        assert node.n_incident_faces() == 2
        assert node.get_face(1) == FaceRef(2, 3)
        assert node.get_face(0).first == 1
        assert node.get_face(0).second == 2

    def test_bad_face_index(self):
        node = Node(position=(0, 0, 0), normal=(0, 0, 1))
        with pytest.raises(NodeIndexError):
            node.get_face(0)

    def test_transform_node(self):
        node = Node(position=(1.0, 0.0, 0.0), normal=(1.0, 0.0, 0.0))
        # quarter turn about z followed by a shift along z
        transform = np.array(
            [
                [0.0, -1.0, 0.0, 0.0],
                [1.0, 0.0, 0.0, 0.0],
                [0.0, 0.0, 1.0, 5.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

        node.transform_node(transform)

        assert np.allclose(node.position, [0.0, 1.0, 5.0])
        assert np.allclose(node.normal, [0.0, 1.0, 0.0])


class TestGraph:
    """Tests for the surface mesh graph."""

    def test_position_lookup(self):
        mesh = make_graph([(0.0, 0.0, 0.0), (1.0, 2.0, 3.0)])
        assert len(mesh) == 2
        assert np.array_equal(mesh.position_of(1), [1.0, 2.0, 3.0])

    def test_bad_node_index(self):
        mesh = make_graph([(0.0, 0.0, 0.0)])
        with pytest.raises(NodeIndexError):
            mesh.position_of(1)
        with pytest.raises(NodeIndexError):
            mesh.get_node(-1)

    def test_add_node(self):
        mesh = Graph()
        assert mesh.add_node(Node(position=(0, 0, 0), normal=(0, 0, 1))) == 0
        assert mesh.add_node(Node(position=(1, 0, 0), normal=(0, 0, 1))) == 1

    def test_transform_moves_every_node(self):
        mesh = make_graph([(0.0, 0.0, 0.0), (1.0, 1.0, 1.0)])
        transform = np.eye(4)
        transform[:3, 3] = [1.0, -1.0, 2.0]

        mesh.transform(transform)

        assert np.allclose(mesh.position_of(0), [1.0, -1.0, 2.0])
        assert np.allclose(mesh.position_of(1), [2.0, 0.0, 3.0])

    def test_to_networkx(self):
        mesh = make_graph([(0.0, 0.0, 0.0), (3.0, 0.0, 0.0), (0.0, 4.0, 0.0)])
        mesh.get_node(0).push_triangular_face(1, 2)

        graph = mesh.to_networkx()

        assert graph.number_of_nodes() == 3
        assert graph.number_of_edges() == 3
        assert graph[0][1]["weight"] == pytest.approx(3.0)
        assert graph[0][2]["weight"] == pytest.approx(4.0)
        assert graph[1][2]["weight"] == pytest.approx(5.0)
