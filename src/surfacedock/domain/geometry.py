"""Geometric helpers for merging patch clouds and building rigid transforms."""

import logging
from functools import cmp_to_key
from typing import Sequence, Tuple

import numpy as np
from scipy.spatial.transform import Rotation

from .models.matching import GroupCloud
from .models.mesh import Graph
from .models.surface import SurfaceDescriptors, get_surface_entry
from ..exceptions import EmptyGroupError

logger = logging.getLogger(__name__)

ZERO_NORM_EPS = 1e-12
PARALLEL_EPS = 1e-9

Point = Tuple[float, float, float]


def compare_points(lhs: Sequence[float], rhs: Sequence[float]) -> int:
    """
    Three-way lexicographic comparison of two 3D points.

    Components are compared exactly, without tolerance.

    Returns:
        -1 if lhs < rhs, 1 if lhs > rhs, 0 if both are equal
    """
    for a, b in zip(lhs, rhs):
        if a != b:
            return -1 if a < b else 1
    return 0


point_sort_key = cmp_to_key(compare_points)


def build_cloud_from_group(
    group: Sequence[int],
    descriptors: SurfaceDescriptors,
    mesh: Graph,
    label: str = "surface",
) -> GroupCloud:
    """
    Merge all patches of a group into one point cloud and average their normals.

    Both are computed in a single pass over the patches.

    Args:
        group: Patch indices, all from the same molecule
        descriptors: Surface descriptors of that molecule
        mesh: Surface mesh the patch nodes index into
        label: Name of the molecule, used in error messages

    Returns:
        GroupCloud with unique points in lexicographic order and the unit
        average normal. If the normals cancel out, the normal is the zero
        vector and degenerate_normal is set.

    Raises:
        EmptyGroupError: If group is empty
        PatchIndexError: If a patch index is out of range
        NodeIndexError: If a patch references a node missing from the mesh
    """
    if len(group) == 0:
        raise EmptyGroupError(f"Cannot build a cloud from an empty {label} group")

    normal_sum = np.zeros(3)
    unique_points = set()

    for patch_index in group:
        patch, _ = get_surface_entry(descriptors, patch_index, label)
        normal_sum += patch.normal
        for node_index in patch.nodes:
            unique_points.add(tuple(float(c) for c in mesh.position_of(node_index)))

    points = sorted(unique_points, key=point_sort_key)
    cloud = np.array(points, dtype=np.float64).reshape(-1, 3)

    avg_normal = normal_sum / len(group)
    norm = np.linalg.norm(avg_normal)
    if norm <= ZERO_NORM_EPS:
        logger.warning(
            "Normals of %s group %s cancel out; using zero average normal",
            label,
            list(group),
        )
        return GroupCloud(points=cloud, normal=np.zeros(3), degenerate_normal=True)

    return GroupCloud(points=cloud, normal=avg_normal / norm)


def cloud_centroid(points: np.ndarray) -> np.ndarray:
    """Return the arithmetic mean position of an (N, 3) point cloud."""
    points = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    if len(points) == 0:
        raise ValueError("Cannot compute the centroid of an empty cloud")
    return points.mean(axis=0)


def _perpendicular_axis(vector: np.ndarray) -> np.ndarray:
    # cross with the world axis least aligned with the vector
    reference = np.eye(3)[int(np.argmin(np.abs(vector)))]
    axis = np.cross(vector, reference)
    return axis / np.linalg.norm(axis)


def normal_alignment_rotation(
    ligand_normal: np.ndarray, target_normal: np.ndarray
) -> np.ndarray:
    """
    Rotation that turns the ligand normal to face against the target normal.

    With theta the angle between the normals, the rotation is theta + pi about
    cross(ligand, target): theta brings the ligand normal onto the target
    normal and the extra half turn flips it to the opposite direction.

    Args:
        ligand_normal: Unit average normal of the ligand group
        target_normal: Unit average normal of the target group

    Returns:
        3x3 rotation matrix R with R @ ligand_normal == -target_normal. Parallel
        normals give a half turn about an axis perpendicular to them,
        anti-parallel normals give the identity. A zero normal carries no
        orientation and also gives the identity.
    """
    ligand_normal = np.asarray(ligand_normal, dtype=np.float64)
    target_normal = np.asarray(target_normal, dtype=np.float64)

    if (
        np.linalg.norm(ligand_normal) <= ZERO_NORM_EPS
        or np.linalg.norm(target_normal) <= ZERO_NORM_EPS
    ):
        logger.warning("Degenerate group normal; skipping normal alignment")
        return np.eye(3)

    cos_angle = float(np.clip(np.dot(ligand_normal, target_normal), -1.0, 1.0))
    axis = np.cross(ligand_normal, target_normal)
    axis_norm = np.linalg.norm(axis)

    if axis_norm <= PARALLEL_EPS:
        if cos_angle < 0:
            return np.eye(3)
        axis = _perpendicular_axis(ligand_normal)
        angle = np.pi
    else:
        axis = axis / axis_norm
        angle = np.arccos(cos_angle) + np.pi

    half = angle / 2.0
    # scipy expects scalar-last quaternions
    quat = np.append(axis * np.sin(half), np.cos(half))
    return Rotation.from_quat(quat).as_matrix()


def translation_matrix(offset: np.ndarray) -> np.ndarray:
    """Return the 4x4 homogeneous translation by offset."""
    matrix = np.eye(4)
    matrix[:3, 3] = offset
    return matrix


def compose_transform(
    rotation: np.ndarray, ligand_centroid: np.ndarray, target_centroid: np.ndarray
) -> np.ndarray:
    """
    Rotate about the ligand centroid and carry it onto the target centroid.

    Returns:
        4x4 matrix Translate(target_centroid) @ R @ Translate(-ligand_centroid)
    """
    rotation4 = np.eye(4)
    rotation4[:3, :3] = rotation
    return (
        translation_matrix(target_centroid)
        @ rotation4
        @ translation_matrix(-np.asarray(ligand_centroid, dtype=np.float64))
    )


def apply_transform(transform: np.ndarray, points: np.ndarray) -> np.ndarray:
    """
    Apply a 4x4 homogeneous transform to one point or an (N, 3) array of points.
    """
    points = np.asarray(points, dtype=np.float64)
    return points @ transform[:3, :3].T + transform[:3, 3]
