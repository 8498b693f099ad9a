import math

import numpy as np
import pytest

from aengine.mathutils import (
    angle_axis,
    decompose_transform,
    face_normal,
    from_to_rotation,
    look_at_rotation,
    quat_from_matrix,
    rotate,
)


def _unit(v):
    v = np.asarray(v, dtype=float)
    return v / np.linalg.norm(v)


def _aligned_sign(q, reference):
    """Return q with its sign chosen to match reference (q and -q are the same rotation)."""
    q = np.asarray(q, dtype=float)
    return -q if np.dot(q, reference) < 0 else q


@pytest.mark.parametrize(
    "src,dst",
    [((1, 0, 0), (0, 1, 0)), ((1, 2, 3), (-2, 0.5, 4)), ((0, 0, 2), (1, 1, 0))],
)
def test_from_to_rotation_maps_source_onto_target(src, dst):
    q = from_to_rotation(src, dst)
    assert np.isclose(np.linalg.norm(q), 1.0)
    assert np.allclose(rotate(q, _unit(src)), _unit(dst), atol=1e-9)


def test_from_to_rotation_zero_vector_is_identity():
    assert np.allclose(from_to_rotation((0, 0, 0), (1, 0, 0)), [1, 0, 0, 0])


def test_from_to_rotation_parallel_is_identity():
    assert np.allclose(from_to_rotation((2, 0, 0), (5, 0, 0)), [1, 0, 0, 0])


def test_look_at_rotation_aligns_axes():
    forward = (1.0, 0.0, 1.0)
    up = (0.0, 1.0, 0.0)
    q = look_at_rotation(forward, up)
    assert np.allclose(rotate(q, (0, 0, 1)), _unit(forward), atol=1e-9)
    assert np.allclose(rotate(q, (0, 1, 0)), up, atol=1e-9)


def test_face_normal_is_unit_and_orthogonal():
    v0, v1, v2 = np.array([1.0, 2, 0]), np.array([3.0, 1, 1]), np.array([0.0, 4, 2])
    n = face_normal(v0, v1, v2)
    assert np.isclose(np.linalg.norm(n), 1.0)
    assert abs(np.dot(n, v1 - v0)) < 1e-9
    assert abs(np.dot(n, v2 - v0)) < 1e-9


def test_face_normal_winding():
    assert np.allclose(face_normal((0, 0, 0), (1, 0, 0), (0, 1, 0)), [0, 0, 1])


def test_angle_axis_is_unit_and_preserves_length():
    q = angle_axis(0.7, _unit((1, 1, 1)))
    assert np.isclose(np.linalg.norm(q), 1.0)
    v = np.array([3.0, -1.0, 2.0])
    assert np.isclose(np.linalg.norm(rotate(q, v)), np.linalg.norm(v))


def test_angle_axis_quarter_turn():
    q = angle_axis(math.pi / 2, (0, 0, 1))
    assert np.allclose(rotate(q, (1, 0, 0)), [0, 1, 0], atol=1e-12)


def test_rotation_about_axis_keeps_axis():
    axis = _unit((2, -1, 3))
    assert np.allclose(rotate(angle_axis(1.3, axis), axis), axis)


@pytest.mark.parametrize("angle", [0.1, 1.5, 3.0, -2.5])
def test_quat_from_matrix_round_trip(angle):
    q = np.asarray(angle_axis(angle, _unit((0.3, -0.8, 0.5))), dtype=float)
    matrix = np.column_stack([rotate(q, e) for e in np.eye(3)])
    result = quat_from_matrix(matrix)
    assert np.isclose(np.linalg.norm(result), 1.0)
    assert np.allclose(_aligned_sign(result, q), q, atol=1e-9)


def test_decompose_transform_round_trip():
    q = np.asarray(angle_axis(0.9, _unit((1, 2, -1))), dtype=float)
    scale = np.array([2.0, 0.5, 3.0])
    position = np.array([4.0, -5.0, 6.0])
    transform = np.eye(4)
    for column, (axis, factor) in enumerate(zip(np.eye(3), scale)):
        transform[:3, column] = rotate(q, axis) * factor
    transform[:3, 3] = position
    result = decompose_transform(transform)
    assert np.allclose(result.position, position)
    assert np.allclose(result.scale, scale)
    assert np.allclose(_aligned_sign(result.rotation, q), q, atol=1e-9)


def test_decompose_identity():
    result = decompose_transform(np.eye(4))
    assert np.allclose(result.position, [0, 0, 0])
    assert np.allclose(result.scale, [1, 1, 1])
    assert np.allclose(result.rotation, [1, 0, 0, 0])