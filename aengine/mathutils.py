"""Vector, quaternion and transform helpers.

Quaternions are numpy arrays ordered ``(w, x, y, z)``. Matrices are numpy
arrays that act on column vectors (``matrix @ vector``), so the translation of
a 4x4 transform lives in its last column.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import numpy as np

__all__ = [
    "DecomposedTransform",
    "from_to_rotation",
    "look_at_rotation",
    "face_normal",
    "decompose_transform",
    "quat_from_matrix",
    "angle_axis",
    "rotate",
]

IDENTITY_QUAT = (1.0, 0.0, 0.0, 0.0)


class DecomposedTransform(NamedTuple):
    """Translation, rotation quaternion and per-axis scale of a transform."""

    position: np.ndarray
    rotation: np.ndarray
    scale: np.ndarray


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        return vector / np.linalg.norm(vector)


def _identity() -> np.ndarray:
    return np.array(IDENTITY_QUAT, dtype=float)


def from_to_rotation(from_, to) -> np.ndarray:
    """Quaternion that rotates direction ``from_`` onto direction ``to``.

    Zero-length inputs and (anti)parallel directions yield the identity.
    """
    source = _vec3(from_)
    target = _vec3(to)
    if np.linalg.norm(source) == 0.0 or np.linalg.norm(target) == 0.0:
        return _identity()
    source = _normalize(source)
    target = _normalize(target)
    cos_theta = float(np.dot(source, target))
    if abs(abs(cos_theta) - 1.0) < 1e-9:
        return _identity()
    normal = _normalize(np.cross(source, target))
    theta = math.acos(max(-1.0, min(1.0, cos_theta)))
    return np.concatenate(([math.cos(theta / 2)], math.sin(theta / 2) * normal))


def look_at_rotation(forward, up) -> np.ndarray:
    """Quaternion whose local z axis points along ``forward`` with y near ``up``."""
    forward = _normalize(_vec3(forward))
    up = _normalize(_vec3(up))
    left = _normalize(np.cross(up, forward))
    up = _normalize(np.cross(forward, left))
    return quat_from_matrix(np.column_stack((left, up, forward)))


def face_normal(v0, v1, v2) -> np.ndarray:
    """Unit normal of the triangle ``v0, v1, v2`` (counter-clockwise winding)."""
    a = _vec3(v0)
    return _normalize(np.cross(_vec3(v1) - a, _vec3(v2) - a))


def quat_from_matrix(matrix) -> np.ndarray:
    """Quaternion of the rotation held in the upper-left 3x3 of ``matrix``."""
    m = np.asarray(matrix, dtype=float)[:3, :3]
    candidates = (
        m[0, 0] + m[1, 1] + m[2, 2],
        m[0, 0] - m[1, 1] - m[2, 2],
        m[1, 1] - m[0, 0] - m[2, 2],
        m[2, 2] - m[0, 0] - m[1, 1],
    )
    biggest = max(range(4), key=lambda i: candidates[i])
    value = math.sqrt(candidates[biggest] + 1.0) * 0.5
    mult = 0.25 / value
    if biggest == 0:
        q = (value, (m[2, 1] - m[1, 2]) * mult, (m[0, 2] - m[2, 0]) * mult,
             (m[1, 0] - m[0, 1]) * mult)
    elif biggest == 1:
        q = ((m[2, 1] - m[1, 2]) * mult, value, (m[1, 0] + m[0, 1]) * mult,
             (m[0, 2] + m[2, 0]) * mult)
    elif biggest == 2:
        q = ((m[0, 2] - m[2, 0]) * mult, (m[1, 0] + m[0, 1]) * mult, value,
             (m[2, 1] + m[1, 2]) * mult)
    else:
        q = ((m[1, 0] - m[0, 1]) * mult, (m[0, 2] + m[2, 0]) * mult,
             (m[2, 1] + m[1, 2]) * mult, value)
    return np.array(q, dtype=float)


def decompose_transform(transform) -> DecomposedTransform:
    """Split a 4x4 transform into translation, rotation and scale."""
    local = np.array(transform, dtype=float).reshape(4, 4)
    position = local[:3, 3].copy()
    scale = np.linalg.norm(local[:3, :3], axis=0)
    for column, factor in enumerate(scale):
        if factor != 0:
            local[:, column] /= factor
    return DecomposedTransform(position, quat_from_matrix(local), scale)


def angle_axis(angle: float, axis) -> np.ndarray:
    """Quaternion rotating by ``angle`` radians around the unit vector ``axis``."""
    half = angle * 0.5
    return np.concatenate(([math.cos(half)], math.sin(half) * _vec3(axis)))


def rotate(quat, vector) -> np.ndarray:
    """Rotate ``vector`` by the unit quaternion ``quat``."""
    q = np.asarray(quat, dtype=float).reshape(4)
    v = _vec3(vector)
    w, u = q[0], q[1:]
    uv = np.cross(u, v)
    uuv = np.cross(u, uv)
    return v + 2.0 * (w * uv + uuv)