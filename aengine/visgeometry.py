"""Line geometry for debug visualisation: grids, arrows, cubes, spheres, bones.

Every function returns vertex positions as ``(n, 3)`` float arrays. A "strip"
is drawn as a connected line strip. ``grid_points`` and ``bone_vertices``
return vertex pairs that are drawn as separate line segments.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

from aengine.mathutils import angle_axis, rotate

__all__ = [
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "PURPLE",
    "WHITE",
    "GREY",
    "BLACK",
    "ARROW_SEGMENTS",
    "SPHERE_SEGMENTS",
    "grid_points",
    "arrow_strips",
    "directional_light_strips",
    "cube_strips",
    "wire_sphere_strips",
    "aabb_strips",
    "bone_vertices",
]

RED = (1.0, 0.0, 0.0)
GREEN = (0.0, 1.0, 0.0)
BLUE = (0.0, 0.0, 1.0)
YELLOW = (1.0, 1.0, 0.0)
PURPLE = (1.0, 0.0, 1.0)
WHITE = (1.0, 1.0, 1.0)
GREY = (0.5, 0.5, 0.5)
BLACK = (0.0, 0.0, 0.0)

ARROW_SEGMENTS = 12
SPHERE_SEGMENTS = 32

_X_AXIS = np.array([1.0, 0.0, 0.0])
_Y_AXIS = np.array([0.0, 1.0, 0.0])
_Z_AXIS = np.array([0.0, 0.0, 1.0])


def _vec3(value) -> np.ndarray:
    return np.asarray(value, dtype=float).reshape(3)


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


def grid_points(grid_size: int, grid_spacing: int) -> np.ndarray:
    """Line-segment endpoints of a square grid on the xz plane.

    Grid lines come in pairs of endpoints; the final four points are the two
    axis lines through the origin.
    """
    if grid_spacing <= 0:
        raise ValueError("grid spacing must be positive")
    if grid_size < 0:
        raise ValueError("grid size must not be negative")
    size = float(grid_size)
    points: list[tuple[float, float, float]] = []
    for current in range(grid_size, 0, -grid_spacing):
        c = float(current)
        points.extend(
            [
                (size, 0.0, c),
                (-size, 0.0, c),
                (size, 0.0, -c),
                (-size, 0.0, -c),
                (c, 0.0, size),
                (c, 0.0, -size),
                (-c, 0.0, size),
                (-c, 0.0, -size),
            ]
        )
    points.extend(
        [(size, 0.0, 0.0), (-size, 0.0, 0.0), (0.0, 0.0, size), (0.0, 0.0, -size)]
    )
    return np.array(points, dtype=float)


def arrow_strips(start, end, size: float = 0.2) -> tuple[np.ndarray, np.ndarray]:
    """Two line strips forming an arrow from ``start`` with its head at ``end``."""
    start = _vec3(start)
    end = _vec3(end)
    direction = _normalize(end - start)
    normal = _normalize(np.cross(direction, _Y_AXIS))
    step = math.radians(360.0 / ARROW_SEGMENTS)
    strip1 = [start]
    strip2 = [end + normal * size]
    last_walk = normal
    for i in range(ARROW_SEGMENTS):
        walk = rotate(angle_axis(step * (i + 1), direction), normal)
        strip1.extend(
            [
                end,
                end + last_walk * size,
                end + direction * size * 1.8,
                end + walk * size,
            ]
        )
        strip2.append(end + walk * size)
        last_walk = walk
    return np.array(strip1), np.array(strip2)


def directional_light_strips(
    forward, up, left, pos, size: float = 0.5
) -> list[np.ndarray]:
    """Strips for a directional light gizmo: a crossed rectangle and an arrow."""
    forward = _vec3(forward)
    up = _vec3(up)
    left = _vec3(left)
    pos = _vec3(pos)
    half_width = left * size * 1.5
    half_height = up * size
    strip1 = np.array(
        [
            pos + half_width - half_height,
            pos - half_width + half_height,
            pos - half_width - half_height,
            pos + half_width + half_height,
        ]
    )
    strip2 = np.array(
        [
            pos - half_width - half_height,
            pos + half_width - half_height,
            pos + half_width + half_height,
            pos - half_width + half_height,
        ]
    )
    arrow = arrow_strips(pos, pos + forward * size, size * 0.12)
    return [strip1, strip2, *arrow]


def cube_strips(
    position, forward, left, up, size=(1.0, 1.0, 1.0)
) -> tuple[np.ndarray, np.ndarray]:
    """Two strips outlining a box whose corner is ``position``.

    ``size`` holds the extents along ``left``, ``up`` and ``forward``.
    """
    p = _vec3(position)
    f = _vec3(forward)
    l = _vec3(left)
    u = _vec3(up)
    ld, ud, fd = _vec3(size)
    strip1 = np.array(
        [
            p,
            p + l * ld,
            p + l * ld + f * fd,
            p + f * fd,
            p,
            p + u * ud,
            p + f * fd + u * ud,
            p + f * fd,
        ]
    )
    strip2 = np.array(
        [
            p + l * ld + u * ud,
            p + u * ud,
            p + f * fd + u * ud,
            p + l * ld + f * fd + u * ud,
            p + l * ld + u * ud,
            p + l * ld,
            p + l * ld + f * fd,
            p + l * ld + f * fd + u * ud,
        ]
    )
    return strip1, strip2


def wire_sphere_strips(
    position, radius: float = 1.0
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Three closed circles around ``position``, one per coordinate plane."""
    p = _vec3(position)
    step = math.radians(360.0 / SPHERE_SEGMENTS)
    circles = ((_Y_AXIS, _X_AXIS), (_Z_AXIS, _Y_AXIS), (_X_AXIS, _Z_AXIS))
    strips = []
    for axis, start in circles:
        points = [p + start * radius]
        points.extend(
            p + rotate(angle_axis(step * (i + 1), axis), start) * radius
            for i in range(SPHERE_SEGMENTS)
        )
        strips.append(np.array(points))
    return tuple(strips)


def aabb_strips(minimum, maximum) -> tuple[np.ndarray, np.ndarray]:
    """Strips outlining the axis-aligned box between ``minimum`` and ``maximum``."""
    low = _vec3(minimum)
    high = _vec3(maximum)
    return cube_strips(low, _Z_AXIS, _X_AXIS, _Y_AXIS, high - low)


def bone_vertices(bones: Iterable[Sequence]) -> np.ndarray:
    """Flatten ``(start, end)`` bone pairs into consecutive segment endpoints."""
    points = [_vec3(p) for pair in bones for p in (pair[0], pair[1])]
    if not points:
        return np.zeros((0, 3))
    return np.array(points)