"""Exponential and spring dampers for smoothly approaching a target.

Scalars give scalars back; sequences and arrays are damped per component and
returned as numpy arrays.
"""

from __future__ import annotations

import math

import numpy as np

__all__ = [
    "fast_neg_exp",
    "fast_atan",
    "damper_exp_alpha",
    "damper_exp",
    "damper_spring",
]

_PI = 3.1415926535
_LN2 = 0.69314718056
_EPS = 1e-5


def fast_neg_exp(x: float) -> float:
    """Cheap approximation of ``exp(-x)`` for non-negative ``x``."""
    return 1.0 / (1.0 + x + 0.48 * x * x + 0.235 * x * x * x)


def fast_atan(x: float) -> float:
    """Cheap approximation of ``atan(x)``."""
    z = abs(x)
    w = 1.0 / z if z > 1.0 else z
    y = (_PI / 4.0) * w - w * (w - 1) * (0.2447 + 0.0663 * w)
    return math.copysign(_PI / 2.0 - y if z > 1.0 else y, x)


def damper_exp_alpha(dt: float, half_life: float) -> float:
    """Blend factor that halves the remaining distance every ``half_life``."""
    return 1.0 - fast_neg_exp((_LN2 * dt) / (half_life + 1e-8))


def damper_exp(position, target, dt: float, half_life: float):
    """Move ``position`` towards ``target``; returns the new position.

    Velocity continuity is not guaranteed.
    """
    alpha = damper_exp_alpha(dt, half_life)
    if np.ndim(position) == 0 and np.ndim(target) == 0:
        return (1.0 - alpha) * float(position) + alpha * float(target)
    return (1.0 - alpha) * np.asarray(position, dtype=float) + alpha * np.asarray(
        target, dtype=float
    )


def _spring(x, v, x_goal, v_goal, dt, s, d):
    c = x_goal + (d * v_goal) / (s + _EPS)
    y = d / 2.0
    discriminant = s - (d * d) / 4.0

    if abs(discriminant) < _EPS:
        # critically damped
        j0 = x - c
        j1 = v + j0 * y
        eydt = fast_neg_exp(y * dt)
        return (
            j0 * eydt + dt * j1 * eydt + c,
            -y * j0 * eydt - y * dt * j1 * eydt + j1 * eydt,
        )
    if discriminant > 0.0:
        # under damped
        w = math.sqrt(discriminant)
        j = math.sqrt((v + y * (x - c)) ** 2 / (w * w + _EPS) + (x - c) ** 2)
        p = fast_atan((v + (x - c) * y) / (-(x - c) * w + _EPS))
        j = j if (x - c) > 0.0 else -j
        eydt = fast_neg_exp(y * dt)
        return (
            j * eydt * math.cos(w * dt + p) + c,
            -y * j * eydt * math.cos(w * dt + p) - w * j * eydt * math.sin(w * dt + p),
        )
    if discriminant < 0.0:
        # over damped
        root = math.sqrt(d * d - 4 * s)
        y0 = (d + root) / 2.0
        y1 = (d - root) / 2.0
        j1 = (c * y0 - x * y0 - v) / (y1 - y0)
        j0 = x - j1 - c
        ey0dt = fast_neg_exp(y0 * dt)
        ey1dt = fast_neg_exp(y1 * dt)
        return j0 * ey0dt + j1 * ey1dt + c, -y0 * j0 * ey0dt - y1 * j1 * ey1dt
    return x, v


def damper_spring(
    position,
    velocity,
    goal_position,
    goal_velocity,
    dt: float,
    stiffness: float = 20.0,
    damping: float = 5.0,
):
    """Advance a damped spring by ``dt``; returns ``(position, velocity)``.

    Higher ``damping`` makes the spring less responsive, higher ``stiffness``
    makes it pull harder.
    """
    if all(np.ndim(a) == 0 for a in (position, velocity, goal_position, goal_velocity)):
        return _spring(
            float(position), float(velocity), float(goal_position),
            float(goal_velocity), dt, stiffness, damping,
        )
    arrays = np.broadcast_arrays(
        *(np.asarray(a, dtype=float) for a in (position, velocity, goal_position, goal_velocity))
    )
    results = [
        _spring(x, v, g, q, dt, stiffness, damping)
        for x, v, g, q in zip(*(a.ravel() for a in arrays))
    ]
    shape = arrays[0].shape
    new_position = np.array([r[0] for r in results], dtype=float).reshape(shape)
    new_velocity = np.array([r[1] for r in results], dtype=float).reshape(shape)
    return new_position, new_velocity