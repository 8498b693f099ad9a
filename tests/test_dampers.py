import math

import numpy as np
import pytest

from aengine.dampers import (
    damper_exp,
    damper_exp_alpha,
    damper_spring,
    fast_atan,
    fast_neg_exp,
)


def test_fast_neg_exp_at_zero():
    assert fast_neg_exp(0.0) == 1.0


@pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 2.0, 3.0, 5.0])
def test_fast_neg_exp_approximates_exp(x):
    assert abs(fast_neg_exp(x) - math.exp(-x)) < 0.02


@pytest.mark.parametrize("x", [-10.0, -2.0, -0.5, 0.0, 0.3, 1.0, 4.0, 50.0])
def test_fast_atan_approximates_atan(x):
    assert abs(fast_atan(x) - math.atan(x)) < 0.005


def test_fast_atan_is_odd():
    for x in (0.2, 1.7, 9.0):
        assert fast_atan(-x) == pytest.approx(-fast_atan(x))


def test_alpha_is_half_at_half_life():
    assert damper_exp_alpha(0.3, 0.3) == pytest.approx(0.5, abs=0.01)


def test_alpha_grows_with_dt():
    alphas = [damper_exp_alpha(dt, 0.2) for dt in (0.01, 0.05, 0.2, 1.0)]
    assert alphas == sorted(alphas)
    assert all(0.0 < a < 1.0 for a in alphas)


def test_damper_exp_moves_towards_target():
    new = damper_exp(0.0, 10.0, 0.016, 0.1)
    assert 0.0 < new < 10.0
    assert damper_exp(4.0, 4.0, 0.016, 0.1) == pytest.approx(4.0)


def test_damper_exp_vector_matches_components():
    position = [0.0, 1.0, -2.0]
    target = [3.0, 1.0, 5.0]
    result = damper_exp(position, target, 0.05, 0.2)
    expected = [damper_exp(p, t, 0.05, 0.2) for p, t in zip(position, target)]
    assert np.allclose(result, expected)


def test_spring_at_rest_stays():
    x, v = damper_spring(2.0, 0.0, 2.0, 0.0, 0.016)
    assert x == pytest.approx(2.0, abs=1e-4)
    assert v == pytest.approx(0.0, abs=1e-3)


@pytest.mark.parametrize(
    "stiffness,damping",
    [(20.0, 5.0), (25.0, 10.0), (1.0, 10.0)],
    ids=["under", "critical", "over"],
)
def test_spring_converges_to_goal(stiffness, damping):
    x, v = 0.0, 0.0
    for _ in range(3000):
        x, v = damper_spring(x, v, 5.0, 0.0, 0.016, stiffness, damping)
    assert x == pytest.approx(5.0, abs=1e-2)
    assert v == pytest.approx(0.0, abs=1e-2)


def test_spring_vector_matches_components():
    position = np.array([0.0, 1.0, 2.0])
    velocity = np.array([0.5, -1.0, 0.0])
    goal = np.array([3.0, 3.0, -1.0])
    zero = np.zeros(3)
    new_x, new_v = damper_spring(position, velocity, goal, zero, 0.02)
    for i in range(3):
        sx, sv = damper_spring(position[i], velocity[i], goal[i], 0.0, 0.02)
        assert new_x[i] == pytest.approx(sx)
        assert new_v[i] == pytest.approx(sv)