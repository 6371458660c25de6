import random
from decimal import Decimal

import pytest

from galton_board import binomial_distribution, mean_squared_error, normal_distribution
from simulations.common import ExperimentResult
from simulations.methods import drop_ball, run_galton_board


class _ScriptedRng:
    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values)


def test_drop_ball_counts_right_moves():
    # < 0.5 is a right bounce
    rng = _ScriptedRng([0.1, 0.9, 0.49, 0.5, 0.0])
    assert drop_ball(5, rng) == 3


def test_drop_ball_zero_levels_never_draws():
    assert drop_ball(0, _ScriptedRng([])) == 0


def test_result_shapes_and_tally():
    r = run_galton_board(6, 250, rng=random.Random(7))
    assert isinstance(r, ExperimentResult)
    assert len(r.counts) == len(r.observed) == len(r.binomial) == len(r.normal) == 7
    assert sum(r.counts) == 250
    assert r.observed == [Decimal(c) / 250 for c in r.counts]
    assert r.binomial == binomial_distribution(6)
    assert r.normal == normal_distribution(6)
    assert r.mse_observed_binomial == mean_squared_error(r.observed, r.binomial)
    assert r.mse_observed_normal == mean_squared_error(r.observed, r.normal)
    assert r.mse_binomial_normal == mean_squared_error(r.binomial, r.normal)
    assert r.runtime_s is not None and r.runtime_s >= 0


def test_single_level_is_close_to_fair_coin():
    r = run_galton_board(1, 1000, rng=random.Random(2024))
    assert r.binomial == [Decimal("0.5"), Decimal("0.5")]
    assert r.normal[0] == r.normal[1]
    for p in r.observed:
        assert abs(p - Decimal("0.5")) <= Decimal("0.05")


def test_zero_levels_is_deterministic():
    r = run_galton_board(0, 250)
    assert r.counts == [250]
    assert r.observed == [Decimal(1)]
    assert r.binomial == [Decimal(1)]
    assert r.mse_observed_binomial == 0
    assert r.mse_observed_normal == 0
    assert r.mse_binomial_normal == 0


def test_error_shrinks_with_more_balls():
    small = run_galton_board(10, 100, rng=random.Random(11))
    large = run_galton_board(10, 100_000, rng=random.Random(12))
    # Expected MSE is roughly 0.075 / N for n = 10
    assert large.mse_observed_binomial < Decimal("1e-5")
    assert large.mse_observed_binomial < small.mse_observed_binomial


def test_default_generators_are_independent():
    a = run_galton_board(20, 2000)
    b = run_galton_board(20, 2000)
    assert a.counts != b.counts


@pytest.mark.parametrize("levels,balls", [(-1, 10), (3, 0), (3, -5)])
def test_invalid_arguments(levels, balls):
    with pytest.raises(ValueError):
        run_galton_board(levels, balls)
