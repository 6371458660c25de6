# simulations/methods.py

from __future__ import annotations

import random
from decimal import Decimal, localcontext
from typing import Optional

from galton_board import (
    PRECISION,
    binomial_distribution,
    mean_squared_error,
    normal_distribution,
)

from .common import ExperimentResult, Timer


def drop_ball(levels: int, rng: random.Random) -> int:
    """
    Let one ball fall through the board and return its bucket index,
    i.e. the number of pegs at which it bounced right.
    """
    right_moves = 0
    for _ in range(levels):
        if rng.random() < 0.5:
            right_moves += 1
    return right_moves


def run_galton_board(
    levels: int,
    balls: int,
    rng: Optional[random.Random] = None,
) -> ExperimentResult:
    """
    Drop `balls` balls through a board with `levels` rows of fair pegs and
    compare the empirical bucket frequencies against the binomial PMF and
    its normal approximation.

    Each call owns its generator. When none is passed, a fresh
    random.Random() is created, which seeds itself from OS entropy, so runs
    are independent and not reproducible.
    """
    if levels < 0:
        raise ValueError("levels must be >= 0")
    if balls <= 0:
        raise ValueError("balls must be > 0")

    if rng is None:
        rng = random.Random()

    counts = [0] * (levels + 1)

    with Timer() as t:
        for _ in range(balls):
            counts[drop_ball(levels, rng)] += 1

    with localcontext() as ctx:
        ctx.prec = PRECISION
        observed = [Decimal(c) / balls for c in counts]

    binomial = binomial_distribution(levels)
    normal = normal_distribution(levels)

    return ExperimentResult(
        levels=levels,
        balls=balls,
        counts=counts,
        observed=observed,
        binomial=binomial,
        normal=normal,
        mse_observed_binomial=mean_squared_error(observed, binomial),
        mse_observed_normal=mean_squared_error(observed, normal),
        mse_binomial_normal=mean_squared_error(binomial, normal),
        runtime_s=t.elapsed_s,
    )
