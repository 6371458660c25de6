# simulations/run.py

from __future__ import annotations

import concurrent.futures
import itertools
import logging
from decimal import Decimal, localcontext
from typing import Iterator, List, Optional

from galton_board import PRECISION

from .common import AggregateResult, ExperimentResult, RunParameters, format_result_line
from .methods import run_galton_board

logger = logging.getLogger(__name__)


def _run_once(levels: int, balls: int) -> ExperimentResult:
    # Top-level so process pools can pickle it. Each call builds its own
    # entropy-seeded generator inside run_galton_board.
    return run_galton_board(levels, balls)


def iter_results(params: RunParameters) -> Iterator[ExperimentResult]:
    """
    Yield one ExperimentResult per repetition, in repetition order.

    With params.workers > 1 the repetitions are spread over a process pool;
    results are still yielded in submission order.
    """
    if params.workers == 1:
        for _ in range(params.repetitions):
            yield _run_once(params.levels, params.balls)
        return

    with concurrent.futures.ProcessPoolExecutor(max_workers=params.workers) as executor:
        yield from executor.map(
            _run_once,
            itertools.repeat(params.levels, params.repetitions),
            itertools.repeat(params.balls, params.repetitions),
        )


def run_repetitions(params: RunParameters) -> AggregateResult:
    """
    Run the board `params.repetitions` times and fold the results.

    Parameters
    ----------
    params:
        Levels, balls per run, repetitions and worker count.

    Returns
    -------
    AggregateResult
        Pointwise mean of the observed distributions, mean of the
        observed-vs-binomial and observed-vs-normal errors, and the
        theoretical distributions and binomial-vs-normal error of the
        last run (they depend on `levels` only).
    """
    sum_observed: List[Decimal] = [Decimal(0)] * (params.levels + 1)
    sum_mse_ob_bin = Decimal(0)
    sum_mse_ob_norm = Decimal(0)
    last: Optional[ExperimentResult] = None

    with localcontext() as ctx:
        ctx.prec = PRECISION

        for i, r in enumerate(iter_results(params), start=1):
            sum_observed = [s + o for s, o in zip(sum_observed, r.observed)]
            sum_mse_ob_bin += r.mse_observed_binomial
            sum_mse_ob_norm += r.mse_observed_normal
            last = r
            logger.info("repetition %d/%d: %s", i, params.repetitions, format_result_line(r))

        if last is None:
            raise RuntimeError("no repetitions were run")

        x = params.repetitions
        return AggregateResult(
            params=params,
            observed=[s / x for s in sum_observed],
            binomial=last.binomial,
            normal=last.normal,
            mse_observed_binomial=sum_mse_ob_bin / x,
            mse_observed_normal=sum_mse_ob_norm / x,
            mse_binomial_normal=last.mse_binomial_normal,
        )
