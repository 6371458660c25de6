# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional
import time

from galton_board import Distribution


@dataclass(frozen=True)
class RunParameters:
    """
    Parameters shared by every repetition of an experiment.
    """
    levels: int       # n: peg rows / coin flips per ball
    balls: int        # N: balls dropped per run
    repetitions: int  # x: independent runs averaged together
    workers: int = 1  # processes used to run repetitions

    def __post_init__(self) -> None:
        if self.levels < 0:
            raise ValueError("levels must be >= 0")
        if self.balls <= 0:
            raise ValueError("balls must be > 0")
        if self.repetitions <= 0:
            raise ValueError("repetitions must be > 0")
        if self.workers <= 0:
            raise ValueError("workers must be > 0")


@dataclass
class ExperimentResult:
    """
    Outcome of a single Galton board run.
    """
    levels: int
    balls: int
    counts: List[int]

    observed: Distribution
    binomial: Distribution
    normal: Distribution

    mse_observed_binomial: Decimal
    mse_observed_normal: Decimal
    mse_binomial_normal: Decimal

    runtime_s: Optional[float] = None

    def __post_init__(self) -> None:
        size = self.levels + 1
        for name in ("counts", "observed", "binomial", "normal"):
            actual = len(getattr(self, name))
            if actual != size:
                raise ValueError(
                    f"{name} length mismatch: expected {size}, got {actual}"
                )

        # Sanity: every ball lands in exactly one bucket
        total = sum(self.counts)
        if total != self.balls:
            raise ValueError(
                f"counts sum mismatch: expected {self.balls}, got {total}"
            )


@dataclass(frozen=True)
class AggregateResult:
    """
    Repetitions folded into one report: observed distribution and the
    observed-vs-theory errors are averaged, theory comes from the last run.
    """
    params: RunParameters
    observed: Distribution
    binomial: Distribution
    normal: Distribution
    mse_observed_binomial: Decimal
    mse_observed_normal: Decimal
    mse_binomial_normal: Decimal


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def format_result_line(r: ExperimentResult) -> str:
    """
    Human-friendly one-liner for progress logging.
    """
    return (
        f"n={r.levels}, N={r.balls}: "
        f"mse(obs,bin)={r.mse_observed_binomial:.3e}, "
        f"mse(obs,norm)={r.mse_observed_normal:.3e}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
