# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys
from decimal import localcontext
from typing import List, Optional

from galton_board import PRECISION, DistributionLengthError

from .common import AggregateResult, RunParameters
from .run import run_repetitions

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(message)s"

# Column layout of the per-bucket table
K_WIDTH = 10
OBSERVED_WIDTH = 12
EXPECTED_WIDTH = 20
TABLE_RULE = 62

# Layout of the MSE summary
LABEL_WIDTH = 30
VALUE_WIDTH = 15
SUMMARY_RULE = 45


class _UsageParser(argparse.ArgumentParser):
    """
    argparse exits with status 2 on bad input; this tool reports every
    usage problem with status 1.
    """

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        prog="galton-board",
        description=(
            "Drop balls through a Galton board and compare the bucket counts "
            "with the binomial distribution and its normal approximation."
        ),
    )
    parser.add_argument("levels", type=_positive_int, help="number of peg levels n")
    parser.add_argument("balls", type=_positive_int, help="balls per run N")
    parser.add_argument("repetitions", type=_positive_int, help="independent runs x to average")
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=1,
        help="processes used to run repetitions (default: 1)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    return parser


def render_report(result: AggregateResult) -> str:
    """
    Render the per-bucket table (expected ball counts, i.e. probability
    times balls) followed by the MSE summary.
    """
    n = result.params.levels
    balls = result.params.balls

    lines: List[str] = [
        "",
        f"Results after {balls} balls with {n} levels:",
        "",
        f"{'k':>{K_WIDTH}}"
        f"{'Observed':>{OBSERVED_WIDTH}}"
        f"{'Expected(binomial)':>{EXPECTED_WIDTH}}"
        f"{'Expected(normal)':>{EXPECTED_WIDTH}}",
        "-" * TABLE_RULE,
    ]

    with localcontext() as ctx:
        ctx.prec = PRECISION
        for k in range(n + 1):
            lines.append(
                f"{k:>{K_WIDTH}}"
                f"{balls * result.observed[k]:>{OBSERVED_WIDTH}.5f}"
                f"{balls * result.binomial[k]:>{EXPECTED_WIDTH}.5f}"
                f"{balls * result.normal[k]:>{EXPECTED_WIDTH}.5f}"
            )

    lines += [
        "",
        "Mean Squared Errors",
        "-" * SUMMARY_RULE,
    ]
    for label, value in (
        ("Observed vs Binomial:", result.mse_observed_binomial),
        ("Observed vs Normal:", result.mse_observed_normal),
        ("Binomial vs Normal:", result.mse_binomial_normal),
    ):
        lines.append(f"{label:<{LABEL_WIDTH}}{value:<{VALUE_WIDTH}.10f}")
    lines.append("-" * SUMMARY_RULE)

    return "\n".join(lines) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    params = RunParameters(
        levels=args.levels,
        balls=args.balls,
        repetitions=args.repetitions,
        workers=args.workers,
    )
    logger.info(
        "running %d repetition(s) of %d balls over %d levels with %d worker(s)",
        params.repetitions, params.balls, params.levels, params.workers,
    )

    try:
        result = run_repetitions(params)
    except DistributionLengthError:
        # Every distribution is built for the same n; reaching this is a bug.
        logger.exception("internal error while comparing distributions")
        return 1

    sys.stdout.write(render_report(result))
    return 0


def run_cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
