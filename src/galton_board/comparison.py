from decimal import Decimal, localcontext
from typing import Sequence

from .combinatorics import PRECISION


class DistributionLengthError(ValueError):
    """
    Raised when two distributions of different lengths are compared.

    All distributions built for the same board have n + 1 buckets, so this
    signals a wiring bug in the caller rather than bad user input.
    """

    def __init__(self, len_a: int, len_b: int):
        super().__init__(
            f"distributions must have the same size: got {len_a} and {len_b}"
        )
        self.len_a = len_a
        self.len_b = len_b

    def __reduce__(self):
        # Rebuild from the lengths so the error survives process pools
        return (type(self), (self.len_a, self.len_b))


def mean_squared_error(a: Sequence[Decimal], b: Sequence[Decimal]) -> Decimal:
    """
    Mean of squared pointwise differences between two equal-length sequences.
    """
    if len(a) != len(b):
        raise DistributionLengthError(len(a), len(b))
    if not a:
        return Decimal(0)

    with localcontext() as ctx:
        ctx.prec = PRECISION
        acc = Decimal(0)
        for x, y in zip(a, b):
            diff = Decimal(x) - Decimal(y)
            acc += diff * diff
        return acc / len(a)
