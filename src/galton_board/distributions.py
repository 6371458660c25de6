from decimal import Decimal, localcontext
from typing import List

from .combinatorics import PRECISION, binomial_coefficient

Distribution = List[Decimal]

# pi to 50 significant digits; Decimal has no built-in constant
PI = Decimal("3.1415926535897932384626433832795028841971693993751")


def binomial_distribution(n: int) -> Distribution:
    """
    Exact PMF of the number of right moves for a fair board with n levels.
    """
    if n < 0:
        raise ValueError("n must be >= 0")

    with localcontext() as ctx:
        ctx.prec = PRECISION
        denom = Decimal(2) ** n
        return [binomial_coefficient(n, k) / denom for k in range(n + 1)]


def normal_distribution(n: int) -> Distribution:
    """
    Gaussian approximation to the binomial, sampled at k = 0..n.

        mu    = n / 2
        sigma = sqrt(n) / 2
        f(k)  = 1 / (sigma * sqrt(2 pi)) * exp(-(k - mu)^2 / (2 sigma^2))

    This is a density, not a PMF, so the values only approximately sum to 1.

    For n == 0 sigma is zero and the density is undefined; the board then
    has a single bucket, so the degenerate point mass [1] is returned.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    if n == 0:
        return [Decimal(1)]

    with localcontext() as ctx:
        ctx.prec = PRECISION
        mu = Decimal(n) / 2
        sigma = Decimal(n).sqrt() / 2
        two_var = 2 * sigma * sigma
        scale = 1 / (sigma * (2 * PI).sqrt())

        f: Distribution = []
        for k in range(n + 1):
            d = k - mu
            f.append(scale * (-(d * d) / two_var).exp())
        return f
