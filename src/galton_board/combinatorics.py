from decimal import Decimal, localcontext

PRECISION = 40


def binomial_coefficient(n: int, k: int) -> Decimal:
    """
    Binomial coefficient C(n, k) as a high-precision Decimal.

    The product

        prod_{i=1..k} (n - k + i) / i

    is built incrementally (multiply, then divide) so intermediate values
    stay close to the final magnitude instead of going through factorials.
    Out-of-range k yields 0.
    """
    if k < 0 or k > n:
        return Decimal(0)
    if k == 0 or k == n:
        return Decimal(1)

    # C(n, k) == C(n, n - k); iterate over the shorter side
    if k > n - k:
        k = n - k

    with localcontext() as ctx:
        ctx.prec = PRECISION
        res = Decimal(1)
        for i in range(1, k + 1):
            res *= n - k + i
            res /= i
    return res
