"""
Lagrange interpolation at x = 0 — Exact rational arithmetic.

For points (x_i, y_i), the value of the unique polynomial through
them at x = 0 is

    sum_i  y_i * prod_{j != i} (-x_j) / prod_{j != i} (x_i - x_j)

Each term is kept as an exact Fraction. Individual terms need not be
integers even for integer polynomials (e.g. x = 1, 3), but their sum
must be: a non-integer sum means the shares do not lie on one integer
polynomial.
"""

import logging
from fractions import Fraction
from typing import NamedTuple

from .errors import DuplicateAbscissa, InexactInterpolation, InsufficientPoints


logger = logging.getLogger(__name__)


class Interpolation(NamedTuple):
    secret: int
    contributions: tuple


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def basis_at_zero(xs: list, i: int) -> tuple:
    """
    Numerator and denominator of the i-th Lagrange basis polynomial at 0.

    Returns (numerator, denominator) as unreduced integers; the
    denominator may be negative.
    """
    xi = xs[i]
    numerator = 1
    denominator = 1
    for j, xj in enumerate(xs):
        if i == j:
            continue
        numerator *= -xj
        denominator *= xi - xj
    return numerator, denominator


def interpolate_at_zero(points: list, truncate: bool = False) -> Interpolation:
    """
    Evaluate the interpolating polynomial of `points` at x = 0.

    Args:
        points: Sequence of (x, y) pairs with distinct x
        truncate: Truncate each term toward zero instead of keeping it
            exact. Reproduces older tooling; wrong answers on inputs whose
            terms are not integers.

    Returns:
        Interpolation(secret, contributions), one contribution per point,
        in input order

    Raises:
        InsufficientPoints: no points given
        DuplicateAbscissa: two points share an x value
        InexactInterpolation: the exact sum is not an integer
    """
    if not points:
        raise InsufficientPoints("Need at least 1 point to interpolate")

    xs = [p[0] for p in points]
    if len(set(xs)) != len(xs):
        dupes = sorted({x for x in xs if xs.count(x) > 1})
        raise DuplicateAbscissa(f"Duplicate x values detected: {dupes}")

    contributions = []
    for i, (_, yi) in enumerate(points):
        numerator, denominator = basis_at_zero(xs, i)
        if truncate:
            product = yi * numerator
            term = _trunc_div(product, denominator)
            if product % denominator:
                logger.warning("L%d(0) term %d/%d truncated to %d",
                               i, product, denominator, term)
            term = Fraction(term)
        else:
            term = Fraction(yi * numerator, denominator)
        logger.debug("L%d(0) contribution: %s", i, term)
        contributions.append(term)

    total = sum(contributions, Fraction(0))
    if total.denominator != 1:
        raise InexactInterpolation(
            f"Interpolated value at x=0 is {total}, not an integer. "
            "Shares are inconsistent or corrupted."
        )

    return Interpolation(int(total), tuple(contributions))
