"""
Defuzzification helpers.

Every reduction here is a membership-weighted mean over the 11 alpha-cuts:

    W f = sum_i alpha_i * f(cut_i) / sum_i alpha_i

so tighter, more plausible cuts near the top weigh more than the wide bottom
cut (which carries weight zero).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, List, Tuple

from . import intervals as ivl
from .errors import UndefinedResultError
from .fuzzy import ALPHA_LEVELS, ALPHA_WEIGHT_TOTAL, Fuzzy
from .intervals import Interval

__all__ = [
    "binary",
    "unary",
    "distance",
    "width",
    "risk",
    "expected",
    "plot",
]


def binary(f: Callable[[Interval, Interval], Decimal], a: Fuzzy, b: Fuzzy) -> Decimal:
    """
    Weighted reduction of ``f`` applied to each pair of same-level cuts of ``a`` and ``b``.

    For example the distance between two fuzzy numbers:
        D(A, B) = sum_alpha alpha * D(A_alpha, B_alpha) / sum_alpha alpha
    """
    total = sum(
        (mu * f(x, y) for mu, x, y in zip(ALPHA_LEVELS, a.cuts, b.cuts)),
        Decimal(0),
    )
    return total / ALPHA_WEIGHT_TOTAL


def unary(f: Callable[[Interval], Decimal], a: Fuzzy) -> Decimal:
    """Weighted reduction of ``f`` applied to each cut of ``a``."""
    total = sum((mu * f(x) for mu, x in zip(ALPHA_LEVELS, a.cuts)), Decimal(0))
    return total / ALPHA_WEIGHT_TOTAL


def distance(a: Fuzzy, b: Fuzzy) -> Decimal:
    return binary(ivl.distance, a, b)


def width(a: Fuzzy) -> Decimal:
    return unary(lambda cut: cut.high - cut.low, a)


def _relative_width(cut: Interval) -> Decimal:
    total = cut.low + cut.high
    if total == 0:
        raise UndefinedResultError(f"Risk is undefined for cut {cut} with zero midpoint.")
    return 2 * (cut.high - cut.low) / total


def risk(a: Fuzzy) -> Decimal:
    """
    Weighted ratio between width and midpoint of each cut.

    Raises
    ------
    UndefinedResultError
        If any cut is centred on zero.
    """
    return unary(_relative_width, a)


def expected(a: Fuzzy) -> Decimal:
    """Weighted midpoint, a crisp representative value of ``a``."""
    return unary(lambda cut: cut.midpoint, a)


def plot(a: Fuzzy) -> List[Tuple[Decimal, Decimal]]:
    """
    Closed boundary of ``a`` as ``(value, mu)`` points for charting.

    Left bounds from bottom to top, then right bounds from top back down,
    22 points in total.
    """
    rising = [(cut.low, mu) for mu, cut in zip(ALPHA_LEVELS, a.cuts)]
    falling = [(cut.high, mu) for mu, cut in reversed(list(zip(ALPHA_LEVELS, a.cuts)))]
    return rising + falling
