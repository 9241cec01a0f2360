"""
Fuzzy number definitions for fuzzy_intervals.

A fuzzy number is approximated by 11 alpha-cuts, one closed interval per
membership level mu in {0.0, 0.1, ..., 1.0}. Arithmetic follows the extension
principle: every operation is applied independently at each level, so cut
``i`` of the result only ever depends on cut ``i`` of the operands.

This module contains the :class:`Fuzzy` type, its ``map``/``operation``
combinators, and the factory functions ``interval``, ``number`` and ``point``.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from decimal import Decimal
from functools import reduce, total_ordering
from typing import Callable, Tuple

from . import intervals as ivl
from .errors import ConfigurationError, TypeMismatch
from .intervals import Interval, Number, _is_scalar, to_decimal

__all__ = [
    "CUT_COUNT",
    "ALPHA_LEVELS",
    "ALPHA_WEIGHT_TOTAL",
    "alpha",
    "Fuzzy",
    "ZERO",
    "interval",
    "number",
    "point",
]

CUT_COUNT = 11


def alpha(level: int) -> Decimal:
    """Membership value mu for the cut at ``level`` (0..10)."""
    return Decimal("0.1") * level


ALPHA_LEVELS: Tuple[Decimal, ...] = tuple(alpha(i) for i in range(CUT_COUNT))
ALPHA_WEIGHT_TOTAL: Decimal = sum(ALPHA_LEVELS, Decimal(0))

_HASH_MASK = (1 << 64) - 1


def _hash_combine(seed: int, value: int) -> int:
    return (seed ^ (value + 0x9E3779B97F4A7C15 + (seed << 6) + (seed >> 2))) & _HASH_MASK


@total_ordering
@dataclass(frozen=True, eq=False)
class Fuzzy:
    """
    Fuzzy number as a stack of exactly 11 alpha-cuts, from ``bottom`` (mu = 0)
    up to ``top`` (mu = 1).

    Cuts are expected to be nested (``cuts[i + 1]`` inside ``cuts[i]``). The
    factories always produce nested stacks; the constructor only checks the
    count, use :meth:`is_nested` to verify the shape.

    Equality, ordering and hashing are structural over the whole stack.
    """
    cuts: Tuple[Interval, ...]

    def __post_init__(self) -> None:
        cuts = tuple(self.cuts)
        if len(cuts) != CUT_COUNT:
            raise ConfigurationError(
                f"Exactly {CUT_COUNT} alpha-cuts expected, got {len(cuts)}."
            )
        for cut in cuts:
            if not isinstance(cut, Interval):
                raise TypeMismatch(f"Alpha-cuts must be Interval, got {type(cut).__name__}.")
        object.__setattr__(self, "cuts", cuts)

    @property
    def bottom(self) -> Interval:
        """Alpha-cut with mu = 0."""
        return self.cuts[0]

    @property
    def top(self) -> Interval:
        """Alpha-cut with mu = 1."""
        return self.cuts[-1]

    def is_nested(self) -> bool:
        """True when every cut lies inside the cut one level below it."""
        return all(lower.contains(upper) for lower, upper in zip(self.cuts, self.cuts[1:]))

    @classmethod
    def zero(cls) -> Fuzzy:
        return cls((ivl.ZERO,) * CUT_COUNT)

    # ---------- Combinators ----------
    @staticmethod
    def operation(f: Callable[[Interval, Interval], Interval], a: Fuzzy, b: Fuzzy) -> Fuzzy:
        """Generic binary operation applied to each pair of same-level cuts."""
        return Fuzzy(f(x, y) for x, y in zip(a.cuts, b.cuts))

    @staticmethod
    def map(f: Callable[[Interval], Interval], a: Fuzzy) -> Fuzzy:
        """Generic unary operation applied to every cut."""
        return Fuzzy(f(x) for x in a.cuts)

    @staticmethod
    def pow(x: Fuzzy, p: Number) -> Fuzzy:
        """Raise ``x`` to the power ``p``, uses ``map``."""
        return Fuzzy.map(lambda cut: ivl.power(cut, p), x)

    def _lift(self, other, f: Callable[[Interval, Interval], Interval]):
        if isinstance(other, Fuzzy):
            return Fuzzy.operation(f, self, other)
        if _is_scalar(other):
            scalar = Interval.point(other)
            return Fuzzy.map(lambda cut: f(cut, scalar), self)
        return NotImplemented

    def _lift_left(self, other, f: Callable[[Interval, Interval], Interval]):
        # scalar on the left: the point interval becomes the first operand
        if _is_scalar(other):
            scalar = Interval.point(other)
            return Fuzzy.map(lambda cut: f(scalar, cut), self)
        return NotImplemented

    # ---------- Arithmetic ----------
    def __add__(self, other):
        return self._lift(other, ivl.add)

    def __radd__(self, other):
        return self + other

    def __sub__(self, other):
        return self._lift(other, ivl.subtract)

    def __rsub__(self, other):
        return self._lift_left(other, ivl.subtract)

    def __mul__(self, other):
        return self._lift(other, ivl.multiply)

    def __rmul__(self, other):
        return self * other

    def __truediv__(self, other):
        return self._lift(other, ivl.divide)

    def __rtruediv__(self, other):
        return self._lift_left(other, ivl.divide)

    def __pow__(self, p):
        if _is_scalar(p):
            return Fuzzy.pow(self, p)
        return NotImplemented

    def __neg__(self) -> Fuzzy:
        return Fuzzy.map(operator.neg, self)

    # ---------- Structural comparison ----------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fuzzy):
            return NotImplemented
        return self.cuts == other.cuts

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Fuzzy):
            raise TypeMismatch(f"Cannot compare Fuzzy with {type(other).__name__}.")
        return self.cuts < other.cuts

    def __hash__(self) -> int:
        return reduce(_hash_combine, (hash(cut) for cut in self.cuts), CUT_COUNT)

    def __str__(self) -> str:
        return "Fuzzy(" + ", ".join(str(cut) for cut in self.cuts) + ")"


ZERO = Fuzzy.zero()


def interval(a: Number, b: Number, c: Number, d: Number) -> Fuzzy:
    """
    Create a trapezoidal fuzzy number with bottom cut ``[a, d]`` and top cut ``[b, c]``.

    The left bound moves linearly from ``a`` to ``b`` and the right bound from
    ``d`` to ``c`` as mu goes from 0 to 1.

    Raises
    ------
    ConfigurationError
        Unless ``a <= b <= c <= d``.
    """
    a, b, c, d = (to_decimal(v) for v in (a, b, c, d))
    if a > b or b > c or c > d:
        raise ConfigurationError(f"Expected a <= b <= c <= d, got ({a}, {b}, {c}, {d}).")
    top_level = CUT_COUNT - 1
    return Fuzzy(
        Interval(a + (b - a) * alpha(i), c + (d - c) * alpha(top_level - i))
        for i in range(CUT_COUNT)
    )


def number(a: Number, b: Number, c: Number) -> Fuzzy:
    """Triangular fuzzy number with bottom cut ``[a, c]`` and zero-width top cut at ``b``."""
    return interval(a, b, b, c)


def point(a: Number) -> Fuzzy:
    """Fuzzy representation of the crisp value ``a``."""
    return number(a, a, a)
