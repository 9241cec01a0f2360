"""
Closed-interval arithmetic over decimal endpoints.

This module contains the :class:`Interval` value type and the named interval
operations (``add``, ``subtract``, ``multiply``, ``divide``, ``power``,
``distance``) that the fuzzy layer lifts to whole alpha-cut stacks.

Interval rules used here:
    [a, b] + [c, d] = [a + c, b + d]
    [a, b] - [c, d] = [a - d, b - c]
    [a, b] * [c, d] = [min(P), max(P)],  P = {ac, ad, bc, bd}
    [a, b] / [c, d] = [min(Q), max(Q)],  Q = {a/c, a/d, b/c, b/d},  0 not in [c, d]

All endpoints are ``decimal.Decimal`` so that financial computations do not
accumulate binary floating point drift.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import total_ordering
from typing import Union

from .errors import ConfigurationError, DivisionError, TypeMismatch, UndefinedResultError

__all__ = [
    "Number",
    "Interval",
    "ZERO",
    "to_decimal",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "distance",
]

Number = Union[Decimal, int, float, str]

_SCALAR_TYPES = (Decimal, int, float)


def to_decimal(value: Number) -> Decimal:
    """
    Coerce a scalar to a finite ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather than
    its binary expansion. NaN and infinities are rejected with
    ConfigurationError; unparseable strings raise TypeMismatch.
    """
    if isinstance(value, bool):
        raise TypeMismatch(f"Cannot use bool {value!r} as a numeric endpoint.")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value)
        except InvalidOperation as exc:
            raise TypeMismatch(f"Cannot parse {value!r} as a decimal number.") from exc
    else:
        raise TypeMismatch(f"Cannot convert {type(value).__name__} to Decimal.")
    if not result.is_finite():
        raise ConfigurationError(f"Endpoints must be finite, got {value!r}.")
    return result


def _is_scalar(value: object) -> bool:
    return isinstance(value, _SCALAR_TYPES) and not isinstance(value, bool)


@total_ordering
@dataclass(frozen=True)
class Interval:
    """
    Closed real range ``[low, high]``.

    ``low <= high`` is expected from well-formed inputs; the arithmetic below
    preserves it but the constructor does not check it.

    Equality and hashing are structural. Ordering is lexicographic over
    ``(low, high)``; ordering against a non-Interval raises TypeMismatch.
    """
    low: Decimal
    high: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "low", to_decimal(self.low))
        object.__setattr__(self, "high", to_decimal(self.high))

    @classmethod
    def point(cls, value: Number) -> Interval:
        """Degenerate interval ``[value, value]``."""
        v = to_decimal(value)
        return cls(v, v)

    @property
    def width(self) -> Decimal:
        return self.high - self.low

    @property
    def midpoint(self) -> Decimal:
        return (self.low + self.high) / 2

    def contains_zero(self) -> bool:
        return self.low <= 0 <= self.high

    def contains(self, other: Union[Interval, Number]) -> bool:
        """True when ``other`` (interval or scalar) lies inside this range."""
        if isinstance(other, Interval):
            return self.low <= other.low and other.high <= self.high
        v = to_decimal(other)
        return self.low <= v <= self.high

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            raise TypeMismatch(
                f"Cannot order Interval against {type(other).__name__}."
            )
        return (self.low, self.high) < (other.low, other.high)

    def __str__(self) -> str:
        return f"[{self.low}, {self.high}]"

    # Operators delegate to the named functions below.
    def __add__(self, other):
        if isinstance(other, Interval):
            return add(self, other)
        if _is_scalar(other):
            return add(self, Interval.point(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Interval):
            return subtract(self, other)
        if _is_scalar(other):
            return subtract(self, Interval.point(other))
        return NotImplemented

    def __rsub__(self, other):
        if _is_scalar(other):
            return subtract(Interval.point(other), self)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Interval):
            return multiply(self, other)
        if _is_scalar(other):
            return multiply(self, Interval.point(other))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Interval):
            return divide(self, other)
        if _is_scalar(other):
            return divide(self, Interval.point(other))
        return NotImplemented

    def __rtruediv__(self, other):
        if _is_scalar(other):
            return divide(Interval.point(other), self)
        return NotImplemented

    def __pow__(self, p):
        if _is_scalar(p):
            return power(self, p)
        return NotImplemented

    def __neg__(self) -> Interval:
        return Interval(-self.high, -self.low)


ZERO = Interval(Decimal(0), Decimal(0))


def add(a: Interval, b: Interval) -> Interval:
    return Interval(a.low + b.low, a.high + b.high)


def subtract(a: Interval, b: Interval) -> Interval:
    """Lowest result pairs ``a.low`` with ``b.high``, highest ``a.high`` with ``b.low``."""
    return Interval(a.low - b.high, a.high - b.low)


def multiply(a: Interval, b: Interval) -> Interval:
    """
    Product range from all four endpoint products.

    Examples
    --------
    >>> multiply(Interval(-2, 3), Interval(-1, 4))
    Interval(low=Decimal('-8'), high=Decimal('12'))
    """
    products = (a.low * b.low, a.low * b.high, a.high * b.low, a.high * b.high)
    return Interval(min(products), max(products))


def divide(a: Interval, b: Interval) -> Interval:
    """
    Quotient range, i.e. ``a * [1/b.high, 1/b.low]``.

    Raises
    ------
    DivisionError
        If ``b`` contains zero; the reciprocal is unbounded there.
    """
    if b.contains_zero():
        raise DivisionError(f"Cannot divide by interval {b} which contains zero.")
    quotients = (a.low / b.low, a.low / b.high, a.high / b.low, a.high / b.high)
    return Interval(min(quotients), max(quotients))


def power(a: Interval, p: Number) -> Interval:
    """
    Raise both endpoints to ``p``.

    Only defined for ``p > 0`` and a non-negative base; anything else raises
    UndefinedResultError instead of returning meaningless bounds.
    """
    exponent = to_decimal(p)
    if exponent <= 0:
        raise UndefinedResultError(f"Interval power requires a positive exponent, got {exponent}.")
    if a.low < 0:
        raise UndefinedResultError(f"Interval power requires a non-negative base, got {a}.")
    lo = a.low ** exponent
    hi = a.high ** exponent
    return Interval(min(lo, hi), max(lo, hi))


def distance(a: Interval, b: Interval) -> Decimal:
    """Mean absolute deviation of the two endpoint pairs."""
    return (abs(a.low - b.low) + abs(a.high - b.high)) / 2
