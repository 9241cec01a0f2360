"""
Error taxonomy for fuzzy_intervals.

Every error derives from :class:`FuzzyError` and from the closest builtin
exception, so callers may catch either family.
"""

from __future__ import annotations

__all__ = [
    "FuzzyError",
    "ConfigurationError",
    "DivisionError",
    "TypeMismatch",
    "UndefinedResultError",
]


class FuzzyError(Exception):
    """Base class for all fuzzy_intervals errors."""


class ConfigurationError(FuzzyError, ValueError):
    """Malformed construction input (cut count, trapezoid ordering, model parameters)."""


class DivisionError(FuzzyError, ZeroDivisionError):
    """Division by an interval whose range contains zero."""


class TypeMismatch(FuzzyError, TypeError):
    """Comparison or coercion against an incompatible value."""


class UndefinedResultError(FuzzyError, ArithmeticError):
    """Operation has no meaningful numeric result for the given operands."""
