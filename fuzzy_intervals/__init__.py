"""
fuzzy_intervals: arithmetic on fuzzy numbers represented by alpha-cuts.

A fuzzy number is stored as 11 nested closed intervals, one per membership
level mu = 0.0, 0.1, ..., 1.0. Interval arithmetic is lifted level by level
(extension principle), and membership-weighted reductions turn the result
back into crisp figures.

Main components:
- Interval arithmetic over Decimal endpoints
- Fuzzy type with map/operation combinators and arithmetic operators
- Factories for trapezoidal, triangular and crisp fuzzy numbers
- Defuzzification (distance, width, risk) and plot projection
- Fuzzy bond valuation, charting and scenario analysis

Example usage:
    from fuzzy_intervals import number, width, risk

    i1 = number(0.0011, 0.0012, 0.0014)
    i2 = number(0.0008, 0.0011, 0.0016)
    pv = 100 / (1 + i1) + 1100 / (1 + i2) ** 2
    print(pv.bottom, pv.top, width(pv), risk(pv))
"""

__version__ = "1.0.0"

# Main exports
from .errors import (
    FuzzyError,
    ConfigurationError,
    DivisionError,
    TypeMismatch,
    UndefinedResultError,
)
from .intervals import Interval
from .fuzzy import (
    ALPHA_LEVELS,
    ALPHA_WEIGHT_TOTAL,
    CUT_COUNT,
    ZERO,
    Fuzzy,
    alpha,
    interval,
    number,
    point,
)
from .defuzz import binary, unary, distance, width, risk, expected, plot
from .data import BondParams, RateSpec
from .model import BondValuation

__all__ = [
    "FuzzyError",
    "ConfigurationError",
    "DivisionError",
    "TypeMismatch",
    "UndefinedResultError",
    "Interval",
    "ALPHA_LEVELS",
    "ALPHA_WEIGHT_TOTAL",
    "CUT_COUNT",
    "ZERO",
    "Fuzzy",
    "alpha",
    "interval",
    "number",
    "point",
    "binary",
    "unary",
    "distance",
    "width",
    "risk",
    "expected",
    "plot",
    "BondParams",
    "RateSpec",
    "BondValuation",
]
