"""
pytest configuration and fixtures for fuzzy_intervals tests.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
from decimal import Decimal

from fuzzy_intervals import (
    BondParams,
    BondValuation,
    Interval,
    RateSpec,
    interval,
    number,
)
from fuzzy_intervals.examples import build_bond_instance


@pytest.fixture
def trapezoid():
    """Trapezoid with bottom cut [1, 9] and top cut [3, 6]."""
    return interval(1, 3, 6, 9)


@pytest.fixture
def triangle():
    """Positive triangle with mode 5."""
    return number(4, 5, 7)


@pytest.fixture
def raw_cuts():
    """Eleven nested cuts shrinking towards [5, 5]."""
    return [Interval(Decimal(i) / 2, 10 - Decimal(i) / 2) for i in range(11)]


@pytest.fixture
def bond_params():
    """Create the canonical two-period bond instance."""
    return build_bond_instance()


@pytest.fixture
def valuation(bond_params):
    return BondValuation(bond_params)


@pytest.fixture
def three_period_params():
    """Three-period bond with distinct rates per period."""
    return BondParams(
        face_value=500,
        coupon_rate="0.05",
        rates=[
            RateSpec("0.01", "0.02", "0.03"),
            RateSpec("0.015", "0.025", "0.04"),
            RateSpec("0.02", "0.03", "0.05"),
        ],
    )
