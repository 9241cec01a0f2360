"""
Data structures for fuzzy bond valuation instances.

This module contains the parameter containers needed to price a coupon bond
whose discount rates are only known imprecisely (as triangular fuzzy numbers).
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from .errors import ConfigurationError
from .fuzzy import Fuzzy, number
from .intervals import Number, to_decimal


@dataclass
class RateSpec:
    """
    Triangular fuzzy rate.

    Attributes
    ----------
    low : Decimal
        Smallest plausible rate (mu = 0, left).
    mode : Decimal
        Most plausible rate (mu = 1).
    high : Decimal
        Largest plausible rate (mu = 0, right).
    """
    low: Number
    mode: Number
    high: Number

    def __post_init__(self) -> None:
        self.low = to_decimal(self.low)
        self.mode = to_decimal(self.mode)
        self.high = to_decimal(self.high)
        if not (self.low <= self.mode <= self.high):
            raise ConfigurationError(
                f"RateSpec ordering violated: require low <= mode <= high, "
                f"got ({self.low}, {self.mode}, {self.high})."
            )

    def to_fuzzy(self) -> Fuzzy:
        return number(self.low, self.mode, self.high)

    def widened(self, factor: Number) -> RateSpec:
        """Scale the spread on both sides of ``mode`` by ``factor``."""
        k = to_decimal(factor)
        if k < 0:
            raise ConfigurationError(f"Spread factor must be non-negative, got {k}.")
        return RateSpec(
            low=self.mode - (self.mode - self.low) * k,
            mode=self.mode,
            high=self.mode + (self.high - self.mode) * k,
        )


@dataclass
class BondParams:
    """
    Coupon bond parameters.

    Attributes
    ----------
    face_value : Decimal
        Principal M repaid together with the last coupon.
    coupon_rate : Decimal
        Coupon paid each period as a fraction of ``face_value``.
    rates : List[RateSpec]
        Discount rate per period; ``rates[k]`` discounts the cash flow of
        period ``k + 1`` as ``1 / (1 + rate) ** (k + 1)``. The number of
        entries is the bond's maturity in periods.

    Notes
    -----
    - With two periods this reproduces
      ``coupon / (1 + i1) + (coupon + M) / (1 + i2) ** 2``.
    """
    face_value: Number
    coupon_rate: Number
    rates: List[RateSpec] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.face_value = to_decimal(self.face_value)
        self.coupon_rate = to_decimal(self.coupon_rate)
        if self.face_value <= 0:
            raise ConfigurationError("face_value must be positive.")
        if self.coupon_rate < 0:
            raise ConfigurationError("coupon_rate must be non-negative.")
        if not self.rates:
            raise ConfigurationError("At least one period rate is required.")

    @property
    def coupon(self) -> Decimal:
        return self.face_value * self.coupon_rate

    @property
    def periods(self) -> int:
        return len(self.rates)
