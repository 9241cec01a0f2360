"""
Tests for DataFrame summaries and bond scenario sweeps.
"""

import math

import pytest
import pandas as pd
import matplotlib.pyplot as plt

from fuzzy_intervals import number, point, width
from fuzzy_intervals.sensitivity import (
    plot_metric_trends,
    run_coupon_scenarios,
    run_spread_sweep,
    summarize_fuzzy,
)


class TestSummaries:
    """Test tabulation of defuzzified metrics."""

    def test_summarize_fuzzy(self, triangle, trapezoid):
        df = summarize_fuzzy({"triangle": triangle, "trapezoid": trapezoid})
        assert list(df.index) == ["triangle", "trapezoid"]
        assert {"bottom_low", "top_high", "width", "risk", "expected"} <= set(df.columns)
        assert df.loc["trapezoid", "width"] == pytest.approx(4.5)
        assert df.loc["triangle", "bottom_low"] == 4.0

    def test_undefined_risk_is_nan(self):
        df = summarize_fuzzy({"zero": point(0), "wide": number(-1, 0, 1)})
        assert df["risk"].isna().all()

    def test_empty(self):
        assert summarize_fuzzy({}).empty


class TestScenarios:
    """Test bond scenario sweeps."""

    def test_spread_sweep(self, bond_params):
        df = run_spread_sweep(bond_params, factors=(0, 1, 2))
        assert list(df.index) == [0.0, 1.0, 2.0]
        assert df.loc[0.0, "width"] == pytest.approx(0.0, abs=1e-12)
        assert df["width"].is_monotonic_increasing
        # spread scaling keeps the most plausible value fixed
        assert df["top_low"].nunique() == 1

    def test_spread_sweep_factor_one_matches_model(self, bond_params, valuation):
        df = run_spread_sweep(bond_params, factors=(1,))
        assert df.loc[1.0, "width"] == pytest.approx(float(width(valuation.present_value())))

    def test_coupon_scenarios(self, bond_params):
        df = run_coupon_scenarios(bond_params, ["0.12", 0.05, "0.1"])
        assert list(df["coupon_rate"]) == [0.05, 0.1, 0.12]
        assert df["expected"].is_monotonic_increasing
        assert not math.isnan(df["risk"].iloc[0])


class TestTrendPlots:
    """Test metric trend plotting."""

    def test_plot_metric_trends(self, bond_params):
        df = run_spread_sweep(bond_params, factors=(0, 1))
        ax = plot_metric_trends(df, "spread_factor", metrics=("width", "missing"), show=False)
        assert len(ax.get_lines()) == 1
        plt.close("all")

    def test_plot_metric_trends_validation(self, bond_params):
        with pytest.raises(TypeError):
            plot_metric_trends([1, 2], "x", show=False)
        df = run_spread_sweep(bond_params, factors=(1,))
        with pytest.raises(ValueError, match="not found"):
            plot_metric_trends(df, "nope", show=False)
