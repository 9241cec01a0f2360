"""
Sensitivity analysis utilities for fuzzy_intervals.

This module provides helpers to tabulate defuzzified metrics of many fuzzy
numbers at once and to explore how a bond's fuzzy present value reacts when
rate uncertainty or the coupon changes.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from .data import BondParams
from .defuzz import expected, risk, width
from .errors import UndefinedResultError
from .fuzzy import Fuzzy
from .intervals import Number
from .model import BondValuation

__all__ = [
    "summarize_fuzzy",
    "run_spread_sweep",
    "run_coupon_scenarios",
    "plot_metric_trends",
]


def _require_pandas():
    try:
        import pandas as pd  # type: ignore
    except ImportError as exc:  # pragma: no cover - import guard
        raise RuntimeError(
            "pandas is required for sensitivity analysis. Install it with `pip install pandas`."
        ) from exc
    return pd


def _require_matplotlib():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:  # pragma: no cover
        raise RuntimeError(
            "matplotlib is required for plotting sensitivity analysis. Install it with `pip install matplotlib`."
        ) from exc
    return plt


def _metrics(a: Fuzzy) -> Dict[str, Any]:
    try:
        a_risk = float(risk(a))
    except UndefinedResultError:
        a_risk = float("nan")
    return {
        "bottom_low": float(a.bottom.low),
        "bottom_high": float(a.bottom.high),
        "top_low": float(a.top.low),
        "top_high": float(a.top.high),
        "width": float(width(a)),
        "risk": a_risk,
        "expected": float(expected(a)),
    }


def summarize_fuzzy(values: Mapping[str, Fuzzy]) -> "pd.DataFrame":
    """
    Tabulate bounds and defuzzified metrics, one row per label.

    ``risk`` is NaN for values whose risk is undefined.
    """
    pd = _require_pandas()
    rows: List[Dict[str, Any]] = []
    for label, a in values.items():
        row = _metrics(a)
        row["label"] = label
        rows.append(row)
    df = pd.DataFrame(rows)
    if not df.empty:
        df = df.set_index("label")
    return df


def _valuation_row(params: BondParams) -> Dict[str, Any]:
    pv = BondValuation(params).present_value()
    return _metrics(pv)


def run_spread_sweep(
    params: BondParams,
    factors: Sequence[Number] = (0, 0.5, 1, 1.5, 2),
) -> "pd.DataFrame":
    """
    Evaluate the present value with every rate's spread scaled by each factor.

    A factor of 1 reproduces ``params``; 0 collapses the rates to their modes.
    """
    pd = _require_pandas()
    rows: List[Dict[str, Any]] = []
    for factor in factors:
        variant = replace(params, rates=[rate.widened(factor) for rate in params.rates])
        row = _valuation_row(variant)
        row["spread_factor"] = float(factor)
        rows.append(row)
    df = pd.DataFrame(rows).set_index("spread_factor").sort_index()
    return df


def run_coupon_scenarios(
    params: BondParams,
    coupon_rates: Iterable[Number],
) -> "pd.DataFrame":
    """
    Evaluate the present value for each coupon rate, keeping rates fixed.
    """
    pd = _require_pandas()
    rows: List[Dict[str, Any]] = []
    for coupon_rate in coupon_rates:
        variant = replace(params, coupon_rate=coupon_rate)
        row = _valuation_row(variant)
        row["coupon_rate"] = float(variant.coupon_rate)
        rows.append(row)
    df = pd.DataFrame(rows).sort_values("coupon_rate")
    return df


def plot_metric_trends(
    df: "pd.DataFrame",
    x_column: str,
    *,
    metrics: Sequence[str] = ("width", "expected"),
    ax=None,
    show: bool = True,
) -> Any:
    """
    Plot selected metrics against a given column (e.g., spread factor or coupon rate).
    """
    pd = _require_pandas()
    plt = _require_matplotlib()

    if not isinstance(df, pd.DataFrame):
        raise TypeError("Expected a pandas DataFrame for plotting.")
    plot_df = df.reset_index(drop=False)
    if x_column not in plot_df.columns:
        raise ValueError(f"Column '{x_column}' not found in DataFrame.")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 4))
    else:
        fig = ax.figure

    for metric in metrics:
        if metric not in plot_df.columns:
            continue
        ax.plot(plot_df[x_column], plot_df[metric], marker="o", label=metric)

    ax.set_xlabel(x_column)
    ax.set_ylabel("Metric value")
    ax.set_title("Sensitivity trends")
    ax.legend(loc="best")
    ax.grid(True, linestyle="--", alpha=0.3)
    fig.tight_layout()

    if show:
        plt.show()
    return ax
