"""
Visualization utilities for fuzzy numbers.

This module turns the ``(value, mu)`` boundary produced by
:func:`fuzzy_intervals.defuzz.plot` into membership charts and exportable
formats.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional
import json
import csv

from .defuzz import plot
from .fuzzy import Fuzzy

__all__ = [
    "plot_fuzzy",
    "plot_fuzzy_many",
    "export_plot_json",
    "export_plot_csv",
]


def _require_matplotlib():
    try:
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:  # pragma: no cover - import guard
        raise RuntimeError(
            "matplotlib is required for visualization utilities. "
            "Install it with `pip install matplotlib`."
        ) from exc
    return plt


def _draw(ax, a: Fuzzy, label: Optional[str]) -> None:
    points = plot(a)
    xs = [float(value) for value, _ in points]
    ys = [float(mu) for _, mu in points]
    ax.plot(xs, ys, marker="o", markersize=3, label=label)


def _finish(ax, fig, title: str) -> None:
    ax.set_xlabel("Value")
    ax.set_ylabel("Membership")
    ax.set_ylim(-0.05, 1.05)
    ax.set_title(title)
    ax.grid(True, linestyle="--", alpha=0.3)
    fig.tight_layout()


def plot_fuzzy(
    a: Fuzzy,
    *,
    ax=None,
    label: Optional[str] = None,
    show: bool = True,
) -> Any:
    """
    Plot the membership polygon of a single fuzzy number.
    """
    plt = _require_matplotlib()

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 4))
    else:
        fig = ax.figure

    _draw(ax, a, label)
    if label:
        ax.legend(loc="best")
    _finish(ax, fig, label or "Fuzzy number")

    if show:
        plt.show()
    return ax


def plot_fuzzy_many(
    values: Mapping[str, Fuzzy],
    *,
    ax=None,
    title: str = "Fuzzy numbers",
    show: bool = True,
) -> Any:
    """
    Plot several fuzzy numbers on shared axes, one polygon per label.
    """
    plt = _require_matplotlib()
    if not values:
        raise ValueError("No fuzzy numbers given; nothing to plot.")

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 4))
    else:
        fig = ax.figure

    for label, a in values.items():
        _draw(ax, a, label)
    ax.legend(loc="best")
    _finish(ax, fig, title)

    if show:
        plt.show()
    return ax


def export_plot_json(a: Fuzzy, path: Path | str) -> Path:
    """
    Export the plot points to a JSON list of ``{"value", "membership"}`` objects.

    Decimals are written as strings to keep their exact representation.
    """
    target = Path(path)
    payload = [
        {"value": str(value), "membership": str(mu)}
        for value, mu in plot(a)
    ]
    with target.open("w", encoding="utf-8") as fp:
        json.dump(payload, fp, indent=2)
    return target


def export_plot_csv(a: Fuzzy, path: Path | str) -> Path:
    """
    Export the plot points to a two-column CSV file.
    """
    target = Path(path)
    with target.open("w", newline="", encoding="utf-8") as fp:
        writer = csv.writer(fp)
        writer.writerow(["value", "membership"])
        for value, mu in plot(a):
            writer.writerow([value, mu])
    return target
