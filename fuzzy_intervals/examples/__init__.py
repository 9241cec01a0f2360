"""Canonical example instances for fuzzy_intervals."""

from .bond_instance import build_bond_instance, run_bond_example

__all__ = ["build_bond_instance", "run_bond_example"]
