"""Bond instance helpers for fuzzy_intervals.

Provides the canonical two-period coupon bond (face value 1000, coupon 10%)
discounted at two imprecise rates, used by the test-suite, as well as a small
runner that prints the valuation summary.
"""

from __future__ import annotations

from ..data import BondParams, RateSpec


def build_bond_instance() -> BondParams:
    """Construct the bond instance used by the tests."""
    rates = [
        RateSpec(low="0.0011", mode="0.0012", high="0.0014"),
        RateSpec(low="0.0008", mode="0.0011", high="0.0016"),
    ]
    return BondParams(face_value=1000, coupon_rate="0.1", rates=rates)


def run_bond_example(*, show_plot: bool = False) -> None:
    """Value the bond instance and print its fuzzy present value summary."""
    from .. import BondValuation

    valuation = BondValuation(build_bond_instance(), logging_enabled=True)
    pv = valuation.present_value()
    result = valuation.extract_result(pv)

    print(f"Bottom cut (mu=0): {result['bottom']}")
    print(f"Top cut (mu=1):    {result['top']}")
    print(f"Expected value:    {result['expected']}")
    print(f"Weighted width:    {result['width']}")
    print(f"Weighted risk:     {result['risk']}")

    if show_plot:
        from ..visualization import plot_fuzzy

        plot_fuzzy(pv, label="Present value", show=True)


if __name__ == "__main__":
    run_bond_example()
