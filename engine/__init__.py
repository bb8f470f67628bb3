"""Financial ratio formulas."""

from engine.common import UNDEFINED, is_undefined, ieee_divide
from engine.performance import (
    calculate_sharpe_ratio,
    calculate_treynor_ratio,
    calculate_sortino_ratio,
    calculate_expected_return_capm,
)
from engine.valuation import (
    calculate_enterprise_value_to_ebitda,
    calculate_price_to_book,
    calculate_graham_number,
    calculate_gordon_intrinsic_value_ddm,
)
from engine.distress import calculate_altman_z_score
from engine.ratios import compute_ratios, RatioInputs

__all__ = [
    "UNDEFINED",
    "is_undefined",
    "ieee_divide",
    "calculate_sharpe_ratio",
    "calculate_treynor_ratio",
    "calculate_sortino_ratio",
    "calculate_enterprise_value_to_ebitda",
    "calculate_price_to_book",
    "calculate_graham_number",
    "calculate_expected_return_capm",
    "calculate_altman_z_score",
    "calculate_gordon_intrinsic_value_ddm",
    "compute_ratios",
    "RatioInputs",
]
