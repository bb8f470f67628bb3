"""
Financial ratio computation engine.

Evaluates every ratio formula for which inputs are available.

CONVENTIONS:
1. Rates, returns and yields are decimals (0.08 for 8%)
2. A ratio with any missing input is left out of the result
3. A ratio whose denominator is zero is reported as NaN, never dropped
"""

from dataclasses import dataclass, fields
from typing import Callable, Optional

from config.logging_config import get_logger
from engine.distress import calculate_altman_z_score
from engine.performance import (
    calculate_expected_return_capm,
    calculate_sharpe_ratio,
    calculate_sortino_ratio,
    calculate_treynor_ratio,
)
from engine.valuation import (
    calculate_enterprise_value_to_ebitda,
    calculate_gordon_intrinsic_value_ddm,
    calculate_graham_number,
    calculate_price_to_book,
)

logger = get_logger(__name__)


@dataclass
class RatioInputs:
    """Scalar inputs for every supported ratio. Unknown values stay None."""

    # Returns & risk
    risk_free_rate: Optional[float] = None
    average_return: Optional[float] = None
    standard_deviation: Optional[float] = None
    downside_deviation: Optional[float] = None
    market_return: Optional[float] = None
    beta: Optional[float] = None

    # Market & valuation
    enterprise_value: Optional[float] = None
    ebitda: Optional[float] = None
    stock_price: Optional[float] = None
    book_value_per_share: Optional[float] = None
    earnings_per_share: Optional[float] = None
    eps_growth_rate: Optional[float] = None
    bond_yield: Optional[float] = None

    # Balance sheet
    working_capital: Optional[float] = None
    retained_earnings: Optional[float] = None
    total_assets: Optional[float] = None
    market_value_equity: Optional[float] = None
    total_liabilities: Optional[float] = None

    # Dividends
    current_dividend: Optional[float] = None
    dividend_growth_rate: Optional[float] = None
    discount_rate: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "RatioInputs":
        """Create RatioInputs from a dictionary."""
        # Map common field name variations
        field_aliases = {
            "risk_free_rate": ["riskFreeRate"],
            "average_return": ["averageReturn"],
            "standard_deviation": ["standardDeviation"],
            "downside_deviation": ["downsideDeviation"],
            "market_return": ["marketReturn"],
            "enterprise_value": ["enterpriseValue", "ev"],
            "stock_price": ["stockPrice", "price"],
            "book_value_per_share": ["bookValuePerShare", "bvps"],
            "earnings_per_share": ["earningsPerShare", "eps"],
            "eps_growth_rate": ["epsGrowthRate"],
            "bond_yield": ["bondYield"],
            "working_capital": ["workingCapital"],
            "retained_earnings": ["retainedEarnings"],
            "total_assets": ["totalAssets"],
            "market_value_equity": ["marketValueEquity"],
            "total_liabilities": ["totalLiabilities"],
            "current_dividend": ["currentDividend", "dividend"],
            "dividend_growth_rate": ["growthRate"],
            "discount_rate": ["discountRate"],
        }

        processed = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                # Try aliases
                for alias in field_aliases.get(f.name, []):
                    if alias in data:
                        value = data[alias]
                        break

            if value is not None:
                try:
                    processed[f.name] = float(value)
                except (ValueError, TypeError):
                    logger.debug(f"Ignoring non-numeric value for {f.name}: {value!r}")

        return cls(**processed)


# Ratio name -> (formula, ordered input fields)
RATIO_FORMULAS: dict[str, tuple[Callable[..., float], tuple[str, ...]]] = {
    # ===== RISK-ADJUSTED PERFORMANCE =====
    "sharpe_ratio": (
        calculate_sharpe_ratio,
        ("risk_free_rate", "average_return", "standard_deviation"),
    ),
    "treynor_ratio": (
        calculate_treynor_ratio,
        ("average_return", "market_return", "beta"),
    ),
    "sortino_ratio": (
        calculate_sortino_ratio,
        ("risk_free_rate", "average_return", "downside_deviation"),
    ),
    "capm_expected_return": (
        calculate_expected_return_capm,
        ("risk_free_rate", "market_return", "beta"),
    ),
    # ===== VALUATION =====
    "ev_ebitda": (
        calculate_enterprise_value_to_ebitda,
        ("enterprise_value", "ebitda"),
    ),
    "pb_ratio": (
        calculate_price_to_book,
        ("stock_price", "book_value_per_share"),
    ),
    "graham_number": (
        calculate_graham_number,
        ("earnings_per_share", "eps_growth_rate", "bond_yield"),
    ),
    "gordon_intrinsic_value": (
        calculate_gordon_intrinsic_value_ddm,
        ("current_dividend", "dividend_growth_rate", "discount_rate"),
    ),
    # ===== DISTRESS =====
    "altman_z_score": (
        calculate_altman_z_score,
        (
            "working_capital",
            "retained_earnings",
            "total_assets",
            "market_value_equity",
            "total_liabilities",
        ),
    ),
}


def compute_ratios(inputs: RatioInputs) -> dict[str, float]:
    """
    Compute all ratios whose inputs are available.

    Args:
        inputs: Scalar inputs; None marks a missing value

    Returns:
        Dict of ratio names to values. Undefined ratios map to NaN.
    """
    ratios: dict[str, float] = {}

    for name, (formula, arg_names) in RATIO_FORMULAS.items():
        args = [getattr(inputs, arg) for arg in arg_names]
        missing = [arg for arg, value in zip(arg_names, args) if value is None]
        if missing:
            logger.debug(f"Skipping {name}: missing {', '.join(missing)}")
            continue
        ratios[name] = formula(*args)

    return ratios
