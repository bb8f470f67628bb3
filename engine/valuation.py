"""
Valuation multiples and intrinsic value estimates.
"""

import math

from config.logging_config import get_logger
from engine.common import UNDEFINED

logger = get_logger(__name__)

# Graham's 15 × P/E ceiling times 1.5 × P/B ceiling
GRAHAM_CONSTANT = 22.5


def calculate_enterprise_value_to_ebitda(enterprise_value: float, ebitda: float) -> float:
    """
    EV/EBITDA = Enterprise Value / EBITDA

    Returns:
        The EV/EBITDA multiple, or NaN if EBITDA is zero
    """
    if ebitda == 0:
        logger.debug("EV/EBITDA undefined: EBITDA is zero")
        return UNDEFINED
    return enterprise_value / ebitda


def calculate_price_to_book(stock_price: float, book_value_per_share: float) -> float:
    """
    PB Ratio = Market Price / Book Value per Share

    Returns:
        The Price-to-Book ratio, or NaN if book value per share is zero
    """
    if book_value_per_share == 0:
        logger.debug("PB ratio undefined: book value per share is zero")
        return UNDEFINED
    return stock_price / book_value_per_share


def calculate_graham_number(
    earnings_per_share: float,
    eps_growth_rate: float,
    bond_yield: float,
) -> float:
    """
    Graham Number = EPS × (1 + EPS Growth) × √22.5 / Bond Yield

    Args:
        earnings_per_share: Company's earnings per share
        eps_growth_rate: EPS growth rate as a decimal
        bond_yield: Yield of a long-term government bond as a decimal

    Returns:
        The Graham Number, or NaN if EPS or bond yield is zero
    """
    if earnings_per_share == 0 or bond_yield == 0:
        logger.debug("Graham number undefined: EPS or bond yield is zero")
        return UNDEFINED
    return earnings_per_share * (1 + eps_growth_rate) * math.sqrt(GRAHAM_CONSTANT) / bond_yield


def calculate_gordon_intrinsic_value_ddm(
    current_dividend: float,
    growth_rate: float,
    discount_rate: float,
) -> float:
    """
    Intrinsic value under the Gordon Growth (dividend discount) model.

    Value = Current Dividend / (Discount Rate - Growth Rate)

    The model only converges when the discount rate exceeds the growth
    rate; otherwise NaN is returned.

    Args:
        current_dividend: Current annual dividend per share
        growth_rate: Expected perpetual dividend growth rate as a decimal
        discount_rate: Required rate of return (cost of equity)
    """
    if discount_rate <= growth_rate:
        logger.debug(
            f"Gordon value undefined: discount rate {discount_rate} <= growth rate {growth_rate}"
        )
        return UNDEFINED
    return current_dividend / (discount_rate - growth_rate)
