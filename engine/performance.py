"""
Risk-adjusted performance measures.

Inputs are already-computed scalars (average returns, deviations, beta),
expressed as decimals, e.g. 0.08 for 8%.
"""

from config.logging_config import get_logger
from engine.common import UNDEFINED

logger = get_logger(__name__)


def calculate_sharpe_ratio(
    risk_free_rate: float,
    average_return: float,
    standard_deviation: float,
) -> float:
    """
    Sharpe Ratio = (Average Return - Risk Free Rate) / Standard Deviation

    Args:
        risk_free_rate: Risk-free rate of return (e.g. treasury bill yield)
        average_return: Average return of the investment
        standard_deviation: Standard deviation of the investment's returns

    Returns:
        The Sharpe Ratio, or NaN if standard deviation is zero
    """
    if standard_deviation == 0:
        logger.debug("Sharpe ratio undefined: standard deviation is zero")
        return UNDEFINED
    return (average_return - risk_free_rate) / standard_deviation


def calculate_treynor_ratio(
    average_return: float,
    market_return: float,
    beta: float,
) -> float:
    """
    Treynor Ratio = (Average Return - Market Return) / Beta

    Args:
        average_return: Average return of the investment
        market_return: Average return of the market benchmark
        beta: Volatility of the investment relative to the market

    Returns:
        The Treynor Ratio, or NaN if beta is zero
    """
    if beta == 0:
        logger.debug("Treynor ratio undefined: beta is zero")
        return UNDEFINED
    return (average_return - market_return) / beta


def calculate_sortino_ratio(
    risk_free_rate: float,
    average_return: float,
    downside_deviation: float,
) -> float:
    """
    Sortino Ratio = (Average Return - Risk Free Rate) / Downside Deviation

    Like Sharpe, but only penalises volatility of negative returns.

    Returns:
        The Sortino Ratio, or NaN if downside deviation is zero
    """
    if downside_deviation == 0:
        logger.debug("Sortino ratio undefined: downside deviation is zero")
        return UNDEFINED
    return (average_return - risk_free_rate) / downside_deviation


def calculate_expected_return_capm(
    risk_free_rate: float,
    market_return: float,
    beta: float,
) -> float:
    """Expected return under CAPM: Rf + Beta × (Rm - Rf)."""
    return risk_free_rate + beta * (market_return - risk_free_rate)
