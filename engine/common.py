"""
Shared numeric helpers for the ratio formulas.

Every formula reports an undefined result (zero denominator or a failed
magnitude precondition) by returning UNDEFINED instead of raising.
"""

import math

import numpy as np

# Not-a-number sentinel returned for undefined ratios
UNDEFINED: float = math.nan


def is_undefined(value: float) -> bool:
    """Return True if a ratio result is the not-a-number sentinel."""
    return math.isnan(value)


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Divide with IEEE-754 semantics.

    Python floats raise ZeroDivisionError on x / 0; this returns
    +/-inf for a non-zero numerator and nan for 0 / 0 instead.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))
