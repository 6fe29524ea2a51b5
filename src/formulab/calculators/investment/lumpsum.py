"""
Future value of a one-time (lumpsum) investment.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.validation import require_positive


def calculate_lumpsum(principal, annual_return_rate, total_years) -> float:
    """
    Calculate the future value of a lumpsum: P × (1 + r/100)^t.

    Args:
        principal: Amount invested (must be > 0)
        annual_return_rate: Expected annual return in percent (must be > 0)
        total_years: Investment horizon in years (must be > 0)

    Returns:
        Future value rounded to 2 decimal places

    Raises:
        ValidationError: If any argument is not positive
    """
    principal, annual_return_rate, total_years = require_positive(
        principal=principal,
        annual_return_rate=annual_return_rate,
        total_years=total_years,
    )
    return quantize(principal * (1 + annual_return_rate / 100) ** total_years)
