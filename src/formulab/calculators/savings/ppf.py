"""
Public Provident Fund (PPF) maturity.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.validation import require_positive

# Statutory PPF lock-in
DEFAULT_PPF_YEARS = 15


def calculate_ppf(annual_investment, annual_rate, total_years=DEFAULT_PPF_YEARS) -> float:
    """
    Calculate the maturity amount of a PPF account.

    The accumulated deposits are re-compounded from scratch every year:

        for year in 1..T:
            accumulated += annual_investment
            maturity = accumulated × (1 + r/100)^year

    so the result depends on the full loop, not only on the last term.

    Args:
        annual_investment: Amount deposited each year (must be > 0)
        annual_rate: Annual interest rate in percent (must be > 0)
        total_years: Account tenure in years, 15 by default (must be > 0)

    Returns:
        Maturity amount rounded to 2 decimal places

    Raises:
        ValidationError: If any argument is not positive
    """
    annual_investment, annual_rate, total_years = require_positive(
        annual_investment=annual_investment,
        annual_rate=annual_rate,
        total_years=total_years,
    )

    maturity = 0.0
    accumulated = 0.0
    year = 1
    while year <= total_years:
        accumulated += annual_investment
        maturity = accumulated * (1 + annual_rate / 100) ** year
        year += 1

    return quantize(maturity)
