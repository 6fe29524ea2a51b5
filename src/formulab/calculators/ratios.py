"""
Financial ratio calculators.

Each ratio is returned as a percentage rounded to 2 decimal places.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.validation import require_non_negative, require_positive


def calculate_roi(initial_investment, final_value) -> float:
    """
    Calculate Return on Investment: (final − initial) / initial × 100.

    Args:
        initial_investment: Amount invested (must be > 0)
        final_value: Value at the end of the period (must be >= 0)

    Returns:
        ROI in percent; negative for a loss
    """
    (initial_investment,) = require_positive(initial_investment=initial_investment)
    (final_value,) = require_non_negative(final_value=final_value)
    return quantize((final_value - initial_investment) / initial_investment * 100)


def calculate_dti(total_debt, gross_income) -> float:
    """
    Calculate the Debt-to-Income ratio: total_debt / gross_income × 100.

    Args:
        total_debt: Recurring debt payments for the period (must be >= 0)
        gross_income: Gross income for the same period (must be > 0)
    """
    (total_debt,) = require_non_negative(total_debt=total_debt)
    (gross_income,) = require_positive(gross_income=gross_income)
    return quantize(total_debt / gross_income * 100)


def calculate_dividend_yield(annual_dividends, stock_price) -> float:
    """Dividend yield: annual_dividends / stock_price × 100."""
    (annual_dividends,) = require_non_negative(annual_dividends=annual_dividends)
    (stock_price,) = require_positive(stock_price=stock_price)
    return quantize(annual_dividends / stock_price * 100)
