"""
Systematic Investment Plan (SIP) maturity, flat and with an annual step-up.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.validation import require_non_negative, require_positive


def annuity_due_factor(rate: float, periods: float) -> float:
    """
    Future value of 1 paid at the start of each of ``periods`` periods.

    ((1+i)^n − 1) / i × (1+i); for i == 0 this is simply n.
    """
    if rate == 0:
        return periods
    return ((1 + rate) ** periods - 1) / rate * (1 + rate)


def calculate_sip(monthly_investment, annual_return_rate, total_months) -> float:
    """
    Calculate the maturity amount of a SIP.

    FV = PMT × ((1+i)^n − 1) / i × (1+i),  i = annual_return_rate / 12 / 100

    Args:
        monthly_investment: Amount invested each month (must be > 0)
        annual_return_rate: Expected annual return in percent (must be > 0)
        total_months: Number of monthly instalments (must be > 0)

    Returns:
        Maturity amount rounded to 2 decimal places

    Raises:
        ValidationError: If any argument is not positive

    Example:
        ```python
        calculate_sip(5000, 12, 12)  # 64046.64
        ```
    """
    monthly_investment, annual_return_rate, total_months = require_positive(
        monthly_investment=monthly_investment,
        annual_return_rate=annual_return_rate,
        total_months=total_months,
    )
    i = annual_return_rate / 12 / 100
    return quantize(monthly_investment * annuity_due_factor(i, total_months))


def calculate_step_up_sip(
    initial_investment, annual_return_rate, total_years, step_up_rate
) -> float:
    """
    Calculate the maturity amount of a SIP whose instalment steps up every year.

    Year ``y`` (0-based) invests ``initial × (1 + step_up_rate/100)^y`` per
    month, and that year's stream compounds monthly for the remaining
    ``(total_years − y) × 12`` months. The contribution base changes yearly,
    so the total is accumulated year by year.

    Args:
        initial_investment: Monthly instalment in the first year (must be > 0)
        annual_return_rate: Expected annual return in percent (must be > 0)
        total_years: Whole number of investment years (must be > 0)
        step_up_rate: Annual increase of the instalment in percent (must be >= 0)

    Returns:
        Maturity amount rounded to 2 decimal places

    Raises:
        ValidationError: If any argument is out of range
    """
    initial_investment, annual_return_rate, total_years = require_positive(
        initial_investment=initial_investment,
        annual_return_rate=annual_return_rate,
        total_years=total_years,
    )
    (step_up_rate,) = require_non_negative(step_up_rate=step_up_rate)

    i = annual_return_rate / 12 / 100
    maturity = 0.0
    year = 0
    while year < total_years:
        contribution = initial_investment * (1 + step_up_rate / 100) ** year
        months_remaining = (total_years - year) * 12
        maturity += contribution * annuity_due_factor(i, months_remaining)
        year += 1

    return quantize(maturity)
