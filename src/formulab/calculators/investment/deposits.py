"""
Bank deposit maturity: Fixed Deposit (FD) and Recurring Deposit (RD).
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.validation import require_positive


def calculate_fd(principal, annual_rate, total_years, compounding_frequency=1) -> float:
    """
    Calculate the maturity amount of a Fixed Deposit.

    Args:
        principal: Amount deposited (must be > 0)
        annual_rate: Annual interest rate in percent (must be > 0)
        total_years: Duration in years (must be > 0)
        compounding_frequency: Compounding periods per year, 1 = annual,
            4 = quarterly (must be > 0)

    Returns:
        Maturity amount rounded to 2 decimal places

    Raises:
        ValidationError: If any argument is not positive
    """
    principal, annual_rate, total_years, compounding_frequency = require_positive(
        principal=principal,
        annual_rate=annual_rate,
        total_years=total_years,
        compounding_frequency=compounding_frequency,
    )
    effective_rate = annual_rate / 100 / compounding_frequency
    periods = total_years * compounding_frequency
    return quantize(principal * (1 + effective_rate) ** periods)


def calculate_rd(monthly_investment, annual_rate, total_years) -> float:
    """
    Calculate the maturity amount of a Recurring Deposit.

    Interest compounds quarterly. The k-th monthly deposit (k = 1..months)
    grows for the ``(months − k) / 3`` quarters left until maturity:

        maturity = Σ M × (1 + q)^((months − k) / 3),  q = annual_rate / 4 / 100

    Args:
        monthly_investment: Amount deposited each month (must be > 0)
        annual_rate: Annual interest rate in percent (must be > 0)
        total_years: Duration in years (must be > 0)

    Returns:
        Maturity amount rounded to 2 decimal places

    Raises:
        ValidationError: If any argument is not positive
    """
    monthly_investment, annual_rate, total_years = require_positive(
        monthly_investment=monthly_investment,
        annual_rate=annual_rate,
        total_years=total_years,
    )
    q = annual_rate / 4 / 100
    months = total_years * 4 * 3

    maturity = 0.0
    k = 1
    while k <= months:
        maturity += monthly_investment * (1 + q) ** ((months - k) / 3)
        k += 1

    return quantize(maturity)
