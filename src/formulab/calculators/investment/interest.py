"""
Compound and simple interest.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.validation import require_positive


def calculate_compound_interest(principal, annual_rate, times_compounded, years) -> float:
    """
    Calculate compound interest earned.

    A = P × (1 + r/100/n)^(n×t); the interest returned is A − P.

    Unlike :func:`~formulab.calculators.loan.calculate_emi`, a zero rate is
    rejected.

    Args:
        principal: Amount invested (must be > 0)
        annual_rate: Annual interest rate in percent (must be > 0)
        times_compounded: Compounding periods per year (must be > 0)
        years: Investment horizon in years (must be > 0)

    Returns:
        Interest earned, rounded to 2 decimal places

    Raises:
        ValidationError: If any argument is not positive
    """
    principal, annual_rate, times_compounded, years = require_positive(
        principal=principal,
        annual_rate=annual_rate,
        times_compounded=times_compounded,
        years=years,
    )
    amount = principal * (1 + annual_rate / 100 / times_compounded) ** (
        times_compounded * years
    )
    return quantize(amount - principal)


def calculate_simple_interest(principal, annual_rate, years) -> float:
    """
    Calculate simple interest: P × r × t / 100.

    Raises:
        ValidationError: If any argument is not positive
    """
    principal, annual_rate, years = require_positive(
        principal=principal, annual_rate=annual_rate, years=years
    )
    return quantize(principal * annual_rate * years / 100)
