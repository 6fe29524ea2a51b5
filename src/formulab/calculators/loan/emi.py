"""
Equated Monthly Installment (EMI) for loans quoted with a term in months.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.validation import require_non_negative, require_positive

from ._loan_utils import amortizing_payment, monthly_rate


def calculate_emi(principal, annual_rate, term_months) -> float:
    """
    Calculate the Equated Monthly Installment (EMI) for a loan.

    EMI = P × r × (1+r)^n / ((1+r)^n − 1),  r = annual_rate / 12 / 100

    A rate of exactly zero is accepted and gives ``principal / term_months``.

    Args:
        principal: Loan amount (must be > 0)
        annual_rate: Annual interest rate in percent, e.g. 8.5 (must be >= 0)
        term_months: Number of monthly payments (must be > 0)

    Returns:
        Monthly installment rounded to 2 decimal places

    Raises:
        ValidationError: If any argument is out of range

    Example:
        ```python
        calculate_emi(500_000, 12, 24)  # 23536.74
        ```
    """
    principal, term_months = require_positive(
        principal=principal, term_months=term_months
    )
    (annual_rate,) = require_non_negative(annual_rate=annual_rate)

    return quantize(amortizing_payment(principal, monthly_rate(annual_rate), term_months))


def calculate_total_interest_paid(principal, annual_rate, term_months) -> float:
    """
    Calculate the total interest paid over the life of a loan.

    Uses the rounded EMI: ``EMI × term_months − principal``.

    Args:
        principal: Loan amount (must be > 0)
        annual_rate: Annual interest rate in percent (must be >= 0)
        term_months: Number of monthly payments (must be > 0)

    Returns:
        Total interest rounded to 2 decimal places

    Raises:
        ValidationError: If any argument is out of range
    """
    emi = calculate_emi(principal, annual_rate, term_months)
    return quantize(emi * term_months - principal)
