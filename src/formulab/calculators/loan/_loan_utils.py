"""
Shared utilities for loan calculators.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.results import LoanDetails
from formulab.core.validation import require_positive


def monthly_rate(annual_rate_pct: float) -> float:
    """Convert an annual percentage rate (e.g. 8.5) to a monthly fraction."""
    return annual_rate_pct / 12 / 100


def amortizing_payment(principal: float, rate: float, periods: float) -> float:
    """
    Unrounded equated installment for a fully amortizing loan.

    EMI = P × r × (1+r)^n / ((1+r)^n − 1)

    A zero periodic rate degrades to straight-line repayment ``P / n``.

    Args:
        principal: Loan amount
        rate: Periodic (monthly) interest rate as a fraction
        periods: Number of payments
    """
    if rate == 0:
        return principal / periods
    growth = (1 + rate) ** periods
    return principal * rate * growth / (growth - 1)


def year_term_payment(principal, annual_rate, term_years) -> float:
    """
    Rounded monthly payment for a loan quoted with a term in years.

    Raises:
        ValidationError: If principal, rate or term is not positive
    """
    principal, annual_rate, term_years = require_positive(
        principal=principal, annual_rate=annual_rate, loan_term_years=term_years
    )
    return quantize(
        amortizing_payment(principal, monthly_rate(annual_rate), term_years * 12)
    )


def year_term_details(principal, annual_rate, term_years) -> LoanDetails:
    """
    Monthly payment, total payment and total interest for a year-term loan.

    Totals are built from the rounded monthly payment, so
    ``total_interest == total_payment - principal`` holds to the cent.
    """
    payment = year_term_payment(principal, annual_rate, term_years)
    principal, term_years = float(principal), float(term_years)
    total_payment = payment * term_years * 12
    total_interest = total_payment - principal
    return LoanDetails(
        monthly_payment=payment,
        total_payment=quantize(total_payment),
        total_interest=quantize(total_interest),
    )
