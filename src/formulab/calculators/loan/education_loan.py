"""
Education loan payment and lifetime totals.
"""

from __future__ import annotations

from formulab.core.results import LoanDetails

from ._loan_utils import year_term_details, year_term_payment


def calculate_education_loan_payment(principal, annual_rate, term_years) -> float:
    return year_term_payment(principal, annual_rate, term_years)


def calculate_education_loan_details(principal, annual_rate, term_years) -> LoanDetails:
    """
    Total payment and total interest over the life of an education loan.

    Args:
        principal: Amount borrowed (must be > 0)
        annual_rate: Annual interest rate in percent (must be > 0)
        term_years: Repayment term in years (must be > 0)

    Returns:
        LoanDetails with monthly_payment, total_payment and total_interest
    """
    return year_term_details(principal, annual_rate, term_years)
