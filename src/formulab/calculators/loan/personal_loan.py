"""
Personal loan payment and lifetime totals.
"""

from __future__ import annotations

from formulab.core.results import LoanDetails

from ._loan_utils import year_term_details, year_term_payment


def calculate_personal_loan_payment(principal, annual_rate, term_years) -> float:
    """Monthly personal loan payment, rounded to 2 decimal places."""
    return year_term_payment(principal, annual_rate, term_years)


def calculate_personal_loan_details(principal, annual_rate, term_years) -> LoanDetails:
    """
    Total payment and total interest over the life of a personal loan.

    Raises:
        ValidationError: If principal, annual_rate or term_years is not positive
    """
    return year_term_details(principal, annual_rate, term_years)
