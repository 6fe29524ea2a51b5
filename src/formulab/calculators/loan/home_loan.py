"""
Home loan (mortgage) payment and lifetime totals.
"""

from __future__ import annotations

from formulab.core.results import LoanDetails

from ._loan_utils import year_term_details, year_term_payment


def calculate_home_loan_payment(principal, annual_rate, term_years) -> float:
    """
    Calculate the monthly mortgage payment.

    Args:
        principal: Loan principal (must be > 0)
        annual_rate: Annual interest rate in percent (must be > 0)
        term_years: Loan term in years (must be > 0)

    Returns:
        Monthly payment rounded to 2 decimal places

    Raises:
        ValidationError: If any argument is not positive
    """
    return year_term_payment(principal, annual_rate, term_years)


def calculate_home_loan_details(principal, annual_rate, term_years) -> LoanDetails:
    """
    Calculate total payment and total interest over the life of a home loan.

    Args:
        principal: Loan principal (must be > 0)
        annual_rate: Annual interest rate in percent (must be > 0)
        term_years: Loan term in years (must be > 0)

    Returns:
        LoanDetails with monthly_payment, total_payment and total_interest

    Raises:
        ValidationError: If any argument is not positive

    Example:
        ```python
        details = calculate_home_loan_details(400_000, 6.5, 30)
        details.monthly_payment  # 2528.27
        ```
    """
    return year_term_details(principal, annual_rate, term_years)
