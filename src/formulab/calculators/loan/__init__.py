"""
Loan calculators: EMI, total interest and per-product loan details.
"""

from .education_loan import (
    calculate_education_loan_details,
    calculate_education_loan_payment,
)
from .emi import calculate_emi, calculate_total_interest_paid
from .home_loan import calculate_home_loan_details, calculate_home_loan_payment
from .personal_loan import (
    calculate_personal_loan_details,
    calculate_personal_loan_payment,
)

__all__ = [
    "calculate_emi",
    "calculate_total_interest_paid",
    "calculate_home_loan_payment",
    "calculate_home_loan_details",
    "calculate_personal_loan_payment",
    "calculate_personal_loan_details",
    "calculate_education_loan_payment",
    "calculate_education_loan_details",
]
