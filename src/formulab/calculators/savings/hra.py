"""
House Rent Allowance (HRA) exemption.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.validation import require_non_negative, require_positive

METRO_SHARE = 0.5
NON_METRO_SHARE = 0.4
RENT_EXCESS_SHARE = 0.10


def calculate_hra_exemption(basic_salary, hra_received, rent_paid, metro_city=True) -> float:
    """
    Calculate the tax-exempt part of HRA.

    The exemption is the least of:
      - HRA actually received
      - rent paid minus 10% of basic salary
      - 50% of basic salary in a metro city, 40% elsewhere

    and never less than zero. All amounts must cover the same period
    (monthly or annual).

    Args:
        basic_salary: Basic salary (must be > 0)
        hra_received: HRA received from the employer (must be >= 0)
        rent_paid: Rent paid (must be >= 0)
        metro_city: True for Delhi, Mumbai, Kolkata or Chennai

    Returns:
        Exempt HRA rounded to 2 decimal places

    Raises:
        ValidationError: If any amount is out of range
    """
    (basic_salary,) = require_positive(basic_salary=basic_salary)
    hra_received, rent_paid = require_non_negative(
        hra_received=hra_received, rent_paid=rent_paid
    )

    city_share = METRO_SHARE if metro_city else NON_METRO_SHARE
    exemption = min(
        hra_received,
        rent_paid - RENT_EXCESS_SHARE * basic_salary,
        city_share * basic_salary,
    )
    return quantize(max(exemption, 0.0))
