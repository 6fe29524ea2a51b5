"""
Employee Provident Fund (EPF) projection.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.results import EPFResult
from formulab.core.validation import require_non_negative, require_positive

DEFAULT_EPF_RATE = 8.25
EMPLOYEE_SHARE_PCT = 12.0
# Employer's 12% minus the 8.33% diverted to the pension scheme
EMPLOYER_SHARE_PCT = 3.67


def calculate_epf(
    monthly_basic_salary,
    total_years,
    annual_rate=DEFAULT_EPF_RATE,
    employee_contribution_rate=EMPLOYEE_SHARE_PCT,
    employer_contribution_rate=EMPLOYER_SHARE_PCT,
    annual_salary_increase=0.0,
) -> EPFResult:
    """
    Project the EPF balance year by year.

    Each year the employee and employer contributions on the current basic
    salary are added to the balance, the balance earns one year of interest,
    and the salary is raised by ``annual_salary_increase`` percent.

    Args:
        monthly_basic_salary: Basic salary plus dearness allowance per month (must be > 0)
        total_years: Whole years of service to project (must be > 0)
        annual_rate: EPF interest rate in percent (must be > 0)
        employee_contribution_rate: Employee share in percent of basic (must be >= 0)
        employer_contribution_rate: Employer share credited to EPF in percent (must be >= 0)
        annual_salary_increase: Yearly raise in percent (must be >= 0)

    Returns:
        EPFResult with total_contribution, interest_earned and maturity_amount

    Raises:
        ValidationError: If any argument is out of range
    """
    monthly_basic_salary, total_years, annual_rate = require_positive(
        monthly_basic_salary=monthly_basic_salary,
        total_years=total_years,
        annual_rate=annual_rate,
    )
    (
        employee_contribution_rate,
        employer_contribution_rate,
        annual_salary_increase,
    ) = require_non_negative(
        employee_contribution_rate=employee_contribution_rate,
        employer_contribution_rate=employer_contribution_rate,
        annual_salary_increase=annual_salary_increase,
    )

    share = (employee_contribution_rate + employer_contribution_rate) / 100
    salary = monthly_basic_salary
    balance = 0.0
    contributed = 0.0
    year = 0
    while year < total_years:
        contribution = salary * share * 12
        contributed += contribution
        balance = (balance + contribution) * (1 + annual_rate / 100)
        salary *= 1 + annual_salary_increase / 100
        year += 1

    return EPFResult(
        total_contribution=quantize(contributed),
        interest_earned=quantize(balance - contributed),
        maturity_amount=quantize(balance),
    )
