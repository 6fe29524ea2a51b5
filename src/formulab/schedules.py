"""
Month-by-month schedules for loans and SIPs.

The calculators return single totals; these functions expand the same
formulas into pandas DataFrames (one row per month) for tables, exports and
charts. Values are rounded to 2 decimal places like every other result.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from formulab.calculators.investment.sip import annuity_due_factor
from formulab.calculators.loan.emi import calculate_emi
from formulab.core.currency import quantize
from formulab.core.errors import ValidationError
from formulab.core.validation import require_positive

AMORTIZATION_COLUMNS = ["month", "payment", "principal", "interest", "balance"]
SIP_COLUMNS = ["month", "invested", "value", "gains"]


def _whole_months(name: str, value: float) -> int:
    if not float(value).is_integer():
        raise ValidationError(f"{name.replace('_', ' ')} must be a whole number of months")
    return int(value)


def _round_money(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    for col in columns:
        df[col] = df[col].map(quantize)
    return df


def amortization_schedule(principal, annual_rate, term_months) -> pd.DataFrame:
    """
    Build the amortization table of an EMI loan.

    The outstanding balance after month k follows the closed form

        B_k = P(1+r)^k − EMI((1+r)^k − 1)/r   (B_k = P − EMI·k when r = 0)

    and each month's interest is ``B_{k−1} × r``. Because the EMI is rounded
    to the cent, the last payment is adjusted so the balance ends at exactly
    zero.

    Args:
        principal: Loan amount (must be > 0)
        annual_rate: Annual interest rate in percent (must be >= 0)
        term_months: Whole number of monthly payments (must be > 0)

    Returns:
        DataFrame with columns month, payment, principal, interest, balance

    Raises:
        ValidationError: If any argument is out of range

    Example:
        ```python
        df = amortization_schedule(500_000, 12, 24)
        df["interest"].sum()  # ≈ calculate_total_interest_paid(500_000, 12, 24)
        ```
    """
    emi = calculate_emi(principal, annual_rate, term_months)
    principal = float(principal)
    n = _whole_months("term_months", term_months)
    r = float(annual_rate) / 12 / 100

    k = np.arange(0, n + 1)
    if r == 0:
        balance = principal - emi * k
    else:
        growth = (1 + r) ** k
        balance = principal * growth - emi * (growth - 1) / r

    opening = balance[:-1]
    interest = opening * r
    payment = np.full(n, emi)
    # Settle the rounding residue in the final month
    payment[-1] = opening[-1] + interest[-1]
    principal_paid = payment - interest
    closing = opening - principal_paid
    closing[-1] = 0.0

    df = pd.DataFrame(
        {
            "month": k[1:],
            "payment": payment,
            "principal": principal_paid,
            "interest": interest,
            "balance": closing,
        },
        columns=AMORTIZATION_COLUMNS,
    )
    return _round_money(df, ["payment", "principal", "interest", "balance"])


def sip_growth_schedule(monthly_investment, annual_return_rate, total_months) -> pd.DataFrame:
    """
    Build the month-by-month growth table of a SIP.

    Row k holds the amount invested so far (``PMT × k``) and the value of
    those k instalments at the end of month k, so the last row's ``value``
    equals :func:`~formulab.calculators.investment.calculate_sip`.

    Args:
        monthly_investment: Amount invested each month (must be > 0)
        annual_return_rate: Expected annual return in percent (must be > 0)
        total_months: Whole number of monthly instalments (must be > 0)

    Returns:
        DataFrame with columns month, invested, value, gains
    """
    monthly_investment, annual_return_rate, total_months = require_positive(
        monthly_investment=monthly_investment,
        annual_return_rate=annual_return_rate,
        total_months=total_months,
    )
    n = _whole_months("total_months", total_months)
    i = annual_return_rate / 12 / 100

    months = np.arange(1, n + 1)
    invested = monthly_investment * months
    value = np.array([monthly_investment * annuity_due_factor(i, m) for m in months])

    df = pd.DataFrame(
        {
            "month": months,
            "invested": invested,
            "value": value,
            "gains": value - invested,
        },
        columns=SIP_COLUMNS,
    )
    return _round_money(df, ["invested", "value", "gains"])


def schedule_totals(schedule: pd.DataFrame) -> pd.Series:
    """
    Summarise an amortization schedule.

    Returns:
        Series with total_payment, total_principal and total_interest
    """
    return pd.Series(
        {
            "total_payment": quantize(float(schedule["payment"].sum())),
            "total_principal": quantize(float(schedule["principal"].sum())),
            "total_interest": quantize(float(schedule["interest"].sum())),
        },
        name="schedule_totals",
    )
