"""
Result records returned by FormulaLab calculators.

All records are frozen dataclasses: built once by a calculator, returned to
the caller and never mutated. ``to_dict()`` gives a JSON-ready mapping.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


class _Record:
    """Mixin providing dictionary export for result dataclasses."""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass(frozen=True)
class LoanDetails(_Record):
    """
    Totals over the life of an amortizing loan.

    Attributes:
        monthly_payment: Rounded equated monthly installment
        total_payment: monthly_payment times the number of payments
        total_interest: total_payment minus principal
    """

    monthly_payment: float
    total_payment: float
    total_interest: float


@dataclass(frozen=True)
class BMIResult(_Record):
    bmi: float
    category: str


@dataclass(frozen=True)
class TDEEResult(_Record):
    tdee: float
    category: str


@dataclass(frozen=True)
class HeartRateRange(_Record):
    """Target heart-rate band in beats per minute (whole numbers)."""

    hrr_min: int
    hrr_max: int


@dataclass(frozen=True)
class MacroSplit(_Record):
    """Daily macronutrient targets in grams."""

    protein: float
    fat: float
    carbs: float


@dataclass(frozen=True)
class EPFResult(_Record):
    """
    Employee Provident Fund projection.

    Attributes:
        total_contribution: Employee plus employer contributions over the term
        interest_earned: maturity_amount minus total_contribution
        maturity_amount: Balance at the end of the final year
    """

    total_contribution: float
    interest_earned: float
    maturity_amount: float


@dataclass(frozen=True)
class IncomeTaxResult(_Record):
    """
    Breakdown of an income-tax computation after deductions.

    Attributes:
        gross_income: Annual gross income as supplied
        total_deductions: Sum of the capped deductions
        taxable_income: gross_income minus total_deductions, floored at zero
        tax: Slab tax before cess
        cess: Health and education cess on ``tax``
        total_tax: tax plus cess
    """

    gross_income: float
    total_deductions: float
    taxable_income: float
    tax: float
    cess: float
    total_tax: float


@dataclass(frozen=True)
class TaxComparison(_Record):
    """Old versus new regime liability with the cheaper regime recommended."""

    old_regime_tax: float
    new_regime_tax: float
    recommended_regime: str

    @property
    def savings(self) -> float:
        """Absolute difference between the two liabilities."""
        return round(abs(self.old_regime_tax - self.new_regime_tax), 2)
