"""
Indian personal income tax under the old and new regimes.

Tax is computed on marginal slabs and a 4% health and education cess is
added on top. The old regime allows deductions (80C, 80D, HRA, ...); the new
regime has lower slab rates but no deductions.
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping
from dataclasses import dataclass, fields

from formulab.core.currency import quantize
from formulab.core.errors import FormulaWarning, ValidationError
from formulab.core.kinds import TaxRegime
from formulab.core.results import IncomeTaxResult, TaxComparison, _Record
from formulab.core.validation import require_kind, require_non_negative

CESS_RATE = 0.04

# (upper bound of the slab, marginal rate); None = no upper bound
OLD_REGIME_SLABS: tuple[tuple[float | None, float], ...] = (
    (250_000, 0.0),
    (500_000, 0.05),
    (1_000_000, 0.20),
    (None, 0.30),
)

NEW_REGIME_SLABS: tuple[tuple[float | None, float], ...] = (
    (300_000, 0.0),
    (600_000, 0.05),
    (900_000, 0.10),
    (1_200_000, 0.15),
    (1_500_000, 0.20),
    (None, 0.30),
)

SLABS = {
    TaxRegime.OLD: OLD_REGIME_SLABS,
    TaxRegime.NEW: NEW_REGIME_SLABS,
}

SECTION_80C_CAP = 150_000
SECTION_80D_CAP = 75_000
HRA_CAP_SHARE = 0.40


def slab_tax(income: float, slabs) -> float:
    """
    Marginal tax on ``income`` for the given slab table (before cess, unrounded).

    Args:
        income: Taxable income (>= 0)
        slabs: Sequence of (upper_bound, rate) pairs in ascending order
    """
    tax = 0.0
    lower = 0.0
    for upper, rate in slabs:
        if upper is None or income <= upper:
            tax += (income - lower) * rate
            break
        tax += (upper - lower) * rate
        lower = upper
    return tax


@dataclass(frozen=True)
class Deductions(_Record):
    """
    Old-regime deductions claimed against gross income.

    Amounts are as claimed; caps are applied by :meth:`capped`.

    Attributes:
        section_80c: PPF, ELSS, life insurance, ... (capped at 150,000)
        section_80d: Health insurance premiums (capped at 75,000)
        hra_exemption: Exempt HRA (capped at 40% of gross income)
        other: Any further deduction, uncapped
    """

    section_80c: float = 0.0
    section_80d: float = 0.0
    hra_exemption: float = 0.0
    other: float = 0.0

    def __post_init__(self):
        checked = require_non_negative(
            **{f.name: getattr(self, f.name) for f in fields(self)}
        )
        for f, value in zip(fields(self), checked):
            object.__setattr__(self, f.name, value)

    # Alternative spellings accepted by from_mapping
    ALIASES = {
        "80c": "section_80c",
        "section80c": "section_80c",
        "80d": "section_80d",
        "section80d": "section_80d",
        "hra": "hra_exemption",
        "hraexemption": "hra_exemption",
        "otherdeductions": "other",
        "other_deductions": "other",
    }

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> Deductions:
        """
        Build deductions from a mapping with canonical or alias keys.

        Alias keys are matched case-insensitively. When an alias and its
        canonical key are both given with different values, the canonical
        key wins and a :class:`FormulaWarning` is emitted.

        Raises:
            ValidationError: On unknown keys or negative amounts
        """
        canonical = {f.name for f in fields(cls)}
        resolved: dict = {}
        from_alias: dict = {}
        for key, value in mapping.items():
            name = key if key in canonical else cls.ALIASES.get(str(key).lower())
            if name is None:
                allowed = ", ".join(sorted(canonical))
                raise ValidationError(
                    f"Unknown deduction {key!r}. Use one of: {allowed}."
                )
            if name == key:
                if name in from_alias and from_alias[name] != value:
                    warnings.warn(
                        f"Deduction alias ignored because '{name}' is set "
                        f"(precedence: {name}).",
                        FormulaWarning,
                        stacklevel=2,
                    )
                resolved[name] = value
            elif name in resolved:
                if resolved[name] != value:
                    warnings.warn(
                        f"'{key}' ignored because '{name}' is set (precedence: {name}).",
                        FormulaWarning,
                        stacklevel=2,
                    )
            else:
                resolved[name] = value
                from_alias[name] = value
        return cls(**resolved)

    def capped(self, gross_income: float) -> Deductions:
        """Return a copy with statutory caps applied for ``gross_income``."""
        return Deductions(
            section_80c=min(self.section_80c, SECTION_80C_CAP),
            section_80d=min(self.section_80d, SECTION_80D_CAP),
            hra_exemption=min(self.hra_exemption, HRA_CAP_SHARE * gross_income),
            other=self.other,
        )

    @property
    def total(self) -> float:
        return self.section_80c + self.section_80d + self.hra_exemption + self.other


def _coerce_deductions(deductions) -> Deductions:
    if deductions is None:
        return Deductions()
    if isinstance(deductions, Deductions):
        return deductions
    if isinstance(deductions, Mapping):
        return Deductions.from_mapping(deductions)
    raise ValidationError(
        f"deductions must be a Deductions record or a mapping, "
        f"got {type(deductions).__name__}"
    )


def calculate_income_tax(taxable_income, regime=TaxRegime.OLD) -> float:
    """
    Calculate income tax including 4% cess on already-taxable income.

    Old regime slabs: 0% up to 2.5L, 5% up to 5L, 20% up to 10L, 30% above.
    New regime slabs: 0% up to 3L, 5% up to 6L, 10% up to 9L, 15% up to 12L,
    20% up to 15L, 30% above.

    Args:
        taxable_income: Annual taxable income (must be >= 0)
        regime: "old" (default) or "new"

    Returns:
        Total tax (slab tax plus cess) rounded to 2 decimal places

    Raises:
        ValidationError: If income is negative or the regime is unknown

    Example:
        ```python
        calculate_income_tax(600_000)  # 33800.0
        ```
    """
    (taxable_income,) = require_non_negative(taxable_income=taxable_income)
    regime = require_kind("regime", regime, TaxRegime)

    tax = slab_tax(taxable_income, SLABS[regime])
    return quantize(tax * (1 + CESS_RATE))


def calculate_advanced_income_tax(gross_income, deductions=None) -> IncomeTaxResult:
    """
    Calculate old-regime income tax after capped deductions.

    Caps: 80C at 150,000; 80D at 75,000; HRA at 40% of gross income.
    Taxable income is gross minus total capped deductions, floored at zero.

    Args:
        gross_income: Annual gross income (must be >= 0)
        deductions: Deductions record, mapping of deduction amounts, or None

    Returns:
        IncomeTaxResult with the full breakdown

    Raises:
        ValidationError: On negative amounts or unknown deduction keys
    """
    (gross_income,) = require_non_negative(gross_income=gross_income)
    capped = _coerce_deductions(deductions).capped(gross_income)

    taxable = max(gross_income - capped.total, 0.0)
    tax = slab_tax(taxable, OLD_REGIME_SLABS)
    cess = tax * CESS_RATE
    return IncomeTaxResult(
        gross_income=quantize(gross_income),
        total_deductions=quantize(capped.total),
        taxable_income=quantize(taxable),
        tax=quantize(tax),
        cess=quantize(cess),
        total_tax=quantize(tax + cess),
    )


def compare_tax_regimes(gross_income, deductions=None) -> TaxComparison:
    """
    Compare old-regime tax (with deductions) against new-regime tax (without).

    The regime with the lower liability is recommended; a tie favours the
    old regime.

    Args:
        gross_income: Annual gross income (must be >= 0)
        deductions: Old-regime deductions, as for calculate_advanced_income_tax

    Returns:
        TaxComparison with both liabilities and the recommended regime
    """
    old_tax = calculate_advanced_income_tax(gross_income, deductions).total_tax
    new_tax = calculate_income_tax(gross_income, TaxRegime.NEW)
    recommended = TaxRegime.OLD if old_tax <= new_tax else TaxRegime.NEW
    return TaxComparison(
        old_regime_tax=old_tax,
        new_regime_tax=new_tax,
        recommended_regime=recommended.value,
    )
