"""
Tests for savings schemes and income tax.
"""

import warnings

import pytest

from formulab.calculators.savings import (
    NEW_REGIME_SLABS,
    OLD_REGIME_SLABS,
    Deductions,
    calculate_advanced_income_tax,
    calculate_epf,
    calculate_hra_exemption,
    calculate_income_tax,
    calculate_ppf,
    compare_tax_regimes,
    slab_tax,
)
from formulab.core.errors import FormulaWarning, ValidationError
from formulab.core.kinds import TaxRegime
from formulab.core.results import EPFResult, IncomeTaxResult, TaxComparison


class TestPPF:
    """Public Provident Fund maturity."""

    def test_two_year_loop(self):
        # year 1: 1000 × 1.1; year 2: 2000 × 1.1²
        assert calculate_ppf(1000, 10, 2) == 2420.0

    def test_default_tenure_is_fifteen_years(self):
        assert calculate_ppf(150_000, 7.1) == calculate_ppf(150_000, 7.1, 15)

    def test_invalid(self):
        with pytest.raises(ValidationError):
            calculate_ppf(0, 7.1)


class TestEPF:
    """Employee Provident Fund projection."""

    def test_single_year(self):
        result = calculate_epf(10_000, 1)
        assert isinstance(result, EPFResult)
        assert result.total_contribution == 18804.0
        assert result.maturity_amount == 20355.33
        assert result.interest_earned == 1551.33

    def test_salary_increase(self):
        result = calculate_epf(10_000, 2, annual_salary_increase=10)
        assert result.total_contribution == pytest.approx(39488.4, abs=0.01)
        assert result.maturity_amount == pytest.approx(44425.51, abs=0.01)

    def test_interest_is_maturity_minus_contribution(self):
        result = calculate_epf(25_000, 20, annual_salary_increase=5)
        assert result.interest_earned == pytest.approx(
            result.maturity_amount - result.total_contribution, abs=0.01
        )

    def test_invalid(self):
        with pytest.raises(ValidationError, match="employee contribution rate"):
            calculate_epf(10_000, 5, employee_contribution_rate=-1)


class TestHRA:
    """HRA exemption is the least of three limits."""

    def test_rent_limit(self):
        assert calculate_hra_exemption(50_000, 20_000, 15_000) == 10000.0

    def test_non_metro_limit(self):
        assert calculate_hra_exemption(50_000, 25_000, 30_000, metro_city=False) == 20000.0

    def test_received_limit(self):
        assert calculate_hra_exemption(50_000, 8_000, 30_000) == 8000.0

    def test_floored_at_zero(self):
        assert calculate_hra_exemption(50_000, 20_000, 3_000) == 0.0

    def test_invalid(self):
        with pytest.raises(ValidationError):
            calculate_hra_exemption(0, 20_000, 15_000)


class TestSlabTax:
    """Marginal slab computation."""

    def test_old_regime(self):
        assert slab_tax(250_000, OLD_REGIME_SLABS) == 0.0
        assert slab_tax(600_000, OLD_REGIME_SLABS) == pytest.approx(32_500)

    def test_new_regime(self):
        assert slab_tax(1_000_000, NEW_REGIME_SLABS) == pytest.approx(60_000)
        assert slab_tax(2_000_000, NEW_REGIME_SLABS) == pytest.approx(300_000)


class TestIncomeTax:
    """Tax on taxable income, with cess."""

    def test_old_regime_known_value(self):
        assert calculate_income_tax(600_000) == 33800.0

    def test_new_regime(self):
        assert calculate_income_tax(600_000, "new") == 15600.0
        assert calculate_income_tax(1_000_000, TaxRegime.NEW) == 62400.0

    def test_below_exemption(self):
        assert calculate_income_tax(250_000) == 0.0
        assert calculate_income_tax(0) == 0.0

    def test_invalid(self):
        with pytest.raises(ValidationError, match="taxable income must be non-negative"):
            calculate_income_tax(-1)
        with pytest.raises(ValidationError, match="Invalid regime"):
            calculate_income_tax(600_000, "flat")


class TestAdvancedIncomeTax:
    """Old-regime tax after capped deductions."""

    def test_caps_applied(self):
        result = calculate_advanced_income_tax(
            1_200_000, {"section_80c": 200_000, "section_80d": 25_000}
        )
        assert isinstance(result, IncomeTaxResult)
        assert result.total_deductions == 175000.0
        assert result.taxable_income == 1025000.0
        assert result.tax == 120000.0
        assert result.cess == 4800.0
        assert result.total_tax == 124800.0

    def test_hra_capped_at_forty_percent(self):
        result = calculate_advanced_income_tax(1_000_000, Deductions(hra_exemption=600_000))
        assert result.total_deductions == 400000.0

    def test_taxable_income_floored_at_zero(self):
        result = calculate_advanced_income_tax(100_000, {"other": 500_000})
        assert result.taxable_income == 0.0
        assert result.total_tax == 0.0

    def test_no_deductions(self):
        assert calculate_advanced_income_tax(600_000).total_tax == 33800.0

    def test_alias_keys(self):
        result = calculate_advanced_income_tax(1_200_000, {"80C": 150_000, "80d": 25_000})
        assert result.total_deductions == 175000.0

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError, match="Unknown deduction"):
            calculate_advanced_income_tax(1_200_000, {"section_24b": 1})

    def test_negative_deduction_rejected(self):
        with pytest.raises(ValidationError, match="section 80c must be non-negative"):
            Deductions(section_80c=-1)

    def test_conflicting_alias_warns(self):
        with pytest.warns(FormulaWarning, match="precedence: section_80c"):
            deductions = Deductions.from_mapping({"80c": 100_000, "section_80c": 150_000})
        assert deductions.section_80c == 150_000

    def test_matching_alias_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Deductions.from_mapping({"80c": 100_000, "section_80c": 100_000})

    def test_wrong_type_rejected(self):
        with pytest.raises(ValidationError, match="deductions must be"):
            calculate_advanced_income_tax(1_200_000, [150_000])


class TestCompareRegimes:
    """Old vs new regime recommendation."""

    def test_new_regime_recommended(self):
        comparison = compare_tax_regimes(1_200_000, {"section_80c": 200_000, "section_80d": 25_000})
        assert isinstance(comparison, TaxComparison)
        assert comparison.old_regime_tax == 124800.0
        assert comparison.new_regime_tax == 93600.0
        assert comparison.recommended_regime == "new"
        assert comparison.savings == 31200.0

    def test_old_regime_recommended_with_large_deductions(self):
        comparison = compare_tax_regimes(
            800_000,
            {"section_80c": 150_000, "section_80d": 75_000, "hra_exemption": 200_000},
        )
        assert comparison.recommended_regime == "old"

    def test_tie_favours_old(self):
        assert compare_tax_regimes(0).recommended_regime == "old"
