"""
Property-based tests for calculator invariants.
"""

import pytest

pytest.importorskip("hypothesis")

from hypothesis import given, settings  # noqa: E402
from hypothesis import strategies as st  # noqa: E402

from formulab.calculators.fitness import bmi_category, calculate_bmi  # noqa: E402
from formulab.calculators.investment import calculate_swp_duration  # noqa: E402
from formulab.calculators.loan import (  # noqa: E402
    calculate_emi,
    calculate_home_loan_details,
    calculate_total_interest_paid,
)
from formulab.calculators.savings import calculate_income_tax  # noqa: E402
from formulab.core.currency import quantize  # noqa: E402

principals = st.floats(min_value=1_000, max_value=10_000_000, allow_nan=False, allow_infinity=False)
rates = st.floats(min_value=0.1, max_value=30, allow_nan=False, allow_infinity=False)
months = st.integers(min_value=1, max_value=480)


@given(principal=principals, rate=rates, term=months)
def test_emi_covers_principal(principal, rate, term):
    """A positive-rate EMI repays at least the principal."""
    emi = calculate_emi(principal, rate, term)
    assert emi > 0
    assert emi * term >= principal


@given(principal=principals, term=months)
def test_zero_rate_emi_is_straight_line(principal, term):
    assert calculate_emi(principal, 0, term) == quantize(principal / term)


@given(principal=principals, rate=rates, term=months)
def test_total_interest_is_payment_minus_principal(principal, rate, term):
    emi = calculate_emi(principal, rate, term)
    assert calculate_total_interest_paid(principal, rate, term) == quantize(
        emi * term - principal
    )


@given(principal=principals, rate=rates, years=st.integers(min_value=1, max_value=40))
def test_loan_details_consistent(principal, rate, years):
    details = calculate_home_loan_details(principal, rate, years)
    assert details.total_interest == pytest.approx(
        details.total_payment - principal, abs=0.011
    )


@given(
    corpus=st.floats(min_value=1, max_value=1e9, allow_nan=False),
    withdrawal=st.floats(min_value=1, max_value=1e7, allow_nan=False),
    rate=st.floats(min_value=0, max_value=50, allow_nan=False),
    cap=st.integers(min_value=1, max_value=1200),
)
@settings(deadline=None)
def test_swp_duration_is_none_only_when_growth_covers_withdrawal(corpus, withdrawal, rate, cap):
    result = calculate_swp_duration(corpus, withdrawal, rate, max_months=cap)
    if withdrawal <= corpus * (rate / 12 / 100):
        assert result is None
    else:
        assert isinstance(result, int) and result >= 1


@given(
    weight=st.floats(min_value=20, max_value=300, allow_nan=False),
    height=st.floats(min_value=1.0, max_value=2.5, allow_nan=False),
)
def test_bmi_category_matches_rounded_value(weight, height):
    result = calculate_bmi(weight, height)
    assert result.category == bmi_category(result.bmi)


@given(
    low=st.floats(min_value=0, max_value=5_000_000, allow_nan=False),
    extra=st.floats(min_value=0, max_value=5_000_000, allow_nan=False),
    regime=st.sampled_from(["old", "new"]),
)
def test_income_tax_monotonic(low, extra, regime):
    assert calculate_income_tax(low, regime) <= calculate_income_tax(low + extra, regime)
