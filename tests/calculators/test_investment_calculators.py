"""
Tests for investment calculators.
"""

import logging

import pytest

from formulab.calculators.investment import (
    DEFAULT_MAX_MONTHS,
    annuity_due_factor,
    calculate_compound_interest,
    calculate_fd,
    calculate_lumpsum,
    calculate_rd,
    calculate_simple_interest,
    calculate_sip,
    calculate_step_up_sip,
    calculate_swp_amount,
    calculate_swp_duration,
)
from formulab.core.errors import ValidationError


class TestInterest:
    """Compound and simple interest."""

    def test_compound_interest_annual(self):
        assert calculate_compound_interest(10_000, 5, 1, 2) == 1025.0

    def test_compound_interest_more_frequent_earns_more(self):
        annual = calculate_compound_interest(10_000, 8, 1, 5)
        monthly = calculate_compound_interest(10_000, 8, 12, 5)
        assert monthly > annual

    def test_compound_interest_zero_rate_rejected(self):
        with pytest.raises(ValidationError, match="annual rate must be greater than zero"):
            calculate_compound_interest(10_000, 0, 1, 2)

    def test_simple_interest(self):
        assert calculate_simple_interest(10_000, 5, 2) == 1000.0

    def test_simple_interest_invalid(self):
        with pytest.raises(ValidationError):
            calculate_simple_interest(10_000, 5, 0)


class TestSIP:
    """Systematic investment plans."""

    def test_known_value(self):
        assert calculate_sip(5000, 12, 12) == 64046.64

    def test_deterministic(self):
        assert calculate_sip(5000, 12, 12) == calculate_sip(5000, 12, 12)

    def test_annuity_due_factor(self):
        assert annuity_due_factor(0, 12) == 12
        assert annuity_due_factor(0.01, 1) == pytest.approx(1.01)

    def test_zero_rate_rejected(self):
        with pytest.raises(ValidationError):
            calculate_sip(5000, 0, 12)

    def test_step_up_single_year_matches_flat_sip(self):
        assert calculate_step_up_sip(5000, 12, 1, 10) == calculate_sip(5000, 12, 12)

    def test_step_up_increases_maturity(self):
        flat = calculate_step_up_sip(5000, 12, 5, 0)
        stepped = calculate_step_up_sip(5000, 12, 5, 10)
        assert stepped > flat

    def test_step_up_negative_rejected(self):
        with pytest.raises(ValidationError, match="step up rate must be non-negative"):
            calculate_step_up_sip(5000, 12, 5, -1)


class TestSWP:
    """Systematic withdrawal plans."""

    def test_duration(self):
        assert calculate_swp_duration(1_000_000, 10_000, 8) == 166

    def test_duration_without_growth(self):
        assert calculate_swp_duration(12_000, 1000, 0) == 12
        assert calculate_swp_duration(12_500, 1000, 0) == 13

    def test_duration_is_none_when_growth_covers_withdrawals(self):
        assert calculate_swp_duration(1_000_000, 5_000, 8) is None

    def test_duration_beyond_simulated_months(self, caplog):
        """Plans that run out after the simulated window still report their length."""
        with caplog.at_level(logging.DEBUG, logger="formulab.calculators.investment.swp"):
            assert calculate_swp_duration(1_000_000, 6_667, 8) == 1491
        assert "closed form" in caplog.text

    def test_short_simulation_window_gives_same_duration(self):
        assert calculate_swp_duration(1_000_000, 10_000, 8, max_months=100) == 166
        assert calculate_swp_duration(12_500, 1000, 0, max_months=5) == 13

    def test_default_cap(self):
        assert DEFAULT_MAX_MONTHS == 1200

    def test_amount_zero_rate(self):
        assert calculate_swp_amount(120_000, 12, 0) == 10000.0

    def test_amount_exhausts_corpus(self):
        withdrawal = calculate_swp_amount(1_000_000, 120, 8)
        months = calculate_swp_duration(1_000_000, withdrawal, 8)
        assert months in (120, 121)

    def test_invalid_inputs(self):
        with pytest.raises(ValidationError):
            calculate_swp_duration(0, 1000, 8)
        with pytest.raises(ValidationError):
            calculate_swp_amount(100_000, 12, -1)


class TestLumpsumAndDeposits:
    """Lumpsum, fixed and recurring deposits."""

    def test_lumpsum(self):
        assert calculate_lumpsum(100_000, 10, 2) == 121000.0

    def test_fd_annual(self):
        assert calculate_fd(100_000, 10, 1) == 110000.0

    def test_fd_quarterly(self):
        assert calculate_fd(100_000, 10, 1, compounding_frequency=4) == 110381.29

    def test_rd_one_year(self):
        # 2% a quarter; the first deposit earns 11/3 quarters, the last none
        assert calculate_rd(1000, 8, 1) == 12446.89

    def test_deposits_invalid(self):
        with pytest.raises(ValidationError):
            calculate_fd(100_000, 10, 1, compounding_frequency=0)
        with pytest.raises(ValidationError):
            calculate_rd(1000, 0, 1)
