"""
Tests for result rounding.
"""

import pytest

from formulab.core.currency import RoundingPolicy, quantize, quantize_whole


class TestQuantize:
    """Rounding works on the exact binary value of the float."""

    def test_two_decimals_by_default(self):
        assert quantize(22.857142857) == 22.86
        assert quantize(10623.5234) == 10623.52

    def test_exact_half_rounds_away_from_zero(self):
        """0.125 is exactly representable, so HALF_UP applies."""
        assert quantize(0.125) == 0.13
        assert quantize(-0.125) == -0.13

    def test_binary_representation_is_respected(self):
        """1.005 and 2.675 are stored just below the half."""
        assert quantize(1.005) == 1.0
        assert quantize(2.675) == 2.67

    def test_bankers_policy(self):
        assert quantize(0.125, rounding=RoundingPolicy.BANKERS) == 0.12
        assert quantize(0.375, rounding=RoundingPolicy.BANKERS) == 0.38

    def test_negative_zero_is_normalised(self):
        result = quantize(-0.001)
        assert result == 0.0
        assert str(result) == "0.0"

    def test_custom_decimals(self):
        assert quantize(3.14159, decimals=3) == 3.142
        assert quantize(1234.5, decimals=0) == 1235.0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError, match="non-finite"):
            quantize(value)


class TestQuantizeWhole:
    """Whole-number rounding used for heart-rate bands."""

    def test_returns_int(self):
        assert quantize_whole(134.812) == 135
        assert isinstance(quantize_whole(134.812), int)

    def test_half_rounds_up(self):
        assert quantize_whole(2.5) == 3
        assert quantize_whole(110.4) == 110
