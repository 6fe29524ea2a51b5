"""
Tests for financial ratios.
"""

import pytest

from formulab.calculators.ratios import (
    calculate_dividend_yield,
    calculate_dti,
    calculate_roi,
)
from formulab.core.errors import ValidationError


class TestRatios:
    """ROI, DTI and dividend yield in percent."""

    def test_roi(self):
        assert calculate_roi(1000, 1500) == 50.0
        assert calculate_roi(1000, 500) == -50.0
        assert calculate_roi(1000, 0) == -100.0

    def test_dti(self):
        assert calculate_dti(2000, 5000) == 40.0
        assert calculate_dti(0, 5000) == 0.0

    def test_dividend_yield(self):
        assert calculate_dividend_yield(5, 100) == 5.0
        assert calculate_dividend_yield(1, 3) == 33.33

    @pytest.mark.parametrize(
        "fn, args",
        [
            (calculate_roi, (0, 100)),
            (calculate_roi, (100, -1)),
            (calculate_dti, (-1, 100)),
            (calculate_dti, (100, 0)),
            (calculate_dividend_yield, (5, 0)),
        ],
    )
    def test_invalid(self, fn, args):
        with pytest.raises(ValidationError):
            fn(*args)
