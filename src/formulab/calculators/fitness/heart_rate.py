"""
Target heart-rate range with the Karvonen formula.
"""

from __future__ import annotations

from formulab.core.currency import quantize_whole
from formulab.core.kinds import Intensity
from formulab.core.results import HeartRateRange
from formulab.core.validation import require_kind, require_positive

# Fraction of heart-rate reserve (low, high) per intensity
INTENSITY_RANGES = {
    Intensity.VERY_LIGHT: (0.0, 0.19),
    Intensity.LIGHT: (0.2, 0.39),
    Intensity.MODERATE: (0.4, 0.59),
    Intensity.HARD: (0.6, 0.84),
    Intensity.VERY_HARD: (0.85, 1.0),
}


def max_heart_rate(age: float) -> float:
    """Maximum heart rate, Gellish regression: 206.9 − 0.67 × age."""
    return 206.9 - 0.67 * age


def calculate_hrr_range(age, resting_heart_rate, intensity) -> HeartRateRange:
    """
    Calculate the target heart-rate band for an exercise intensity.

    THR = (HRmax − RHR) × %intensity + RHR, rounded half-up to whole beats.

    Args:
        age: Age in years (must be > 0)
        resting_heart_rate: Resting heart rate in bpm (must be > 0)
        intensity: "very_light", "light", "moderate", "hard" or "very_hard"

    Returns:
        HeartRateRange(hrr_min, hrr_max)

    Raises:
        ValidationError: On non-positive inputs or an unknown intensity
    """
    age, resting_heart_rate = require_positive(
        age=age, resting_heart_rate=resting_heart_rate
    )
    intensity = require_kind("intensity", intensity, Intensity)

    reserve = max_heart_rate(age) - resting_heart_rate
    low, high = INTENSITY_RANGES[intensity]
    return HeartRateRange(
        hrr_min=quantize_whole(reserve * low + resting_heart_rate),
        hrr_max=quantize_whole(reserve * high + resting_heart_rate),
    )
