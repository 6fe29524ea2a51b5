"""
Total Daily Energy Expenditure (TDEE).
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.kinds import ActivityLevel
from formulab.core.results import TDEEResult
from formulab.core.validation import require_kind

from .bmr import calculate_bmr

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

# (exclusive upper bound in kcal, label), checked in order
CALORIC_NEEDS: tuple[tuple[float, str], ...] = (
    (1800, "Low caloric needs"),
    (2500, "Moderate caloric needs"),
)
HIGH_CALORIC_NEEDS = "High caloric needs"


def caloric_needs_category(tdee: float) -> str:
    for upper, label in CALORIC_NEEDS:
        if tdee < upper:
            return label
    return HIGH_CALORIC_NEEDS


def calculate_tdee(weight_kg, height_cm, age, gender, activity_level) -> TDEEResult:
    """
    Calculate TDEE as the rounded BMR times an activity multiplier.

    Args:
        weight_kg: Body weight in kilograms (must be > 0)
        height_cm: Height in centimetres (must be > 0)
        age: Age in years (must be > 0)
        gender: "male" or "female"
        activity_level: "sedentary", "light", "moderate", "active" or "very_active"

    Returns:
        TDEEResult(tdee, category)

    Raises:
        ValidationError: On invalid measurements or unknown tags
    """
    activity_level = require_kind("activity_level", activity_level, ActivityLevel)
    bmr = calculate_bmr(weight_kg, height_cm, age, gender)

    tdee = quantize(bmr * ACTIVITY_MULTIPLIERS[activity_level])
    return TDEEResult(tdee=tdee, category=caloric_needs_category(tdee))
