"""
Basal Metabolic Rate (BMR) using the Mifflin-St Jeor equation.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.kinds import Gender
from formulab.core.validation import require_kind, require_positive

# Sex-specific constant added to 10w + 6.25h − 5a
GENDER_OFFSET = {
    Gender.MALE: 5.0,
    Gender.FEMALE: -161.0,
}


def calculate_bmr(weight_kg, height_cm, age, gender) -> float:
    """
    Calculate BMR in kcal/day.

    BMR = 10 × weight + 6.25 × height − 5 × age + s,  s = +5 (male), −161 (female)

    Args:
        weight_kg: Body weight in kilograms (must be > 0)
        height_cm: Height in centimetres (must be > 0)
        age: Age in years (must be > 0)
        gender: "male" or "female"

    Returns:
        BMR rounded to 2 decimal places

    Raises:
        ValidationError: On non-positive measurements or an unknown gender
    """
    weight_kg, height_cm, age = require_positive(
        weight=weight_kg, height=height_cm, age=age
    )
    gender = require_kind("gender", gender, Gender)

    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age + GENDER_OFFSET[gender]
    return quantize(bmr)
