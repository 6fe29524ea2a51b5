"""
Body Mass Index (BMI).
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.results import BMIResult
from formulab.core.validation import require_positive

# (exclusive upper bound, label), checked in order
BMI_CATEGORIES: tuple[tuple[float, str], ...] = (
    (18.5, "Underweight"),
    (25.0, "Normal weight"),
    (30.0, "Overweight"),
)
OBESITY = "Obesity"


def bmi_category(bmi: float) -> str:
    """Map a BMI value to its WHO category label."""
    for upper, label in BMI_CATEGORIES:
        if bmi < upper:
            return label
    return OBESITY


def calculate_bmi(weight_kg, height_m) -> BMIResult:
    """
    Calculate BMI (weight / height²) and its category.

    The category is derived from the rounded BMI.

    Args:
        weight_kg: Body weight in kilograms (must be > 0)
        height_m: Height in metres (must be > 0)

    Returns:
        BMIResult(bmi, category)

    Raises:
        ValidationError: If weight or height is not positive

    Example:
        ```python
        calculate_bmi(70, 1.75)  # BMIResult(bmi=22.86, category='Normal weight')
        ```
    """
    weight_kg, height_m = require_positive(weight=weight_kg, height=height_m)
    bmi = quantize(weight_kg / (height_m * height_m))
    return BMIResult(bmi=bmi, category=bmi_category(bmi))
