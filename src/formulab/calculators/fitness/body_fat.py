"""
Body fat percentage using the U.S. Navy circumference method.
"""

from __future__ import annotations

import math

from formulab.core.currency import quantize
from formulab.core.errors import ValidationError
from formulab.core.kinds import Gender
from formulab.core.validation import require_kind, require_positive


def calculate_body_fat_percentage(
    gender, weight_kg, height_cm, neck_cm, waist_cm, hips_cm=None
) -> float:
    """
    Estimate body fat percentage from circumference measurements.

    Male:   495 / (1.0324 − 0.19077·log10(waist − neck) + 0.15456·log10(height)) − 450
    Female: 495 / (1.29579 − 0.35004·log10(waist + hips − neck) + 0.221·log10(height)) − 450

    Weight does not enter the formula but is validated like the other
    measurements.

    Args:
        gender: "male" or "female"
        weight_kg: Body weight in kilograms (must be > 0)
        height_cm: Height in centimetres (must be > 0)
        neck_cm: Neck circumference in centimetres (must be > 0)
        waist_cm: Waist circumference in centimetres (must be > 0)
        hips_cm: Hip circumference in centimetres (required for females)

    Returns:
        Body fat percentage rounded to 2 decimal places

    Raises:
        ValidationError: On non-positive measurements, missing hips for a
            female, or a circumference combination with no logarithm
    """
    gender = require_kind("gender", gender, Gender)
    weight_kg, height_cm, neck_cm, waist_cm = require_positive(
        weight=weight_kg, height=height_cm, neck=neck_cm, waist=waist_cm
    )

    if gender is Gender.FEMALE:
        if hips_cm is None:
            raise ValidationError("hips must be provided for females")
        (hips_cm,) = require_positive(hips=hips_cm)
        girth = waist_cm + hips_cm - neck_cm
    else:
        girth = waist_cm - neck_cm

    if girth <= 0:
        raise ValidationError(
            "waist (plus hips for females) must exceed neck circumference"
        )

    if gender is Gender.MALE:
        density = 1.0324 - 0.19077 * math.log10(girth) + 0.15456 * math.log10(height_cm)
    else:
        density = 1.29579 - 0.35004 * math.log10(girth) + 0.221 * math.log10(height_cm)

    return quantize(495 / density - 450)
