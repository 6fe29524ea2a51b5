"""
Fitness calculators: BMI, BMR, TDEE, body fat, heart-rate zones, macros, 1RM.
"""

from .bmi import bmi_category, calculate_bmi
from .bmr import calculate_bmr
from .body_fat import calculate_body_fat_percentage
from .heart_rate import calculate_hrr_range, max_heart_rate
from .macros import calculate_macros
from .one_rep_max import calculate_one_rep_max
from .tdee import calculate_tdee, caloric_needs_category
from .weight import convert_weight

__all__ = [
    "calculate_bmi",
    "bmi_category",
    "calculate_bmr",
    "calculate_tdee",
    "caloric_needs_category",
    "calculate_body_fat_percentage",
    "calculate_hrr_range",
    "max_heart_rate",
    "calculate_macros",
    "calculate_one_rep_max",
    "convert_weight",
]
