"""
FormulaLab enumerated inputs.

Each closed set of string tags accepted by a calculator is an ``Enum`` whose
values are the canonical lowercase tags. Calculators accept either a member
or its string value; see :func:`formulab.core.validation.require_kind`.
"""

from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class Intensity(str, Enum):
    VERY_LIGHT = "very_light"
    LIGHT = "light"
    MODERATE = "moderate"
    HARD = "hard"
    VERY_HARD = "very_hard"


class Exercise(str, Enum):
    SQUAT = "squat"
    DEADLIFT = "deadlift"
    BENCH_PRESS = "bench_press"
    GENERIC = "generic"


class MacroGoal(str, Enum):
    BALANCED = "balanced"
    LOW_CARB = "low_carb"
    HIGH_CARB = "high_carb"
    KETOGENIC = "ketogenic"


class TaxRegime(str, Enum):
    OLD = "old"
    NEW = "new"


class WeightUnit(str, Enum):
    KG = "kg"
    LB = "lb"


def all_kinds() -> dict[str, list[str]]:
    """Enumerate all accepted tags per enumeration (for validation and docs)."""
    return {
        cls.__name__: [member.value for member in cls]
        for cls in (
            Gender,
            ActivityLevel,
            Intensity,
            Exercise,
            MacroGoal,
            TaxRegime,
            WeightUnit,
        )
    }
