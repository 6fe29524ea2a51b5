"""
Macronutrient split from TDEE.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.kinds import MacroGoal
from formulab.core.results import MacroSplit
from formulab.core.validation import require_kind, require_positive

# Share of calories as (protein, fat, carbs)
MACRO_RATIOS = {
    MacroGoal.BALANCED: (0.30, 0.30, 0.40),
    MacroGoal.LOW_CARB: (0.40, 0.40, 0.20),
    MacroGoal.HIGH_CARB: (0.20, 0.20, 0.60),
    MacroGoal.KETOGENIC: (0.25, 0.70, 0.05),
}

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_FAT = 9
KCAL_PER_GRAM_CARBS = 4


def calculate_macros(tdee, goal) -> MacroSplit:
    """
    Split daily calories into grams of protein, fat and carbohydrate.

    Args:
        tdee: Total daily energy expenditure in kcal (must be > 0)
        goal: "balanced", "low_carb", "high_carb" or "ketogenic"

    Returns:
        MacroSplit in grams, each rounded to 2 decimal places

    Raises:
        ValidationError: On a non-positive TDEE or an unknown goal
    """
    (tdee,) = require_positive(tdee=tdee)
    goal = require_kind("goal", goal, MacroGoal)

    protein, fat, carbs = MACRO_RATIOS[goal]
    return MacroSplit(
        protein=quantize(tdee * protein / KCAL_PER_GRAM_PROTEIN),
        fat=quantize(tdee * fat / KCAL_PER_GRAM_FAT),
        carbs=quantize(tdee * carbs / KCAL_PER_GRAM_CARBS),
    )
