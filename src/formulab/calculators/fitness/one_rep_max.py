"""
One-repetition maximum (1RM) with the Epley formula.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.kinds import Exercise
from formulab.core.validation import require_kind, require_positive

# Epley divisor per lift: 1RM = weight × (1 + reps / divisor)
EPLEY_DIVISORS = {
    Exercise.SQUAT: 33.33,
    Exercise.DEADLIFT: 30.0,
    Exercise.BENCH_PRESS: 40.0,
    Exercise.GENERIC: 30.0,
}


def calculate_one_rep_max(weight_kg, reps, exercise=Exercise.GENERIC) -> float:
    """
    Estimate the one-rep max for a lift.

    Args:
        weight_kg: Weight lifted in kilograms (must be > 0)
        reps: Repetitions performed with that weight (must be > 0)
        exercise: "squat", "deadlift", "bench_press" or "generic" (default)

    Returns:
        Estimated 1RM rounded to 2 decimal places

    Raises:
        ValidationError: On non-positive inputs or an unknown exercise
    """
    weight_kg, reps = require_positive(weight=weight_kg, reps=reps)
    exercise = require_kind("exercise", exercise, Exercise)

    return quantize(weight_kg * (1 + reps / EPLEY_DIVISORS[exercise]))
