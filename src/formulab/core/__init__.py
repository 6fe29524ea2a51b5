"""
Core module for FormulaLab.

Errors, enumerated inputs, validation, rounding and result records shared by
every calculator.
"""

from .currency import RoundingPolicy, quantize, quantize_whole
from .errors import (
    ConfigError,
    FormulaError,
    FormulaWarning,
    ResponseShapeError,
    ValidationError,
)
from .kinds import (
    ActivityLevel,
    Exercise,
    Gender,
    Intensity,
    MacroGoal,
    TaxRegime,
    WeightUnit,
    all_kinds,
)
from .outcome import Outcome, attempt, classify
from .results import (
    BMIResult,
    EPFResult,
    HeartRateRange,
    IncomeTaxResult,
    LoanDetails,
    MacroSplit,
    TaxComparison,
    TDEEResult,
)
from .validation import (
    require_kind,
    require_non_negative,
    require_number,
    require_positive,
)

__all__ = [
    # Errors
    "FormulaError",
    "ValidationError",
    "ConfigError",
    "ResponseShapeError",
    "FormulaWarning",
    # Rounding
    "RoundingPolicy",
    "quantize",
    "quantize_whole",
    # Kinds
    "Gender",
    "ActivityLevel",
    "Intensity",
    "Exercise",
    "MacroGoal",
    "TaxRegime",
    "WeightUnit",
    "all_kinds",
    # Results
    "LoanDetails",
    "BMIResult",
    "TDEEResult",
    "HeartRateRange",
    "MacroSplit",
    "EPFResult",
    "IncomeTaxResult",
    "TaxComparison",
    "Outcome",
    "attempt",
    "classify",
    # Validation
    "require_number",
    "require_positive",
    "require_non_negative",
    "require_kind",
]
