"""
Weight unit conversion.
"""

from __future__ import annotations

from formulab.core.currency import quantize
from formulab.core.kinds import WeightUnit
from formulab.core.validation import require_kind, require_positive

LB_PER_KG = 2.20462


def convert_weight(weight, to_unit) -> float:
    """
    Convert a weight to ``to_unit``.

    ``to_unit="lb"`` reads ``weight`` as kilograms; ``to_unit="kg"`` reads it
    as pounds.

    Raises:
        ValidationError: On a non-positive weight or an unknown unit
    """
    (weight,) = require_positive(weight=weight)
    to_unit = require_kind("unit", to_unit, WeightUnit)

    if to_unit is WeightUnit.LB:
        return quantize(weight * LB_PER_KG)
    return quantize(weight / LB_PER_KG)
