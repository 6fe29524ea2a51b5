"""
Precision handling for FormulaLab.

Every monetary or measurement result leaves the library rounded to a fixed
number of decimal places. Rounding works on the exact binary value of the
float, so ``quantize(1.005)`` is ``1.0`` (the stored value is 1.00499...),
which matches JavaScript's ``Number.prototype.toFixed``.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from enum import Enum


class RoundingPolicy(Enum):
    """Rounding policies for result quantization."""

    BANKERS = ROUND_HALF_EVEN
    HALF_UP = ROUND_HALF_UP


DEFAULT_DECIMALS = 2


def quantize(
    value: float,
    decimals: int = DEFAULT_DECIMALS,
    rounding: RoundingPolicy = RoundingPolicy.HALF_UP,
) -> float:
    """
    Round a float to ``decimals`` places and return it as a float.

    Args:
        value: Value to round
        decimals: Number of decimal places (0 for whole numbers)
        rounding: Rounding policy applied to the exact binary value

    Returns:
        The rounded value

    Raises:
        ValueError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot quantize non-finite value {value!r}")

    quantum = Decimal("1").scaleb(-decimals)  # e.g., 0.01 for 2 dp, 1 for 0 dp
    rounded = Decimal(value).quantize(quantum, rounding=rounding.value)
    # Normalise -0.0 to 0.0
    return float(rounded) + 0.0


def quantize_whole(value: float) -> int:
    """Round half-up to the nearest integer (``Math.round`` semantics for positives)."""
    return int(quantize(value, decimals=0))
