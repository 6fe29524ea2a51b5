"""
Argument validation for FormulaLab calculators.

All checks run before any computation and raise
:class:`~formulab.core.errors.ValidationError` with a message naming the
argument and the precondition it failed.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import TypeVar

from .errors import ValidationError

E = TypeVar("E", bound=Enum)


def _label(name: str) -> str:
    return name.replace("_", " ")


def require_number(name: str, value) -> float:
    """
    Check that ``value`` is a finite real number and return it as a float.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValidationError(
            f"{_label(name)} must be a number, got {type(value).__name__}"
        )
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"{_label(name)} must be finite, got {value!r}")
    return value


def require_positive(**values) -> tuple[float, ...]:
    """
    Validate that every keyword argument is a number greater than zero.

    Args:
        **values: name=value pairs, checked in the order given

    Returns:
        The values as floats, in the order given

    Raises:
        ValidationError: On the first value that is not a positive number

    Example:
        ```python
        principal, rate = require_positive(principal=100_000, annual_rate=8.5)
        ```
    """
    checked = []
    for name, value in values.items():
        number = require_number(name, value)
        if number <= 0:
            raise ValidationError(
                f"{_label(name)} must be greater than zero, got {value!r}"
            )
        checked.append(number)
    return tuple(checked)


def require_non_negative(**values) -> tuple[float, ...]:
    """Validate that every keyword argument is a number greater than or equal to zero."""
    checked = []
    for name, value in values.items():
        number = require_number(name, value)
        if number < 0:
            raise ValidationError(
                f"{_label(name)} must be non-negative, got {value!r}"
            )
        checked.append(number)
    return tuple(checked)


def require_kind(name: str, value, kind: type[E]) -> E:
    """
    Resolve an enumerated tag to its ``Enum`` member.

    Accepts a member of ``kind`` or its string value (case-insensitive,
    surrounding whitespace ignored).

    Raises:
        ValidationError: If the tag is not one of the allowed values
    """
    if isinstance(value, kind):
        return value
    if isinstance(value, str):
        tag = value.strip().lower()
        for member in kind:
            if member.value == tag:
                return member
    allowed = ", ".join(f"'{member.value}'" for member in kind)
    raise ValidationError(f"Invalid {_label(name)} {value!r}. Use one of: {allowed}.")
