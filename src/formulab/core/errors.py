"""
Error classes for FormulaLab.

This module defines the exception classes raised by the calculators and the
crypto price client. Every failure surfaces immediately to the caller; nothing
is retried or silently downgraded.
"""

from __future__ import annotations


class FormulaError(Exception):
    """Base class for all FormulaLab errors."""


class ValidationError(FormulaError, ValueError):
    """
    Invalid argument passed to a calculator.

    Raised synchronously, before any computation proceeds, when a numeric
    argument is out of range (non-positive principal, negative rate, ...) or
    when an enumerated tag is not recognized.

    **Common Causes:**
    - Zero or negative principal, rate, term, weight or height
    - NaN/inf or boolean values passed as numbers
    - Unknown gender, activity level, intensity, goal or exercise tag
    - Missing hip measurement for the female body-fat formula

    **Example Usage:**
        ```python
        from formulab import calculate_emi
        from formulab.core.errors import ValidationError

        try:
            calculate_emi(0, 8.5, 240)
        except ValidationError as e:
            print(f"Invalid input: {e}")
        ```

    **Note:**
        Subclasses ``ValueError`` so callers that already catch ``ValueError``
        keep working.
    """


class ConfigError(FormulaError):
    """
    Configuration error detected before an operation can start.

    Raised when required configuration is missing or malformed, e.g. the
    CoinMarketCap API key is not set or the HTTP timeout is not a number.
    """


class ResponseShapeError(FormulaError):
    """
    A remote response did not contain the expected fields.

    Attributes:
        payload: The decoded response body (if available)
    """

    def __init__(self, message: str, payload=None):
        self.payload = payload
        super().__init__(message)


class FormulaWarning(UserWarning):
    """Warning for non-fatal input issues (e.g. conflicting key aliases)."""
