"""
Discriminated success/failure results.

Calculators raise on invalid input. Callers that prefer to branch on the kind
of failure instead of catching exceptions can wrap any call with
:func:`attempt`, which returns an :class:`Outcome`.

Example:
    ```python
    from formulab import attempt, convert_crypto_currency

    outcome = attempt(convert_crypto_currency, 1, "BTC", "USD")
    if outcome.ok:
        print(outcome.value)
    elif outcome.kind == "transport":
        print("network problem:", outcome.message)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import requests

from .errors import ConfigError, ResponseShapeError, ValidationError

OK = "ok"
VALIDATION = "validation"
CONFIG = "config"
TRANSPORT = "transport"
DATA_SHAPE = "data_shape"

# Order matters: the first matching class wins.
_FAILURE_KINDS: tuple[tuple[type[BaseException], str], ...] = (
    (ValidationError, VALIDATION),
    (ConfigError, CONFIG),
    (ResponseShapeError, DATA_SHAPE),
    (requests.RequestException, TRANSPORT),
)


@dataclass(frozen=True)
class Outcome:
    """
    Result of a wrapped call.

    Attributes:
        kind: "ok" or one of "validation", "config", "transport", "data_shape"
        value: Return value of the call when ``kind == "ok"``
        error: The exception raised when the call failed
    """

    kind: str
    value: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.kind == OK

    @property
    def message(self) -> str | None:
        """Human-readable failure message, or None on success."""
        return None if self.error is None else str(self.error)

    def unwrap(self) -> Any:
        """Return the value, or re-raise the captured exception."""
        if self.error is not None:
            raise self.error
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        value = self.value.to_dict() if hasattr(self.value, "to_dict") else self.value
        return {"kind": self.kind, "value": value, "error": self.message}


def classify(error: BaseException) -> str | None:
    """Map an exception to its failure kind, or None if it is not a known kind."""
    for exc_type, kind in _FAILURE_KINDS:
        if isinstance(error, exc_type):
            return kind
    return None


def attempt(func: Callable[..., Any], *args, **kwargs) -> Outcome:
    """
    Call ``func`` and capture known failures as an :class:`Outcome`.

    Exceptions that are not validation, configuration, transport or
    data-shape failures (i.e. programming errors) propagate unchanged.
    """
    try:
        value = func(*args, **kwargs)
    except Exception as exc:
        kind = classify(exc)
        if kind is None:
            raise
        return Outcome(kind=kind, error=exc)
    return Outcome(kind=OK, value=value)
