"""
Tests for the Outcome wrapper.
"""

import pytest
import requests

from formulab.core.errors import ConfigError, ResponseShapeError, ValidationError
from formulab.core.outcome import Outcome, attempt, classify
from formulab.core.results import BMIResult


def _raise(exc):
    raise exc


class TestAttempt:
    """attempt() turns known failures into Outcome values."""

    def test_success(self):
        outcome = attempt(lambda a, b: a + b, 2, b=3)
        assert outcome.ok
        assert outcome.kind == "ok"
        assert outcome.value == 5
        assert outcome.message is None
        assert outcome.unwrap() == 5

    @pytest.mark.parametrize(
        "exc, kind",
        [
            (ValidationError("principal must be greater than zero, got 0"), "validation"),
            (ConfigError("missing key"), "config"),
            (ResponseShapeError("No conversion data found."), "data_shape"),
            (requests.ConnectionError("refused"), "transport"),
            (requests.HTTPError("401 Client Error"), "transport"),
        ],
    )
    def test_failure_kinds(self, exc, kind):
        outcome = attempt(_raise, exc)
        assert not outcome.ok
        assert outcome.kind == kind
        assert outcome.error is exc
        assert outcome.message == str(exc)

    def test_unknown_errors_propagate(self):
        with pytest.raises(ZeroDivisionError):
            attempt(lambda: 1 / 0)

    def test_unwrap_reraises(self):
        outcome = attempt(_raise, ConfigError("missing key"))
        with pytest.raises(ConfigError, match="missing key"):
            outcome.unwrap()

    def test_wraps_calculator(self):
        from formulab import calculate_emi

        assert attempt(calculate_emi, 500_000, 12, 24).value == 23536.74
        assert attempt(calculate_emi, 0, 12, 24).kind == "validation"


class TestOutcomeRecord:
    """Outcome serialisation and classification."""

    def test_to_dict_serialises_records(self):
        outcome = Outcome(kind="ok", value=BMIResult(bmi=22.86, category="Normal weight"))
        assert outcome.to_dict() == {
            "kind": "ok",
            "value": {"bmi": 22.86, "category": "Normal weight"},
            "error": None,
        }

    def test_classify_unknown(self):
        assert classify(KeyError("x")) is None
        assert classify(ValidationError("x")) == "validation"
