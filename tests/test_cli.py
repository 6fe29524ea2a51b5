"""
Tests for the formulab command-line interface.
"""

import json

import pytest
import requests

from formulab import cli
from formulab.core.errors import ResponseShapeError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr("formulab.config.load_dotenv", lambda *a, **k: False)
    for var in (
        "COINMARKETCAP_API_KEY",
        "COIN_MARKET_API_KEY",
        "FORMULAB_HTTP_TIMEOUT",
        "FORMULAB_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


def run(capsys, *argv):
    code = cli.main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


class FakeClient:
    """Stands in for CryptoPriceClient inside the CLI."""

    error = None

    @classmethod
    def from_settings(cls, settings=None, session=None):
        return cls()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return None

    def convert(self, amount, from_symbol, to_symbol):
        if self.error is not None:
            raise self.error
        return 65000.5

    def latest_listings(self, **params):
        return {"data": [], "params": params}


class TestCalculatorCommands:
    """Successful commands print JSON and exit 0."""

    def test_emi(self, capsys):
        code, out, _ = run(capsys, "emi", "--principal", "500000", "--rate", "12", "--months", "24")
        assert code == 0
        assert json.loads(out) == {"emi": 23536.74, "total_interest": 64881.76}

    def test_loan_details(self, capsys):
        code, out, _ = run(
            capsys, "loan", "home", "--principal", "400000", "--rate", "6.5", "--years", "30"
        )
        assert code == 0
        assert json.loads(out)["monthly_payment"] == 2528.27

    def test_bmi(self, capsys):
        code, out, _ = run(capsys, "bmi", "--weight", "70", "--height", "1.75")
        assert code == 0
        assert json.loads(out) == {"bmi": 22.86, "category": "Normal weight"}

    def test_income_tax(self, capsys):
        code, out, _ = run(capsys, "income-tax", "--income", "600000")
        assert code == 0
        assert json.loads(out) == 33800.0

    def test_income_tax_compare(self, capsys):
        code, out, _ = run(
            capsys,
            "income-tax",
            "--income",
            "1200000",
            "--gross",
            "--deduction",
            "section_80c=200000",
            "--deduction",
            "80d=25000",
            "--compare",
        )
        assert code == 0
        assert json.loads(out) == {
            "old_regime_tax": 124800.0,
            "new_regime_tax": 93600.0,
            "recommended_regime": "new",
            "savings": 31200.0,
        }

    def test_swp_never_exhausted(self, capsys):
        code, out, _ = run(
            capsys, "swp", "--corpus", "1000000", "--withdrawal", "5000", "--rate", "8"
        )
        assert code == 0
        assert json.loads(out) == {"duration_months": None}

    def test_schedule(self, capsys):
        code, out, _ = run(
            capsys, "schedule", "amortization", "--amount", "120000", "--rate", "0", "--months", "12"
        )
        assert code == 0
        rows = json.loads(out)
        assert len(rows) == 12
        assert rows[-1]["balance"] == 0.0

    def test_heart_rate(self, capsys):
        code, out, _ = run(
            capsys, "heart-rate", "--age", "30", "--resting", "60", "--intensity", "moderate"
        )
        assert code == 0
        assert json.loads(out) == {"hrr_min": 111, "hrr_max": 135}


class TestFailures:
    """Failures go to stderr with a meaningful exit code."""

    def test_validation_error_exit_2(self, capsys):
        code, out, err = run(capsys, "emi", "--principal", "0", "--rate", "12", "--months", "24")
        assert code == 2
        assert out == ""
        assert "principal must be greater than zero" in err

    def test_bad_deduction_exit_2(self, capsys):
        code, _, err = run(
            capsys, "income-tax", "--income", "100", "--gross", "--deduction", "80c"
        )
        assert code == 2
        assert "KEY=AMOUNT" in err

    def test_swp_requires_one_mode(self, capsys):
        code, _, _ = run(capsys, "swp", "--corpus", "1000", "--rate", "8")
        assert code == 2

    def test_missing_api_key_exit_2(self, capsys):
        code, _, err = run(capsys, "crypto-convert", "1", "BTC", "USD")
        assert code == 2
        assert "API key is missing" in err

    def test_invalid_timeout_exit_2(self, capsys, monkeypatch):
        monkeypatch.setenv("FORMULAB_HTTP_TIMEOUT", "never")
        code, _, err = run(capsys, "bmi", "--weight", "70", "--height", "1.75")
        assert code == 2
        assert "FORMULAB_HTTP_TIMEOUT" in err

    @pytest.mark.parametrize(
        "error",
        [requests.ConnectionError("refused"), ResponseShapeError("No conversion data found.")],
    )
    def test_remote_failures_exit_1(self, capsys, monkeypatch, error):
        monkeypatch.setattr(FakeClient, "error", error)
        monkeypatch.setattr(cli, "CryptoPriceClient", FakeClient)
        code, _, err = run(capsys, "crypto-convert", "1", "BTC", "USD")
        assert code == 1
        assert str(error) in err


class TestCryptoCommands:
    """Crypto commands with a fake client."""

    def test_convert(self, capsys, monkeypatch):
        monkeypatch.setattr(cli, "CryptoPriceClient", FakeClient)
        code, out, _ = run(capsys, "crypto-convert", "1", "btc", "usd")
        assert code == 0
        assert json.loads(out) == {"amount": 1.0, "from": "BTC", "to": "USD", "price": 65000.5}

    def test_listings(self, capsys, monkeypatch):
        monkeypatch.setattr(cli, "CryptoPriceClient", FakeClient)
        code, out, _ = run(capsys, "crypto-listings", "--limit", "3")
        assert code == 0
        assert json.loads(out)["params"] == {"limit": 3}


class TestParser:
    """Argument parsing."""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])
        assert exc_info.value.code == 0
        assert "FormulaLab 0.1.0" in capsys.readouterr().out

    def test_unknown_choice(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["bmr", "--weight", "70", "--height", "175", "--age", "25", "--gender", "x"])
        assert exc_info.value.code == 2


class TestScheduleChart:
    """The --chart option depends on the optional plotly extra."""

    def test_chart_without_plotly_exit_2(self, capsys, monkeypatch, tmp_path):
        monkeypatch.setattr("formulab.charts.PLOTLY_AVAILABLE", False)
        target = tmp_path / "loan.html"
        code, out, err = run(
            capsys,
            "schedule",
            "amortization",
            "--amount",
            "120000",
            "--rate",
            "10",
            "--months",
            "12",
            "--chart",
            str(target),
        )
        assert code == 2
        assert out == ""
        assert "formulab[viz]" in err
        assert not target.exists()
