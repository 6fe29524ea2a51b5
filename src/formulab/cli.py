"""
Command-line interface for FormulaLab.

Every subcommand calls one library function and prints its result as JSON.
Exit codes: 0 on success, 2 on invalid input or configuration, 1 on network
or response-data failures.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import numpy as np
import pandas as pd

from formulab import __version__
from formulab.calculators import (
    calculate_advanced_income_tax,
    calculate_bmi,
    calculate_bmr,
    calculate_body_fat_percentage,
    calculate_compound_interest,
    calculate_dividend_yield,
    calculate_dti,
    calculate_education_loan_details,
    calculate_emi,
    calculate_epf,
    calculate_fd,
    calculate_home_loan_details,
    calculate_hra_exemption,
    calculate_hrr_range,
    calculate_income_tax,
    calculate_lumpsum,
    calculate_macros,
    calculate_one_rep_max,
    calculate_personal_loan_details,
    calculate_ppf,
    calculate_rd,
    calculate_roi,
    calculate_simple_interest,
    calculate_sip,
    calculate_step_up_sip,
    calculate_swp_amount,
    calculate_swp_duration,
    calculate_tdee,
    calculate_total_interest_paid,
    compare_tax_regimes,
    convert_weight,
)
from formulab.calculators.savings.income_tax import Deductions
from formulab.config import Settings
from formulab.core.errors import ConfigError, ValidationError
from formulab.core.kinds import (
    ActivityLevel,
    Exercise,
    Gender,
    Intensity,
    MacroGoal,
    TaxRegime,
    WeightUnit,
)
from formulab.core.outcome import CONFIG, VALIDATION, attempt
from formulab.crypto import CryptoPriceClient

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

LOAN_DETAILS = {
    "home": calculate_home_loan_details,
    "personal": calculate_personal_loan_details,
    "education": calculate_education_loan_details,
}


def _choices(kind) -> list[str]:
    return [member.value for member in kind]


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy scalars and arrays, pandas objects and result records."""

    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        elif isinstance(obj, np.floating):
            return float(obj)
        elif isinstance(obj, np.ndarray):
            return obj.tolist()
        elif isinstance(obj, pd.DataFrame):
            return obj.to_dict("records")
        elif isinstance(obj, pd.Series):
            return obj.to_dict()
        elif hasattr(obj, "to_dict"):
            return obj.to_dict()
        return super().default(obj)


def _parse_deductions(items: list[str] | None) -> Deductions:
    """Parse repeated ``KEY=AMOUNT`` options into deductions."""
    mapping: dict[str, float] = {}
    for item in items or []:
        key, sep, raw = item.partition("=")
        if not sep or not key.strip():
            raise ValidationError(f"Deduction must look like KEY=AMOUNT, got {item!r}")
        try:
            mapping[key.strip()] = float(raw)
        except ValueError as exc:
            raise ValidationError(
                f"Deduction amount for {key.strip()!r} must be a number, got {raw!r}"
            ) from exc
    return Deductions.from_mapping(mapping)


# =============================================================================
# Loans
# =============================================================================


def cmd_emi(args):
    """Monthly EMI and total interest for a loan in months."""
    return {
        "emi": calculate_emi(args.principal, args.rate, args.months),
        "total_interest": calculate_total_interest_paid(
            args.principal, args.rate, args.months
        ),
    }


def cmd_loan(args):
    """Payment and totals for a home, personal or education loan."""
    return LOAN_DETAILS[args.kind](args.principal, args.rate, args.years)


# =============================================================================
# Investments and savings
# =============================================================================


def cmd_compound_interest(args):
    return calculate_compound_interest(
        args.principal, args.rate, args.times_compounded, args.years
    )


def cmd_simple_interest(args):
    return calculate_simple_interest(args.principal, args.rate, args.years)


def cmd_sip(args):
    if args.step_up is not None:
        return calculate_step_up_sip(args.amount, args.rate, args.years, args.step_up)
    if args.months is None:
        raise ValidationError("sip needs --months (or --years with --step-up)")
    return calculate_sip(args.amount, args.rate, args.months)


def cmd_swp(args):
    """SWP duration for a withdrawal amount, or the amount for a duration."""
    if (args.withdrawal is None) == (args.months is None):
        raise ValidationError("swp needs exactly one of --withdrawal or --months")
    if args.withdrawal is not None:
        return {
            "duration_months": calculate_swp_duration(
                args.corpus, args.withdrawal, args.rate, max_months=args.max_months
            )
        }
    return {"withdrawal": calculate_swp_amount(args.corpus, args.months, args.rate)}


def cmd_lumpsum(args):
    return calculate_lumpsum(args.principal, args.rate, args.years)


def cmd_fd(args):
    return calculate_fd(args.principal, args.rate, args.years, args.frequency)


def cmd_rd(args):
    return calculate_rd(args.amount, args.rate, args.years)


def cmd_ppf(args):
    return calculate_ppf(args.amount, args.rate, args.years)


def cmd_epf(args):
    return calculate_epf(
        args.salary,
        args.years,
        annual_rate=args.rate,
        employee_contribution_rate=args.employee_share,
        employer_contribution_rate=args.employer_share,
        annual_salary_increase=args.salary_increase,
    )


def cmd_hra(args):
    return calculate_hra_exemption(
        args.basic, args.hra, args.rent, metro_city=not args.non_metro
    )


def cmd_income_tax(args):
    """Slab tax on taxable income, or the full computation from gross income."""
    if args.gross:
        deductions = _parse_deductions(args.deduction)
        if args.compare:
            comparison = compare_tax_regimes(args.income, deductions)
            return {**comparison.to_dict(), "savings": comparison.savings}
        return calculate_advanced_income_tax(args.income, deductions)
    if args.deduction or args.compare:
        raise ValidationError("--deduction and --compare require --gross")
    return calculate_income_tax(args.income, args.regime)


# =============================================================================
# Ratios
# =============================================================================


def cmd_roi(args):
    return calculate_roi(args.initial, args.final)


def cmd_dti(args):
    return calculate_dti(args.debt, args.income)


def cmd_dividend_yield(args):
    return calculate_dividend_yield(args.dividends, args.price)


# =============================================================================
# Fitness
# =============================================================================


def cmd_bmi(args):
    return calculate_bmi(args.weight, args.height)


def cmd_bmr(args):
    return calculate_bmr(args.weight, args.height, args.age, args.gender)


def cmd_tdee(args):
    return calculate_tdee(args.weight, args.height, args.age, args.gender, args.activity)


def cmd_body_fat(args):
    return calculate_body_fat_percentage(
        args.gender, args.weight, args.height, args.neck, args.waist, args.hips
    )


def cmd_heart_rate(args):
    return calculate_hrr_range(args.age, args.resting, args.intensity)


def cmd_macros(args):
    return calculate_macros(args.tdee, args.goal)


def cmd_one_rep_max(args):
    return calculate_one_rep_max(args.weight, args.reps, args.exercise)


def cmd_convert_weight(args):
    return convert_weight(args.weight, args.to)


# =============================================================================
# Schedules
# =============================================================================


def cmd_schedule(args):
    """Month-by-month schedule, optionally saved as a chart."""
    from formulab import charts, schedules

    if args.chart and not charts.PLOTLY_AVAILABLE:
        raise ConfigError(
            "Plotly is required for --chart. Install with: pip install 'formulab[viz]'"
        )

    if args.kind == "amortization":
        table = schedules.amortization_schedule(args.amount, args.rate, args.months)
        chart = charts.amortization_breakdown
    else:
        table = schedules.sip_growth_schedule(args.amount, args.rate, args.months)
        chart = charts.sip_growth

    if args.chart:
        fig, _ = chart(table)
        charts.save_chart(fig, args.chart)
        logger.info("Chart saved to %s", args.chart)
    return table


# =============================================================================
# Crypto
# =============================================================================


def cmd_crypto_convert(args):
    with CryptoPriceClient.from_settings(args.settings) as client:
        price = client.convert(args.amount, args.from_symbol, args.to_symbol)
    return {
        "amount": args.amount,
        "from": args.from_symbol.upper(),
        "to": args.to_symbol.upper(),
        "price": price,
    }


def cmd_crypto_listings(args):
    params = {"limit": args.limit}
    if args.convert:
        params["convert"] = args.convert
    with CryptoPriceClient.from_settings(args.settings) as client:
        return client.latest_listings(**params)


# =============================================================================
# Parser
# =============================================================================


def _add_command(subparsers, name: str, func, help: str) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(name, help=help, description=help)
    parser.set_defaults(func=func)
    return parser


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per calculator."""
    parser = argparse.ArgumentParser(
        prog="formulab",
        description="FormulaLab - financial, tax and fitness calculators",
    )
    parser.add_argument("--version", action="version", version=f"FormulaLab {__version__}")
    parser.add_argument(
        "--log-level", help="Override FORMULAB_LOG_LEVEL (e.g. DEBUG, INFO)"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True, help="Available commands")

    # Loans
    p = _add_command(subparsers, "emi", cmd_emi, "Monthly EMI for a loan term in months")
    p.add_argument("--principal", type=float, required=True)
    p.add_argument("--rate", type=float, required=True, help="Annual rate in percent")
    p.add_argument("--months", type=float, required=True)

    p = _add_command(subparsers, "loan", cmd_loan, "Home, personal or education loan details")
    p.add_argument("kind", choices=sorted(LOAN_DETAILS))
    p.add_argument("--principal", type=float, required=True)
    p.add_argument("--rate", type=float, required=True, help="Annual rate in percent")
    p.add_argument("--years", type=float, required=True)

    # Investments
    p = _add_command(
        subparsers, "compound-interest", cmd_compound_interest, "Compound interest earned"
    )
    p.add_argument("--principal", type=float, required=True)
    p.add_argument("--rate", type=float, required=True)
    p.add_argument("--years", type=float, required=True)
    p.add_argument("--times-compounded", type=float, default=1, help="Per year (default: 1)")

    p = _add_command(
        subparsers, "simple-interest", cmd_simple_interest, "Simple interest earned"
    )
    p.add_argument("--principal", type=float, required=True)
    p.add_argument("--rate", type=float, required=True)
    p.add_argument("--years", type=float, required=True)

    p = _add_command(subparsers, "sip", cmd_sip, "SIP maturity value (optionally stepped up)")
    p.add_argument("--amount", type=float, required=True, help="Monthly instalment")
    p.add_argument("--rate", type=float, required=True, help="Expected annual return")
    p.add_argument("--months", type=float)
    p.add_argument("--years", type=float, help="Investment years (with --step-up)")
    p.add_argument("--step-up", type=float, help="Yearly instalment increase in percent")

    p = _add_command(subparsers, "swp", cmd_swp, "Systematic withdrawal duration or amount")
    p.add_argument("--corpus", type=float, required=True)
    p.add_argument("--rate", type=float, required=True)
    p.add_argument("--withdrawal", type=float, help="Monthly withdrawal (gives duration)")
    p.add_argument("--months", type=float, help="Duration in months (gives withdrawal)")
    p.add_argument(
        "--max-months", type=int, default=1200, help="Months simulated before the closed form"
    )

    p = _add_command(subparsers, "lumpsum", cmd_lumpsum, "Lump-sum maturity value")
    p.add_argument("--principal", type=float, required=True)
    p.add_argument("--rate", type=float, required=True)
    p.add_argument("--years", type=float, required=True)

    p = _add_command(subparsers, "fd", cmd_fd, "Fixed deposit maturity value")
    p.add_argument("--principal", type=float, required=True)
    p.add_argument("--rate", type=float, required=True)
    p.add_argument("--years", type=float, required=True)
    p.add_argument("--frequency", type=float, default=1, help="Compoundings per year")

    p = _add_command(subparsers, "rd", cmd_rd, "Recurring deposit maturity value")
    p.add_argument("--amount", type=float, required=True, help="Monthly deposit")
    p.add_argument("--rate", type=float, required=True)
    p.add_argument("--years", type=float, required=True)

    # Savings and tax
    p = _add_command(subparsers, "ppf", cmd_ppf, "PPF maturity value")
    p.add_argument("--amount", type=float, required=True, help="Annual investment")
    p.add_argument("--rate", type=float, required=True)
    p.add_argument("--years", type=float, default=15)

    p = _add_command(subparsers, "epf", cmd_epf, "EPF balance projection")
    p.add_argument("--salary", type=float, required=True, help="Monthly basic salary")
    p.add_argument("--years", type=float, required=True)
    p.add_argument("--rate", type=float, default=8.25)
    p.add_argument("--employee-share", type=float, default=12.0)
    p.add_argument("--employer-share", type=float, default=3.67)
    p.add_argument("--salary-increase", type=float, default=0.0)

    p = _add_command(subparsers, "hra", cmd_hra, "HRA exemption")
    p.add_argument("--basic", type=float, required=True)
    p.add_argument("--hra", type=float, required=True)
    p.add_argument("--rent", type=float, required=True)
    p.add_argument("--non-metro", action="store_true")

    p = _add_command(subparsers, "income-tax", cmd_income_tax, "Indian income tax")
    p.add_argument("--income", type=float, required=True)
    p.add_argument("--regime", choices=_choices(TaxRegime), default=TaxRegime.OLD.value)
    p.add_argument(
        "--gross",
        action="store_true",
        help="Treat income as gross and apply deductions, slabs and cess",
    )
    p.add_argument(
        "--deduction",
        action="append",
        metavar="KEY=AMOUNT",
        help="e.g. section_80c=150000 (repeatable, requires --gross)",
    )
    p.add_argument("--compare", action="store_true", help="Compare old and new regimes")

    # Ratios
    p = _add_command(subparsers, "roi", cmd_roi, "Return on investment in percent")
    p.add_argument("--initial", type=float, required=True)
    p.add_argument("--final", type=float, required=True)

    p = _add_command(subparsers, "dti", cmd_dti, "Debt-to-income ratio in percent")
    p.add_argument("--debt", type=float, required=True)
    p.add_argument("--income", type=float, required=True)

    p = _add_command(
        subparsers, "dividend-yield", cmd_dividend_yield, "Dividend yield in percent"
    )
    p.add_argument("--dividends", type=float, required=True)
    p.add_argument("--price", type=float, required=True)

    # Fitness
    p = _add_command(subparsers, "bmi", cmd_bmi, "Body mass index")
    p.add_argument("--weight", type=float, required=True, help="Kilograms")
    p.add_argument("--height", type=float, required=True, help="Metres")

    for name, func, help in (
        ("bmr", cmd_bmr, "Basal metabolic rate (Mifflin-St Jeor)"),
        ("tdee", cmd_tdee, "Total daily energy expenditure"),
    ):
        p = _add_command(subparsers, name, func, help)
        p.add_argument("--weight", type=float, required=True, help="Kilograms")
        p.add_argument("--height", type=float, required=True, help="Centimetres")
        p.add_argument("--age", type=float, required=True)
        p.add_argument("--gender", choices=_choices(Gender), required=True)
        if name == "tdee":
            p.add_argument("--activity", choices=_choices(ActivityLevel), required=True)

    p = _add_command(subparsers, "body-fat", cmd_body_fat, "Body fat percentage (US Navy)")
    p.add_argument("--gender", choices=_choices(Gender), required=True)
    p.add_argument("--weight", type=float, required=True)
    p.add_argument("--height", type=float, required=True, help="Centimetres")
    p.add_argument("--neck", type=float, required=True)
    p.add_argument("--waist", type=float, required=True)
    p.add_argument("--hips", type=float, help="Required for females")

    p = _add_command(subparsers, "heart-rate", cmd_heart_rate, "Target heart-rate range")
    p.add_argument("--age", type=float, required=True)
    p.add_argument("--resting", type=float, required=True, help="Resting heart rate")
    p.add_argument("--intensity", choices=_choices(Intensity), required=True)

    p = _add_command(subparsers, "macros", cmd_macros, "Daily macronutrient split")
    p.add_argument("--tdee", type=float, required=True)
    p.add_argument("--goal", choices=_choices(MacroGoal), default=MacroGoal.BALANCED.value)

    p = _add_command(subparsers, "one-rep-max", cmd_one_rep_max, "Estimated one-rep max")
    p.add_argument("--weight", type=float, required=True)
    p.add_argument("--reps", type=float, required=True)
    p.add_argument("--exercise", choices=_choices(Exercise), default=Exercise.GENERIC.value)

    p = _add_command(subparsers, "convert-weight", cmd_convert_weight, "Convert kg and lb")
    p.add_argument("--weight", type=float, required=True)
    p.add_argument("--to", choices=_choices(WeightUnit), required=True)

    # Schedules
    p = _add_command(subparsers, "schedule", cmd_schedule, "Month-by-month schedule")
    p.add_argument("kind", choices=["amortization", "sip"])
    p.add_argument(
        "--amount", type=float, required=True, help="Principal or monthly instalment"
    )
    p.add_argument("--rate", type=float, required=True)
    p.add_argument("--months", type=int, required=True)
    p.add_argument("--chart", metavar="FILE", help="Also save an HTML chart")

    # Crypto
    p = _add_command(
        subparsers, "crypto-convert", cmd_crypto_convert, "Convert between currencies"
    )
    p.add_argument("amount", type=float)
    p.add_argument("from_symbol", metavar="FROM")
    p.add_argument("to_symbol", metavar="TO")

    p = _add_command(
        subparsers, "crypto-listings", cmd_crypto_listings, "Latest cryptocurrency listings"
    )
    p.add_argument("--limit", type=int, default=10)
    p.add_argument("--convert", help="Quote currency, e.g. EUR")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    loaded = attempt(Settings.from_env)
    if not loaded.ok:
        print(f"Error: {loaded.message}", file=sys.stderr)
        return EXIT_USAGE
    args.settings = loaded.value

    level = (args.log_level or args.settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    outcome = attempt(args.func, args)
    if not outcome.ok:
        print(f"Error: {outcome.message}", file=sys.stderr)
        return EXIT_USAGE if outcome.kind in (VALIDATION, CONFIG) else EXIT_FAILURE

    json.dump(outcome.value, sys.stdout, indent=2, cls=NumpyEncoder)
    sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
