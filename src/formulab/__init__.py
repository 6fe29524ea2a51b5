"""
FormulaLab - Financial, Tax and Fitness Formula Library

FormulaLab is a collection of small, deterministic calculators: loan EMIs,
investment and savings growth, Indian income tax and allowances, financial
ratios and fitness metrics, plus a thin client for cryptocurrency price
conversion.

Key Features:
- **Stateless calculators**: Plain functions, validated inputs, no shared state
- **Exact rounding**: Monetary and metric results are rounded half-up to 2 decimals
- **Explicit errors**: Invalid input raises ``ValidationError`` before any computation
- **Result records**: Multi-value results are frozen dataclasses with ``to_dict()``
- **Schedules and charts**: Month-by-month pandas tables with Plotly charts
- **Outcome wrapper**: ``attempt()`` turns failures into a discriminated result

Quick Start:
    ```python
    from formulab import calculate_emi, calculate_bmi, calculate_advanced_income_tax

    calculate_emi(500_000, 10, 60)           # 10623.52
    calculate_bmi(70, 1.75)                  # BMIResult(bmi=22.86, category='Normal weight')
    calculate_advanced_income_tax(
        1_200_000, {"section_80c": 150_000}
    ).total_tax
    ```

Calculator Families:
    - Loans: EMI, total interest, home/personal/education loan details
    - Investments: compound/simple interest, SIP, step-up SIP, SWP, lump sum, FD, RD
    - Savings and tax: PPF, EPF, HRA exemption, old/new regime income tax
    - Ratios: ROI, debt-to-income, dividend yield
    - Fitness: BMI, BMR, TDEE, body fat, heart-rate zones, macros, one-rep max

Configuration:
    The crypto client reads ``COINMARKETCAP_API_KEY`` from the environment
    (or a ``.env`` file); see :mod:`formulab.config`.
"""

# Version information
__version__ = "0.1.0"
__author__ = "FormulaLab Team"
__description__ = "Financial, tax and fitness formula library"

from . import calculators
from .calculators import *  # noqa: F401,F403

# Import core components
from .core import (
    ActivityLevel,
    BMIResult,
    ConfigError,
    EPFResult,
    Exercise,
    FormulaError,
    FormulaWarning,
    Gender,
    HeartRateRange,
    IncomeTaxResult,
    Intensity,
    LoanDetails,
    MacroGoal,
    MacroSplit,
    Outcome,
    ResponseShapeError,
    TaxComparison,
    TaxRegime,
    TDEEResult,
    ValidationError,
    WeightUnit,
    attempt,
)
from .config import Settings, get_settings
from .crypto import CryptoPriceClient, convert_crypto_currency, fetch_latest_crypto_prices
from .schedules import amortization_schedule, schedule_totals, sip_growth_schedule

# Chart functions need plotly (optional "viz" extra)
from .charts import PLOTLY_AVAILABLE as CHARTS_AVAILABLE

__all__ = [
    # Calculators
    *calculators.__all__,
    # Errors
    "FormulaError",
    "ValidationError",
    "ConfigError",
    "ResponseShapeError",
    "FormulaWarning",
    # Enumerated inputs
    "Gender",
    "ActivityLevel",
    "Intensity",
    "Exercise",
    "MacroGoal",
    "TaxRegime",
    "WeightUnit",
    # Result records
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
    # Crypto and configuration
    "CryptoPriceClient",
    "fetch_latest_crypto_prices",
    "convert_crypto_currency",
    "Settings",
    "get_settings",
    # Schedules
    "amortization_schedule",
    "sip_growth_schedule",
    "schedule_totals",
    # Version info
    "__version__",
    "__author__",
    "__description__",
]

if CHARTS_AVAILABLE:
    from .charts import amortization_breakdown, save_chart, sip_growth

    __all__.extend(["amortization_breakdown", "sip_growth", "save_chart"])
