"""
Quick demonstration of the loan, SIP and income-tax calculators.
"""

from __future__ import annotations

import json

from formulab import (
    amortization_schedule,
    attempt,
    calculate_emi,
    calculate_home_loan_details,
    calculate_sip,
    compare_tax_regimes,
    schedule_totals,
)


def pretty(data: dict) -> str:
    """Return JSON formatted output."""
    return json.dumps(data, indent=2, sort_keys=True)


def main() -> None:
    print("EMI for 5L at 12% over 24 months:", calculate_emi(500_000, 12, 24))
    print("Home loan 40L at 8.5% over 20 years:")
    print(pretty(calculate_home_loan_details(4_000_000, 8.5, 20).to_dict()))

    schedule = amortization_schedule(500_000, 12, 24)
    print(schedule.head(3).to_string(index=False))
    print(schedule_totals(schedule).to_string())

    print("SIP of 5000/month at 12% for 10 years:", calculate_sip(5_000, 12, 120))

    comparison = compare_tax_regimes(
        1_500_000, {"section_80c": 150_000, "section_80d": 25_000, "hra": 180_000}
    )
    print(pretty({**comparison.to_dict(), "savings": comparison.savings}))

    # Failures as values instead of exceptions
    outcome = attempt(calculate_emi, 0, 12, 24)
    print(outcome.kind, "-", outcome.message)


if __name__ == "__main__":
    main()
