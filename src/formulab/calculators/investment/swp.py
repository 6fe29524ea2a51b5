"""
Systematic Withdrawal Plan (SWP): how long a corpus lasts, and how much can
be withdrawn each month for a target duration.
"""

from __future__ import annotations

import logging
import math

from formulab.core.currency import quantize
from formulab.core.validation import require_non_negative, require_positive

logger = logging.getLogger(__name__)

# 100 years of monthly withdrawals
DEFAULT_MAX_MONTHS = 1200


def _months_to_exhaust(remaining: float, withdrawal_amount: float, i: float) -> int:
    """Closed-form count of further withdrawals needed to bring ``remaining`` to zero."""
    if i == 0:
        return math.ceil(remaining / withdrawal_amount)
    ratio = withdrawal_amount / (withdrawal_amount - remaining * i)
    return max(1, math.ceil(math.log(ratio) / math.log1p(i)))


def calculate_swp_duration(
    initial_corpus,
    withdrawal_amount,
    annual_return_rate,
    max_months: int = DEFAULT_MAX_MONTHS,
) -> int | None:
    """
    Calculate how many months a corpus lasts under a fixed monthly withdrawal.

    Each month the remaining corpus first grows by the monthly return, then
    the withdrawal is taken out. The month in which the corpus reaches zero
    or goes negative is counted.

    A corpus whose monthly growth pays for the withdrawal
    (``withdrawal_amount <= initial_corpus × i``) is never exhausted and
    gives ``None``. Otherwise the first ``max_months`` months are simulated
    one by one; a corpus still positive after that is finished with the
    closed form ``ceil(log(W / (W − R·i)) / log(1 + i))`` on the remaining
    balance ``R``, so long-lived plans still report their real duration.

    Args:
        initial_corpus: Starting corpus (must be > 0)
        withdrawal_amount: Fixed monthly withdrawal (must be > 0)
        annual_return_rate: Expected annual return in percent (must be >= 0)
        max_months: Number of months simulated step by step before switching
            to the closed form (must be > 0)

    Returns:
        Number of months until the corpus is exhausted, or None if it is
        never exhausted

    Raises:
        ValidationError: If any argument is out of range

    Example:
        ```python
        calculate_swp_duration(1_000_000, 10_000, 8)  # 166
        calculate_swp_duration(1_000_000, 6_667, 8)   # 1491
        calculate_swp_duration(1_000_000, 5_000, 8)   # None (growth covers withdrawals)
        ```
    """
    initial_corpus, withdrawal_amount, max_months = require_positive(
        initial_corpus=initial_corpus,
        withdrawal_amount=withdrawal_amount,
        max_months=max_months,
    )
    (annual_return_rate,) = require_non_negative(annual_return_rate=annual_return_rate)

    i = annual_return_rate / 12 / 100
    if withdrawal_amount <= initial_corpus * i:
        return None

    remaining = initial_corpus
    months = 0
    while remaining > 0:
        if months >= max_months:
            logger.debug(
                "SWP corpus %.2f still positive after %d months, solving the rest in closed form",
                remaining,
                months,
            )
            return months + _months_to_exhaust(remaining, withdrawal_amount, i)
        remaining = remaining + remaining * i - withdrawal_amount
        months += 1

    return months


def calculate_swp_amount(initial_corpus, duration_months, annual_return_rate) -> float:
    """
    Calculate the fixed monthly withdrawal that exhausts a corpus in a given time.

    W = C × i / (1 − (1+i)^(−n)); a zero return gives C / n.

    Args:
        initial_corpus: Starting corpus (must be > 0)
        duration_months: Target number of monthly withdrawals (must be > 0)
        annual_return_rate: Expected annual return in percent (must be >= 0)

    Returns:
        Monthly withdrawal rounded to 2 decimal places

    Raises:
        ValidationError: If any argument is out of range
    """
    initial_corpus, duration_months = require_positive(
        initial_corpus=initial_corpus, duration_months=duration_months
    )
    (annual_return_rate,) = require_non_negative(annual_return_rate=annual_return_rate)

    i = annual_return_rate / 12 / 100
    if i == 0:
        return quantize(initial_corpus / duration_months)
    return quantize(initial_corpus * i / (1 - (1 + i) ** (-duration_months)))
