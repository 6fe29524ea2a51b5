"""
Investment and time-value-of-money calculators.
"""

from .deposits import calculate_fd, calculate_rd
from .interest import calculate_compound_interest, calculate_simple_interest
from .lumpsum import calculate_lumpsum
from .sip import annuity_due_factor, calculate_sip, calculate_step_up_sip
from .swp import DEFAULT_MAX_MONTHS, calculate_swp_amount, calculate_swp_duration

__all__ = [
    "calculate_compound_interest",
    "calculate_simple_interest",
    "calculate_sip",
    "calculate_step_up_sip",
    "annuity_due_factor",
    "calculate_swp_duration",
    "calculate_swp_amount",
    "DEFAULT_MAX_MONTHS",
    "calculate_lumpsum",
    "calculate_fd",
    "calculate_rd",
]
