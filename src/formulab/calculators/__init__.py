"""
FormulaLab calculators.

Every calculator is a stateless function: it validates its arguments, applies
one closed-form or small iterative formula, and returns a rounded number or a
frozen result record.
"""

from . import fitness, investment, loan, ratios, savings
from .fitness import *  # noqa: F401,F403
from .investment import *  # noqa: F401,F403
from .loan import *  # noqa: F401,F403
from .ratios import calculate_dividend_yield, calculate_dti, calculate_roi
from .savings import *  # noqa: F401,F403

__all__ = [
    *loan.__all__,
    *investment.__all__,
    *savings.__all__,
    *fitness.__all__,
    "calculate_roi",
    "calculate_dti",
    "calculate_dividend_yield",
]
