"""
Savings scheme and tax calculators: PPF, EPF, HRA exemption, income tax.
"""

from .epf import calculate_epf
from .hra import calculate_hra_exemption
from .income_tax import (
    NEW_REGIME_SLABS,
    OLD_REGIME_SLABS,
    Deductions,
    calculate_advanced_income_tax,
    calculate_income_tax,
    compare_tax_regimes,
    slab_tax,
)
from .ppf import calculate_ppf

__all__ = [
    "calculate_ppf",
    "calculate_epf",
    "calculate_hra_exemption",
    "calculate_income_tax",
    "calculate_advanced_income_tax",
    "compare_tax_regimes",
    "Deductions",
    "slab_tax",
    "OLD_REGIME_SLABS",
    "NEW_REGIME_SLABS",
]
