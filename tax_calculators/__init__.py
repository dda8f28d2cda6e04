"""
Transfer Tax Calculators for the realtor chat widget.

Jurisdiction-specific property transfer tax calculators:
- British Columbia PTT (bc_ptt), with fading first-time buyer exemption
- Ontario LTT (on_ltt), with capped first-time buyer rebate
- Alberta Land Title Transfer Fee (ab_ltt)
- Generic 1.5% estimate for everything else
"""

from .base import (
    InvalidTaxInputError,
    TaxCalculationInput,
    TaxCalculationResult,
    TaxCalculator,
    TaxTier,
)
from .ab_ltt import AlbertaLttCalculator
from .bc_ptt import BcPttCalculator
from .generic import GenericCalculator
from .on_ltt import OntarioLttCalculator
from .registry import available_jurisdictions, get_calculator

__all__ = [
    "InvalidTaxInputError",
    "TaxCalculationInput",
    "TaxCalculationResult",
    "TaxCalculator",
    "TaxTier",
    "AlbertaLttCalculator",
    "BcPttCalculator",
    "GenericCalculator",
    "OntarioLttCalculator",
    "available_jurisdictions",
    "get_calculator",
]
