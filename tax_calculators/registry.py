"""
Registry of transfer-tax calculators keyed by jurisdiction code.

Codes match the agent's configured calculator id. Unknown or missing codes
resolve to the generic estimator, so a lookup never fails.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .base import TaxCalculator
from .ab_ltt import AlbertaLttCalculator
from .bc_ptt import BcPttCalculator
from .generic import GenericCalculator
from .on_ltt import OntarioLttCalculator

logger = logging.getLogger(__name__)

# Calculators are stateless, so one shared instance per jurisdiction
_CALCULATORS: Dict[str, TaxCalculator] = {
    calculator.code: calculator
    for calculator in (BcPttCalculator(), OntarioLttCalculator(), AlbertaLttCalculator())
}

_FALLBACK: TaxCalculator = GenericCalculator()


def get_calculator(jurisdiction_code: Optional[str]) -> TaxCalculator:
    """
    Get the calculator for a jurisdiction.

    Args:
        jurisdiction_code: Calculator id such as "bc_ptt"; matched
            case-insensitively, surrounding whitespace ignored

    Returns:
        The jurisdiction's calculator, or the generic estimator
    """
    code = (jurisdiction_code or "").strip().lower()
    calculator = _CALCULATORS.get(code)
    if calculator is None:
        logger.info(f"No tax calculator for {jurisdiction_code!r}, using generic estimate")
        return _FALLBACK
    return calculator


def available_jurisdictions() -> List[Tuple[str, str, str]]:
    """List (code, region name, tax name) for every registered calculator."""
    return [
        (code, calculator.region_name, calculator.tax_name)
        for code, calculator in _CALCULATORS.items()
    ]
