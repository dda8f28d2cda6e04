"""
British Columbia Property Transfer Tax calculator.

Rates (marginal):
    - 1% on the first $200,000
    - 2% on $200,001 to $2,000,000
    - 3% above $2,000,000

First-time home buyer exemption:
    - Resale: full up to $835,000, fading linearly to nothing at $860,000
    - Newly built: full up to $1,100,000, fading linearly to nothing at $1,150,000

Inside the fade band the exemption is a share of the tax owed *at the
threshold price*, not at the actual price.
"""

import logging
from typing import NamedTuple

from .base import (
    TaxBracket,
    TaxCalculationInput,
    TaxCalculationResult,
    apply_brackets,
    build_result,
    round_cents,
)

logger = logging.getLogger(__name__)


class ExemptionBand(NamedTuple):
    """Full exemption at or below ``threshold``, none at or above ``upper_bound``."""
    threshold: float
    upper_bound: float


class BcPttCalculator:
    """Three-band PTT with a fading first-time buyer exemption."""

    code = "bc_ptt"
    region_name = "British Columbia"
    tax_name = "Property Transfer Tax (PTT)"

    BRACKETS = (
        TaxBracket(0, 200_000, 0.01, "$0 - $200,000", "1%"),
        TaxBracket(200_000, 2_000_000, 0.02, "$200,001 - $2,000,000", "2%"),
        TaxBracket(2_000_000, None, 0.03, "Above $2,000,000", "3%"),
    )

    RESALE_EXEMPTION = ExemptionBand(threshold=835_000, upper_bound=860_000)
    NEWLY_BUILT_EXEMPTION = ExemptionBand(threshold=1_100_000, upper_bound=1_150_000)

    def calculate(self, tax_input: TaxCalculationInput) -> TaxCalculationResult:
        price = tax_input.purchase_price
        tiers, raw_total = apply_brackets(price, self.BRACKETS)
        total_tax = round_cents(raw_total)

        exemption = 0.0
        if tax_input.is_first_time_buyer:
            band = self.NEWLY_BUILT_EXEMPTION if tax_input.is_newly_built else self.RESALE_EXEMPTION
            exemption = self._first_time_exemption(price, total_tax, band)

        return build_result(self, tiers, total_tax, exemption)

    def _first_time_exemption(self, price: float, total_tax: float, band: ExemptionBand) -> float:
        if price <= band.threshold:
            return total_tax
        if price < band.upper_bound:
            full_exemption_tax = self.raw_tax_at(band.threshold)
            ratio = (band.upper_bound - price) / (band.upper_bound - band.threshold)
            exemption = round_cents(full_exemption_tax * ratio)
            logger.debug(
                f"BC first-time exemption fading: price={price}, ratio={ratio:.4f}, exemption={exemption}"
            )
            return exemption
        return 0.0

    @staticmethod
    def raw_tax_at(price: float) -> float:
        """
        Tax owed at ``price`` before any exemption.

        Computed directly from the rates rather than through the tier
        breakdown; the fade-out interpolates from this value.
        """
        tax = 0.0
        tax += min(price, 200_000) * 0.01
        tax += min(max(price - 200_000, 0), 1_800_000) * 0.02
        tax += max(price - 2_000_000, 0) * 0.03
        return round_cents(tax)
