"""
Generic / fallback transfer tax estimator.

Estimates transfer tax as a flat 1.5% of the purchase price. Used when no
region-specific calculator is configured for an agent.
"""

from .base import TaxCalculationInput, TaxCalculationResult, TaxTier, build_result, round_cents


class GenericCalculator:
    """Flat-rate estimate with no exemptions."""

    code = "generic"
    region_name = "General"
    tax_name = "Estimated Transfer Tax"

    RATE = 0.015

    def calculate(self, tax_input: TaxCalculationInput) -> TaxCalculationResult:
        total_tax = round_cents(tax_input.purchase_price * self.RATE)

        tiers = []
        if tax_input.purchase_price > 0:
            tiers.append(TaxTier(range="Full purchase price", rate="1.5% (estimated)", amount=total_tax))

        return build_result(self, tiers, total_tax)
