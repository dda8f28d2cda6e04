"""
Alberta Land Title Transfer Fee calculator.

Alberta has no land transfer tax. Registering the title costs a fee instead:
    - Base fee: $50
    - Plus $2 for every $5,000 of property value, or portion thereof

The mortgage registration fee uses the same formula but depends on the
mortgage amount, so it is not included. There is no first-time buyer
exemption for the transfer fee.
"""

import math

from .base import TaxCalculationInput, TaxCalculationResult, TaxTier, build_result, round_cents


class AlbertaLttCalculator:
    """Flat administrative fee, never exempt."""

    code = "ab_ltt"
    region_name = "Alberta"
    tax_name = "Land Title Transfer Fee"

    BASE_FEE = 50
    INCREMENT = 5_000
    FEE_PER_INCREMENT = 2

    def calculate(self, tax_input: TaxCalculationInput) -> TaxCalculationResult:
        increments = math.ceil(tax_input.purchase_price / self.INCREMENT)
        increment_fee = increments * self.FEE_PER_INCREMENT

        tiers = [TaxTier(range="Base fee", rate="Flat", amount=float(self.BASE_FEE))]
        if increment_fee > 0:
            tiers.append(
                TaxTier(
                    range=f"{increments} x $5,000 increments",
                    rate="$2 per $5,000",
                    amount=float(increment_fee),
                )
            )

        total_tax = round_cents(self.BASE_FEE + increment_fee)
        return build_result(self, tiers, total_tax)
