"""
Ontario Land Transfer Tax calculator.

Provincial LTT rates (marginal):
    - 0.5% on the first $55,000
    - 1.0% on $55,001 to $250,000
    - 1.5% on $250,001 to $400,000
    - 2.0% on $400,001 to $2,000,000
    - 2.5% above $2,000,000

First-time home buyer rebate: up to $4,000, which covers the full tax on
homes up to $368,000. Toronto's municipal LTT is not included.
"""


from .base import (
    TaxBracket,
    TaxCalculationInput,
    TaxCalculationResult,
    apply_brackets,
    build_result,
    round_cents,
)


class OntarioLttCalculator:
    """Five-band provincial LTT with a capped first-time buyer rebate."""

    code = "on_ltt"
    region_name = "Ontario"
    tax_name = "Land Transfer Tax (LTT)"

    BRACKETS = (
        TaxBracket(0, 55_000, 0.005, "$0 - $55,000", "0.5%"),
        TaxBracket(55_000, 250_000, 0.01, "$55,001 - $250,000", "1%"),
        TaxBracket(250_000, 400_000, 0.015, "$250,001 - $400,000", "1.5%"),
        TaxBracket(400_000, 2_000_000, 0.02, "$400,001 - $2,000,000", "2%"),
        TaxBracket(2_000_000, None, 0.025, "Above $2,000,000", "2.5%"),
    )

    MAX_FIRST_TIME_REBATE = 4_000.0

    def calculate(self, tax_input: TaxCalculationInput) -> TaxCalculationResult:
        tiers, raw_total = apply_brackets(tax_input.purchase_price, self.BRACKETS)
        total_tax = round_cents(raw_total)

        exemption = 0.0
        if tax_input.is_first_time_buyer:
            exemption = min(total_tax, self.MAX_FIRST_TIME_REBATE)

        return build_result(self, tiers, total_tax, exemption)
