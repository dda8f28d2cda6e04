"""Tests for the transfer tax calculators."""

import logging
import math

import pytest
from tax_calculators import (
    AlbertaLttCalculator,
    BcPttCalculator,
    GenericCalculator,
    InvalidTaxInputError,
    OntarioLttCalculator,
    TaxCalculationInput,
    TaxCalculationResult,
    TaxCalculator,
    available_jurisdictions,
    get_calculator,
)
from tax_calculators.base import round_cents


def calc(code, price, first_time=False, newly_built=False):
    tax_input = TaxCalculationInput(
        purchase_price=price,
        is_first_time_buyer=first_time,
        is_newly_built=newly_built,
    )
    return get_calculator(code).calculate(tax_input)


SAMPLE_PRICES = [0, 1, 4_999, 55_000, 61_234.57, 199_999.99, 368_000, 500_000, 835_000, 847_500,
                 1_125_000, 1_234_567.89, 2_000_000, 2_345_678.91, 3_750_000.5]


# ── Registry ──────────────────────────────────────────

class TestRegistry:
    @pytest.mark.parametrize("code,expected", [
        ("bc_ptt", BcPttCalculator),
        ("on_ltt", OntarioLttCalculator),
        ("ab_ltt", AlbertaLttCalculator),
        (" BC_PTT ", BcPttCalculator),
        ("qc_welcome", GenericCalculator),
        ("", GenericCalculator),
        (None, GenericCalculator),
    ])
    def test_get_calculator(self, code, expected):
        assert isinstance(get_calculator(code), expected)

    def test_calculators_satisfy_protocol(self):
        for code in ("bc_ptt", "on_ltt", "ab_ltt", "unknown"):
            calculator = get_calculator(code)
            assert isinstance(calculator, TaxCalculator)
            # structural match, not inheritance
            assert TaxCalculator not in type(calculator).__mro__
            assert calculator.code and calculator.region_name and calculator.tax_name
            assert isinstance(calculator.calculate(TaxCalculationInput(purchase_price=100_000)), TaxCalculationResult)

    def test_protocol_is_structural(self):
        class FlatFee:
            code = "flat"
            region_name = "Testland"
            tax_name = "Flat fee"

            def calculate(self, tax_input):
                return None

        assert isinstance(FlatFee(), TaxCalculator)
        assert not isinstance(object(), TaxCalculator)

    def test_available_jurisdictions(self):
        codes = [code for code, _, _ in available_jurisdictions()]
        assert codes == ["bc_ptt", "on_ltt", "ab_ltt"]
        assert ("on_ltt", "Ontario", "Land Transfer Tax (LTT)") in available_jurisdictions()


# ── Input validation ──────────────────────────────────

class TestTaxCalculationInput:
    @pytest.mark.parametrize("price", [-1, -0.01, float("nan"), float("inf"), True, "500000", None])
    def test_rejects_invalid_price(self, price):
        with pytest.raises(InvalidTaxInputError):
            TaxCalculationInput(purchase_price=price)

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            TaxCalculationInput(purchase_price=-5)

    def test_integer_price_coerced(self):
        assert TaxCalculationInput(purchase_price=500_000).purchase_price == 500_000.0

    def test_round_cents_half_up(self):
        assert round_cents(0.125) == 0.13
        assert round_cents(2.675) == 2.68
        assert round_cents(12950.000000000002) == 12950.0


# ── British Columbia ──────────────────────────────────

class TestBcPtt:
    def test_first_time_resale_fully_exempt(self):
        result = calc("bc_ptt", 800_000, first_time=True)
        assert result.total_tax == 14_000
        assert [tier.amount for tier in result.tiers] == [2_000, 12_000]
        assert result.exemption == 14_000
        assert result.net_tax == 0
        assert result.region_name == "British Columbia"

    def test_no_exemption_without_first_time(self):
        result = calc("bc_ptt", 800_000)
        assert result.exemption == 0
        assert result.net_tax == 14_000

    def test_top_bracket(self):
        result = calc("bc_ptt", 2_500_000)
        assert [tier.rate for tier in result.tiers] == ["1%", "2%", "3%"]
        assert result.total_tax == 53_000

    def test_full_exemption_at_threshold(self):
        result = calc("bc_ptt", 835_000, first_time=True)
        assert result.total_tax == 14_700
        assert result.exemption == 14_700

    def test_partial_exemption_in_fade_band(self):
        result = calc("bc_ptt", 847_500, first_time=True)
        # half of the tax owed at $835,000
        assert result.exemption == 7_350
        assert result.total_tax == 14_950
        assert result.net_tax == 7_600

    def test_no_exemption_at_upper_bound(self):
        result = calc("bc_ptt", 860_000, first_time=True)
        assert result.exemption == 0
        assert result.net_tax == result.total_tax == 15_200

    def test_exemption_fades_monotonically(self):
        exemptions = [
            calc("bc_ptt", price, first_time=True).exemption
            for price in range(835_000, 865_000, 2_500)
        ]
        assert exemptions == sorted(exemptions, reverse=True)
        assert exemptions[0] > 0 and exemptions[-1] == 0

    def test_fade_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tax_calculators.bc_ptt"):
            calc("bc_ptt", 847_500, first_time=True)
        assert "exemption fading" in caplog.text

    def test_newly_built_band(self):
        assert calc("bc_ptt", 1_100_000, first_time=True, newly_built=True).exemption == 20_000
        result = calc("bc_ptt", 1_125_000, first_time=True, newly_built=True)
        assert result.exemption == 10_000
        assert result.net_tax == 10_500
        assert calc("bc_ptt", 1_150_000, first_time=True, newly_built=True).exemption == 0

    def test_newly_built_ignored_without_first_time(self):
        assert calc("bc_ptt", 1_000_000, newly_built=True).exemption == 0

    def test_raw_tax_at(self):
        assert BcPttCalculator.raw_tax_at(835_000) == 14_700
        assert BcPttCalculator.raw_tax_at(2_100_000) == 41_000


# ── Ontario ───────────────────────────────────────────

class TestOntarioLtt:
    def test_first_time_rebate_capped(self):
        result = calc("on_ltt", 500_000, first_time=True)
        assert [tier.amount for tier in result.tiers] == [275, 1_950, 2_250, 2_000]
        assert result.total_tax == 6_475
        assert result.exemption == 4_000
        assert result.net_tax == 2_475

    def test_rebate_covers_small_purchases(self):
        result = calc("on_ltt", 300_000, first_time=True)
        assert result.total_tax == 2_975
        assert result.exemption == 2_975
        assert result.net_tax == 0

    def test_no_rebate_without_first_time(self):
        assert calc("on_ltt", 500_000).exemption == 0

    def test_tier_labels(self):
        result = calc("on_ltt", 2_500_000)
        assert len(result.tiers) == 5
        assert result.tiers[-1].range == "Above $2,000,000"
        assert result.tiers[-1].rate == "2.5%"


# ── Alberta ───────────────────────────────────────────

class TestAlbertaLtt:
    def test_fee_per_increment(self):
        result = calc("ab_ltt", 312_000, first_time=True)
        assert result.total_tax == 176
        assert result.exemption == 0
        assert result.net_tax == 176
        assert result.tiers[0].range == "Base fee"
        assert result.tiers[1].range == "63 x $5,000 increments"
        assert result.tiers[1].amount == 126

    def test_partial_increment_rounds_up(self):
        assert calc("ab_ltt", 5_000).total_tax == 52
        assert calc("ab_ltt", 5_001).total_tax == 54

    def test_zero_price_is_base_fee_only(self):
        result = calc("ab_ltt", 0)
        assert result.total_tax == 50
        assert len(result.tiers) == 1


# ── Generic fallback ──────────────────────────────────

class TestGenericCalculator:
    def test_unknown_code_uses_estimate(self):
        result = calc("qc_welcome", 1_000_000, first_time=True)
        assert result.total_tax == 15_000
        assert result.exemption == 0
        assert result.net_tax == 15_000
        assert len(result.tiers) == 1
        assert result.tiers[0].rate == "1.5% (estimated)"
        assert result.tax_name == "Estimated Transfer Tax"

    def test_zero_price(self):
        result = calc("generic", 0)
        assert result.total_tax == 0
        assert result.tiers == ()

    def test_to_dict(self):
        data = calc("generic", 400_000).to_dict()
        assert data == {
            "totalTax": 6_000,
            "exemption": 0,
            "netTax": 6_000,
            "tiers": [{"range": "Full purchase price", "rate": "1.5% (estimated)", "amount": 6_000}],
            "regionName": "General",
            "taxName": "Estimated Transfer Tax",
        }


# ── Invariants across calculators ─────────────────────

class TestInvariants:
    @pytest.mark.parametrize("code", ["bc_ptt", "on_ltt", "ab_ltt", "generic"])
    @pytest.mark.parametrize("price", SAMPLE_PRICES)
    def test_tiers_sum_to_total(self, code, price):
        result = calc(code, price)
        tier_sum = sum(tier.amount for tier in result.tiers)
        assert abs(tier_sum - result.total_tax) <= 0.01 + 1e-9

    @pytest.mark.parametrize("code", ["bc_ptt", "on_ltt", "ab_ltt", "generic"])
    @pytest.mark.parametrize("price", SAMPLE_PRICES)
    @pytest.mark.parametrize("newly_built", [False, True])
    def test_exemption_bounds(self, code, price, newly_built):
        result = calc(code, price, first_time=True, newly_built=newly_built)
        assert 0 <= result.exemption <= result.total_tax
        assert result.net_tax == pytest.approx(result.total_tax - result.exemption, abs=0.005)
        assert result.net_tax >= 0

    @pytest.mark.parametrize("code", ["bc_ptt", "on_ltt", "generic"])
    def test_total_monotonic_in_price(self, code):
        totals = [calc(code, price).total_tax for price in SAMPLE_PRICES]
        assert totals == sorted(totals)

    @pytest.mark.parametrize("code", ["bc_ptt", "on_ltt", "ab_ltt", "generic"])
    def test_deterministic(self, code):
        assert calc(code, 987_654.32, first_time=True) == calc(code, 987_654.32, first_time=True)


# ── Very large prices ─────────────────────────────────

class TestLargePrices:
    def test_round_cents_beyond_default_precision(self):
        assert round_cents(1e30) == 1e30
        big = 123_456_789_012_345_678_901_234_567_890
        assert round_cents(big) == float(big)

    @pytest.mark.parametrize("code", ["bc_ptt", "on_ltt", "ab_ltt", "generic"])
    @pytest.mark.parametrize("price", [1e30, 1e300])
    def test_large_price_is_taxed(self, code, price):
        result = calc(code, price, first_time=True)
        assert result.total_tax > 0
        assert 0 <= result.exemption <= result.total_tax
        assert math.isfinite(result.net_tax)
