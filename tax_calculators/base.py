"""
Shared types for the transfer-tax calculators.

Defines the calculator input/result containers, the structural TaxCalculator
protocol and the marginal-bracket helper the progressive calculators are
built on. Calculators do not inherit from a common base; the registry maps
each jurisdiction code to an instance.
"""

import math
import numbers
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Dict, List, NamedTuple, Optional, Protocol, Sequence, Tuple, runtime_checkable

CENT = Decimal("0.01")


class InvalidTaxInputError(ValueError):
    """Raised when a calculator is given a price it cannot tax."""


def round_cents(value: float) -> float:
    """
    Round to two decimals, halves away from zero.

    Precision grows with the magnitude of ``value`` so very large prices
    quantize instead of raising InvalidOperation.
    """
    amount = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return float(amount.quantize(CENT, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class TaxCalculationInput:
    """Purchase details supplied by the caller."""
    purchase_price: float
    is_first_time_buyer: bool = False
    is_newly_built: bool = False

    def __post_init__(self):
        price = self.purchase_price
        if isinstance(price, bool) or not isinstance(price, numbers.Real):
            raise InvalidTaxInputError(f"Purchase price must be a number, got {price!r}")
        price = float(price)
        if math.isnan(price) or math.isinf(price):
            raise InvalidTaxInputError(f"Purchase price must be finite, got {price}")
        if price < 0:
            raise InvalidTaxInputError(f"Purchase price cannot be negative, got {price}")
        object.__setattr__(self, "purchase_price", price)
        object.__setattr__(self, "is_first_time_buyer", bool(self.is_first_time_buyer))
        object.__setattr__(self, "is_newly_built", bool(self.is_newly_built))


@dataclass(frozen=True)
class TaxTier:
    """One price band of a tax breakdown."""
    range: str
    rate: str
    amount: float

    def to_dict(self) -> Dict[str, Any]:
        return {"range": self.range, "rate": self.rate, "amount": self.amount}


@dataclass(frozen=True)
class TaxCalculationResult:
    """Tiered tax breakdown for one jurisdiction."""
    total_tax: float
    exemption: float
    net_tax: float
    region_name: str
    tax_name: str
    tiers: Tuple[TaxTier, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with camelCase keys."""
        return {
            "totalTax": self.total_tax,
            "exemption": self.exemption,
            "netTax": self.net_tax,
            "tiers": [tier.to_dict() for tier in self.tiers],
            "regionName": self.region_name,
            "taxName": self.tax_name,
        }


@runtime_checkable
class TaxCalculator(Protocol):
    """Structural contract every jurisdiction strategy satisfies."""

    code: str
    region_name: str
    tax_name: str

    def calculate(self, tax_input: TaxCalculationInput) -> TaxCalculationResult:
        """
        Compute the tax breakdown for a purchase.

        Args:
            tax_input: Validated purchase details

        Returns:
            TaxCalculationResult with tiers, exemption and net tax
        """
        ...


class TaxBracket(NamedTuple):
    """A marginal-rate band; ``upper`` is None for the open-ended top band."""
    lower: float
    upper: Optional[float]
    rate: float
    range_label: str
    rate_label: str


def apply_brackets(price: float, brackets: Sequence[TaxBracket]) -> Tuple[List[TaxTier], float]:
    """
    Apply marginal brackets to a price.

    Returns:
        Tuple of (tiers with a strictly positive base, unrounded total tax)
    """
    tiers: List[TaxTier] = []
    total = 0.0
    for bracket in brackets:
        base = max(price - bracket.lower, 0.0)
        if bracket.upper is not None:
            base = min(base, bracket.upper - bracket.lower)
        if base <= 0:
            continue
        amount = base * bracket.rate
        tiers.append(TaxTier(range=bracket.range_label, rate=bracket.rate_label, amount=round_cents(amount)))
        total += amount
    return tiers, total


def build_result(
    calculator: TaxCalculator,
    tiers: Sequence[TaxTier],
    total_tax: float,
    exemption: float = 0.0,
) -> TaxCalculationResult:
    """Assemble a result, deriving net tax from total and exemption."""
    return TaxCalculationResult(
        total_tax=total_tax,
        exemption=exemption,
        net_tax=round_cents(total_tax - exemption),
        region_name=calculator.region_name,
        tax_name=calculator.tax_name,
        tiers=tuple(tiers),
    )
