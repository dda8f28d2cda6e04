"""
Transfer Tax API Routes.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from ..services import get_services
from ..middleware.metrics import record_tax_calculation
from tax_calculators import (
    InvalidTaxInputError,
    TaxCalculationInput,
    available_jurisdictions,
    get_calculator,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ── Request / Response Models ─────────────────────────────────────

class TaxCalculateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    jurisdiction: Optional[str] = None
    purchase_price: float = Field(..., ge=0, allow_inf_nan=False, alias="purchasePrice")
    is_first_time_buyer: bool = Field(default=False, alias="isFirstTimeBuyer")
    is_newly_built: bool = Field(default=False, alias="isNewlyBuilt")


class TaxTierOut(BaseModel):
    range: str
    rate: str
    amount: float


class TaxCalculateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    calculator: str
    total_tax: float = Field(..., alias="totalTax")
    exemption: float
    net_tax: float = Field(..., alias="netTax")
    tiers: List[TaxTierOut]
    region_name: str = Field(..., alias="regionName")
    tax_name: str = Field(..., alias="taxName")


class Jurisdiction(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    code: str
    region_name: str = Field(..., alias="regionName")
    tax_name: str = Field(..., alias="taxName")


class JurisdictionList(BaseModel):
    jurisdictions: List[Jurisdiction]
    default: str


# ── Endpoints ─────────────────────────────────────────────────────

@router.get("/tax/jurisdictions", response_model=JurisdictionList, response_model_by_alias=True)
async def list_jurisdictions():
    """List the jurisdictions with a dedicated calculator."""
    services = get_services()
    return JurisdictionList(
        jurisdictions=[
            Jurisdiction(code=code, region_name=region_name, tax_name=tax_name)
            for code, region_name, tax_name in available_jurisdictions()
        ],
        default=services.settings.default_tax_calculator,
    )


@router.post("/tax/calculate", response_model=TaxCalculateResponse, response_model_by_alias=True)
async def calculate_tax(request: TaxCalculateRequest):
    """
    Calculate the transfer tax breakdown for a purchase.

    Unknown jurisdictions get the generic estimate; a request without one
    uses the configured default calculator.
    """
    services = get_services()
    code = request.jurisdiction or services.settings.default_tax_calculator
    calculator = get_calculator(code)

    try:
        tax_input = TaxCalculationInput(
            purchase_price=request.purchase_price,
            is_first_time_buyer=request.is_first_time_buyer,
            is_newly_built=request.is_newly_built,
        )
    except InvalidTaxInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    result = calculator.calculate(tax_input)
    record_tax_calculation(calculator.code)

    logger.info(
        f"Tax calculated: calculator={calculator.code}, price={tax_input.purchase_price}, "
        f"net={result.net_tax}"
    )

    return TaxCalculateResponse(calculator=calculator.code, **result.to_dict())
