"""
Lead Qualification API Routes.
"""

import logging
from typing import List, Dict, Optional
from enum import Enum

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from ..services import get_services
from ..middleware.metrics import record_lead_score

logger = logging.getLogger(__name__)

router = APIRouter()


class LeadPriority(str, Enum):
    HOT = "hot"
    WARM = "warm"
    COLD = "cold"


# Models
class ChatMessage(BaseModel):
    """A chat message from the conversation history."""
    role: str = Field(..., min_length=1)
    content: Optional[str] = None


class LeadExtractRequest(BaseModel):
    """Lead extraction request."""
    messages: List[ChatMessage] = Field(default_factory=list)
    conversation_id: Optional[str] = None


class LeadProfile(BaseModel):
    """Scored lead profile."""
    model_config = ConfigDict(populate_by_name=True)

    intent: Optional[str] = None
    budget_range: Optional[str] = Field(default=None, alias="budgetRange")
    property_type: Optional[str] = Field(default=None, alias="propertyType")
    timeline: Optional[str] = None
    areas: Optional[List[str]] = None
    is_first_time_buyer: Optional[bool] = Field(default=None, alias="isFirstTimeBuyer")
    score: int = Field(..., ge=0, le=100)
    score_breakdown: Optional[Dict[str, int]] = Field(default=None, alias="scoreBreakdown")
    priority: LeadPriority
    signals: List[str] = []
    conversation_id: Optional[str] = Field(default=None, alias="conversationId")


@router.post(
    "/leads/extract",
    response_model=LeadProfile,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
async def extract_lead(request: LeadExtractRequest):
    """
    Score a conversation as a lead.

    Called by the chat backend during or after a conversation; the result
    is persisted by the caller.
    """
    services = get_services()

    messages = [message.model_dump() for message in request.messages]
    profile, lead_score = services.lead_extractor.qualify(messages)

    if lead_score is not None:
        priority = lead_score.priority.value
        signals = lead_score.signals
    else:
        priority = services.lead_scorer.priority_for(profile.score).value
        signals = []

    record_lead_score(profile.score, priority)
    logger.info(
        f"Lead scored: conversation={request.conversation_id}, "
        f"score={profile.score}, priority={priority}"
    )

    return LeadProfile(
        **profile.to_dict(),
        priority=priority,
        signals=signals,
        conversationId=request.conversation_id,
    )
