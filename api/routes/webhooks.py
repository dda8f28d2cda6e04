"""
Webhook Routes for the lead qualification API.

Receives lead payloads pushed by the chat platform.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/webhooks/leads")
async def lead_webhook(payload: Dict[str, Any]):
    """Acknowledge a lead payload."""
    # TODO: dispatch to the agent's configured webhook URLs
    logger.info(f"Lead webhook received: keys={sorted(payload.keys())}")
    return {"received": True}
