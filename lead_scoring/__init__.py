"""
Lead Scoring Module for the realtor chat widget.

This module provides deterministic lead qualification:
- Intent classification (buying, selling, exploring)
- Entity extraction (budget, property type, timeline, areas, first-time buyer, contact)
- Lead scoring (0-100 scale) with hot/warm/cold priority
"""

from .intent_classifier import IntentClassifier, Intent, IntentResult
from .entity_extractor import EntityExtractor, ExtractedEntities
from .scoring_model import LeadScorer, LeadScore, LeadPriority
from .lead_extractor import (
    ConversationMessage,
    ExtractedLeadProfile,
    LeadSignalExtractor,
    extract_lead_data,
)

__all__ = [
    "IntentClassifier",
    "Intent",
    "IntentResult",
    "EntityExtractor",
    "ExtractedEntities",
    "LeadScorer",
    "LeadScore",
    "LeadPriority",
    "ConversationMessage",
    "ExtractedLeadProfile",
    "LeadSignalExtractor",
    "extract_lead_data",
]
