"""
Lead Signal Extractor for the realtor chat widget.

Turns a chat transcript into a scored lead profile. Only user messages are
examined; their bodies are joined into one text blob and passed through the
intent classifier, the entity extractor and the scorer. The whole pipeline is
deterministic and keeps no state between calls.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from .intent_classifier import IntentClassifier
from .entity_extractor import EntityExtractor
from .scoring_model import LeadScorer, LeadScore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversationMessage:
    """A single chat message as supplied by the chat backend."""
    role: str  # "user" | "assistant"
    content: Optional[str] = None


MessageLike = Union[ConversationMessage, Mapping]


@dataclass(frozen=True)
class ExtractedLeadProfile:
    """Scored lead profile extracted from a conversation."""
    intent: Optional[str] = None
    budget_range: Optional[str] = None
    property_type: Optional[str] = None
    timeline: Optional[str] = None
    areas: Tuple[str, ...] = ()
    is_first_time_buyer: Optional[bool] = None
    score: int = 0
    score_breakdown: Dict[str, int] = field(default_factory=dict, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, leaving out unset fields."""
        data: Dict[str, Any] = {}
        if self.intent is not None:
            data["intent"] = self.intent
        if self.budget_range is not None:
            data["budgetRange"] = self.budget_range
        if self.property_type is not None:
            data["propertyType"] = self.property_type
        if self.timeline is not None:
            data["timeline"] = self.timeline
        if self.areas:
            data["areas"] = list(self.areas)
        if self.is_first_time_buyer:
            data["isFirstTimeBuyer"] = True
        data["score"] = self.score
        if self.score_breakdown:
            data["scoreBreakdown"] = dict(self.score_breakdown)
        return data


class LeadSignalExtractor:
    """
    Extracts and scores lead signals from a conversation transcript.

    Composes IntentClassifier, EntityExtractor and LeadScorer.
    """

    def __init__(
        self,
        classifier: Optional[IntentClassifier] = None,
        extractor: Optional[EntityExtractor] = None,
        scorer: Optional[LeadScorer] = None,
    ):
        self.classifier = classifier or IntentClassifier()
        self.extractor = extractor or EntityExtractor()
        self.scorer = scorer or LeadScorer()

    def extract(self, messages: Iterable[MessageLike]) -> ExtractedLeadProfile:
        """
        Extract a scored lead profile from a conversation.

        Args:
            messages: Ordered chat messages, as ConversationMessage objects
                or mappings with "role" and "content" keys

        Returns:
            ExtractedLeadProfile; the zero-score profile when there is no
            user text
        """
        profile, _ = self.qualify(messages)
        return profile

    def qualify(self, messages: Iterable[MessageLike]) -> Tuple[ExtractedLeadProfile, Optional[LeadScore]]:
        """
        Extract the profile together with the full LeadScore.

        The LeadScore is None when the transcript holds no user text.
        """
        user_texts = [text for text in (_user_text(m) for m in messages or ()) if text]
        if not user_texts:
            return ExtractedLeadProfile(), None

        all_user_text = " ".join(user_texts)

        intent_result = self.classifier.classify(all_user_text)
        entities = self.extractor.extract(all_user_text)
        lead_score = self.scorer.score(intent_result, entities)

        profile = ExtractedLeadProfile(
            intent=intent_result.intent.value if intent_result.intent else None,
            budget_range=entities.budget_text,
            property_type=entities.property_type,
            timeline=entities.timeline,
            areas=entities.areas,
            is_first_time_buyer=True if entities.is_first_time_buyer else None,
            score=lead_score.score,
            score_breakdown=dict(lead_score.score_breakdown),
        )

        logger.debug(
            f"Lead extracted from {len(user_texts)} user messages: "
            f"score={lead_score.score}, priority={lead_score.priority.value}"
        )
        return profile, lead_score


def _user_text(message: Any) -> Optional[str]:
    """Return the message body if it is a non-empty user message."""
    if isinstance(message, Mapping):
        role = message.get("role")
        content = message.get("content")
    else:
        role = getattr(message, "role", None)
        content = getattr(message, "content", None)

    if role != "user" or not isinstance(content, str) or not content:
        return None
    return content


_default_extractor = LeadSignalExtractor()


def extract_lead_data(messages: Iterable[MessageLike]) -> ExtractedLeadProfile:
    """Extract a scored lead profile using the default extractor."""
    return _default_extractor.extract(messages)
