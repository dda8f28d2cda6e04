"""
Lead Scoring Model for the realtor chat widget.

Additive, rule-based scoring over the signal categories that fired in a
conversation. The weights encode a hand-tuned prioritization:
contact info > intent / budget / areas > property / timeline / first-time.
"""

from enum import Enum
from typing import Dict, List
from dataclasses import dataclass, field

from .intent_classifier import Intent, IntentResult
from .entity_extractor import ExtractedEntities


class LeadPriority(Enum):
    """Lead priority levels."""
    HOT = "hot"          # Score >= hot threshold - immediate follow-up
    WARM = "warm"        # Score >= warm threshold - standard follow-up
    COLD = "cold"        # Below warm threshold - nurture


@dataclass(frozen=True)
class LeadScore:
    """Lead score result."""
    score: int  # 0-100
    priority: LeadPriority
    score_breakdown: Dict[str, int] = field(default_factory=dict)
    signals: List[str] = field(default_factory=list)


class LeadScorer:
    """
    Scores leads from intent and extracted entities.

    Scoring Rules (0-100):
    - Buying or selling intent: +15
    - Exploring intent only: +5
    - Budget mentioned: +15
    - Property type: +10
    - Timeline: +10
    - Areas of interest: +15
    - First-time buyer: +10
    - Contact info shared: +25

    Each category contributes at most once; the sum is clamped to [0, 100].
    """

    SCORING_RULES = {
        "intent_buying": 15,
        "intent_selling": 15,
        "intent_exploring": 5,
        "budget": 15,
        "property_type": 10,
        "timeline": 10,
        "areas": 15,
        "first_time_buyer": 10,
        "contact_info": 25,
    }

    MIN_SCORE = 0
    MAX_SCORE = 100

    def __init__(self, hot_threshold: int = 70, warm_threshold: int = 50):
        """
        Initialize the lead scorer.

        Args:
            hot_threshold: Minimum score for a hot lead
            warm_threshold: Minimum score for a warm lead
        """
        self.hot_threshold = hot_threshold
        self.warm_threshold = warm_threshold

    def score(self, intent_result: IntentResult, entities: ExtractedEntities) -> LeadScore:
        """
        Calculate lead score based on intent and entities.

        Args:
            intent_result: Intent classification result
            entities: Entities extracted from the user text

        Returns:
            LeadScore with score, priority and breakdown
        """
        breakdown: Dict[str, int] = {}
        signals: List[str] = []

        if intent_result.intent is not None:
            key = f"intent_{intent_result.intent.value}"
            breakdown[key] = self.SCORING_RULES[key]
            signals.append(f"Intent: {intent_result.intent.value}")
            if intent_result.intent == Intent.BUYING and intent_result.selling_signal:
                signals.append("Also mentioned selling")

        if entities.has_budget():
            breakdown["budget"] = self.SCORING_RULES["budget"]
            signals.append(f"Budget: {entities.budget_text}")

        if entities.property_type:
            breakdown["property_type"] = self.SCORING_RULES["property_type"]
            signals.append(f"Property type: {entities.property_type}")

        if entities.timeline:
            breakdown["timeline"] = self.SCORING_RULES["timeline"]
            signals.append(f"Timeline: {entities.timeline}")

        if entities.areas:
            breakdown["areas"] = self.SCORING_RULES["areas"]
            signals.append(f"Areas: {', '.join(entities.areas)}")

        if entities.is_first_time_buyer:
            breakdown["first_time_buyer"] = self.SCORING_RULES["first_time_buyer"]
            signals.append("First-time buyer")

        if entities.has_contact_info:
            breakdown["contact_info"] = self.SCORING_RULES["contact_info"]
            signals.append("Contact info shared")

        score = max(self.MIN_SCORE, min(self.MAX_SCORE, sum(breakdown.values())))

        return LeadScore(
            score=score,
            priority=self.priority_for(score),
            score_breakdown=breakdown,
            signals=signals,
        )

    def priority_for(self, score: int) -> LeadPriority:
        """Determine lead priority from score."""
        if score >= self.hot_threshold:
            return LeadPriority.HOT
        elif score >= self.warm_threshold:
            return LeadPriority.WARM
        return LeadPriority.COLD

    def adjust_thresholds(self, hot: int = 70, warm: int = 50):
        """
        Adjust priority thresholds.

        Args:
            hot: Threshold for hot leads (default 70)
            warm: Threshold for warm leads (default 50)
        """
        if warm > hot:
            raise ValueError(f"warm threshold {warm} is above hot threshold {hot}")
        self.hot_threshold = hot
        self.warm_threshold = warm
