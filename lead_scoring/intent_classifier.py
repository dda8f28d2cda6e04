"""
Intent Classification for the realtor chat widget.

Detects whether a prospect is buying, selling or just exploring, using
ordered batteries of case-insensitive regular expressions. Within a
category the first pattern that matches decides; no model calls are made.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Pattern

logger = logging.getLogger(__name__)


class Intent(Enum):
    """Prospect intent categories."""
    BUYING = "buying"          # Looking for a home
    SELLING = "selling"        # Wants to list or value a property
    EXPLORING = "exploring"    # Curious, no buy/sell language


@dataclass(frozen=True)
class IntentResult:
    """Result of intent classification."""
    intent: Optional[Intent] = None
    buying_signal: bool = False
    selling_signal: bool = False

    @property
    def is_transactional(self) -> bool:
        """True when a buying or selling pattern fired."""
        return self.buying_signal or self.selling_signal


class IntentClassifier:
    """
    Classifies prospect intent from the concatenated user text.

    Buying wins ties: a transcript with both buying and selling language is
    treated as a buyer. Exploring is only reported when neither transactional
    category matched.
    """

    BUYING_PATTERNS: List[Pattern[str]] = [
        re.compile(
            r"\b(buy|buying|purchase|purchasing|looking\s+for|looking\s+to\s+buy|want\s+to\s+buy"
            r"|interested\s+in\s+buying|home\s+search|house\s+hunt|house\s+hunting)\b",
            re.IGNORECASE,
        ),
        re.compile(
            r"\b(move\s+to|relocat\w*|moving\s+to|need\s+a\s+home|need\s+a\s+house"
            r"|find\s+a\s+place|find\s+a\s+home)\b",
            re.IGNORECASE,
        ),
        re.compile(
            r"\b(pre-?approv|mortgage|down\s+payment|afford|what\s+can\s+i\s+afford)\b",
            re.IGNORECASE,
        ),
    ]

    SELLING_PATTERNS: List[Pattern[str]] = [
        re.compile(
            r"\b(sell|selling|list|listing|put\s+on\s+the\s+market|market\s+value"
            r"|home\s+value|what\s+is\s+my\s+home\s+worth)\b",
            re.IGNORECASE,
        ),
        re.compile(r"\b(sell\s+my\s+(home|house|condo|property|place))\b", re.IGNORECASE),
        re.compile(r"\b(listing\s+agent|sell\s+side|seller)\b", re.IGNORECASE),
    ]

    # Lower-confidence curiosity language
    EXPLORING_PATTERNS: List[Pattern[str]] = [
        re.compile(
            r"\b(curious|wondering|interested|learn|tell\s+me\s+about"
            r"|what\s+(?:is|are)|how\s+(?:does|do|is|are))\b",
            re.IGNORECASE,
        ),
    ]

    def classify(self, text: str) -> IntentResult:
        """
        Classify the intent expressed in a block of user text.

        Args:
            text: All user message bodies joined together

        Returns:
            IntentResult; ``intent`` is None when nothing matched
        """
        buying = self._matches_any(self.BUYING_PATTERNS, text)
        selling = self._matches_any(self.SELLING_PATTERNS, text)

        if buying:
            intent = Intent.BUYING
            if selling:
                logger.debug("Buying and selling language both present, classifying as buying")
        elif selling:
            intent = Intent.SELLING
        elif self._matches_any(self.EXPLORING_PATTERNS, text):
            intent = Intent.EXPLORING
        else:
            intent = None

        return IntentResult(intent=intent, buying_signal=buying, selling_signal=selling)

    @staticmethod
    def _matches_any(patterns: List[Pattern[str]], text: str) -> bool:
        """Return True on the first pattern that matches."""
        for pattern in patterns:
            if pattern.search(text):
                return True
        return False

