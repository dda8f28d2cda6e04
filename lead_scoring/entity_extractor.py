"""
Entity Extraction for the realtor chat widget.

Extracts lead signals from prospect messages:
- Budget / price range
- Property type
- Purchase timeline
- Neighbourhoods and areas of interest
- First-time buyer status
- Presence of contact information
"""

import re
from typing import List, Dict, Optional, Pattern, Tuple
from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedEntities:
    """Container for entities extracted from the user text."""

    budget_text: Optional[str] = None
    property_type: Optional[str] = None
    timeline: Optional[str] = None
    areas: Tuple[str, ...] = ()
    is_first_time_buyer: bool = False
    has_contact_info: bool = False

    def has_budget(self) -> bool:
        """Check if budget information was extracted."""
        return self.budget_text is not None


class EntityExtractor:
    """
    Extracts lead entities from prospect messages.

    Every table below is ordered and evaluated first-match-wins, so more
    specific phrasings have to stay ahead of broader ones.
    """

    BUDGET_PATTERNS: List[Pattern[str]] = [
        # $500K, $1.2M, $500,000, $1,200,000
        re.compile(r"\$\s?[\d,]+(?:\.\d+)?\s?(?:k|m|million|thousand)?", re.IGNORECASE),
        # 500k to 800k, between 500 and 800 thousand
        # Digit runs are bounded so a long "1,1,1,..." string is scanned in linear time
        re.compile(
            r"\b(\d[\d,]{0,15}(?:\.\d+)?)\s?(?:k|m|million|thousand)?\s*(?:to|-|and)\s*"
            r"(\d[\d,]{0,15}(?:\.\d+)?)\s?(?:k|m|million|thousand)?\b",
            re.IGNORECASE,
        ),
        # budget is ..., can afford ...
        re.compile(
            r"\b(?:budget|afford|spend|price\s+range)[^.]{0,30}?\$?\s?[\d,]+(?:\.\d+)?"
            r"\s?(?:k|m|million|thousand)?",
            re.IGNORECASE,
        ),
    ]

    PROPERTY_TYPES: List[Tuple[Pattern[str], str]] = [
        (re.compile(r"\b(condo|condominium|apartment|apt)\b", re.IGNORECASE), "condo"),
        (
            re.compile(r"\b(townhouse|townhome|town\s+house|row\s+house|rowhouse)\b", re.IGNORECASE),
            "townhouse",
        ),
        # not the "detached" inside semi-detached
        (
            re.compile(
                r"(?<!semi-)(?<!semi )\b(detached|single\s+family|single-family|standalone)\b",
                re.IGNORECASE,
            ),
            "detached house",
        ),
        (re.compile(r"\b(semi-?detached|semi|duplex)\b", re.IGNORECASE), "semi-detached"),
        (re.compile(r"\b(house|home)\b", re.IGNORECASE), "house"),
        (re.compile(r"\b(land|lot|acreage)\b", re.IGNORECASE), "land"),
        (
            re.compile(r"\b(multi-?family|investment\s+property|rental\s+property)\b", re.IGNORECASE),
            "multi-family/investment",
        ),
        (re.compile(r"\b(penthouse)\b", re.IGNORECASE), "penthouse"),
        (re.compile(r"\b(loft)\b", re.IGNORECASE), "loft"),
    ]

    TIMELINES: List[Tuple[Pattern[str], str]] = [
        (
            re.compile(
                r"\b(asap|as\s+soon\s+as\s+possible|immediately|urgent|right\s+away|this\s+month)\b",
                re.IGNORECASE,
            ),
            "Immediately",
        ),
        (
            re.compile(
                r"\b(next\s+(?:few\s+)?(?:weeks?|month)|within\s+(?:a\s+)?month|1-?2\s+months?"
                r"|couple\s+(?:of\s+)?months)\b",
                re.IGNORECASE,
            ),
            "1-2 months",
        ),
        (
            re.compile(
                r"\b(3\s*-?\s*6\s+months?|few\s+months|this\s+(?:spring|summer|fall|winter|year)"
                r"|next\s+few\s+months)\b",
                re.IGNORECASE,
            ),
            "3-6 months",
        ),
        (
            re.compile(
                r"\b(6\s*-?\s*12\s+months?|within\s+(?:a\s+)?year|next\s+year|this\s+year)\b",
                re.IGNORECASE,
            ),
            "6-12 months",
        ),
        (
            re.compile(
                r"\b(1-?2\s+years?|couple\s+(?:of\s+)?years|in\s+a\s+year\s+or\s+two)\b",
                re.IGNORECASE,
            ),
            "1-2 years",
        ),
        (
            re.compile(
                r"\b(no\s+rush|just\s+(?:looking|browsing|exploring)|eventually"
                r"|down\s+the\s+(?:road|line)|someday|not\s+in\s+a\s+hurry)\b",
                re.IGNORECASE,
            ),
            "No rush / exploring",
        ),
        (re.compile(r"\b(soon)\b", re.IGNORECASE), "Soon"),
    ]

    # Case-sensitive: place names are capitalized
    AREA_PATTERNS: List[Pattern[str]] = [
        re.compile(r"\b(?:in|near|around|close\s+to)\s+([A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+){0,2})\b"),
        re.compile(
            r"\b([A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+){0,2})\s+"
            r"(?:area|neighbourhood|neighborhood|district|community)\b"
        ),
    ]

    # Capitalized words that the area patterns pick up but are not places
    AREA_STOPLIST = frozenset({
        "I", "The", "This", "That", "My", "Your", "It", "We", "They",
        "What", "Where", "When", "How", "Why", "Who", "Which",
        "Yes", "No", "Not", "Just", "Also", "But", "And", "Or",
        "Can", "Could", "Would", "Should", "Will", "May", "Might",
        "Some", "Any", "All", "Many", "Much", "More", "Most",
        "Very", "Really", "About", "Around", "Here", "There",
        "Google", "Maps", "Thanks", "Thank", "Hi", "Hello", "Hey",
    })

    FIRST_TIME_PATTERNS: List[Pattern[str]] = [
        re.compile(r"\b(first[\s-]?time\s+(?:home\s*)?buyer)", re.IGNORECASE),
        re.compile(
            r"\b(first\s+home|first\s+house|first\s+property|first\s+condo"
            r"|never\s+(?:bought|owned|purchased))",
            re.IGNORECASE,
        ),
        re.compile(r"\b(first[\s-]?time\s+buying)", re.IGNORECASE),
    ]

    EMAIL_PATTERN = re.compile(r"(?<![a-zA-Z0-9._%+-])[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
    # North-American numbers: 604-555-1234, (604) 555 1234, +1 604.555.1234
    PHONE_PATTERN = re.compile(r"(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
    # The lead-in is case-insensitive, the name itself must be capitalized
    NAME_PATTERNS: List[Pattern[str]] = [
        re.compile(
            r"\b(?i:my\s+name\s+is|i'?m|i\s+am|this\s+is|call\s+me)\s+"
            r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)\b"
        ),
    ]

    def extract(self, text: str) -> ExtractedEntities:
        """
        Extract all entities from the user text.

        Args:
            text: All user message bodies joined together

        Returns:
            ExtractedEntities with whatever signals were found
        """
        return ExtractedEntities(
            budget_text=self._extract_budget(text),
            property_type=self._first_label(self.PROPERTY_TYPES, text),
            timeline=self._first_label(self.TIMELINES, text),
            areas=self._extract_areas(text),
            is_first_time_buyer=self._is_first_time_buyer(text),
            has_contact_info=self._has_contact_info(text),
        )

    def _extract_budget(self, text: str) -> Optional[str]:
        """Return the verbatim budget phrase from the first matching pattern."""
        for pattern in self.BUDGET_PATTERNS:
            match = pattern.search(text)
            if match:
                return match.group(0).strip()
        return None

    @staticmethod
    def _first_label(table: List[Tuple[Pattern[str], str]], text: str) -> Optional[str]:
        for pattern, label in table:
            if pattern.search(text):
                return label
        return None

    def _extract_areas(self, text: str) -> Tuple[str, ...]:
        """Extract candidate place names, deduplicated in discovery order."""
        found: Dict[str, None] = {}
        for pattern in self.AREA_PATTERNS:
            for match in pattern.finditer(text):
                area = match.group(1).strip()
                if area in self.AREA_STOPLIST or len(area) <= 2:
                    continue
                found.setdefault(area, None)
        return tuple(found)

    def _is_first_time_buyer(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.FIRST_TIME_PATTERNS)

    def _has_contact_info(self, text: str) -> bool:
        """Check for an email, a phone number or a name introduction."""
        if self.EMAIL_PATTERN.search(text):
            return True
        if self.PHONE_PATTERN.search(text):
            return True
        return any(pattern.search(text) for pattern in self.NAME_PATTERNS)
