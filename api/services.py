"""
Service initialization and dependency injection for the lead qualification API.

Creates and manages the engine instances used by the routes.
"""

import logging
from typing import Optional

from config.settings import get_settings, Settings
from lead_scoring.intent_classifier import IntentClassifier
from lead_scoring.entity_extractor import EntityExtractor
from lead_scoring.scoring_model import LeadScorer
from lead_scoring.lead_extractor import LeadSignalExtractor

logger = logging.getLogger(__name__)


class Services:
    """Container for all application services."""

    def __init__(self):
        self.settings: Optional[Settings] = None
        self.lead_scorer: Optional[LeadScorer] = None
        self.lead_extractor: Optional[LeadSignalExtractor] = None
        self._initialized = False

    def initialize(self):
        """Initialize all services."""
        if self._initialized:
            return

        self.settings = get_settings()
        self._init_lead_scoring()
        self._initialized = True
        logger.info(
            f"Services initialized (default tax calculator: {self.settings.default_tax_calculator})"
        )

    def _init_lead_scoring(self):
        """Initialize lead scoring components."""
        self.lead_scorer = LeadScorer()
        self.lead_scorer.adjust_thresholds(
            hot=self.settings.lead_score_threshold_hot,
            warm=self.settings.lead_score_threshold_warm,
        )
        self.lead_extractor = LeadSignalExtractor(
            classifier=IntentClassifier(),
            extractor=EntityExtractor(),
            scorer=self.lead_scorer,
        )
        logger.info("Lead scoring services ready")

    @property
    def is_ready(self) -> bool:
        return self._initialized and self.lead_extractor is not None

    def health(self) -> dict:
        """Return health status of all services."""
        return {
            "initialized": self._initialized,
            "lead_scoring": self.lead_extractor is not None,
            "tax_calculators": True,
        }


# Singleton
_services = Services()


def get_services() -> Services:
    """Get the global services instance, initializing it on first use."""
    _services.initialize()
    return _services


def initialize_services():
    """Initialize all services (called at startup)."""
    _services.initialize()
