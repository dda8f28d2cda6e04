"""
API Module for the lead qualification engine.

FastAPI application with routes for:
- Lead extraction and scoring
- Transfer tax calculation
- Lead webhooks
"""

from .main import create_app, app

__all__ = ["create_app", "app"]
