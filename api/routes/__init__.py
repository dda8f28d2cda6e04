"""
API Routes for the lead qualification engine.
"""

from . import leads, tax, webhooks

__all__ = ["leads", "tax", "webhooks"]
