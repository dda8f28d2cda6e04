"""Shared fixtures for lead qualification engine tests."""

import os
import pytest
from fastapi.testclient import TestClient

# Ensure we use test settings
os.environ.setdefault("DEFAULT_TAX_CALCULATOR", "bc_ptt")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def client():
    """Create a FastAPI test client."""
    from api.main import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def buyer_transcript():
    """A short buyer conversation."""
    return [
        {"role": "assistant", "content": "Hi! How can I help with your home search?"},
        {
            "role": "user",
            "content": "I'm looking to buy a condo in Oakridge, budget around $900k, my name is Jane, asap",
        },
    ]


@pytest.fixture
def seller_transcript():
    """A short seller conversation."""
    return [
        {"role": "user", "content": "What is my home worth? Thinking of putting it on the market."},
        {"role": "assistant", "content": "Happy to help with a valuation."},
        {"role": "user", "content": "It's a townhouse near Kitsilano, no rush."},
    ]
