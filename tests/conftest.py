import pytest
from fastapi.testclient import TestClient

from shorts_forge.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def full_request():
    return {
        "topic": "How to automate a week of Shorts in 60 minutes",
        "niche": "Creator systems",
        "persona": "High-energy creative strategist",
        "vibe": "Punchy, kinetic, data-backed",
        "targetAudience": "Solo content creators hungry for growth",
        "callToAction": "Subscribe for daily AI workflows",
        "duration": 55,
    }
