"""
Pytest fixtures for LifeLine+ Health Assistant tests.
"""

import pytest
from fastapi.testclient import TestClient

# Set environment variables before imports
import os
os.environ["ASSISTANT_API_KEY"] = "test-api-key-12345"
os.environ["DEBUG"] = "true"
os.environ["RATE_LIMIT_REQUESTS"] = "1000"

from lifeline.main import app
from lifeline.services.health_scorer import HealthScorer
from lifeline.services.symptom_analyzer import SymptomAnalyzer


@pytest.fixture
def test_client():
    """Create synchronous test client."""
    return TestClient(app)


@pytest.fixture
def api_key_headers():
    """Headers with valid API key."""
    return {"X-API-Key": "test-api-key-12345"}


@pytest.fixture
def analyzer() -> SymptomAnalyzer:
    """Create symptom analyzer instance."""
    return SymptomAnalyzer()


@pytest.fixture
def scorer() -> HealthScorer:
    """Create health scorer instance."""
    return HealthScorer()
