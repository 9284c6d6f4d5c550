# conftest.py
"""
Pytest configuration and shared fixtures.
"""

import random

import pytest
from fastapi.testclient import TestClient

from bag_of_holding.config import Settings
from bag_of_holding.web.app import create_app

TEST_SEED = 1234


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(TEST_SEED)


@pytest.fixture
def settings():
    """Settings for an in-process test server."""
    return Settings(seed=TEST_SEED)


@pytest.fixture
def client(settings):
    """HTTP client talking to a fresh app."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow"
    )
    config.addinivalue_line(
        "markers", "api: mark test as exercising the HTTP API"
    )
