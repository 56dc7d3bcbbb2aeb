"""Shared test fixtures for all test groups."""

import random

import pytest

from ideamock.fixtures.data_manager import TestDataManager
from ideamock.schemas.frankenstein import FrankensteinElement
from ideamock.schemas.mock import MockServiceConfig, TestScenario
from ideamock.services.analysis_service import MockAIAnalysisService
from ideamock.services.frankenstein_service import MockFrankensteinService


@pytest.fixture
def data_manager():
    """Fresh TestDataManager over the bundled fixtures."""
    return TestDataManager()


@pytest.fixture
def make_config():
    """Factory for MockServiceConfig with fast, quiet defaults."""

    def _make(**overrides) -> MockServiceConfig:
        values = {
            "default_scenario": TestScenario.SUCCESS,
            "enable_variability": False,
            "simulate_latency": False,
            "min_latency": 0,
            "max_latency": 0,
            "log_requests": True,
        }
        values.update(overrides)
        return MockServiceConfig(**values)

    return _make


@pytest.fixture
def analysis_service(data_manager, make_config):
    """MockAIAnalysisService with success scenario and no latency."""
    return MockAIAnalysisService(data_manager, make_config(), rng=random.Random(7))


@pytest.fixture
def frankenstein_service(data_manager, make_config):
    """MockFrankensteinService with success scenario and no latency."""
    return MockFrankensteinService(data_manager, make_config(), rng=random.Random(7))


@pytest.fixture
def two_companies():
    return [
        FrankensteinElement(name="Slack", description="Team messaging"),
        FrankensteinElement(name="Notion", description="Docs and wikis"),
    ]
