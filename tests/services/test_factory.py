"""Tests for ServiceFactory mock/real selection."""

import pytest

from ideamock.core.config import Settings
from ideamock.core.exceptions import MockConfigurationError
from ideamock.core.feature_flags import MockModeFlags
from ideamock.schemas.mock import TestScenario
from ideamock.services.analysis_service import MockAIAnalysisService
from ideamock.services.factory import ServiceFactory
from ideamock.services.frankenstein_service import MockFrankensteinService

pytestmark = pytest.mark.unit


def _factory(data_manager, **settings) -> ServiceFactory:
    values = {"environment": "test", "ff_use_mock_api": True}
    values.update(settings)
    flags = MockModeFlags(Settings(_env_file=None, **values))
    return ServiceFactory(flags, data_manager)


def test_creates_mock_services_in_mock_mode(data_manager):
    factory = _factory(data_manager, ff_mock_scenario="rate_limit")

    analysis = factory.create_ai_analysis_service()
    frankenstein = factory.create_frankenstein_service()

    assert isinstance(analysis, MockAIAnalysisService)
    assert isinstance(frankenstein, MockFrankensteinService)
    assert analysis.config.default_scenario == TestScenario.RATE_LIMIT
    assert analysis.test_data_manager is data_manager


def test_services_are_cached_per_factory(data_manager):
    factory = _factory(data_manager)

    assert factory.create_ai_analysis_service() is factory.create_ai_analysis_service()


def test_mock_mode_off_raises(data_manager):
    factory = _factory(data_manager, ff_use_mock_api=False)

    with pytest.raises(MockConfigurationError) as exc_info:
        factory.create_ai_analysis_service()

    assert exc_info.value.code == MockConfigurationError.MOCK_SERVICE_CREATION_FAILED


def test_invalid_environment_raises(data_manager):
    factory = _factory(data_manager, ff_min_latency=3000, ff_max_latency=100)

    with pytest.raises(MockConfigurationError) as exc_info:
        factory.create_frankenstein_service()

    assert exc_info.value.code == MockConfigurationError.INVALID_TEST_ENV
    assert exc_info.value.details["errors"]


def test_production_without_override_is_refused(data_manager):
    factory = _factory(data_manager, environment="production")

    assert factory.is_mock_mode_enabled() is False
    with pytest.raises(MockConfigurationError) as exc_info:
        factory.create_ai_analysis_service()

    assert exc_info.value.code == MockConfigurationError.INVALID_TEST_ENV


def test_mock_mode_status(data_manager):
    status = _factory(data_manager, ff_mock_scenario="timeout").get_mock_mode_status()

    assert status["mock_mode"] is True
    assert status["scenario"] == "timeout"
    assert "timestamp" in status
