"""Tests for structlog configuration and request logging events."""

import logging
import random

import pytest
import structlog
from structlog.testing import capture_logs

from ideamock.core.config import get_settings
from ideamock.core.logging import configure_from_settings, configure_structlog
from ideamock.schemas.mock import TestScenario
from ideamock.services.analysis_service import MockAIAnalysisService

pytestmark = pytest.mark.unit


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_configure_structlog_installs_stdlib_bridge(reset_structlog):
    configure_structlog(log_level="DEBUG", json_logs=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h.formatter, structlog.stdlib.ProcessorFormatter) for h in root.handlers)


@pytest.mark.asyncio
async def test_request_event_emitted_per_call(data_manager, make_config):
    service = MockAIAnalysisService(
        data_manager, make_config(default_scenario=TestScenario.RATE_LIMIT), rng=random.Random(1)
    )

    with capture_logs() as logs:
        await service.analyze_idea("Logged idea")

    events = [entry for entry in logs if entry["event"] == "mock_request"]
    assert len(events) == 1
    assert events[0]["operation"] == "analyze_idea"
    assert events[0]["scenario"] == "rate_limit"
    assert events[0]["success"] is False


@pytest.mark.asyncio
async def test_no_request_event_when_logging_disabled(data_manager, make_config):
    service = MockAIAnalysisService(data_manager, make_config(log_requests=False))

    with capture_logs() as logs:
        await service.analyze_idea("Quiet idea")

    assert not [entry for entry in logs if entry["event"] == "mock_request"]


def test_configure_from_settings_uses_log_level(monkeypatch, reset_structlog):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()

    try:
        configure_from_settings()
    finally:
        get_settings.cache_clear()

    assert logging.getLogger().level == logging.WARNING
