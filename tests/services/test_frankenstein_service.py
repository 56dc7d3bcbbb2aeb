"""Tests for MockFrankensteinService generation, validation and scenarios."""

import time

import pytest

from ideamock.core.exceptions import ApiError, InputValidationError
from ideamock.schemas.frankenstein import FrankensteinIdeaResult
from ideamock.schemas.mock import TestScenario
from ideamock.services.frankenstein_service import MockFrankensteinService
from ideamock.services.protocols import FrankensteinService

pytestmark = pytest.mark.unit

GENERIC_STACK_TOKENS = ("React", "Node.js", "PostgreSQL", "Redis", "Docker")


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_companies_mode_includes_both_names(frankenstein_service, two_companies):
    result = await frankenstein_service.generate_frankenstein_idea(two_companies, "companies", "en")

    idea = result.data
    assert result.success is True
    assert isinstance(idea, FrankensteinIdeaResult)
    assert idea.idea_title == "Slack + Notion Fusion Platform"
    assert "Slack" in idea.unique_value_proposition
    assert "Notion" in idea.unique_value_proposition
    assert "Slack" in idea.idea_description
    assert idea.language == "en"


@pytest.mark.asyncio
async def test_aws_mode_removes_generic_stack_tokens(frankenstein_service):
    result = await frankenstein_service.generate_frankenstein_idea(
        [{"name": "Lambda"}, {"name": "S3"}, {"name": "DynamoDB"}], "aws", "en"
    )

    idea = result.data
    assert idea.idea_title == "Lambda + S3 + DynamoDB Integration Hub"
    for token in GENERIC_STACK_TOKENS:
        assert token.lower() not in idea.tech_stack_suggestion.lower()


@pytest.mark.asyncio
async def test_spanish_generation(frankenstein_service, two_companies):
    result = await frankenstein_service.generate_frankenstein_idea(two_companies, "companies", "es")

    assert result.data.language == "es"
    assert result.data.idea_title == "Slack + Notion Fusión"


@pytest.mark.asyncio
async def test_metrics_stay_in_range_with_variability(data_manager, make_config):
    service = MockFrankensteinService(data_manager, make_config(enable_variability=True))

    result = await service.generate_frankenstein_idea(
        [{"name": n} for n in ("A", "B", "C", "D", "E")], "aws", "en"
    )

    for value in result.data.metrics.model_dump().values():
        assert 0 <= value <= 100


@pytest.mark.asyncio
async def test_generation_is_idempotent(frankenstein_service, two_companies):
    first = await frankenstein_service.generate_frankenstein_idea(two_companies, "companies", "en")
    second = await frankenstein_service.generate_frankenstein_idea(two_companies, "companies", "en")

    assert first.data.model_dump() == second.data.model_dump()


@pytest.mark.asyncio
async def test_implements_protocol(frankenstein_service):
    assert isinstance(frankenstein_service, FrankensteinService)


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "elements,mode,language",
    [
        ([{"name": "Solo"}], "companies", "en"),
        ([], "companies", "en"),
        ([{"name": "A"}, {"name": "B"}], "gcp", "en"),
        ([{"name": "A"}, {"name": "B"}], "companies", "fr"),
        ([{"name": ""}, {"name": "B"}], "companies", "en"),
    ],
)
async def test_invalid_input_raises_before_latency(data_manager, make_config, elements, mode, language):
    service = MockFrankensteinService(
        data_manager, make_config(simulate_latency=True, min_latency=200, max_latency=300)
    )

    start = time.perf_counter()
    with pytest.raises(InputValidationError):
        await service.generate_frankenstein_idea(elements, mode, language)
    elapsed_ms = (time.perf_counter() - start) * 1000

    assert elapsed_ms < 200
    assert service.get_last_simulated_latency() == 0
    assert service.get_request_logs() == []
    assert service.get_performance_metrics() == {}


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_api_error_scenario(data_manager, make_config, two_companies):
    service = MockFrankensteinService(data_manager, make_config(default_scenario=TestScenario.API_ERROR))

    result = await service.generate_frankenstein_idea(two_companies)

    assert result.success is False
    assert isinstance(result.error, ApiError)
    assert result.error.operation == "generate_frankenstein_idea"
    assert service.get_request_logs()[0].error == result.error.message


@pytest.mark.asyncio
async def test_partial_response_keeps_core_fields(data_manager, make_config, two_companies):
    service = MockFrankensteinService(
        data_manager, make_config(default_scenario=TestScenario.PARTIAL_RESPONSE)
    )

    result = await service.generate_frankenstein_idea(two_companies)

    idea = result.data
    assert result.success is True
    assert idea.idea_title == "Slack + Notion Fusion Platform"
    assert idea.business_model is None
    assert idea.growth_strategy is None
    assert idea.risks_and_challenges is None


@pytest.mark.asyncio
async def test_invalid_scenario_override_raises(frankenstein_service, two_companies):
    with pytest.raises(ValueError):
        await frankenstein_service.generate_frankenstein_idea(two_companies, scenario="explode")


@pytest.mark.asyncio
async def test_health_check_records_call(frankenstein_service):
    result = await frankenstein_service.health_check()

    assert result.data.status == "healthy"
    assert frankenstein_service.get_performance_metrics("health_check").total_requests == 1
