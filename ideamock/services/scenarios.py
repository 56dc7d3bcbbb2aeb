"""Scenario resolution and the structured failure for each fault scenario."""

from dataclasses import dataclass
from enum import StrEnum

from ideamock.core.exceptions import (
    ApiError,
    InvalidInputError,
    MockServiceError,
    RateLimitError,
    RequestTimeoutError,
)
from ideamock.schemas.mock import TestScenario


class ScenarioAction(StrEnum):
    CUSTOMIZE = "customize"
    CUSTOMIZE_PARTIAL = "customize_partial"
    FAIL = "fail"


@dataclass
class ScenarioResolution:
    """What a façade call must do for the active scenario."""

    scenario: TestScenario
    action: ScenarioAction
    simulate_latency: bool


# Scenario -> (error class, message template)
SCENARIO_ERRORS: dict[TestScenario, tuple[type[MockServiceError], str]] = {
    TestScenario.API_ERROR: (
        ApiError,
        "Mock API error in {operation}: Simulated server error for testing error handling",
    ),
    TestScenario.TIMEOUT: (
        RequestTimeoutError,
        "Mock timeout in {operation}: Simulated request timeout for testing timeout handling",
    ),
    TestScenario.RATE_LIMIT: (
        RateLimitError,
        "Mock rate limit in {operation}: Simulated rate limit exceeded for testing rate limiting",
    ),
    TestScenario.INVALID_INPUT: (
        InvalidInputError,
        "Mock invalid input in {operation}: Simulated invalid input for testing validation",
    ),
}

HEALTH_BY_SCENARIO: dict[TestScenario, str] = {
    TestScenario.SUCCESS: "healthy",
    TestScenario.TIMEOUT: "degraded",
    TestScenario.RATE_LIMIT: "degraded",
    TestScenario.API_ERROR: "unhealthy",
    TestScenario.INVALID_INPUT: "unhealthy",
    TestScenario.PARTIAL_RESPONSE: "unhealthy",
}


def resolve_scenario(default: TestScenario, override: TestScenario | str | None = None) -> ScenarioResolution:
    """Resolve the scenario for one call.

    The timeout scenario is a simulated failure that completes immediately, so it
    skips latency simulation.

    Raises:
        ValueError: If override is not a known scenario name
    """
    scenario = TestScenario(override) if override is not None else default

    if scenario == TestScenario.SUCCESS:
        action = ScenarioAction.CUSTOMIZE
    elif scenario == TestScenario.PARTIAL_RESPONSE:
        action = ScenarioAction.CUSTOMIZE_PARTIAL
    else:
        action = ScenarioAction.FAIL

    return ScenarioResolution(
        scenario=scenario,
        action=action,
        simulate_latency=scenario != TestScenario.TIMEOUT,
    )


def build_scenario_error(scenario: TestScenario, operation: str) -> MockServiceError:
    """Create a fresh structured error for a failing scenario."""
    if scenario not in SCENARIO_ERRORS:
        raise ValueError(f"Scenario {scenario} does not produce an error")

    error_cls, template = SCENARIO_ERRORS[scenario]
    return error_cls(template.format(operation=operation), scenario=scenario.value, operation=operation)
