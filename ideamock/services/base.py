"""Shared call pipeline for the mock service façades.

Every public operation runs: resolve scenario -> simulate latency -> produce
customized payload or structured error -> log request -> update metrics.
"""

import random
import time
from datetime import datetime, timezone
from typing import Any, Callable

import structlog

from ideamock.fixtures.data_manager import TestDataManager
from ideamock.metrics.performance import PerformanceAggregator
from ideamock.metrics.request_log import RequestLogger
from ideamock.schemas.mock import (
    HealthStatus,
    MockServiceConfig,
    PerformanceMetrics,
    RequestLogEntry,
    ServiceResult,
    TestScenario,
)
from ideamock.services.latency import LatencySimulator
from ideamock.services.scenarios import (
    HEALTH_BY_SCENARIO,
    ScenarioAction,
    ScenarioResolution,
    build_scenario_error,
    resolve_scenario,
)

logger = structlog.get_logger(__name__)


class MockServiceBase:
    """Owns the scenario, latency, request log and metrics state of one façade."""

    SERVICE_NAME = "mock"

    def __init__(
        self,
        test_data_manager: TestDataManager,
        config: MockServiceConfig,
        *,
        rng: random.Random | None = None,
    ):
        self.test_data_manager = test_data_manager
        self.config = config
        self._latency = LatencySimulator(
            config.min_latency,
            config.max_latency,
            enabled=config.simulate_latency,
            rng=rng,
        )
        self._request_logger = RequestLogger(config.log_requests, service=self.SERVICE_NAME)
        self._performance = PerformanceAggregator()

        logger.debug(
            "mock_service_initialized",
            service=self.SERVICE_NAME,
            scenario=config.default_scenario.value,
            variability=config.enable_variability,
            simulate_latency=config.simulate_latency,
        )

    async def _execute(
        self,
        operation: str,
        scenario: TestScenario | str | None,
        produce: Callable[[ScenarioResolution], Any],
    ) -> ServiceResult:
        """Run one call through the pipeline and wrap the outcome.

        Scenario failures come back as ServiceResult.fail(). Exceptions raised by
        produce() are recorded as failed calls and then propagate.
        """
        start = time.perf_counter()
        resolution = resolve_scenario(self.config.default_scenario, scenario)

        simulated = 0
        if resolution.simulate_latency:
            simulated = await self._latency.simulate()
        else:
            self._latency.last_latency_ms = 0

        if resolution.action == ScenarioAction.FAIL:
            error = build_scenario_error(resolution.scenario, operation)
            self._record(operation, resolution.scenario, start, simulated, error=error.message)
            return ServiceResult.fail(error)

        try:
            with structlog.contextvars.bound_contextvars(
                service=self.SERVICE_NAME, operation=operation, scenario=resolution.scenario.value
            ):
                data = produce(resolution)
        except Exception as e:
            self._record(operation, resolution.scenario, start, simulated, error=f"{type(e).__name__}: {e}")
            raise

        self._record(operation, resolution.scenario, start, simulated)
        return ServiceResult.ok(data)

    def _record(
        self,
        operation: str,
        scenario: TestScenario,
        start: float,
        simulated_latency_ms: int,
        error: str | None = None,
    ) -> None:
        duration_ms = (time.perf_counter() - start) * 1000
        self._request_logger.log(
            RequestLogEntry(
                timestamp=datetime.now(timezone.utc),
                operation=operation,
                scenario=scenario,
                latency_ms=duration_ms,
                simulated_latency_ms=simulated_latency_ms,
                success=error is None,
                error=error,
            )
        )
        self._performance.record_duration(operation, duration_ms, success=error is None)

    async def health_check(self, *, scenario: TestScenario | str | None = None) -> ServiceResult:
        """Report service health for the active scenario.

        success -> healthy, timeout/rate_limit -> degraded, other faults -> unhealthy.
        Always a successful result; the simulated latency is reported alongside.
        """
        start = time.perf_counter()
        resolved = resolve_scenario(self.config.default_scenario, scenario).scenario
        simulated = await self._latency.simulate()

        self._record("health_check", resolved, start, simulated)
        return ServiceResult.ok(HealthStatus(status=HEALTH_BY_SCENARIO[resolved], latency=simulated))

    # =========================================================================
    # DIAGNOSTICS
    # =========================================================================

    def get_request_logs(self) -> list[RequestLogEntry]:
        return self._request_logger.get_logs()

    def clear_request_logs(self) -> None:
        self._request_logger.clear()

    def get_performance_metrics(
        self, operation: str | None = None
    ) -> PerformanceMetrics | dict[str, PerformanceMetrics]:
        return self._performance.get_metrics(operation)

    def clear_performance_metrics(self) -> None:
        self._performance.clear()

    def get_last_simulated_latency(self) -> int:
        return self._latency.last_latency_ms
