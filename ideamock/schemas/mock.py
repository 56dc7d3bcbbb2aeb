"""Pydantic schemas for mock service configuration, telemetry and results."""

from datetime import datetime
from enum import StrEnum
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ideamock.core.exceptions import MockConfigurationError, MockServiceError

T = TypeVar("T")


class TestScenario(StrEnum):
    """Closed set of behaviours a mock façade call can produce."""

    __test__ = False  # not a pytest test class

    SUCCESS = "success"
    API_ERROR = "api_error"
    TIMEOUT = "timeout"
    RATE_LIMIT = "rate_limit"
    INVALID_INPUT = "invalid_input"
    PARTIAL_RESPONSE = "partial_response"


class OperationName(StrEnum):
    """Fixture tables, one per logical operation family."""

    ANALYZER = "analyzer"
    HACKATHON = "hackathon"
    FRANKENSTEIN = "frankenstein"


class MockServiceConfig(BaseModel):
    """Immutable per-façade configuration.

    Built at the boundary from environment/feature-flag values; the façades
    never read ambient state themselves.
    """

    model_config = ConfigDict(frozen=True)

    default_scenario: TestScenario = TestScenario.SUCCESS
    enable_variability: bool = False
    simulate_latency: bool = False
    min_latency: int = Field(50, ge=0)
    max_latency: int = Field(150, ge=0)
    log_requests: bool = False

    @model_validator(mode="after")
    def _check_latency_range(self) -> "MockServiceConfig":
        if self.min_latency > self.max_latency:
            raise MockConfigurationError(
                f"min_latency ({self.min_latency}) must not exceed max_latency ({self.max_latency})",
                MockConfigurationError.INVALID_LATENCY_RANGE,
                {"min_latency": self.min_latency, "max_latency": self.max_latency},
            )
        return self


class RequestLogEntry(BaseModel):
    """One recorded façade call."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    operation: str
    scenario: TestScenario
    latency_ms: float  # wall-clock duration of the call
    simulated_latency_ms: int = 0
    success: bool
    error: str | None = None


class PerformanceMetrics(BaseModel):
    """Running statistics for one operation."""

    total_requests: int = 0
    failed_requests: int = 0
    average_duration_ms: float = 0.0
    min_duration_ms: float = 0.0
    max_duration_ms: float = 0.0


class HealthStatus(BaseModel):
    status: Literal["healthy", "degraded", "unhealthy"]
    latency: int  # simulated latency in milliseconds


class ServiceResult(BaseModel, Generic[T]):
    """Result wrapper returned by every façade operation.

    Callers branch on ``success`` instead of catching exceptions.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    success: bool
    data: T | None = None
    error: MockServiceError | None = None

    @classmethod
    def ok(cls, data: Any) -> "ServiceResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: MockServiceError) -> "ServiceResult":
        return cls(success=False, error=error)
