"""Mock-mode feature flag resolution.

Resolution logic:
1. Read FF_* values from Settings (environment / .env)
2. Refuse mock mode in production unless ALLOW_TEST_MODE_IN_PRODUCTION is set
3. Normalise the scenario name (unknown -> "success" with a warning)
4. Build the typed MockServiceConfig handed to the façades
"""

from dataclasses import dataclass, field

import structlog

from ideamock.core.config import Settings, get_settings
from ideamock.schemas.mock import MockServiceConfig, TestScenario

logger = structlog.get_logger(__name__)


@dataclass
class EnvironmentValidation:
    """Outcome of validating the mock-mode environment."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def normalize_scenario(raw: str | None) -> TestScenario:
    if raw:
        try:
            return TestScenario(raw.strip().lower())
        except ValueError:
            logger.warning(
                "mock_scenario_invalid",
                scenario=raw,
                valid_scenarios=[s.value for s in TestScenario],
                fallback=TestScenario.SUCCESS.value,
            )
    return TestScenario.SUCCESS


class MockModeFlags:
    """Reads mock-mode flags from Settings."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def is_mock_mode_enabled(self) -> bool:
        if not self.settings.ff_use_mock_api:
            return False
        if self.settings.is_production and not self.settings.allow_test_mode_in_production:
            return False
        return True

    def get_mock_service_config(self) -> MockServiceConfig:
        """Build the typed façade configuration from the raw flag values.

        Raises:
            MockConfigurationError: If FF_MIN_LATENCY exceeds FF_MAX_LATENCY
        """
        s = self.settings
        return MockServiceConfig(
            default_scenario=normalize_scenario(s.ff_mock_scenario),
            enable_variability=s.ff_mock_variability,
            simulate_latency=s.ff_simulate_latency,
            min_latency=s.ff_min_latency,
            max_latency=s.ff_max_latency,
            log_requests=s.ff_log_mock_requests,
        )

    def get_all_flags(self) -> dict[str, object]:
        s = self.settings
        return {
            "FF_USE_MOCK_API": s.ff_use_mock_api,
            "FF_MOCK_SCENARIO": s.ff_mock_scenario,
            "FF_MOCK_VARIABILITY": s.ff_mock_variability,
            "FF_SIMULATE_LATENCY": s.ff_simulate_latency,
            "FF_MIN_LATENCY": s.ff_min_latency,
            "FF_MAX_LATENCY": s.ff_max_latency,
            "FF_LOG_MOCK_REQUESTS": s.ff_log_mock_requests,
        }

    def validate_environment(self) -> EnvironmentValidation:
        """Check the flag combination without raising."""
        s = self.settings
        result = EnvironmentValidation()

        if s.is_production and s.ff_use_mock_api and not s.allow_test_mode_in_production:
            result.errors.append("Mock mode cannot be enabled in production")

        if s.ff_min_latency < 0 or s.ff_min_latency > s.ff_max_latency:
            result.errors.append(
                f"Invalid latency range: FF_MIN_LATENCY={s.ff_min_latency}, FF_MAX_LATENCY={s.ff_max_latency}"
            )

        if self.is_mock_mode_enabled() and s.ff_mock_scenario:
            if s.ff_mock_scenario.strip().lower() not in {t.value for t in TestScenario}:
                result.warnings.append(
                    f'Invalid mock scenario "{s.ff_mock_scenario}". '
                    f"Valid scenarios: {', '.join(t.value for t in TestScenario)}"
                )

        return result
