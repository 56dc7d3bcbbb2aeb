"""Service factory: hands out mock or production services based on feature flags.

Only the mock façades ship with this package; asking for a service while mock
mode is off raises MockConfigurationError.
"""

from datetime import datetime, timezone

import structlog

from ideamock.core.exceptions import MockConfigurationError
from ideamock.core.feature_flags import MockModeFlags
from ideamock.fixtures.data_manager import TestDataManager, get_test_data_manager
from ideamock.services.analysis_service import MockAIAnalysisService
from ideamock.services.frankenstein_service import MockFrankensteinService
from ideamock.services.protocols import AIAnalysisService, FrankensteinService

logger = structlog.get_logger(__name__)


class ServiceFactory:
    """Creates and caches service instances for one request scope."""

    def __init__(
        self,
        flags: MockModeFlags | None = None,
        test_data_manager: TestDataManager | None = None,
    ):
        self.flags = flags or MockModeFlags()
        self._test_data_manager = test_data_manager
        self._services: dict[str, object] = {}

    def is_mock_mode_enabled(self) -> bool:
        return self.flags.is_mock_mode_enabled()

    def create_ai_analysis_service(self) -> AIAnalysisService:
        """Return the analysis service (mock façade when mock mode is enabled)."""
        if "ai_analysis" not in self._services:
            self._services["ai_analysis"] = self._create_mock(
                MockAIAnalysisService,
                "Production AI analysis service is not bundled. "
                "Enable mock mode with FF_USE_MOCK_API=true.",
            )
        return self._services["ai_analysis"]

    def create_frankenstein_service(self) -> FrankensteinService:
        """Return the Frankenstein service (mock-only)."""
        if "frankenstein" not in self._services:
            self._services["frankenstein"] = self._create_mock(
                MockFrankensteinService,
                "Frankenstein service is only available in mock mode. "
                "Enable FF_USE_MOCK_API before calling this method.",
            )
        return self._services["frankenstein"]

    def get_mock_mode_status(self) -> dict:
        """Mock mode status payload for diagnostics endpoints."""
        return {
            "mock_mode": self.is_mock_mode_enabled(),
            "scenario": self.flags.get_mock_service_config().default_scenario.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def _create_mock(self, service_cls: type, disabled_message: str):
        validation = self.flags.validate_environment()
        if not validation.is_valid:
            raise MockConfigurationError(
                f"Test environment validation failed: {', '.join(validation.errors)}",
                MockConfigurationError.INVALID_TEST_ENV,
                {"errors": validation.errors, "warnings": validation.warnings},
            )
        for warning in validation.warnings:
            logger.warning("mock_environment_warning", warning=warning)

        if not self.is_mock_mode_enabled():
            raise MockConfigurationError(
                disabled_message,
                MockConfigurationError.MOCK_SERVICE_CREATION_FAILED,
            )

        config = self.flags.get_mock_service_config()
        manager = self._test_data_manager or get_test_data_manager()
        service = service_cls(manager, config)

        logger.info(
            "mock_service_created",
            service=service_cls.SERVICE_NAME,
            scenario=config.default_scenario.value,
            simulate_latency=config.simulate_latency,
        )
        return service
