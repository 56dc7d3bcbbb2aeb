"""MockFrankensteinService: fixture-backed Doctor Frankenstein idea generation.

Supports 'companies' and 'aws' modes in English and Spanish.
"""

import structlog
from pydantic import ValidationError

from ideamock.core.exceptions import InputValidationError
from ideamock.fixtures.data_manager import validate_frankenstein_input
from ideamock.schemas.frankenstein import (
    FrankensteinElement,
    FrankensteinIdeaResult,
    FrankensteinLanguage,
    FrankensteinMode,
)
from ideamock.schemas.mock import OperationName, ServiceResult, TestScenario
from ideamock.services.base import MockServiceBase
from ideamock.services.scenarios import ScenarioAction, ScenarioResolution

logger = structlog.get_logger(__name__)


def _coerce_elements(elements: list[FrankensteinElement | dict] | None) -> list[FrankensteinElement]:
    try:
        return [FrankensteinElement.model_validate(e) for e in elements or []]
    except ValidationError as e:
        raise InputValidationError(f"Invalid Frankenstein element: {e.errors()[0]['msg']}") from e


class MockFrankensteinService(MockServiceBase):
    """Scenario-driven mock of the Frankenstein mashup generator."""

    SERVICE_NAME = "frankenstein"

    async def generate_frankenstein_idea(
        self,
        elements: list[FrankensteinElement | dict],
        mode: FrankensteinMode = "companies",
        language: FrankensteinLanguage = "en",
        *,
        scenario: TestScenario | str | None = None,
    ) -> ServiceResult[FrankensteinIdeaResult]:
        """Generate a mashup idea from two or more elements.

        Args:
            elements: Companies or AWS services to combine (models or plain dicts)
            mode: "companies" or "aws"
            language: "en" or "es"
            scenario: Per-call override of the configured scenario

        Returns:
            ServiceResult wrapping a FrankensteinIdeaResult, or the scenario's MockServiceError

        Raises:
            InputValidationError: Fewer than two elements or unknown mode/language.
                Raised before any latency is simulated and is not logged as a call.
        """
        parsed = _coerce_elements(elements)
        validate_frankenstein_input(parsed, mode, language)

        logger.debug(
            "frankenstein_generation_requested",
            mode=mode,
            language=language,
            element_count=len(parsed),
            elements=", ".join(e.name for e in parsed),
        )

        def produce(resolution: ScenarioResolution) -> FrankensteinIdeaResult:
            manager = self.test_data_manager
            fixture = manager.customize_frankenstein_response(
                manager.get_fixture(OperationName.FRANKENSTEIN, language),
                parsed,
                mode,
                language=language,
                enable_variability=self.config.enable_variability,
            )
            if resolution.action == ScenarioAction.CUSTOMIZE_PARTIAL:
                fixture = manager.strip_enrichments(fixture)
            return FrankensteinIdeaResult.model_validate(fixture.to_dict())

        return await self._execute("generate_frankenstein_idea", scenario, produce)
