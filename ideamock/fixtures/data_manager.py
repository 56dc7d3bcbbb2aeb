"""TestDataManager: fixture access and input-driven customization.

Provides:
- get_fixture(): base fixture for an (operation, locale) pair
- get_variant(): deterministic pick among a locale's variants
- customize_analysis_response() / customize_frankenstein_response()
- strip_enrichments(): the partial_response shape of a fixture
- validate_all(), load_custom_fixtures(), cache statistics

Fixtures are never mutated; every customization returns a derived Fixture.
"""

import hashlib
import json
from pathlib import Path
from typing import get_args

import structlog

from ideamock.core.config import get_settings
from ideamock.core.exceptions import InputValidationError, MockConfigurationError
from ideamock.fixtures.customization import (
    apply_analysis_customization,
    apply_frankenstein_customization,
)
from ideamock.fixtures.store import ENRICHMENTS, Fixture, FixtureStore, validate_table
from ideamock.schemas.frankenstein import FrankensteinElement, FrankensteinLanguage, FrankensteinMode
from ideamock.schemas.mock import OperationName

logger = structlog.get_logger(__name__)

VALID_MODES = set(get_args(FrankensteinMode))
VALID_LANGUAGES = set(get_args(FrankensteinLanguage))


class TestDataManager:
    """Loads fixtures and derives customized copies from caller input."""

    __test__ = False  # not a pytest test class

    def __init__(self, data_dir: Path | None = None):
        self._store = FixtureStore(data_dir)
        self._cache_hits = 0
        self._cache_misses = 0

    # =========================================================================
    # FIXTURE ACCESS
    # =========================================================================

    def get_fixture(self, operation: OperationName | str, locale: str) -> Fixture:
        """Return the base fixture for an operation and locale.

        Raises:
            FixtureNotFoundError: If no table or locale exists for the pair
            MalformedFixtureError: If the table fails validation on first load
        """
        return self._variants(operation, locale)[0]

    def get_variant(self, operation: OperationName | str, locale: str, seed: str) -> Fixture:
        """Pick one of a locale's variants, stable for a given seed."""
        variants = self._variants(operation, locale)
        digest = hashlib.sha256(seed.encode("utf-8")).digest()
        return variants[int.from_bytes(digest[:4], "big") % len(variants)]

    def _variants(self, operation: OperationName | str, locale: str) -> tuple[Fixture, ...]:
        if self._store.is_loaded(operation):
            self._cache_hits += 1
        else:
            self._cache_misses += 1
        return self._store.variants(operation, locale)

    # =========================================================================
    # CUSTOMIZATION
    # =========================================================================

    def customize_analysis_response(
        self,
        fixture: Fixture,
        input_text: str,
        *,
        enable_variability: bool = True,
    ) -> Fixture:
        """Derive an analysis fixture that reflects the caller's idea or project text.

        The summary lead quotes the first line of the input. With variability
        enabled the final score and rubric scores also shift by a small offset
        derived from the input and the payload carries an input_fingerprint;
        otherwise the summary is the only change.
        """
        if fixture.operation not in (OperationName.ANALYZER, OperationName.HACKATHON):
            raise ValueError(f"Not an analysis fixture: {fixture.operation}")

        payload = apply_analysis_customization(
            fixture.to_dict(),
            fixture.operation,
            fixture.locale,
            input_text,
            enable_variability,
        )
        return fixture.derive(payload)

    def customize_frankenstein_response(
        self,
        fixture: Fixture,
        elements: list[FrankensteinElement],
        mode: str,
        *,
        language: str | None = None,
        enable_variability: bool = False,
    ) -> Fixture:
        """Derive a Frankenstein fixture from the supplied elements and mode.

        Args:
            fixture: Base frankenstein fixture
            elements: At least two elements to combine
            mode: "companies" or "aws"
            language: Response language, must match the fixture locale (defaults to it)
            enable_variability: Add a small element-derived jitter to metrics

        Raises:
            InputValidationError: Fewer than two elements, unknown mode/language,
                or a language that differs from the fixture locale
        """
        if fixture.operation != OperationName.FRANKENSTEIN:
            raise ValueError(f"Not a frankenstein fixture: {fixture.operation}")

        language = language or fixture.locale
        validate_frankenstein_input(elements, mode, language)
        if language != fixture.locale:
            raise InputValidationError(
                f"Language {language} does not match fixture locale {fixture.locale}; "
                f"fetch the {language} fixture first"
            )

        payload = apply_frankenstein_customization(
            fixture.to_dict(),
            [element.name for element in elements],
            mode,
            language,
            enable_variability,
        )
        return fixture.derive(payload)

    def strip_enrichments(self, fixture: Fixture) -> Fixture:
        """Drop optional enrichment sections, keeping every required field."""
        payload = fixture.to_dict()
        for key in ENRICHMENTS[fixture.operation]:
            payload.pop(key, None)
        return fixture.derive(payload)

    # =========================================================================
    # VALIDATION AND CUSTOM DATA
    # =========================================================================

    def validate_all(self) -> dict[str, list[str]]:
        """Validate the fixture table in effect for every operation.

        Installed tables, including ones loaded with load_custom_fixtures(), are
        checked as installed; the rest are read from disk without installing them.

        Returns:
            Mapping of operation name to its list of issues (empty when valid)
        """
        report = {}
        for operation in OperationName:
            if self._store.is_loaded(operation):
                table = self._store.installed_table(operation)
            else:
                table = self._store.read_table(operation)
            report[operation.value] = validate_table(operation, table)
        return report

    def load_custom_fixtures(self, file_path: Path | str) -> OperationName:
        """Replace one operation's fixture table with a JSON file.

        The operation is inferred from the file name, which must contain
        "analyzer", "hackathon" or "frankenstein".

        Raises:
            ValueError: If the operation cannot be inferred from the file name
            MalformedFixtureError: If the file content fails validation
        """
        path = Path(file_path)
        operation = _operation_from_file_name(path.name)
        table = json.loads(path.read_text(encoding="utf-8"))

        self._store.install(operation, table)
        logger.info("mock_custom_fixtures_loaded", operation=operation.value, path=str(path))
        return operation

    # =========================================================================
    # CACHE STATISTICS
    # =========================================================================

    def get_cache_stats(self) -> dict:
        total = self._cache_hits + self._cache_misses
        hit_rate = (self._cache_hits / total) * 100 if total else 0.0
        return {
            "hits": self._cache_hits,
            "misses": self._cache_misses,
            "hit_rate": round(hit_rate, 2),
            "tables_loaded": sum(1 for op in OperationName if self._store.is_loaded(op)),
        }

    def reset_cache_stats(self) -> None:
        self._cache_hits = 0
        self._cache_misses = 0

    def clear_cache(self) -> None:
        """Drop loaded tables (forcing a reload) and reset statistics."""
        self._store.unload()
        self.reset_cache_stats()


def validate_frankenstein_input(elements: list[FrankensteinElement], mode: str, language: str) -> None:
    if not elements or len(elements) < 2:
        raise InputValidationError(
            "At least two elements are required to generate a Frankenstein idea"
        )
    if mode not in VALID_MODES:
        raise InputValidationError(f"Unknown mode: {mode}. Valid modes: {sorted(VALID_MODES)}")
    if language not in VALID_LANGUAGES:
        raise InputValidationError(
            f"Unknown language: {language}. Valid languages: {sorted(VALID_LANGUAGES)}"
        )


def _operation_from_file_name(file_name: str) -> OperationName:
    name = file_name.lower()
    if "hackathon" in name:
        return OperationName.HACKATHON
    if "analyzer" in name:
        return OperationName.ANALYZER
    if "frankenstein" in name:
        return OperationName.FRANKENSTEIN
    raise ValueError(
        f'Cannot determine fixture operation from file name "{file_name}". '
        'File name must include "analyzer", "hackathon", or "frankenstein".'
    )


_instance: TestDataManager | None = None


def get_test_data_manager() -> TestDataManager:
    """Shared TestDataManager used by the service factory."""
    global _instance
    if _instance is None:
        _instance = TestDataManager()
    return _instance


def reset_test_data_manager() -> None:
    """Drop the shared instance. Refused in production."""
    global _instance
    if get_settings().is_production:
        raise MockConfigurationError(
            "Cannot reset test data manager in production mode",
            MockConfigurationError.MOCK_MODE_IN_PRODUCTION,
        )
    _instance = None
