"""Fixture store: versioned example payloads per operation and locale.

Fixture tables ship as JSON package data (``data/<operation>.json``) with the
shape ``{"version": int, "locales": {"<locale>": [variant, ...]}}``. Each table
is validated once on load and frozen; callers only ever receive read-only
``Fixture`` objects and derive mutable copies via ``Fixture.to_dict()``.
"""

import json
from dataclasses import dataclass, field, replace
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import structlog
from pydantic import BaseModel, ValidationError

from ideamock.core.exceptions import FixtureNotFoundError, MalformedFixtureError
from ideamock.schemas.analysis import (
    HACKATHON_ENRICHMENTS,
    IDEA_ENRICHMENTS,
    HackathonAnalysis,
    IdeaAnalysis,
)
from ideamock.schemas.frankenstein import FRANKENSTEIN_ENRICHMENTS, FrankensteinIdeaResult
from ideamock.schemas.mock import OperationName

logger = structlog.get_logger(__name__)

# Payload model and optional enrichment sections per operation
PAYLOAD_MODELS: dict[OperationName, type[BaseModel]] = {
    OperationName.ANALYZER: IdeaAnalysis,
    OperationName.HACKATHON: HackathonAnalysis,
    OperationName.FRANKENSTEIN: FrankensteinIdeaResult,
}
ENRICHMENTS: dict[OperationName, tuple[str, ...]] = {
    OperationName.ANALYZER: IDEA_ENRICHMENTS,
    OperationName.HACKATHON: HACKATHON_ENRICHMENTS,
    OperationName.FRANKENSTEIN: FRANKENSTEIN_ENRICHMENTS,
}


def freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of freeze(): build fresh mutable dicts and lists."""
    if isinstance(value, Mapping):
        return {k: thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    return value


@dataclass(frozen=True)
class Fixture:
    """Immutable example of a successful operation result."""

    operation: OperationName
    locale: str
    version: int
    variant: int
    payload: Mapping[str, Any] = field(repr=False)

    def to_dict(self) -> dict[str, Any]:
        return thaw(self.payload)

    def derive(self, payload: dict[str, Any]) -> "Fixture":
        """Return a copy of this fixture carrying a new payload."""
        return replace(self, payload=freeze(payload))


def validate_table(operation: OperationName, table: dict) -> list[str]:
    """Validate a raw fixture table and return human-readable issues."""
    issues: list[str] = []

    if not isinstance(table.get("version"), int):
        issues.append("version: missing or not an integer")
    locales = table.get("locales")
    if not isinstance(locales, dict) or not locales:
        issues.append("locales: missing or empty")
        return issues

    model = PAYLOAD_MODELS[operation]
    for locale, variants in locales.items():
        if not isinstance(variants, list) or not variants:
            issues.append(f"[{locale}] no variants")
            continue
        for index, variant in enumerate(variants, start=1):
            prefix = f"[{locale}/variant-{index}]"
            try:
                model.model_validate(variant)
            except ValidationError as e:
                for err in e.errors():
                    path = ".".join(str(p) for p in err["loc"])
                    issues.append(f"{prefix} {path}: {err['msg']}")
                continue
            for key in ENRICHMENTS[operation]:
                if variant.get(key) is None:
                    issues.append(f"{prefix} {key}: base fixtures must include enrichment sections")

    return issues


class FixtureStore:
    """Loads fixture tables once and serves frozen fixtures."""

    def __init__(self, data_dir: Path | None = None):
        self.data_dir = data_dir
        self._tables: dict[OperationName, dict[str, tuple[Fixture, ...]]] = {}

    def read_table(self, operation: OperationName) -> dict:
        file_name = f"{operation.value}.json"
        if self.data_dir is not None:
            path = self.data_dir / file_name
            if not path.exists():
                raise FixtureNotFoundError(operation.value, "*")
            return json.loads(path.read_text(encoding="utf-8"))

        source = resources.files("ideamock.fixtures").joinpath("data", file_name)
        return json.loads(source.read_text(encoding="utf-8"))

    def install(self, operation: OperationName, table: dict) -> None:
        """Validate and freeze a raw table, replacing any loaded one."""
        issues = validate_table(operation, table)
        if issues:
            logger.error("mock_fixtures_invalid", operation=operation.value, issue_count=len(issues))
            raise MalformedFixtureError(operation.value, issues)

        self._tables[operation] = {
            locale: tuple(
                Fixture(
                    operation=operation,
                    locale=locale,
                    version=table["version"],
                    variant=index,
                    payload=freeze(variant),
                )
                for index, variant in enumerate(variants)
            )
            for locale, variants in table["locales"].items()
        }
        logger.debug(
            "mock_fixtures_loaded",
            operation=operation.value,
            version=table["version"],
            locales=sorted(table["locales"]),
        )

    def variants(self, operation: OperationName | str, locale: str) -> tuple[Fixture, ...]:
        try:
            operation = OperationName(operation)
        except ValueError:
            raise FixtureNotFoundError(str(operation), locale) from None
        if operation not in self._tables:
            self.install(operation, self.read_table(operation))

        table = self._tables[operation]
        if locale not in table:
            raise FixtureNotFoundError(operation.value, locale, sorted(table))
        return table[locale]

    def is_loaded(self, operation: OperationName) -> bool:
        return operation in self._tables

    def raw_tables(self) -> dict[OperationName, dict]:
        """Read every table from disk without installing it."""
        return {op: self.read_table(op) for op in OperationName}

    def installed_table(self, operation: OperationName) -> dict:
        """Rebuild the raw table shape from the installed, frozen fixtures."""
        locales = self._tables[operation]
        version = next(iter(locales.values()))[0].version
        return {
            "version": version,
            "locales": {locale: [f.to_dict() for f in fixtures] for locale, fixtures in locales.items()},
        }

    def unload(self, operation: OperationName | None = None) -> None:
        if operation is None:
            self._tables.clear()
        else:
            self._tables.pop(operation, None)
