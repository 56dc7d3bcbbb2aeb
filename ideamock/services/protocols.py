"""Service protocols shared by the real services and their mock façades.

The service factory returns objects satisfying these protocols, so callers never
know whether they hold a mock or a production implementation.
"""

from typing import Protocol, runtime_checkable

from ideamock.schemas.analysis import (
    CategoryRecommendation,
    HackathonAnalysis,
    IdeaAnalysis,
    IdeaComparison,
)
from ideamock.schemas.frankenstein import FrankensteinElement, FrankensteinIdeaResult
from ideamock.schemas.mock import HealthStatus, ServiceResult


@runtime_checkable
class AIAnalysisService(Protocol):
    """Idea and hackathon analysis operations.

    Every method returns a ServiceResult; failures are reported through
    ``success=False`` and ``error`` rather than raised.
    """

    async def analyze_idea(self, idea: str, locale: str = "en") -> ServiceResult[IdeaAnalysis]:
        """Score and critique a startup idea."""
        ...

    async def analyze_hackathon_project(
        self, project_name: str, description: str, locale: str = "en"
    ) -> ServiceResult[HackathonAnalysis]:
        """Score a hackathon project against categories and judging criteria."""
        ...

    async def get_improvement_suggestions(
        self, idea: str, current_score: int, locale: str = "en"
    ) -> ServiceResult[list[str]]:
        """Suggest improvements for an already-scored idea."""
        ...

    async def compare_ideas(self, idea1: str, idea2: str, locale: str = "en") -> ServiceResult[IdeaComparison]:
        """Compare two ideas factor by factor."""
        ...

    async def recommend_hackathon_category(
        self, project_name: str, description: str
    ) -> ServiceResult[CategoryRecommendation]:
        """Recommend a hackathon category with alternatives."""
        ...

    async def health_check(self) -> ServiceResult[HealthStatus]:
        """Report service health and latency."""
        ...


@runtime_checkable
class FrankensteinService(Protocol):
    """Doctor Frankenstein mashup generation."""

    async def generate_frankenstein_idea(
        self, elements: list[FrankensteinElement], mode: str = "companies", language: str = "en"
    ) -> ServiceResult[FrankensteinIdeaResult]:
        """Combine two or more elements into a new product idea."""
        ...

    async def health_check(self) -> ServiceResult[HealthStatus]:
        """Report service health and latency."""
        ...
