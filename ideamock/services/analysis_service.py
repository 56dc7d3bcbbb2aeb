"""MockAIAnalysisService: fixture-backed stand-in for the AI analysis service.

Implements the AIAnalysisService protocol with the same signatures and result
wrapper as the real service, so the factory can swap one for the other.
"""

from ideamock.fixtures.store import Fixture
from ideamock.schemas.analysis import (
    AlternativeCategory,
    CategoryRecommendation,
    ComparisonFactor,
    HackathonAnalysis,
    IdeaAnalysis,
    IdeaComparison,
)
from ideamock.schemas.mock import OperationName, ServiceResult, TestScenario
from ideamock.services.base import MockServiceBase
from ideamock.services.scenarios import ScenarioAction, ScenarioResolution

COMPARISON_RECOMMENDATIONS = {
    "en": {
        "idea1": "Idea 1 shows stronger overall potential with better market positioning.",
        "idea2": "Idea 2 shows stronger overall potential with better market positioning.",
        "tie": "Both ideas show comparable potential; validate each with real users before choosing.",
    },
    "es": {
        "idea1": "La idea 1 muestra mayor potencial general y mejor posicionamiento.",
        "idea2": "La idea 2 muestra mayor potencial general y mejor posicionamiento.",
        "tie": "Ambas ideas muestran un potencial similar; valídalas con usuarios reales antes de elegir.",
    },
}


def _winner(score1: int, score2: int) -> str:
    if score1 > score2:
        return "idea1"
    if score2 > score1:
        return "idea2"
    return "tie"


class MockAIAnalysisService(MockServiceBase):
    """Scenario-driven mock of the idea / hackathon analysis service."""

    SERVICE_NAME = "ai_analysis"

    async def analyze_idea(
        self,
        idea: str,
        locale: str = "en",
        *,
        scenario: TestScenario | str | None = None,
    ) -> ServiceResult[IdeaAnalysis]:
        """Analyze a startup idea.

        Args:
            idea: Idea text; its first line is quoted in the summary
            locale: Response locale ("en" or "es")
            scenario: Per-call override of the configured scenario

        Returns:
            ServiceResult wrapping an IdeaAnalysis, or the scenario's MockServiceError
        """

        def produce(resolution: ScenarioResolution) -> IdeaAnalysis:
            fixture = self._analysis_fixture(OperationName.ANALYZER, locale, idea, resolution)
            return IdeaAnalysis.model_validate(fixture.to_dict())

        return await self._execute("analyze_idea", scenario, produce)

    async def analyze_hackathon_project(
        self,
        project_name: str,
        description: str,
        locale: str = "en",
        *,
        scenario: TestScenario | str | None = None,
    ) -> ServiceResult[HackathonAnalysis]:
        """Analyze a hackathon project.

        The description drives customization; the project name is used when the
        description is blank.
        """

        def produce(resolution: ScenarioResolution) -> HackathonAnalysis:
            text = description if description.strip() else project_name
            fixture = self._analysis_fixture(OperationName.HACKATHON, locale, text, resolution)
            return HackathonAnalysis.model_validate(fixture.to_dict())

        return await self._execute("analyze_hackathon_project", scenario, produce)

    async def get_improvement_suggestions(
        self,
        idea: str,
        current_score: int,
        locale: str = "en",
        *,
        scenario: TestScenario | str | None = None,
    ) -> ServiceResult[list[str]]:
        """Improvement suggestions for an idea, strongest first."""

        def produce(resolution: ScenarioResolution) -> list[str]:
            fixture = self._analysis_fixture(OperationName.ANALYZER, locale, idea, resolution)
            suggestions = fixture.to_dict()["improvement_suggestions"]
            return [f"{item['title']}: {item['description']}" for item in suggestions]

        return await self._execute("get_improvement_suggestions", scenario, produce)

    async def compare_ideas(
        self,
        idea1: str,
        idea2: str,
        locale: str = "en",
        *,
        scenario: TestScenario | str | None = None,
    ) -> ServiceResult[IdeaComparison]:
        """Compare two ideas factor by factor.

        Each idea is scored through the same customization as analyze_idea, with
        input-derived score offsets always applied so distinct ideas can differ.
        """

        def produce(resolution: ScenarioResolution) -> IdeaComparison:
            first = self._scored_analysis(idea1, locale)
            second = self._scored_analysis(idea2, locale)

            factors = [
                ComparisonFactor(
                    factor=item1["name"],
                    idea1_score=item1["score"],
                    idea2_score=item2["score"],
                    winner=_winner(item1["score"], item2["score"]),
                )
                for item1, item2 in zip(first["scoring_rubric"], second["scoring_rubric"])
            ]
            overall = _winner(first["final_score"], second["final_score"])
            recommendations = COMPARISON_RECOMMENDATIONS.get(locale, COMPARISON_RECOMMENDATIONS["en"])

            return IdeaComparison(
                winner=overall,
                score_difference=abs(first["final_score"] - second["final_score"]),
                comparison_factors=factors,
                recommendation=recommendations[overall],
            )

        return await self._execute("compare_ideas", scenario, produce)

    async def recommend_hackathon_category(
        self,
        project_name: str,
        description: str,
        *,
        scenario: TestScenario | str | None = None,
    ) -> ServiceResult[CategoryRecommendation]:
        """Recommend the best-fitting hackathon category with ranked alternatives."""

        def produce(resolution: ScenarioResolution) -> CategoryRecommendation:
            text = description if description.strip() else project_name
            fixture = self._analysis_fixture(OperationName.HACKATHON, "en", text, resolution)
            analysis = fixture.to_dict()["category_analysis"]

            ranked = sorted(analysis["evaluations"], key=lambda e: e["fit_score"], reverse=True)
            best = next(
                (e for e in ranked if e["category"] == analysis["best_match"]),
                ranked[0],
            )
            return CategoryRecommendation(
                recommended_category=best["category"],
                confidence=round(best["fit_score"] * 10),
                alternative_categories=[
                    AlternativeCategory(
                        category=e["category"],
                        confidence=round(e["fit_score"] * 10),
                        reason=e["explanation"],
                    )
                    for e in ranked
                    if e is not best
                ],
            )

        return await self._execute("recommend_hackathon_category", scenario, produce)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _analysis_fixture(
        self,
        operation: OperationName,
        locale: str,
        text: str,
        resolution: ScenarioResolution,
    ) -> Fixture:
        manager = self.test_data_manager
        if self.config.enable_variability:
            base = manager.get_variant(operation, locale, seed=text)
        else:
            base = manager.get_fixture(operation, locale)

        fixture = manager.customize_analysis_response(
            base, text, enable_variability=self.config.enable_variability
        )
        if resolution.action == ScenarioAction.CUSTOMIZE_PARTIAL:
            fixture = manager.strip_enrichments(fixture)
        return fixture

    def _scored_analysis(self, idea: str, locale: str) -> dict:
        manager = self.test_data_manager
        base = manager.get_fixture(OperationName.ANALYZER, locale)
        return manager.customize_analysis_response(base, idea, enable_variability=True).to_dict()
