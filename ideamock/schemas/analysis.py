"""Pydantic schemas for idea and hackathon analysis payloads.

The same models validate fixture data on load and type the results returned by
the analysis façade. Enrichment sections are optional: a partial response omits
them while every required field stays present.
"""

from typing import Literal

from pydantic import BaseModel, Field

# Sections a partial response may omit, per operation
IDEA_ENRICHMENTS = (
    "founder_questions",
    "current_market_trends",
    "competitors",
    "monetization_strategies",
    "next_steps",
)
HACKATHON_ENRICHMENTS = (
    "hackathon_specific_advice",
    "competitors",
    "next_steps",
)


class FounderQuestion(BaseModel):
    question: str = Field(..., min_length=1)
    ask: str = Field(..., min_length=1)
    why: str = Field(..., min_length=1)
    source: str = Field(..., min_length=1)
    analysis: str = Field(..., min_length=1)


class SwotAnalysis(BaseModel):
    strengths: list[str]
    weaknesses: list[str]
    opportunities: list[str]
    threats: list[str]


class MarketTrend(BaseModel):
    trend: str = Field(..., min_length=1)
    impact: str = Field(..., min_length=1)


class ScoringRubricItem(BaseModel):
    name: str = Field(..., min_length=1)
    score: int = Field(..., ge=0, le=100)
    justification: str = Field(..., min_length=1)


class Competitor(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    strengths: list[str]
    weaknesses: list[str]


class TitledItem(BaseModel):
    """Improvement suggestion, monetization strategy or next step."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class IdeaAnalysis(BaseModel):
    """Startup idea analysis as produced by the analysis service."""

    detailed_summary: str = Field(..., min_length=1)
    swot_analysis: SwotAnalysis
    scoring_rubric: list[ScoringRubricItem] = Field(..., min_length=1)
    improvement_suggestions: list[TitledItem]
    final_score: int = Field(..., ge=0, le=100)
    final_score_explanation: str = Field(..., min_length=1)
    viability_summary: str = Field(..., min_length=1)
    input_fingerprint: str | None = None  # set when variability is enabled

    founder_questions: list[FounderQuestion] | None = None
    current_market_trends: list[MarketTrend] | None = None
    competitors: list[Competitor] | None = None
    monetization_strategies: list[TitledItem] | None = None
    next_steps: list[TitledItem] | None = None


class SubScore(BaseModel):
    score: float = Field(..., ge=0, le=5)
    explanation: str = Field(..., min_length=1)


class CriteriaScore(BaseModel):
    name: str = Field(..., min_length=1)
    score: float = Field(..., ge=0, le=5)
    justification: str = Field(..., min_length=1)
    sub_scores: dict[str, SubScore] = Field(default_factory=dict)


class CriteriaAnalysis(BaseModel):
    scores: list[CriteriaScore]
    final_score: float = Field(..., ge=0, le=5)
    final_score_explanation: str = Field(..., min_length=1)


class CategoryEvaluation(BaseModel):
    category: str = Field(..., min_length=1)
    fit_score: float = Field(..., ge=0, le=10)
    explanation: str = Field(..., min_length=1)
    improvement_suggestions: list[str] = Field(default_factory=list)


class CategoryAnalysis(BaseModel):
    evaluations: list[CategoryEvaluation] = Field(..., min_length=1)
    best_match: str = Field(..., min_length=1)
    best_match_reason: str = Field(..., min_length=1)


class HackathonAdvice(BaseModel):
    category_optimization: list[str]
    kiro_integration_tips: list[str]
    competition_strategy: list[str]


class HackathonAnalysis(BaseModel):
    """Hackathon project analysis as produced by the analysis service."""

    detailed_summary: str = Field(..., min_length=1)
    category_analysis: CategoryAnalysis
    criteria_analysis: CriteriaAnalysis
    scoring_rubric: list[ScoringRubricItem] = Field(..., min_length=1)
    improvement_suggestions: list[TitledItem]
    final_score: int = Field(..., ge=0, le=100)
    final_score_explanation: str = Field(..., min_length=1)
    viability_summary: str = Field(..., min_length=1)
    input_fingerprint: str | None = None  # set when variability is enabled

    hackathon_specific_advice: HackathonAdvice | None = None
    competitors: list[Competitor] | None = None
    next_steps: list[TitledItem] | None = None


class ComparisonFactor(BaseModel):
    factor: str
    idea1_score: int
    idea2_score: int
    winner: Literal["idea1", "idea2", "tie"]


class IdeaComparison(BaseModel):
    winner: Literal["idea1", "idea2", "tie"]
    score_difference: int
    comparison_factors: list[ComparisonFactor]
    recommendation: str


class AlternativeCategory(BaseModel):
    category: str
    confidence: int = Field(..., ge=0, le=100)
    reason: str


class CategoryRecommendation(BaseModel):
    recommended_category: str
    confidence: int = Field(..., ge=0, le=100)
    alternative_categories: list[AlternativeCategory]
