"""Pydantic schemas for Doctor Frankenstein idea generation."""

from typing import Literal

from pydantic import BaseModel, Field

FrankensteinMode = Literal["companies", "aws"]
FrankensteinLanguage = Literal["en", "es"]

# Sections a partial response may omit
FRANKENSTEIN_ENRICHMENTS = (
    "business_model",
    "growth_strategy",
    "risks_and_challenges",
)


class FrankensteinElement(BaseModel):
    """A company or AWS service fed into the mashup generator."""

    name: str = Field(..., min_length=1)
    description: str | None = None


class FrankensteinMetrics(BaseModel):
    originality_score: int = Field(..., ge=0, le=100)
    feasibility_score: int = Field(..., ge=0, le=100)
    impact_score: int = Field(..., ge=0, le=100)
    scalability_score: int = Field(..., ge=0, le=100)
    wow_factor: int = Field(..., ge=0, le=100)


class FrankensteinIdeaResult(BaseModel):
    idea_title: str = Field(..., min_length=1)
    idea_description: str = Field(..., min_length=1)
    core_concept: str = Field(..., min_length=1)
    problem_statement: str = Field(..., min_length=1)
    proposed_solution: str = Field(..., min_length=1)
    unique_value_proposition: str = Field(..., min_length=1)
    target_audience: str = Field(..., min_length=1)
    tech_stack_suggestion: str = Field(..., min_length=1)
    metrics: FrankensteinMetrics
    summary: str = Field(..., min_length=1)
    language: FrankensteinLanguage

    business_model: str | None = None
    growth_strategy: str | None = None
    risks_and_challenges: str | None = None
