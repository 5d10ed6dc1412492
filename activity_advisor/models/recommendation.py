"""
Recommendation, evaluation and parent-action output models.

All models are frozen.  Field names serialise in camelCase
(``model_dump(by_alias=True)``) and those names are part of the output
contract consumed by the frontend:

    Recommendation            {id, name, category, priority, targetAttributes,
                               recommendationType, targetedAttributes, venues?,
                               estimatedCost, feasibilityScore{...}, ...}
    CurrentActivityEvaluation {activityName, inferredAttributes, alignment,
                               recommendation, reasoning, alternatives}
    ParentAction              {targetArea, priority, category, title,
                               description, activities[], expectedOutcome,
                               timeToSeeResults}

``recommendation_type`` and ``targeted_attributes`` are fixed by the
selection pass that chose an activity; enrichment only replaces ``venues``
and ``estimated_cost`` via ``model_copy``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from activity_advisor.models.report import LearnerAttributeProfile
from activity_advisor.taxonomy.activity_taxonomy import (
    ActivityType,
    ClimateZone,
    PriorityTier,
)

BudgetFlexibility = Literal["strict", "moderate", "flexible"]
VALID_FLEXIBILITIES: frozenset[str] = frozenset({"strict", "moderate", "flexible"})

_CAMEL = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class RecommendationType(StrEnum):
    """Provenance tag explaining why an activity was selected."""

    IMPROVEMENT = "improvement"
    STRENGTH = "strength"
    AGE_BASED = "age-based"


class Verdict(StrEnum):
    CONTINUE = "continue"
    RECONSIDER = "reconsider"
    STOP = "stop"


# ── Request context ───────────────────────────────────────────────────────────


class RecommendationContext(BaseModel):
    """Budget and regional context for feasibility scoring.

    Attributes:
        budget: Monthly budget in USD; ``None`` means unconstrained.
        budget_flexibility: How steeply over-budget activities are penalised.
        climate_zone: Climate zone of the family's location, if known.
        is_coastal: Whether the location is coastal; ``None`` = unknown
            (treated as not coastal for ``requires_coastal`` activities).
    """

    model_config = _CAMEL

    budget: Optional[float] = None
    budget_flexibility: BudgetFlexibility = "moderate"
    climate_zone: Optional[ClimateZone] = None
    is_coastal: Optional[bool] = None


# ── Scores ────────────────────────────────────────────────────────────────────


class FeasibilityScore(BaseModel):
    """Budget and climate suitability, each in [0, 100]."""

    model_config = _CAMEL

    budget_match: float
    climate_match: float
    overall: float

    @field_validator("budget_match", "climate_match", "overall")
    @classmethod
    def validate_range(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"feasibility components must be in [0, 100], got {v}.")
        return v


# ── Venues ────────────────────────────────────────────────────────────────────


class Venue(BaseModel):
    """A nearby place offering an activity, as returned by venue search."""

    model_config = _CAMEL

    name: str
    address: str
    distance: Optional[str] = None
    rating: Optional[float] = None
    total_ratings: Optional[int] = None
    place_id: str
    latitude: float
    longitude: float
    types: tuple[str, ...] = ()


# ── Recommendation ────────────────────────────────────────────────────────────


class Recommendation(BaseModel):
    """One item of a RecommendationSet."""

    model_config = _CAMEL

    id: str
    name: str
    category: str
    priority: PriorityTier
    target_attributes: tuple[str, ...]
    recommendation_type: RecommendationType
    targeted_attributes: tuple[str, ...] = ()
    venues: Optional[tuple[Venue, ...]] = None
    estimated_cost: str
    feasibility_score: FeasibilityScore
    relevance_score: float
    activity_type: ActivityType
    home_based: bool = False
    description: str = ""
    benefits: tuple[str, ...] = ()
    frequency: str = ""
    why_recommended: str = ""

    @property
    def venue_count(self) -> int:
        return len(self.venues) if self.venues else 0


# ── Current activity evaluation ──────────────────────────────────────────────


class CurrentActivityEvaluation(BaseModel):
    """Alignment of one existing activity with the learner profile."""

    model_config = _CAMEL

    activity_name: str
    inferred_attributes: tuple[str, ...]
    alignment: int
    recommendation: Verdict
    reasoning: str
    alternatives: tuple[str, ...] = ()

    @field_validator("alignment")
    @classmethod
    def validate_alignment(cls, v: int) -> int:
        if not 0 <= v <= 100:
            raise ValueError(f"alignment must be in [0, 100], got {v}.")
        return v

    @field_validator("alternatives")
    @classmethod
    def validate_alternatives(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) > 3:
            raise ValueError(f"at most 3 alternatives allowed, got {len(v)}.")
        return v


# ── Parent actions ────────────────────────────────────────────────────────────

ParentActionCategory = Literal["improvement", "strength-maintenance", "foundational"]


class HomeActivity(BaseModel):
    """A single at-home activity inside a parent action plan."""

    model_config = _CAMEL

    activity: str
    frequency: str
    duration: str
    tips: tuple[str, ...] = ()


class ParentAction(BaseModel):
    """A home-based action plan for parents."""

    model_config = _CAMEL

    target_area: str
    priority: PriorityTier
    category: ParentActionCategory
    title: str
    description: str
    activities: tuple[HomeActivity, ...]
    expected_outcome: str
    time_to_see_results: str


# ── Bundle ────────────────────────────────────────────────────────────────────

LocationStatus = Literal["not-provided", "resolved", "unavailable"]


class RecommendationBundle(BaseModel):
    """Everything returned for one recommendation request."""

    model_config = _CAMEL

    recommendations: tuple[Recommendation, ...] = ()
    current_activity_evaluations: tuple[CurrentActivityEvaluation, ...] = ()
    parent_actions: tuple[ParentAction, ...] = ()
    profile: LearnerAttributeProfile = Field(default_factory=LearnerAttributeProfile)
    age: int
    climate_zone: Optional[ClimateZone] = None
    is_coastal: Optional[bool] = None
    location_status: LocationStatus = "not-provided"
