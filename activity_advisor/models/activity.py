"""
Activity catalog entry models.

``ActivityCandidate`` is an immutable catalog row.  The catalog itself
(``catalog.activities.ACTIVITY_CATALOG``) is a module-level tuple of these
and is safe to read from concurrent requests.

Costs are stored in USD per month (the base currency); local display
conversion happens only in the VenueEnricher.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from activity_advisor.taxonomy.activity_taxonomy import (
    ActivityCategory,
    ActivityType,
    ClimateZone,
    PriorityTier,
)
from activity_advisor.taxonomy.learner_profile import canonical_attribute

ALL_CLIMATE_ZONES: tuple[ClimateZone, ...] = tuple(ClimateZone)


class CostRange(BaseModel):
    """Monthly cost range in USD."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    min_usd: float
    max_usd: float

    @model_validator(mode="after")
    def validate_range(self) -> "CostRange":
        if self.min_usd < 0:
            raise ValueError(f"min_usd must be non-negative, got {self.min_usd}.")
        if self.min_usd > self.max_usd:
            raise ValueError(
                f"min_usd ({self.min_usd}) must be <= max_usd ({self.max_usd})."
            )
        return self

    @property
    def average(self) -> float:
        return (self.min_usd + self.max_usd) / 2.0

    def label(self) -> str:
        """Base-currency display string, e.g. ``"$100-150 per month"``."""
        if self.max_usd == 0:
            return "Free"
        return f"${self.min_usd:.0f}-{self.max_usd:.0f} per month"


class AgeRange(BaseModel):
    """Inclusive age bounds in years."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    min_age: int
    max_age: int

    @model_validator(mode="after")
    def validate_bounds(self) -> "AgeRange":
        if self.min_age > self.max_age:
            raise ValueError(
                f"min_age ({self.min_age}) must be <= max_age ({self.max_age})."
            )
        return self

    def contains(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age


class RegionalSuitability(BaseModel):
    """Climate preferences and the coastal requirement of an activity."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    climate_preferences: tuple[ClimateZone, ...] = ALL_CLIMATE_ZONES
    requires_coastal: bool = False


class ActivityCandidate(BaseModel):
    """Immutable catalog entry.

    Attributes:
        id: Stable slug, unique within the catalog.
        name: Display name.
        category: ``ActivityCategory`` label.
        target_attributes: Canonical learner attributes the activity develops
            (de-duplicated, catalog order preserved for deterministic output).
        priority: Catalog priority tier.
        activity_type: indoor / outdoor / both.
        cost: Monthly USD cost range.
        age_range: Ages for which the activity is appropriate.
        regional: Climate preferences and coastal requirement.
        home_based: True for activities done at home (no venue lookup).
        description: One-paragraph description.
        benefits: Short benefit bullet points.
        frequency: Suggested commitment.
        why_recommended: Explanation shown next to the recommendation.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    category: ActivityCategory
    target_attributes: tuple[str, ...]
    priority: PriorityTier
    activity_type: ActivityType
    cost: CostRange
    age_range: AgeRange
    regional: RegionalSuitability = RegionalSuitability()
    home_based: bool = False
    description: str = ""
    benefits: tuple[str, ...] = ()
    frequency: str = ""
    why_recommended: str = ""

    @field_validator("target_attributes", mode="after")
    @classmethod
    def canonicalise_targets(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        seen: list[str] = []
        for name in v:
            canonical = canonical_attribute(name)
            if canonical and canonical not in seen:
                seen.append(canonical)
        return tuple(seen)

    def is_age_appropriate(self, age: int) -> bool:
        return self.age_range.contains(age)
