"""
Report input model and the derived learner-attribute profile.

``ReportSource`` is the read-only slice of a parsed school report the engine
consumes.  It accepts the camelCase JSON produced by the report parser
(``learnerProfileAttributes``, ``areasNeedingAttention``, ``keyStrengths``)
as well as snake_case field names.

``LearnerAttributeProfile`` is computed fresh per request by
``analysis.attributes.analyze_attributes`` and never persisted.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ProfileAttributeEntry(BaseModel):
    """One learner-profile line from a report: attribute name + report evidence."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    attribute: str
    evidence: Optional[str] = None


class ReportSummary(BaseModel):
    """AI-generated summary fields used by the secondary attribute scan."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    areas_needing_attention: list[str] = Field(default_factory=list)
    key_strengths: list[str] = Field(default_factory=list)

    @field_validator("areas_needing_attention", "key_strengths", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class ReportSource(BaseModel):
    """The report fields the recommendation engine reads.

    Attributes:
        grade: Free-text grade label, e.g. ``"EYP 3"`` or ``"Grade 4"``.
        learner_profile_attributes: Attribute/evidence pairs from the report.
        summary: Optional AI summary with attention areas and strengths.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    grade: Optional[str] = None
    learner_profile_attributes: list[ProfileAttributeEntry] = Field(default_factory=list)
    summary: Optional[ReportSummary] = None

    @field_validator("grade", mode="before")
    @classmethod
    def coerce_grade(cls, v: Any) -> Any:
        if isinstance(v, (int, float)):
            return str(int(v))
        return v

    @field_validator("learner_profile_attributes", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class LearnerAttributeProfile(BaseModel):
    """Weak and strong learner attributes in canonical form.

    Both tuples are ordered (report order, then summary order) and
    de-duplicated case-insensitively.  An attribute never appears in both.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    weak_attributes: tuple[str, ...] = ()
    strong_attributes: tuple[str, ...] = ()

    def top_weak(self, n: int = 3) -> tuple[str, ...]:
        return self.weak_attributes[:n]

    def top_strong(self, n: int = 2) -> tuple[str, ...]:
        return self.strong_attributes[:n]

    @property
    def is_empty(self) -> bool:
        return not self.weak_attributes and not self.strong_attributes
