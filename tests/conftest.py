"""
Shared pytest fixtures for the activity advisor test suite.

Provides:
  - Sample report / profile / context objects used across modules.
  - ``make_candidate``: factory for ad-hoc catalog entries.
  - ``make_recommendation`` / ``make_venue``: output-model factories.
  - ``test_config_path``: a TOML config in a temp dir with quiet logging,
    for CLI and config-loader tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest

from activity_advisor.models.activity import (
    ActivityCandidate,
    AgeRange,
    CostRange,
    RegionalSuitability,
)
from activity_advisor.models.recommendation import (
    FeasibilityScore,
    Recommendation,
    RecommendationContext,
    RecommendationType,
    Venue,
)
from activity_advisor.models.report import LearnerAttributeProfile, ReportSource
from activity_advisor.taxonomy.activity_taxonomy import (
    ActivityCategory,
    ActivityType,
    ClimateZone,
    PriorityTier,
)


# ── Reports and profiles ──────────────────────────────────────────────────────

SAMPLE_REPORT_JSON: dict = {
    "grade": "EYP 3",
    "learnerProfileAttributes": [
        {"attribute": "Communicator", "evidence": "Consistently shares ideas with confidence"},
        {"attribute": "Risk-taker", "evidence": "Sometimes hesitant to try new activities"},
        {"attribute": "Inquirer", "evidence": "Developing curiosity; asks questions with support"},
        {"attribute": "Caring", "evidence": "Shows excellent empathy towards peers"},
    ],
    "summary": {
        "areasNeedingAttention": ["Needs to become more Open-minded about new foods"],
        "keyStrengths": ["A caring and Reflective learner"],
    },
}


@pytest.fixture
def sample_report() -> ReportSource:
    """A realistic camelCase report as produced by the report parser."""
    return ReportSource.model_validate(SAMPLE_REPORT_JSON)


@pytest.fixture
def scenario_a_profile() -> LearnerAttributeProfile:
    return LearnerAttributeProfile(
        weak_attributes=("risk-taker",),
        strong_attributes=("communicator",),
    )


@pytest.fixture
def empty_profile() -> LearnerAttributeProfile:
    return LearnerAttributeProfile()


@pytest.fixture
def tropical_strict_context() -> RecommendationContext:
    return RecommendationContext(
        budget=100.0,
        budget_flexibility="strict",
        climate_zone=ClimateZone.TROPICAL,
        is_coastal=False,
    )


# ── Candidate factory ─────────────────────────────────────────────────────────

@pytest.fixture
def make_candidate() -> Callable[..., ActivityCandidate]:
    """Return a factory building ``ActivityCandidate`` objects with defaults."""

    def _make(
        id: str = "test-activity",
        name: str = "Test Activity",
        category: ActivityCategory = ActivityCategory.STEM,
        targets: tuple[str, ...] = ("inquirer",),
        priority: PriorityTier = PriorityTier.MEDIUM,
        activity_type: ActivityType = ActivityType.INDOOR,
        cost: tuple[float, float] = (50.0, 100.0),
        ages: tuple[int, int] = (3, 12),
        climates: tuple[ClimateZone, ...] = tuple(ClimateZone),
        requires_coastal: bool = False,
        home_based: bool = False,
    ) -> ActivityCandidate:
        return ActivityCandidate(
            id=id,
            name=name,
            category=category,
            target_attributes=targets,
            priority=priority,
            activity_type=activity_type,
            cost=CostRange(min_usd=cost[0], max_usd=cost[1]),
            age_range=AgeRange(min_age=ages[0], max_age=ages[1]),
            regional=RegionalSuitability(
                climate_preferences=climates, requires_coastal=requires_coastal,
            ),
            home_based=home_based,
        )

    return _make


# ── Config ────────────────────────────────────────────────────────────────────

TEST_CONFIG_TOML = """
[selection]
min_feasibility = 30.0

[venues]
radius_meters = 3000
query_timeout_seconds = 2.0

[logging]
level = "WARNING"
"""


@pytest.fixture
def test_config_path(tmp_path: Path) -> Path:
    """A standalone TOML config with quiet logging."""
    path = tmp_path / "config" / "test.toml"
    path.parent.mkdir(parents=True)
    path.write_text(TEST_CONFIG_TOML, encoding="utf-8")
    return path


# ── Recommendation factory ────────────────────────────────────────────────────

@pytest.fixture
def make_recommendation() -> Callable[..., Recommendation]:
    """Return a factory building ``Recommendation`` objects with defaults."""

    def _make(
        id: str = "test-activity",
        name: str = "Test Activity",
        category: str = ActivityCategory.STEM.value,
        recommendation_type: RecommendationType = RecommendationType.AGE_BASED,
        targeted: tuple[str, ...] = (),
        home_based: bool = False,
        venues: Optional[tuple[Venue, ...]] = None,
        estimated_cost: str = "$50-100 per month",
    ) -> Recommendation:
        return Recommendation(
            id=id,
            name=name,
            category=category,
            priority=PriorityTier.MEDIUM,
            target_attributes=("inquirer",),
            recommendation_type=recommendation_type,
            targeted_attributes=targeted,
            venues=venues,
            estimated_cost=estimated_cost,
            feasibility_score=FeasibilityScore(
                budget_match=100.0, climate_match=100.0, overall=100.0,
            ),
            relevance_score=20.0,
            activity_type=ActivityType.INDOOR,
            home_based=home_based,
        )

    return _make


@pytest.fixture
def make_venue() -> Callable[..., Venue]:
    def _make(name: str = "Venue", place_id: str = "p1") -> Venue:
        return Venue(
            name=name, address="1 Main St", place_id=place_id, latitude=0.0, longitude=0.0,
        )

    return _make
