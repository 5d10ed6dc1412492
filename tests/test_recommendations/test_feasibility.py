"""
Tests for activity_advisor/recommendations/feasibility.py.

What we test
------------
budget_match():
  - 100 with no budget, or when the average cost fits.
  - Strict decay: budget 50, avg 150 → overage 2.0 → 0.
  - Moderate and flexible floors (20 and 50).
  - Budget of 0 with non-zero cost lands on the floor.
  - Unknown flexibility scored as moderate.

climate_match():
  - 100 when no zone is known or the zone is listed.
  - 40 on climate mismatch.
  - 20 when a coast is required and the location is inland (overrides 40).

compute_feasibility():
  - overall = mean of the two components; every field in [0, 100].
"""

from __future__ import annotations

import pytest

from activity_advisor.models.recommendation import RecommendationContext
from activity_advisor.recommendations.feasibility import (
    budget_match,
    climate_match,
    compute_feasibility,
)
from activity_advisor.taxonomy.activity_taxonomy import ClimateZone


class TestBudgetMatch:
    def test_no_budget(self):
        assert budget_match(500.0, None, "strict") == 100.0

    def test_within_budget(self):
        assert budget_match(80.0, 100.0, "strict") == 100.0

    def test_exactly_on_budget(self):
        assert budget_match(100.0, 100.0, "strict") == 100.0

    def test_strict_overage_two(self):
        assert budget_match(150.0, 50.0, "strict") == 0.0

    def test_strict_small_overage(self):
        # overage 0.25 → 100 - 50
        assert budget_match(125.0, 100.0, "strict") == pytest.approx(50.0)

    def test_moderate_decay_and_floor(self):
        assert budget_match(125.0, 100.0, "moderate") == pytest.approx(75.0)
        assert budget_match(1000.0, 100.0, "moderate") == pytest.approx(20.0)

    def test_flexible_decay_and_floor(self):
        assert budget_match(150.0, 100.0, "flexible") == pytest.approx(75.0)
        assert budget_match(1000.0, 100.0, "flexible") == pytest.approx(50.0)

    @pytest.mark.parametrize(
        "flexibility, floor",
        [("strict", 0.0), ("moderate", 20.0), ("flexible", 50.0)],
    )
    def test_zero_budget_hits_floor(self, flexibility, floor):
        assert budget_match(100.0, 0.0, flexibility) == floor

    def test_zero_budget_free_activity(self):
        assert budget_match(0.0, 0.0, "strict") == 100.0

    def test_unknown_flexibility_is_moderate(self):
        assert budget_match(125.0, 100.0, "lenient") == budget_match(125.0, 100.0, "moderate")

    def test_stricter_never_scores_higher(self):
        for avg in (110.0, 150.0, 300.0):
            strict = budget_match(avg, 100.0, "strict")
            moderate = budget_match(avg, 100.0, "moderate")
            flexible = budget_match(avg, 100.0, "flexible")
            assert strict <= moderate <= flexible


class TestClimateMatch:
    def test_no_zone(self, make_candidate):
        assert climate_match(make_candidate(), None, None) == 100.0

    def test_listed_zone(self, make_candidate):
        c = make_candidate(climates=(ClimateZone.TROPICAL,))
        assert climate_match(c, ClimateZone.TROPICAL, False) == 100.0

    def test_zone_mismatch(self, make_candidate):
        c = make_candidate(climates=(ClimateZone.COLD,))
        assert climate_match(c, ClimateZone.TROPICAL, False) == 40.0

    def test_coastal_required_inland(self, make_candidate):
        c = make_candidate(climates=(ClimateZone.COLD,), requires_coastal=True)
        assert climate_match(c, ClimateZone.TROPICAL, False) == 20.0

    def test_coastal_unknown_treated_as_inland(self, make_candidate):
        c = make_candidate(requires_coastal=True)
        assert climate_match(c, None, None) == 20.0

    def test_coastal_required_on_coast(self, make_candidate):
        c = make_candidate(requires_coastal=True)
        assert climate_match(c, ClimateZone.TROPICAL, True) == 100.0


class TestComputeFeasibility:
    def test_overall_is_mean(self, make_candidate, tropical_strict_context):
        # avg 125 vs budget 100 strict → 50; climate mismatch → 40
        c = make_candidate(cost=(100.0, 150.0), climates=(ClimateZone.COLD,))
        score = compute_feasibility(c, tropical_strict_context)
        assert score.budget_match == pytest.approx(50.0)
        assert score.climate_match == pytest.approx(40.0)
        assert score.overall == pytest.approx(45.0)

    def test_unconstrained_context(self, make_candidate):
        score = compute_feasibility(make_candidate(cost=(500.0, 900.0)))
        assert score.overall == 100.0

    def test_components_bounded(self, make_candidate):
        ctx = RecommendationContext(
            budget=0.0, budget_flexibility="strict",
            climate_zone=ClimateZone.ARID, is_coastal=False,
        )
        c = make_candidate(
            cost=(1000.0, 5000.0), climates=(ClimateZone.COLD,), requires_coastal=True,
        )
        score = compute_feasibility(c, ctx)
        for value in (score.budget_match, score.climate_match, score.overall):
            assert 0.0 <= value <= 100.0
        assert score.overall == pytest.approx(10.0)
