"""
Tests for activity_advisor/recommendations/selector.py.

What we test
------------
build_recommendation_set() over the built-in catalog:
  - Weak risk-taker, strong communicator, age 5, strict $100 tropical inland:
    first pick is a physical improvement targeting risk-taker; ≥3 total.
  - Empty profile: exactly 3 picks, all age-based.
  - Output size within [3, 5] for realistic profiles.
  - Identical inputs → identical ordered output.
  - No age-appropriate entries → empty list.
  - Recommendation ids unique.

Individual passes on hand-built SelectionState objects:
  - physical_guarantee: tags improvement vs age-based; no-op without physical.
  - weakness_coverage: balance preference defers, deferred picks revisited.
  - strength_reinforcement: capped at max_strength_picks.
  - minimum_fill: prefers imbalance fix / new category, stops at minimum.

filter_eligible():
  - Age filter; fallback to top-by-feasibility when too few pass, returned
    in catalog order so relevance ties keep catalog order.
"""

from __future__ import annotations

from activity_advisor.config import SelectionConfig
from activity_advisor.models.recommendation import (
    RecommendationContext,
    RecommendationType,
)
from activity_advisor.models.report import LearnerAttributeProfile
from activity_advisor.recommendations.scorer import score_candidate, score_candidates
from activity_advisor.recommendations.selector import (
    SelectionState,
    build_recommendation_set,
    filter_eligible,
    minimum_fill,
    physical_guarantee,
    select_diverse,
    strength_reinforcement,
    weakness_coverage,
)
from activity_advisor.taxonomy.activity_taxonomy import (
    ActivityCategory,
    ActivityType,
    is_physical_category,
)


def _state(candidates, profile, config=None) -> SelectionState:
    pool = [score_candidate(c, profile) for c in candidates]
    return SelectionState(pool=pool, profile=profile, config=config or SelectionConfig())


def _picked(state: SelectionState) -> list[int]:
    return [s.index for s in state.selections]


# ── Whole-catalog behaviour ───────────────────────────────────────────────────


class TestBuildRecommendationSet:
    def test_weak_risk_taker_gets_physical_improvement(
        self, scenario_a_profile, tropical_strict_context,
    ):
        recs = build_recommendation_set(scenario_a_profile, 5, tropical_strict_context)
        assert len(recs) >= 3
        first = recs[0]
        assert is_physical_category(first.category)
        assert first.recommendation_type is RecommendationType.IMPROVEMENT
        assert "risk-taker" in first.targeted_attributes

    def test_empty_profile_age_based_only(self, empty_profile):
        recs = build_recommendation_set(empty_profile, 5)
        assert len(recs) == 3
        assert all(r.recommendation_type is RecommendationType.AGE_BASED for r in recs)

    def test_size_bounds(self):
        profile = LearnerAttributeProfile(
            weak_attributes=("risk-taker", "inquirer", "open-minded", "thinker"),
            strong_attributes=("communicator", "caring", "reflective"),
        )
        for age in (4, 7, 10, 13):
            recs = build_recommendation_set(profile, age)
            assert 3 <= len(recs) <= 5

    def test_idempotent(self, scenario_a_profile, tropical_strict_context):
        first = build_recommendation_set(scenario_a_profile, 5, tropical_strict_context)
        second = build_recommendation_set(scenario_a_profile, 5, tropical_strict_context)
        assert first == second

    def test_no_age_match_returns_empty(self, scenario_a_profile):
        assert build_recommendation_set(scenario_a_profile, 40) == []

    def test_ids_unique(self, scenario_a_profile):
        recs = build_recommendation_set(scenario_a_profile, 8)
        ids = [r.id for r in recs]
        assert len(ids) == len(set(ids))

    def test_improvement_targets_are_weak(self, scenario_a_profile):
        recs = build_recommendation_set(scenario_a_profile, 8)
        for rec in recs:
            if rec.recommendation_type is RecommendationType.IMPROVEMENT:
                assert set(rec.targeted_attributes) <= set(scenario_a_profile.weak_attributes)
            if rec.recommendation_type is RecommendationType.STRENGTH:
                assert set(rec.targeted_attributes) <= set(scenario_a_profile.strong_attributes)

    def test_custom_catalog_and_config(self, make_candidate, empty_profile):
        catalog = [make_candidate(id=f"c{i}") for i in range(6)]
        config = SelectionConfig(min_recommendations=4, max_recommendations=4)
        recs = build_recommendation_set(empty_profile, 6, catalog=catalog, config=config)
        assert len(recs) == 4


class TestSelectDiverse:
    def test_empty_pool(self, empty_profile):
        assert select_diverse([], empty_profile) == []

    def test_truncates_to_max(self, make_candidate):
        profile = LearnerAttributeProfile(weak_attributes=("inquirer",))
        state_pool = [
            score_candidate(make_candidate(id=f"c{i}", targets=("inquirer",)), profile)
            for i in range(8)
        ]
        config = SelectionConfig(min_recommendations=2, max_recommendations=2)
        assert len(select_diverse(state_pool, profile, config)) == 2


# ── Passes ────────────────────────────────────────────────────────────────────


class TestPhysicalGuarantee:
    def test_improvement_when_weak_match(self, make_candidate):
        profile = LearnerAttributeProfile(weak_attributes=("risk-taker",))
        state = _state(
            [
                make_candidate(id="stem", targets=("risk-taker",)),
                make_candidate(
                    id="gym", category=ActivityCategory.PHYSICAL, targets=("risk-taker",),
                ),
            ],
            profile,
        )
        physical_guarantee(state)
        assert _picked(state) == [1]
        assert state.selections[0].recommendation_type is RecommendationType.IMPROVEMENT
        assert state.addressed_weak == ["risk-taker"]

    def test_age_based_without_weak_match(self, make_candidate, empty_profile):
        state = _state(
            [make_candidate(id="gym", category=ActivityCategory.PHYSICAL)], empty_profile,
        )
        physical_guarantee(state)
        assert state.selections[0].recommendation_type is RecommendationType.AGE_BASED
        assert state.selections[0].targeted_attributes == ()

    def test_no_physical_candidate(self, make_candidate, empty_profile):
        state = _state([make_candidate()], empty_profile)
        physical_guarantee(state)
        assert state.size == 0


class TestWeaknessCoverage:
    def test_covers_each_weak_attribute_once(self, make_candidate):
        profile = LearnerAttributeProfile(weak_attributes=("risk-taker", "inquirer"))
        state = _state(
            [
                make_candidate(id="a", targets=("risk-taker",)),
                make_candidate(id="b", targets=("risk-taker",)),
                make_candidate(id="c", targets=("inquirer",)),
            ],
            profile,
        )
        weakness_coverage(state)
        assert _picked(state) == [0, 2]
        assert state.addressed_weak == ["risk-taker", "inquirer"]

    def test_balance_preference_defers_then_revisits(self, make_candidate):
        profile = LearnerAttributeProfile(weak_attributes=("risk-taker", "inquirer"))
        state = _state(
            [
                make_candidate(id="in1", targets=("thinker",)),
                make_candidate(id="in2", targets=("thinker",)),
                make_candidate(id="in3", targets=("risk-taker",)),
                make_candidate(
                    id="out", targets=("inquirer",), activity_type=ActivityType.OUTDOOR,
                ),
            ],
            profile,
        )
        state.select(0, RecommendationType.AGE_BASED)
        state.select(1, RecommendationType.AGE_BASED)
        assert state.balance_preference() is ActivityType.OUTDOOR

        weakness_coverage(state)
        assert _picked(state) == [0, 1, 3, 2]

    def test_no_weak_attributes(self, make_candidate, empty_profile):
        state = _state([make_candidate()], empty_profile)
        weakness_coverage(state)
        assert state.size == 0

    def test_only_top_weak_focus(self, make_candidate):
        profile = LearnerAttributeProfile(weak_attributes=("risk-taker", "inquirer"))
        config = SelectionConfig(weak_focus_count=1)
        state = _state([make_candidate(targets=("inquirer",))], profile, config)
        weakness_coverage(state)
        assert state.size == 0


class TestStrengthReinforcement:
    def test_capped(self, make_candidate):
        profile = LearnerAttributeProfile(strong_attributes=("caring",))
        state = _state(
            [make_candidate(id=f"c{i}", targets=("caring",)) for i in range(4)], profile,
        )
        strength_reinforcement(state)
        assert _picked(state) == [0, 1]
        assert all(
            s.recommendation_type is RecommendationType.STRENGTH for s in state.selections
        )

    def test_min_score_threshold(self, make_candidate):
        profile = LearnerAttributeProfile(strong_attributes=("caring",))
        config = SelectionConfig(strength_min_score=100.0)
        state = _state([make_candidate(targets=("caring",))], profile, config)
        strength_reinforcement(state)
        assert state.size == 0


class TestMinimumFill:
    def test_prefers_new_category_and_balance(self, make_candidate, empty_profile):
        state = _state(
            [
                make_candidate(id="stem1", category=ActivityCategory.STEM),
                make_candidate(id="stem2", category=ActivityCategory.STEM),
                make_candidate(id="art", category=ActivityCategory.CREATIVE),
            ],
            empty_profile,
        )
        minimum_fill(state)
        assert _picked(state) == [0, 2, 1]
        assert all(
            s.recommendation_type is RecommendationType.AGE_BASED for s in state.selections
        )

    def test_stops_when_pool_exhausted(self, make_candidate, empty_profile):
        state = _state([make_candidate()], empty_profile)
        minimum_fill(state)
        assert state.size == 1

    def test_no_op_at_minimum(self, make_candidate, empty_profile):
        state = _state([make_candidate(id=f"c{i}") for i in range(5)], empty_profile)
        for i in range(3):
            state.select(i, RecommendationType.AGE_BASED)
        minimum_fill(state)
        assert state.size == 3


class TestSelectionStateCounts:
    def test_both_counts_half(self, make_candidate, empty_profile):
        state = _state([make_candidate(activity_type=ActivityType.BOTH)], empty_profile)
        state.select(0, RecommendationType.AGE_BASED)
        assert state.indoor_count == 0.5
        assert state.outdoor_count == 0.5
        assert state.imbalance_fix() is None


# ── Eligibility ───────────────────────────────────────────────────────────────


class TestFilterEligible:
    def test_age_filter(self, make_candidate):
        young = make_candidate(id="young", ages=(3, 6))
        old = make_candidate(id="old", ages=(10, 16))
        eligible = filter_eligible([young, old], 12)
        assert [s.id for s in eligible] == ["old"]

    def test_feasible_only_when_enough(self, make_candidate):
        free = make_candidate(id="free", cost=(0.0, 0.0))
        costly = make_candidate(id="costly", cost=(400.0, 600.0), requires_coastal=True)
        ctx = RecommendationContext(budget=0.0, budget_flexibility="strict", is_coastal=False)
        config = SelectionConfig(fallback_pool_size=1)
        eligible = filter_eligible([costly, free], 6, ctx, config)
        assert [s.id for s in eligible] == ["free"]

    def test_fallback_to_top_by_feasibility(self, make_candidate):
        free = make_candidate(id="free", cost=(0.0, 0.0))
        costly = make_candidate(id="costly", cost=(400.0, 600.0), requires_coastal=True)
        ctx = RecommendationContext(budget=0.0, budget_flexibility="strict", is_coastal=False)
        config = SelectionConfig(fallback_pool_size=2)
        eligible = filter_eligible([costly, free], 6, ctx, config)
        assert [s.id for s in eligible] == ["costly", "free"]

    def test_fallback_keeps_catalog_order(self, make_candidate):
        mid = make_candidate(id="mid", cost=(100.0, 100.0))
        low = make_candidate(id="low", cost=(400.0, 600.0), requires_coastal=True)
        high = make_candidate(id="high", cost=(0.0, 0.0))
        ctx = RecommendationContext(budget=50.0, budget_flexibility="moderate", is_coastal=False)
        config = SelectionConfig(min_feasibility=100.0, fallback_pool_size=2)
        eligible = filter_eligible([mid, low, high], 6, ctx, config)
        assert [s.id for s in eligible] == ["mid", "high"]

    def test_relevance_ties_after_fallback_follow_catalog_order(
        self, make_candidate, empty_profile
    ):
        paid = make_candidate(id="paid", cost=(100.0, 100.0))
        free = make_candidate(id="free", cost=(0.0, 0.0))
        ctx = RecommendationContext(budget=50.0, budget_flexibility="moderate")
        eligible = filter_eligible([paid, free], 6, ctx, SelectionConfig())
        assert eligible[0].feasibility.overall < eligible[1].feasibility.overall

        scored = score_candidates(eligible, empty_profile, ctx)
        assert scored[0].relevance == scored[1].relevance
        assert [s.id for s in scored] == ["paid", "free"]

    def test_relevance_left_at_zero(self, make_candidate):
        eligible = filter_eligible([make_candidate()], 6)
        assert eligible[0].relevance == 0.0
