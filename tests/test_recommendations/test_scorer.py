"""
Tests for activity_advisor/recommendations/scorer.py.

What we test
------------
compute_relevance():
  - 60 per weak match + 30 per strong match + 10 base + priority bonus.
  - Each profile attribute counts once even if it matches several targets.
  - Empty profile → base + priority only.

score_candidate():
  - Weak/strong matches listed in profile order.
  - Precomputed feasibility is reused as-is.

score_candidates():
  - Sorted by relevance descending.
  - Ties keep input order (stable sort).
  - Accepts ScoredActivity input and keeps its feasibility.
"""

from __future__ import annotations

import pytest

from activity_advisor.models.recommendation import FeasibilityScore
from activity_advisor.models.report import LearnerAttributeProfile
from activity_advisor.recommendations.scorer import (
    compute_relevance,
    score_candidate,
    score_candidates,
)
from activity_advisor.taxonomy.activity_taxonomy import PriorityTier


def _profile(weak=(), strong=()) -> LearnerAttributeProfile:
    return LearnerAttributeProfile(weak_attributes=weak, strong_attributes=strong)


class TestComputeRelevance:
    def test_weak_and_strong(self, make_candidate):
        c = make_candidate(targets=("risk-taker", "communicator"), priority=PriorityTier.HIGH)
        profile = _profile(weak=("risk-taker",), strong=("communicator",))
        assert compute_relevance(c, profile) == pytest.approx(60 + 30 + 10 + 20)

    def test_priority_bonus(self, make_candidate, empty_profile):
        high = make_candidate(priority=PriorityTier.HIGH)
        medium = make_candidate(priority=PriorityTier.MEDIUM)
        low = make_candidate(priority=PriorityTier.LOW)
        assert compute_relevance(high, empty_profile) == pytest.approx(30.0)
        assert compute_relevance(medium, empty_profile) == pytest.approx(20.0)
        assert compute_relevance(low, empty_profile) == pytest.approx(10.0)

    def test_attribute_counted_once(self, make_candidate):
        # "risk" fuzzy-matches both targets but is a single profile attribute
        c = make_candidate(targets=("risk-taker", "risk"), priority=PriorityTier.LOW)
        assert compute_relevance(c, _profile(weak=("risk",))) == pytest.approx(70.0)

    def test_no_match(self, make_candidate):
        c = make_candidate(targets=("thinker",), priority=PriorityTier.LOW)
        assert compute_relevance(c, _profile(weak=("caring",))) == pytest.approx(10.0)


class TestScoreCandidate:
    def test_matches_in_profile_order(self, make_candidate):
        c = make_candidate(targets=("inquirer", "risk-taker", "caring"))
        profile = _profile(weak=("risk-taker", "inquirer"), strong=("caring",))
        scored = score_candidate(c, profile)
        assert scored.weak_matches == ["risk-taker", "inquirer"]
        assert scored.strong_matches == ["caring"]
        assert scored.id == c.id

    def test_reuses_feasibility(self, make_candidate, empty_profile):
        fixed = FeasibilityScore(budget_match=10.0, climate_match=20.0, overall=15.0)
        scored = score_candidate(make_candidate(), empty_profile, feasibility=fixed)
        assert scored.feasibility is fixed


class TestScoreCandidates:
    def test_sorted_descending(self, make_candidate):
        low = make_candidate(id="low", targets=("thinker",))
        high = make_candidate(id="high", targets=("risk-taker",))
        ranked = score_candidates([low, high], _profile(weak=("risk-taker",)))
        assert [s.id for s in ranked] == ["high", "low"]

    def test_ties_keep_input_order(self, make_candidate, empty_profile):
        items = [make_candidate(id=f"c{i}") for i in range(5)]
        ranked = score_candidates(items, empty_profile)
        assert [s.id for s in ranked] == ["c0", "c1", "c2", "c3", "c4"]

    def test_rescoring_keeps_feasibility(self, make_candidate, empty_profile):
        fixed = FeasibilityScore(budget_match=0.0, climate_match=40.0, overall=20.0)
        first = score_candidate(make_candidate(), empty_profile, feasibility=fixed)
        rescored = score_candidates([first], _profile(weak=("inquirer",)))
        assert rescored[0].feasibility == fixed
        assert rescored[0].weak_matches == ["inquirer"]
