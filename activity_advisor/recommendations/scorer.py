"""
Relevance scoring: how well an activity fits the learner profile.

Score formula (unbounded, typically 10–230)
-------------------------------------------
    relevance = (
        60 * |weak attributes matching any target|
      + 30 * |strong attributes matching any target|
      + 10                                  # flat base
      + {HIGH: 20, MEDIUM: 10, LOW: 0}      # catalog priority
    )

"Matching" is the shared fuzzy match from ``taxonomy.learner_profile``:
case-insensitive substring containment in either direction.  Each profile
attribute counts at most once however many targets it matches.

Ordering
--------
``score_candidates`` stable-sorts by relevance descending, so catalog
insertion order breaks ties and the result is deterministic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from activity_advisor.models.activity import ActivityCandidate
from activity_advisor.models.recommendation import (
    FeasibilityScore,
    RecommendationContext,
)
from activity_advisor.models.report import LearnerAttributeProfile
from activity_advisor.recommendations.feasibility import compute_feasibility
from activity_advisor.taxonomy.activity_taxonomy import PriorityTier
from activity_advisor.taxonomy.learner_profile import matching_attributes

WEAK_MATCH_WEIGHT = 60.0
STRONG_MATCH_WEIGHT = 30.0
BASE_SCORE = 10.0

_PRIORITY_BONUS: dict[PriorityTier, float] = {
    PriorityTier.HIGH:   20.0,
    PriorityTier.MEDIUM: 10.0,
    PriorityTier.LOW:     0.0,
}


@dataclass
class ScoredActivity:
    """Intermediate object coupling a catalog entry with its scores.

    Attributes:
        candidate:      The catalog entry.
        relevance:      Profile relevance score (see module docstring).
        feasibility:    Budget/climate feasibility.
        weak_matches:   Weak attributes the candidate targets, profile order.
        strong_matches: Strong attributes the candidate targets, profile order.
    """

    candidate:      ActivityCandidate
    relevance:      float
    feasibility:    FeasibilityScore
    weak_matches:   list[str] = field(default_factory=list)
    strong_matches: list[str] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.candidate.id


def compute_relevance(
    candidate: ActivityCandidate,
    profile: LearnerAttributeProfile,
) -> float:
    """Relevance of one candidate to the profile."""
    weak = matching_attributes(profile.weak_attributes, candidate.target_attributes)
    strong = matching_attributes(profile.strong_attributes, candidate.target_attributes)
    return (
        WEAK_MATCH_WEIGHT * len(weak)
        + STRONG_MATCH_WEIGHT * len(strong)
        + BASE_SCORE
        + _PRIORITY_BONUS.get(candidate.priority, 0.0)
    )


def score_candidate(
    candidate: ActivityCandidate,
    profile: LearnerAttributeProfile,
    context: Optional[RecommendationContext] = None,
    feasibility: Optional[FeasibilityScore] = None,
) -> ScoredActivity:
    """Build a ``ScoredActivity``; reuses ``feasibility`` when already computed."""
    return ScoredActivity(
        candidate=candidate,
        relevance=compute_relevance(candidate, profile),
        feasibility=feasibility or compute_feasibility(candidate, context),
        weak_matches=matching_attributes(profile.weak_attributes, candidate.target_attributes),
        strong_matches=matching_attributes(profile.strong_attributes, candidate.target_attributes),
    )


def score_candidates(
    candidates: Iterable[ActivityCandidate] | Iterable[ScoredActivity],
    profile: LearnerAttributeProfile,
    context: Optional[RecommendationContext] = None,
) -> list[ScoredActivity]:
    """Score candidates and stable-sort them by relevance descending.

    Accepts raw catalog entries or already-built ``ScoredActivity`` objects
    (whose feasibility is kept and whose relevance is recomputed).

    Returns:
        New list; input order breaks ties.
    """
    scored: list[ScoredActivity] = []
    for item in candidates:
        if isinstance(item, ScoredActivity):
            scored.append(score_candidate(item.candidate, profile, feasibility=item.feasibility))
        else:
            scored.append(score_candidate(item, profile, context))
    # sorted() is stable: equal relevance keeps input (catalog) order.
    return sorted(scored, key=lambda s: -s.relevance)
