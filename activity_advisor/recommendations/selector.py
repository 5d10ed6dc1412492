"""
DiverseSelector: a multi-pass greedy selection of 3–5 activities.

Usage flow
----------
1. filter_eligible(catalog, age, context, config)
   -> list[ScoredActivity]     (age-appropriate and feasible enough)

2. score_candidates(eligible, profile)
   -> list[ScoredActivity]     (stable-sorted by relevance, see scorer.py)

3. select_diverse(pool, profile, config)
   -> list[Recommendation]     (runs DEFAULT_PASSES over a SelectionState)

``build_recommendation_set`` chains all three.

Passes
------
Each pass is a named function over one mutable ``SelectionState``.  The
state holds the score-sorted pool and records selections as pool indices,
so a pass only ever decides *which index* to take and *with what tag*.

    physical-guarantee      top physical/sports candidate
                            (improvement if it hits a weak attribute,
                            else age-based)
    weakness-coverage       candidates adding an unaddressed top weak
                            attribute, with an indoor/outdoor preference
                            once two items are selected
    strength-reinforcement  up to N candidates hitting a strong attribute
    minimum-fill            age-based fill up to the minimum set size

The result is a bounded heuristic, not an optimum.  It is idempotent:
identical profile, context and catalog produce an identical ordered list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional

from activity_advisor.catalog.activities import get_catalog
from activity_advisor.config import SelectionConfig
from activity_advisor.models.activity import ActivityCandidate
from activity_advisor.models.recommendation import (
    Recommendation,
    RecommendationContext,
    RecommendationType,
)
from activity_advisor.models.report import LearnerAttributeProfile
from activity_advisor.recommendations.feasibility import compute_feasibility
from activity_advisor.recommendations.scorer import ScoredActivity, score_candidates
from activity_advisor.taxonomy.activity_taxonomy import (
    ActivityType,
    is_physical_category,
)

logger = logging.getLogger(__name__)


# ── Selection state ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Selection:
    """One chosen pool index and the provenance the choosing pass gave it."""

    index: int
    recommendation_type: RecommendationType
    targeted_attributes: tuple[str, ...] = ()


@dataclass
class SelectionState:
    """Shared mutable state the selection passes operate on.

    Attributes:
        pool:            Score-sorted candidates; never reordered.
        profile:         Learner profile the pool was scored against.
        config:          Thresholds and size bounds.
        selections:      Chosen pool indices in selection order.
        used_categories: Categories already represented.
        addressed_weak:  Weak attributes already targeted by a selection.
        indoor_count:    Indoor weight (``both`` adds 0.5).
        outdoor_count:   Outdoor weight (``both`` adds 0.5).
    """

    pool:            list[ScoredActivity]
    profile:         LearnerAttributeProfile
    config:          SelectionConfig = field(default_factory=SelectionConfig)
    selections:      list[Selection] = field(default_factory=list)
    used_categories: set[str] = field(default_factory=set)
    addressed_weak:  list[str] = field(default_factory=list)
    indoor_count:    float = 0.0
    outdoor_count:   float = 0.0

    @property
    def size(self) -> int:
        return len(self.selections)

    @property
    def is_full(self) -> bool:
        return self.size >= self.config.max_recommendations

    def is_selected(self, index: int) -> bool:
        return any(s.index == index for s in self.selections)

    def unselected(self) -> Iterator[tuple[int, ScoredActivity]]:
        """Yield ``(index, scored)`` for unselected pool entries in score order."""
        for i, scored in enumerate(self.pool):
            if not self.is_selected(i):
                yield i, scored

    def select(
        self,
        index: int,
        recommendation_type: RecommendationType,
        targeted_attributes: Iterable[str] = (),
    ) -> None:
        """Record a selection and update the bookkeeping counters."""
        targeted = tuple(targeted_attributes)
        self.selections.append(Selection(index, recommendation_type, targeted))

        candidate = self.pool[index].candidate
        self.used_categories.add(candidate.category)
        if recommendation_type is RecommendationType.IMPROVEMENT:
            for attr in targeted:
                if attr not in self.addressed_weak:
                    self.addressed_weak.append(attr)

        if candidate.activity_type is ActivityType.INDOOR:
            self.indoor_count += 1.0
        elif candidate.activity_type is ActivityType.OUTDOOR:
            self.outdoor_count += 1.0
        else:
            self.indoor_count += 0.5
            self.outdoor_count += 0.5

    def balance_preference(self) -> Optional[ActivityType]:
        """Setting the next weakness pick should prefer, if any.

        Only active once two activities are selected.
        """
        if self.size < 2:
            return None
        if self.outdoor_count < 1:
            return ActivityType.OUTDOOR
        if self.indoor_count < 1:
            return ActivityType.INDOOR
        return None

    def imbalance_fix(self) -> Optional[ActivityType]:
        """Setting that would reduce the current indoor/outdoor gap."""
        if self.indoor_count > self.outdoor_count:
            return ActivityType.OUTDOOR
        if self.outdoor_count > self.indoor_count:
            return ActivityType.INDOOR
        return None

    def to_recommendations(self) -> list[Recommendation]:
        limit = self.config.max_recommendations
        return [
            _to_recommendation(self.pool[s.index], s)
            for s in self.selections[:limit]
        ]


def _fits_setting(candidate: ActivityCandidate, setting: ActivityType) -> bool:
    return candidate.activity_type is setting or candidate.activity_type is ActivityType.BOTH


# ── Passes ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SelectionPass:
    """A named step of the selector."""

    name: str
    run: Callable[[SelectionState], None]


def physical_guarantee(state: SelectionState) -> None:
    """Select the top-scoring physical/sports candidate, if any."""
    if state.is_full:
        return
    for i, scored in state.unselected():
        if not is_physical_category(scored.candidate.category):
            continue
        if scored.weak_matches:
            state.select(i, RecommendationType.IMPROVEMENT, scored.weak_matches)
        else:
            state.select(i, RecommendationType.AGE_BASED)
        return


def weakness_coverage(state: SelectionState) -> None:
    """Cover the top weak attributes that no selection addresses yet.

    A candidate whose setting does not match the current balance preference
    is deferred; deferred candidates are revisited in score order after the
    sweep and accepted if they still add a novel attribute.
    """
    focus = state.profile.top_weak(state.config.weak_focus_count)
    if not focus:
        return

    def novel_matches(scored: ScoredActivity) -> list[str]:
        return [
            attr for attr in focus
            if attr in scored.weak_matches and attr not in state.addressed_weak
        ]

    deferred: list[int] = []
    for i, scored in list(state.unselected()):
        if state.is_full:
            return
        novel = novel_matches(scored)
        if not novel:
            continue
        preferred = state.balance_preference()
        if preferred is not None and not _fits_setting(scored.candidate, preferred):
            deferred.append(i)
            continue
        state.select(i, RecommendationType.IMPROVEMENT, novel)

    for i in deferred:
        if state.is_full:
            return
        novel = novel_matches(state.pool[i])
        if novel:
            state.select(i, RecommendationType.IMPROVEMENT, novel)


def strength_reinforcement(state: SelectionState) -> None:
    """Add a few candidates that build on existing strengths."""
    picks = 0
    for i, scored in list(state.unselected()):
        if state.is_full or picks >= state.config.max_strength_picks:
            return
        if scored.strong_matches and scored.relevance >= state.config.strength_min_score:
            state.select(i, RecommendationType.STRENGTH, scored.strong_matches)
            picks += 1


def minimum_fill(state: SelectionState) -> None:
    """Fill up to the minimum size with age-based picks.

    Prefers a candidate that reduces the indoor/outdoor gap or brings a new
    category; otherwise takes the next one in score order.
    """
    while state.size < state.config.min_recommendations:
        remaining = list(state.unselected())
        if not remaining:
            return
        fix = state.imbalance_fix()
        chosen = remaining[0][0]
        for i, scored in remaining:
            candidate = scored.candidate
            if (fix is not None and _fits_setting(candidate, fix)) or (
                candidate.category not in state.used_categories
            ):
                chosen = i
                break
        state.select(chosen, RecommendationType.AGE_BASED)


DEFAULT_PASSES: tuple[SelectionPass, ...] = (
    SelectionPass("physical-guarantee", physical_guarantee),
    SelectionPass("weakness-coverage", weakness_coverage),
    SelectionPass("strength-reinforcement", strength_reinforcement),
    SelectionPass("minimum-fill", minimum_fill),
)


# ── Public API ────────────────────────────────────────────────────────────────


def filter_eligible(
    candidates: Iterable[ActivityCandidate],
    age: int,
    context: Optional[RecommendationContext] = None,
    config: Optional[SelectionConfig] = None,
) -> list[ScoredActivity]:
    """Keep age-appropriate candidates that are feasible enough.

    When fewer than ``config.fallback_pool_size`` pass the feasibility
    threshold, the top ``fallback_pool_size`` age-appropriate candidates by
    overall feasibility are used instead (stable on ties), returned in input
    order so that later relevance ties still fall back to catalog order.

    Returns:
        ``ScoredActivity`` objects with feasibility filled in and relevance
        left at 0 (relevance depends on the profile; see ``score_candidates``).
    """
    cfg = config or SelectionConfig()
    age_ok = [
        ScoredActivity(candidate=c, relevance=0.0, feasibility=compute_feasibility(c, context))
        for c in candidates
        if c.is_age_appropriate(age)
    ]

    eligible = [s for s in age_ok if s.feasibility.overall >= cfg.min_feasibility]
    if len(eligible) < cfg.fallback_pool_size:
        logger.debug(
            "Only %d of %d age-appropriate candidates feasible; "
            "falling back to top %d by feasibility",
            len(eligible), len(age_ok), cfg.fallback_pool_size,
        )
        ranked = sorted(range(len(age_ok)), key=lambda i: -age_ok[i].feasibility.overall)
        eligible = [age_ok[i] for i in sorted(ranked[: cfg.fallback_pool_size])]
    return eligible


def select_diverse(
    pool: list[ScoredActivity],
    profile: LearnerAttributeProfile,
    config: Optional[SelectionConfig] = None,
    passes: Iterable[SelectionPass] = DEFAULT_PASSES,
) -> list[Recommendation]:
    """Run the selection passes over a score-sorted pool.

    Args:
        pool:    Output of ``score_candidates`` (relevance descending).
        profile: Learner profile the pool was scored against.
        config:  Selection thresholds; defaults when ``None``.
        passes:  Ordered passes to apply.

    Returns:
        At most ``max_recommendations`` recommendations in selection order.
        Empty when the pool is empty.
    """
    state = SelectionState(pool=pool, profile=profile, config=config or SelectionConfig())
    for selection_pass in passes:
        before = state.size
        selection_pass.run(state)
        logger.debug(
            "Selection pass '%s' added %d (total %d)",
            selection_pass.name, state.size - before, state.size,
        )
    return state.to_recommendations()


def build_recommendation_set(
    profile: LearnerAttributeProfile,
    age: int,
    context: Optional[RecommendationContext] = None,
    catalog: Optional[Iterable[ActivityCandidate]] = None,
    config: Optional[SelectionConfig] = None,
) -> list[Recommendation]:
    """Filter, score and select recommendations for one child.

    Returns an empty list (not an error) when no catalog entry is
    age-appropriate.
    """
    cfg = config or SelectionConfig()
    eligible = filter_eligible(
        catalog if catalog is not None else get_catalog(), age, context, cfg,
    )
    if not eligible:
        logger.info("No age-appropriate activities for age %d", age)
        return []

    pool = score_candidates(eligible, profile)
    recommendations = select_diverse(pool, profile, cfg)
    logger.info(
        "Selected %d recommendation(s) from %d eligible for age %d",
        len(recommendations), len(eligible), age,
    )
    return recommendations


# ── Helper ────────────────────────────────────────────────────────────────────

def _to_recommendation(scored: ScoredActivity, selection: Selection) -> Recommendation:
    candidate = scored.candidate
    return Recommendation(
        id=candidate.id,
        name=candidate.name,
        category=candidate.category.value,
        priority=candidate.priority,
        target_attributes=candidate.target_attributes,
        recommendation_type=selection.recommendation_type,
        targeted_attributes=selection.targeted_attributes,
        estimated_cost=candidate.cost.label(),
        feasibility_score=scored.feasibility,
        relevance_score=scored.relevance,
        activity_type=candidate.activity_type,
        home_based=candidate.home_based,
        description=candidate.description,
        benefits=candidate.benefits,
        frequency=candidate.frequency,
        why_recommended=candidate.why_recommended,
    )
