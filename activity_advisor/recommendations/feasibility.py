"""
Feasibility scoring: how practical an activity is for a family's budget and
location, independent of the learner profile.

Score formula (each component 0–100)
------------------------------------
    overall = (budget_match + climate_match) / 2

budget_match:
    100 when no budget is given or the average monthly cost fits it.
    Otherwise overage = (avg − budget) / budget, decayed by flexibility:

        strict   : max( 0, 100 − 200·overage)
        moderate : max(20, 100 − 100·overage)
        flexible : max(50, 100 −  50·overage)

    A budget of 0 (or less) with a non-zero cost is an unbounded overage and
    lands on the floor for the flexibility.

climate_match:
    100 by default.
     40 when a climate zone is known and the activity does not list it.
     20 when the activity requires a coast and the location is not coastal
        (applied after the climate check and overrides it).

All functions are pure and total.
"""

from __future__ import annotations

from typing import Optional

from activity_advisor.models.activity import ActivityCandidate
from activity_advisor.models.recommendation import (
    FeasibilityScore,
    RecommendationContext,
)
from activity_advisor.taxonomy.activity_taxonomy import ClimateZone

# flexibility → (decay slope per unit overage, floor)
_BUDGET_DECAY: dict[str, tuple[float, float]] = {
    "strict":   (200.0,  0.0),
    "moderate": (100.0, 20.0),
    "flexible": ( 50.0, 50.0),
}

CLIMATE_MISMATCH_SCORE = 40.0
COASTAL_MISMATCH_SCORE = 20.0


def budget_match(
    average_cost: float,
    budget: Optional[float],
    flexibility: str = "moderate",
) -> float:
    """Budget component of the feasibility score.

    Unknown flexibility values are scored as ``"moderate"``.
    """
    if budget is None or average_cost <= budget:
        return 100.0

    slope, floor = _BUDGET_DECAY.get(flexibility, _BUDGET_DECAY["moderate"])
    if budget <= 0:
        return floor

    overage = (average_cost - budget) / budget
    return _clamp(max(floor, 100.0 - slope * overage), 0.0, 100.0)


def climate_match(
    candidate: ActivityCandidate,
    climate_zone: Optional[ClimateZone],
    is_coastal: Optional[bool],
) -> float:
    """Climate/coastal component of the feasibility score."""
    score = 100.0
    if climate_zone is not None and climate_zone not in candidate.regional.climate_preferences:
        score = CLIMATE_MISMATCH_SCORE
    if candidate.regional.requires_coastal and not is_coastal:
        score = COASTAL_MISMATCH_SCORE
    return score


def compute_feasibility(
    candidate: ActivityCandidate,
    context: Optional[RecommendationContext] = None,
) -> FeasibilityScore:
    """Score one candidate against the budget and regional context.

    Args:
        candidate: Catalog entry.
        context:   Budget/climate context; ``None`` means unconstrained.

    Returns:
        FeasibilityScore with every field in [0, 100].
    """
    ctx = context or RecommendationContext()
    budget = budget_match(candidate.cost.average, ctx.budget, ctx.budget_flexibility)
    climate = climate_match(candidate, ctx.climate_zone, ctx.is_coastal)
    return FeasibilityScore(
        budget_match=round(budget, 2),
        climate_match=round(climate, 2),
        overall=round(_clamp((budget + climate) / 2.0, 0.0, 100.0), 2),
    )


# ── Helper ────────────────────────────────────────────────────────────────────

def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
