"""
CurrentActivityEvaluator: how well the child's existing activities line up
with the learner profile.

Alignment formula
-----------------
    alignment = clamp(30 + 25·weak_matches + 15·strong_matches, 0, 100)

where the match counts are distinct weak/strong profile attributes that
fuzzy-match the attributes inferred from the activity name
(``taxonomy.learner_profile.infer_activity_attributes``).

Verdict (first match wins)
--------------------------
    continue   : alignment >= 60
    reconsider : 30 <= alignment < 60   (+ alternatives)
    stop       : alignment < 30         (+ alternatives)

Alternatives come from ``ALTERNATIVE_SUGGESTIONS`` keyed by the child's
weak attributes, de-duplicated and capped at 3.
"""

from __future__ import annotations

from typing import Iterable, Optional

from activity_advisor.models.recommendation import CurrentActivityEvaluation, Verdict
from activity_advisor.models.report import LearnerAttributeProfile
from activity_advisor.taxonomy.learner_profile import (
    infer_activity_attributes,
    matching_attributes,
)

BASE_ALIGNMENT = 30
WEAK_MATCH_POINTS = 25
STRONG_MATCH_POINTS = 15

CONTINUE_THRESHOLD = 60
RECONSIDER_THRESHOLD = 30

MAX_ALTERNATIVES = 3
MAX_NAMED_ATTRIBUTES = 3

ALTERNATIVE_SUGGESTIONS: dict[str, tuple[str, ...]] = {
    "inquirer": (
        "Science Exploration Club",
        "Nature & Outdoor Exploration",
        "Museum discovery workshops",
    ),
    "knowledgeable": (
        "Library Storytime & Book Club",
        "Science Exploration Club",
        "Language Immersion Class",
    ),
    "thinker": (
        "Chess Club",
        "Building & Engineering for Kids",
        "Coding & Robotics Club",
    ),
    "communicator": (
        "Creative Drama / Theater Arts",
        "Language Immersion Class",
        "Public speaking or storytelling club",
    ),
    "principled": (
        "Martial Arts (Karate/Taekwondo)",
        "Scouts / Junior Guides",
        "Team sports with a fair-play focus",
    ),
    "open-minded": (
        "World Music & Movement",
        "Cultural Storytelling & Arts",
        "Language Immersion Class",
    ),
    "caring": (
        "Community Garden Volunteers",
        "Scouts / Junior Guides",
        "Animal shelter family volunteering",
    ),
    "risk-taker": (
        "Gymnastics/Tumbling Program",
        "Climbing & Bouldering Club",
        "Creative Drama / Theater Arts",
    ),
    "balanced": (
        "Kids Yoga & Mindfulness",
        "Multi-Sport Introduction",
        "Swimming Lessons",
    ),
    "reflective": (
        "Kids Yoga & Mindfulness",
        "Art Therapy / Expressive Arts",
        "Backyard Nature Journal",
    ),
}


def alignment_score(weak_matches: int, strong_matches: int) -> int:
    """Alignment in [0, 100]; non-decreasing in both match counts."""
    raw = (
        BASE_ALIGNMENT
        + WEAK_MATCH_POINTS * weak_matches
        + STRONG_MATCH_POINTS * strong_matches
    )
    return max(0, min(100, raw))


def verdict_for(alignment: int) -> Verdict:
    if alignment >= CONTINUE_THRESHOLD:
        return Verdict.CONTINUE
    if alignment >= RECONSIDER_THRESHOLD:
        return Verdict.RECONSIDER
    return Verdict.STOP


def suggest_alternatives(
    weak_attributes: Iterable[str],
    exclude: Iterable[str] = (),
) -> tuple[str, ...]:
    """Up to three distinct suggestions for the given weak attributes.

    Suggestions equal (case-insensitively) to a name in ``exclude`` are skipped.
    """
    excluded = {name.strip().lower() for name in exclude}
    picked: list[str] = []
    for attr in weak_attributes:
        for suggestion in ALTERNATIVE_SUGGESTIONS.get(attr, ()):
            if suggestion.lower() in excluded or suggestion in picked:
                continue
            picked.append(suggestion)
            if len(picked) >= MAX_ALTERNATIVES:
                return tuple(picked)
    return tuple(picked)


def _build_reasoning(
    verdict: Verdict,
    weak_matched: list[str],
    strong_matched: list[str],
) -> str:
    named = (weak_matched + strong_matched)[:MAX_NAMED_ATTRIBUTES]
    named_text = ", ".join(named)

    if verdict is Verdict.CONTINUE:
        return (
            f"Well aligned with your child's profile: develops {named_text}. "
            "Keep it going."
        )
    if verdict is Verdict.RECONSIDER:
        if named:
            return (
                f"Partly aligned: supports {named_text}, but does little for "
                "the areas that need the most attention. Consider pairing it "
                "with or swapping it for one of the alternatives."
            )
        return (
            "Does not target any of the identified growth areas or strengths. "
            "Worth keeping only if your child enjoys it; the alternatives "
            "address current growth areas more directly."
        )
    return (
        "Shows little alignment with your child's current development "
        "needs. Consider replacing it with one of the alternatives."
    )


def evaluate_activity(
    activity_name: str,
    profile: LearnerAttributeProfile,
) -> CurrentActivityEvaluation:
    """Evaluate one existing activity against the profile.

    Args:
        activity_name: Free-text name as entered by the parent.
        profile:       Learner profile for the same child.

    Returns:
        CurrentActivityEvaluation; alternatives are empty for ``continue``.
    """
    inferred = infer_activity_attributes(activity_name)
    weak_matched = matching_attributes(profile.weak_attributes, inferred)
    strong_matched = matching_attributes(profile.strong_attributes, inferred)

    alignment = alignment_score(len(weak_matched), len(strong_matched))
    verdict = verdict_for(alignment)

    alternatives: tuple[str, ...] = ()
    if verdict is not Verdict.CONTINUE:
        alternatives = suggest_alternatives(profile.weak_attributes, exclude=[activity_name])

    return CurrentActivityEvaluation(
        activity_name=activity_name,
        inferred_attributes=inferred,
        alignment=alignment,
        recommendation=verdict,
        reasoning=_build_reasoning(verdict, weak_matched, strong_matched),
        alternatives=alternatives,
    )


def evaluate_current_activities(
    activity_names: Optional[Iterable[str]],
    profile: LearnerAttributeProfile,
) -> list[CurrentActivityEvaluation]:
    """Evaluate each non-blank activity name, preserving input order."""
    if not activity_names:
        return []
    return [
        evaluate_activity(name.strip(), profile)
        for name in activity_names
        if name and name.strip()
    ]
