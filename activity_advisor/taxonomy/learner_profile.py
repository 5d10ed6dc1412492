"""
Learner-profile attribute taxonomy and the shared keyword tables.

This module is the single source of truth for every keyword lookup the
engine performs:

  - ``STRENGTH_KEYWORDS`` / ``DEVELOPING_KEYWORDS`` classify report evidence
    text (AttributeAnalyzer).
  - ``ACTIVITY_KEYWORD_TABLE`` maps activity-name tokens to the attributes an
    activity develops (CurrentActivityEvaluator and ParentActionGenerator
    both call ``infer_activity_attributes``).

Attribute names are compared in canonical form: lower-case, hyphenated,
e.g. ``"risk-taker"``, ``"open-minded"``.

This module has NO imports from any other ``activity_advisor`` package.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum


class LearnerAttribute(StrEnum):
    """The ten fixed learner-profile attributes."""

    INQUIRER = "inquirer"
    KNOWLEDGEABLE = "knowledgeable"
    THINKER = "thinker"
    COMMUNICATOR = "communicator"
    PRINCIPLED = "principled"
    OPEN_MINDED = "open-minded"
    CARING = "caring"
    RISK_TAKER = "risk-taker"
    BALANCED = "balanced"
    REFLECTIVE = "reflective"


# ── Evidence keywords ─────────────────────────────────────────────────────────

STRENGTH_KEYWORDS: frozenset[str] = frozenset({
    "excellent",
    "strong",
    "consistently",
    "confident",
    "confidently",
    "independently",
    "outstanding",
    "exceptional",
    "always",
    "eagerly",
    "enthusiastic",
    "readily",
    "thoughtfully",
    "exceeds",
    "excels",
})

DEVELOPING_KEYWORDS: frozenset[str] = frozenset({
    "developing",
    "sometimes",
    "struggles",
    "struggle",
    "beginning",
    "emerging",
    "needs support",
    "with support",
    "needs encouragement",
    "learning to",
    "working on",
    "working towards",
    "reluctant",
    "hesitant",
    "hesitates",
    "not yet",
    "occasionally",
    "inconsistent",
    "requires",
    "prompting",
})


# ── Activity-name inference table ─────────────────────────────────────────────

@dataclass(frozen=True)
class ActivityKeywordGroup:
    """One row of the activity-name inference table.

    Attributes:
        name:       Group slug, e.g. ``"physical"``.
        tokens:     Lower-case substrings searched for in an activity name.
                    Tokens of three letters or fewer only match a whole
                    word (plural "s" allowed).
        attributes: Attributes an activity in this group develops.
        excludes:   Phrases removed from the name before this group is
                    matched, e.g. "martial art" for the arts group.
    """

    name: str
    tokens: tuple[str, ...]
    attributes: tuple[LearnerAttribute, ...]
    excludes: tuple[str, ...] = ()


ACTIVITY_KEYWORD_TABLE: tuple[ActivityKeywordGroup, ...] = (
    ActivityKeywordGroup(
        name="physical",
        tokens=(
            "swim", "gymnast", "tumbl", "sport", "soccer", "football",
            "basketball", "tennis", "cricket", "badminton", "martial",
            "karate", "taekwondo", "judo", "cycling", "skating", "climbing",
            "athletic", "hockey", "hiking",
        ),
        attributes=(
            LearnerAttribute.RISK_TAKER,
            LearnerAttribute.BALANCED,
            LearnerAttribute.PRINCIPLED,
        ),
    ),
    ActivityKeywordGroup(
        name="arts",
        tokens=(
            "art", "paint", "draw", "music", "piano", "guitar", "violin",
            "drum", "drama", "theat", "dance", "ballet", "sing", "choir",
            "craft", "pottery",
        ),
        attributes=(
            LearnerAttribute.COMMUNICATOR,
            LearnerAttribute.OPEN_MINDED,
            LearnerAttribute.REFLECTIVE,
            LearnerAttribute.RISK_TAKER,
        ),
        excludes=("martial art",),
    ),
    ActivityKeywordGroup(
        name="language",
        tokens=(
            "language", "spanish", "french", "mandarin", "chinese", "german",
            "hindi", "english", "phonics", "reading", "book", "library",
            "storytell", "writing", "debate",
        ),
        attributes=(
            LearnerAttribute.COMMUNICATOR,
            LearnerAttribute.OPEN_MINDED,
            LearnerAttribute.KNOWLEDGEABLE,
        ),
    ),
    ActivityKeywordGroup(
        name="stem",
        tokens=(
            "science", "stem", "coding", "robot", "lego", "math", "abacus",
            "engineer", "chess", "experiment", "astronomy",
        ),
        attributes=(
            LearnerAttribute.INQUIRER,
            LearnerAttribute.KNOWLEDGEABLE,
            LearnerAttribute.THINKER,
        ),
    ),
    ActivityKeywordGroup(
        name="social",
        tokens=(
            "scout", "volunteer", "community", "charity", "service",
            "guides", "team building",
        ),
        attributes=(
            LearnerAttribute.CARING,
            LearnerAttribute.PRINCIPLED,
            LearnerAttribute.COMMUNICATOR,
            LearnerAttribute.OPEN_MINDED,
        ),
    ),
    ActivityKeywordGroup(
        name="mindfulness",
        tokens=("yoga", "mindful", "meditat", "breathing"),
        attributes=(
            LearnerAttribute.REFLECTIVE,
            LearnerAttribute.BALANCED,
            LearnerAttribute.CARING,
        ),
    ),
)

FALLBACK_ATTRIBUTES: tuple[LearnerAttribute, ...] = (
    LearnerAttribute.BALANCED,
    LearnerAttribute.KNOWLEDGEABLE,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

_SEPARATORS = re.compile(r"[\s\-_]+")

_CANONICAL_BY_KEY: dict[str, LearnerAttribute] = {
    _SEPARATORS.sub("", attr.value): attr for attr in LearnerAttribute
}


def _squash(text: str) -> str:
    return _SEPARATORS.sub("", text.lower())


_SHORT_TOKEN_LEN = 3


def _token_in(token: str, lowered: str) -> bool:
    if len(token) <= _SHORT_TOKEN_LEN:
        return re.search(rf"\b{re.escape(token)}s?\b", lowered) is not None
    return token in lowered


def _group_matches(group: ActivityKeywordGroup, lowered: str) -> bool:
    for phrase in group.excludes:
        lowered = lowered.replace(phrase, " ")
    return any(_token_in(token, lowered) for token in group.tokens)


def canonical_attribute(name: str) -> str:
    """Return the canonical form of an attribute name.

    Known attributes are matched hyphen-, space- and case-insensitively
    (``"Risk Taker"`` → ``"risk-taker"``).  Unknown names are returned
    stripped and lower-cased.
    """
    attr = _CANONICAL_BY_KEY.get(_squash(name))
    if attr is not None:
        return attr.value
    return name.strip().lower()


def attributes_mentioned(text: str) -> list[str]:
    """Return canonical attributes named anywhere in ``text``, in enum order."""
    squashed = _squash(text)
    if not squashed:
        return []
    return [attr.value for key, attr in _CANONICAL_BY_KEY.items() if key in squashed]


def fuzzy_match(a: str, b: str) -> bool:
    """Case-insensitive substring containment in either direction.

    Empty strings never match.
    """
    left = a.strip().lower()
    right = b.strip().lower()
    if not left or not right:
        return False
    return left in right or right in left


def matching_attributes(
    profile_attributes: list[str] | tuple[str, ...],
    target_attributes: frozenset[str] | tuple[str, ...] | list[str],
) -> list[str]:
    """Return the distinct profile attributes that fuzzy-match any target.

    Order follows ``profile_attributes``.
    """
    matched: list[str] = []
    for attr in profile_attributes:
        if attr in matched:
            continue
        if any(fuzzy_match(attr, target) for target in target_attributes):
            matched.append(attr)
    return matched


def infer_activity_attributes(activity_name: str) -> tuple[str, ...]:
    """Infer the attributes an activity develops from its free-text name.

    Every keyword group whose tokens appear in the lower-cased name
    contributes its attributes (union).  Short tokens such as "art" match
    whole words only, so "party" and "start" do not count as arts.  Names
    matching no group fall back to ``FALLBACK_ATTRIBUTES``.  Result is in
    ``LearnerAttribute`` order.
    """
    lowered = activity_name.lower()
    found: set[LearnerAttribute] = set()
    for group in ACTIVITY_KEYWORD_TABLE:
        if _group_matches(group, lowered):
            found.update(group.attributes)
    if not found:
        found.update(FALLBACK_ATTRIBUTES)
    return tuple(attr.value for attr in LearnerAttribute if attr in found)
