"""
Activity taxonomy: catalog categories, priority tiers and setting types.

``ActivityCategory`` values are the display labels used in the output
contract (``"Physical Development"``, ``"STEM & Inquiry"`` ...).  The
DiverseSelector's physical guarantee relies on ``is_physical_category``.

This module has NO imports from any other ``activity_advisor`` package.
"""

from enum import StrEnum


class ActivityCategory(StrEnum):
    """Top-level catalog category."""

    PHYSICAL = "Physical Development"
    """Gymnastics, swimming, team sports, martial arts."""

    OUTDOOR_ADVENTURE = "Outdoor Sports & Adventure"
    """Climbing, cycling, surf and sailing clubs."""

    CULTURAL = "Cultural Exposure"
    """World music, language immersion, cultural storytelling."""

    STEM = "STEM & Inquiry"
    """Science clubs, engineering, coding, nature exploration."""

    MINDFULNESS = "Mindfulness & Reflection"
    """Yoga, expressive arts, journaling."""

    CREATIVE = "Creative Expression"
    """Drama, visual arts, music lessons."""

    SOCIAL = "Social & Community"
    """Scouting, volunteering, team projects."""

    LITERACY = "Language & Literacy"
    """Reading circles, storytelling, writing clubs."""


class PriorityTier(StrEnum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


PRIORITY_RANK: dict[PriorityTier, int] = {
    PriorityTier.HIGH: 3,
    PriorityTier.MEDIUM: 2,
    PriorityTier.LOW: 1,
}


class ActivityType(StrEnum):
    """Where an activity takes place; ``BOTH`` counts half to each side."""

    INDOOR = "indoor"
    OUTDOOR = "outdoor"
    BOTH = "both"


class ClimateZone(StrEnum):
    TROPICAL = "tropical"
    SUBTROPICAL = "subtropical"
    TEMPERATE = "temperate"
    COLD = "cold"
    ARID = "arid"


PHYSICAL_CATEGORIES: frozenset[ActivityCategory] = frozenset({
    ActivityCategory.PHYSICAL,
    ActivityCategory.OUTDOOR_ADVENTURE,
})


def is_physical_category(category: str) -> bool:
    """True for physical/sports categories (also any label mentioning sport)."""
    if category in PHYSICAL_CATEGORIES:
        return True
    lowered = category.lower()
    return "physical" in lowered or "sport" in lowered
