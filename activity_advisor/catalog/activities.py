"""
Static activity catalog: the candidate pool for every recommendation request.

The catalog is read-only configuration data: a module-level tuple of frozen
``ActivityCandidate`` models.  Insertion order matters; it is the stable
tie-breaker when two candidates score equally.

Integrity contract (checked by ``tests/test_catalog/test_activities.py``):
  - ids are unique slugs.
  - every target attribute is one of the ten ``LearnerAttribute`` values.
  - at least one physical candidate exists for every age from 3 to 14.
  - costs are USD per month.

This module has NO imports from other ``activity_advisor`` packages besides
``models`` and ``taxonomy``.
"""

from __future__ import annotations

from typing import Optional

from activity_advisor.models.activity import (
    ActivityCandidate,
    AgeRange,
    CostRange,
    RegionalSuitability,
)
from activity_advisor.taxonomy.activity_taxonomy import (
    ActivityCategory as Cat,
    ActivityType as Setting,
    ClimateZone as Zone,
    PriorityTier as Tier,
)


def _cost(lo: float, hi: float) -> CostRange:
    return CostRange(min_usd=lo, max_usd=hi)


def _ages(lo: int, hi: int) -> AgeRange:
    return AgeRange(min_age=lo, max_age=hi)


_NOT_ARID = RegionalSuitability(
    climate_preferences=(Zone.TROPICAL, Zone.SUBTROPICAL, Zone.TEMPERATE, Zone.COLD),
)
_MILD = RegionalSuitability(
    climate_preferences=(Zone.TROPICAL, Zone.SUBTROPICAL, Zone.TEMPERATE),
)


ACTIVITY_CATALOG: tuple[ActivityCandidate, ...] = (
    # ── Physical development ──────────────────────────────────────────────────
    ActivityCandidate(
        id="gymnastics-tumbling",
        name="Gymnastics/Tumbling Program",
        category=Cat.PHYSICAL,
        target_attributes=("Risk-taker", "Balanced", "Reflective"),
        priority=Tier.HIGH,
        activity_type=Setting.INDOOR,
        cost=_cost(100, 150),
        age_range=_ages(3, 12),
        description=(
            "Age-appropriate gymnastics focusing on body awareness, balance, "
            "and controlled risk-taking in a safe environment."
        ),
        benefits=(
            "Builds confidence in trying new physical challenges",
            "Develops body awareness and coordination",
            "Teaches safe risk assessment",
            "Promotes resilience through trying again after falls",
        ),
        frequency="2x per week, 45-60 minutes",
        why_recommended=(
            "Develops risk-taking in a structured, safe environment."
        ),
    ),
    ActivityCandidate(
        id="swimming-lessons",
        name="Swimming Lessons",
        category=Cat.PHYSICAL,
        target_attributes=("Risk-taker", "Balanced", "Principled"),
        priority=Tier.HIGH,
        activity_type=Setting.BOTH,
        cost=_cost(80, 150),
        age_range=_ages(3, 14),
        description=(
            "Water safety and swimming skills focusing on confidence and "
            "safety awareness."
        ),
        benefits=(
            "Overcomes water fear through gradual exposure",
            "Teaches important safety skills",
            "Builds confidence in unfamiliar environments",
            "Develops gross motor skills",
        ),
        frequency="1-2x per week, 30-45 minutes",
        why_recommended=(
            "Essential life skill that naturally develops risk-taking and confidence."
        ),
    ),
    ActivityCandidate(
        id="multi-sport",
        name="Multi-Sport Introduction",
        category=Cat.PHYSICAL,
        target_attributes=("Risk-taker", "Balanced", "Thinker", "Caring"),
        priority=Tier.HIGH,
        activity_type=Setting.OUTDOOR,
        cost=_cost(60, 120),
        age_range=_ages(4, 10),
        regional=_NOT_ARID,
        description=(
            "Non-competitive introduction to soccer, basketball and t-ball "
            "through games and play."
        ),
        benefits=(
            "Exposure to multiple sports without pressure",
            "Develops varied motor skills",
            "Teaches teamwork and cooperation",
        ),
        frequency="1-2x per week, 45-60 minutes",
        why_recommended=(
            "Variety keeps engagement high while building physical confidence "
            "in a team setting."
        ),
    ),
    ActivityCandidate(
        id="martial-arts",
        name="Martial Arts (Karate/Taekwondo)",
        category=Cat.PHYSICAL,
        target_attributes=("Principled", "Risk-taker", "Balanced", "Reflective"),
        priority=Tier.MEDIUM,
        activity_type=Setting.INDOOR,
        cost=_cost(70, 130),
        age_range=_ages(5, 16),
        description=(
            "Structured martial arts classes emphasising discipline, respect "
            "and self-control."
        ),
        benefits=(
            "Builds self-discipline and respect",
            "Develops focus and body control",
            "Graded belts reward persistence",
        ),
        frequency="2x per week, 45-60 minutes",
        why_recommended="Pairs physical courage with clear principles of conduct.",
    ),
    # ── Outdoor sports & adventure ────────────────────────────────────────────
    ActivityCandidate(
        id="climbing-bouldering",
        name="Climbing & Bouldering Club",
        category=Cat.OUTDOOR_ADVENTURE,
        target_attributes=("Risk-taker", "Thinker", "Balanced"),
        priority=Tier.MEDIUM,
        activity_type=Setting.BOTH,
        cost=_cost(90, 160),
        age_range=_ages(7, 16),
        description="Supervised climbing on walls and natural rock with route problem-solving.",
        benefits=(
            "Calculated risk-taking with safety systems",
            "Problem-solving on every route",
            "Strength and coordination",
        ),
        frequency="1x per week, 90 minutes",
        why_recommended="Every climb is a small, safe risk with a visible payoff.",
    ),
    ActivityCandidate(
        id="junior-surf-club",
        name="Junior Surf & Beach Safety Club",
        category=Cat.OUTDOOR_ADVENTURE,
        target_attributes=("Risk-taker", "Balanced", "Caring"),
        priority=Tier.MEDIUM,
        activity_type=Setting.OUTDOOR,
        cost=_cost(120, 200),
        age_range=_ages(7, 16),
        regional=_MILD.model_copy(update={"requires_coastal": True}),
        description="Surf skills, ocean awareness and beach safety for young swimmers.",
        benefits=(
            "Reading conditions and judging risk",
            "Ocean stewardship",
            "Physical confidence in open water",
        ),
        frequency="1x per week, 2 hours",
        why_recommended="Builds courage alongside respect for the environment.",
    ),
    ActivityCandidate(
        id="cycling-skills",
        name="Cycling & Bike Skills",
        category=Cat.OUTDOOR_ADVENTURE,
        target_attributes=("Risk-taker", "Balanced", "Principled"),
        priority=Tier.LOW,
        activity_type=Setting.OUTDOOR,
        cost=_cost(40, 80),
        age_range=_ages(5, 14),
        regional=_NOT_ARID,
        description="Bike handling, road safety and group rides on traffic-free routes.",
        benefits=(
            "Independence and road awareness",
            "Balance and coordination",
            "Outdoor exercise habit",
        ),
        frequency="1x per week, 60 minutes",
        why_recommended="Low-cost way to build independence and safe risk-taking.",
    ),
    # ── Cultural exposure ─────────────────────────────────────────────────────
    ActivityCandidate(
        id="world-music",
        name="World Music & Movement",
        category=Cat.CULTURAL,
        target_attributes=("Open-minded", "Knowledgeable", "Communicator", "Balanced"),
        priority=Tier.HIGH,
        activity_type=Setting.INDOOR,
        cost=_cost(60, 100),
        age_range=_ages(3, 8),
        description=(
            "Explore music, instruments, and dances from cultures around the "
            "world through interactive, play-based learning."
        ),
        benefits=(
            "Exposure to diverse cultural traditions",
            "Develops rhythm and musical awareness",
            "Builds appreciation for different perspectives",
        ),
        frequency="1x per week, 45 minutes",
        why_recommended="Develops open-mindedness through joyful cultural exposure.",
    ),
    ActivityCandidate(
        id="language-immersion",
        name="Language Immersion Class",
        category=Cat.CULTURAL,
        target_attributes=("Open-minded", "Communicator", "Risk-taker", "Knowledgeable"),
        priority=Tier.HIGH,
        activity_type=Setting.INDOOR,
        cost=_cost(80, 150),
        age_range=_ages(3, 14),
        description=(
            "Play-based language learning in Spanish, French, or Mandarin "
            "through songs, games, and stories."
        ),
        benefits=(
            "Early language acquisition advantage",
            "Cultural understanding through language",
            "Confidence in communication",
        ),
        frequency="1-2x per week, 45-60 minutes",
        why_recommended="Builds communication and cultural awareness together.",
    ),
    ActivityCandidate(
        id="cultural-storytelling",
        name="Cultural Storytelling & Arts",
        category=Cat.CULTURAL,
        target_attributes=("Open-minded", "Knowledgeable", "Caring", "Communicator"),
        priority=Tier.MEDIUM,
        activity_type=Setting.INDOOR,
        cost=_cost(60, 120),
        age_range=_ages(4, 10),
        description=(
            "Stories, arts, and crafts from cultures worldwide; each session "
            "explores a different tradition."
        ),
        benefits=(
            "Develops empathy through stories",
            "Hands-on cultural art forms",
            "Critical thinking about perspectives",
        ),
        frequency="1x per week, 60 minutes",
        why_recommended="Combines creativity with perspective-taking.",
    ),
    # ── STEM & inquiry ────────────────────────────────────────────────────────
    ActivityCandidate(
        id="science-exploration",
        name="Science Exploration Club",
        category=Cat.STEM,
        target_attributes=("Inquirer", "Knowledgeable", "Thinker", "Risk-taker"),
        priority=Tier.HIGH,
        activity_type=Setting.INDOOR,
        cost=_cost(60, 120),
        age_range=_ages(4, 12),
        description=(
            "Hands-on experiments focused on observation, prediction, and discovery."
        ),
        benefits=(
            "Develops an inquiry mindset",
            "Safe experimentation and \"failure\"",
            "Scientific thinking foundations",
        ),
        frequency="1x per week, 60 minutes",
        why_recommended="Builds the questioning habits behind independent learning.",
    ),
    ActivityCandidate(
        id="nature-exploration",
        name="Nature & Outdoor Exploration",
        category=Cat.STEM,
        target_attributes=("Inquirer", "Knowledgeable", "Caring", "Risk-taker"),
        priority=Tier.HIGH,
        activity_type=Setting.OUTDOOR,
        cost=_cost(40, 80),
        age_range=_ages(3, 12),
        regional=_NOT_ARID,
        description="Regular outdoor sessions in natural settings with hands-on exploration.",
        benefits=(
            "Environmental awareness and stewardship",
            "Inquiry in a natural context",
            "Physical risk-taking opportunities",
        ),
        frequency="1-2x per month, 90-120 minutes",
        why_recommended="Combines inquiry, knowledge and care for the environment.",
    ),
    ActivityCandidate(
        id="building-engineering",
        name="Building & Engineering for Kids",
        category=Cat.STEM,
        target_attributes=("Thinker", "Inquirer", "Risk-taker", "Knowledgeable"),
        priority=Tier.MEDIUM,
        activity_type=Setting.INDOOR,
        cost=_cost(60, 120),
        age_range=_ages(5, 12),
        description="Engineering challenges with LEGO, blocks, and everyday materials.",
        benefits=(
            "Problem-solving and design thinking",
            "Safe failure environment",
            "Spatial reasoning development",
        ),
        frequency="1x per week, 60 minutes",
        why_recommended="Natural risk-taking through building and testing.",
    ),
    ActivityCandidate(
        id="coding-robotics",
        name="Coding & Robotics Club",
        category=Cat.STEM,
        target_attributes=("Thinker", "Inquirer", "Knowledgeable"),
        priority=Tier.MEDIUM,
        activity_type=Setting.INDOOR,
        cost=_cost(90, 160),
        age_range=_ages(7, 16),
        description="Block-based and text coding with small robots and sensors.",
        benefits=(
            "Logical and computational thinking",
            "Debugging builds persistence",
            "Collaborative project work",
        ),
        frequency="1x per week, 90 minutes",
        why_recommended="Turns abstract problem-solving into tangible results.",
    ),
    ActivityCandidate(
        id="chess-club",
        name="Chess Club",
        category=Cat.STEM,
        target_attributes=("Thinker", "Reflective", "Principled"),
        priority=Tier.LOW,
        activity_type=Setting.INDOOR,
        cost=_cost(30, 60),
        age_range=_ages(6, 16),
        description="Coached chess with puzzles, friendly matches and game review.",
        benefits=(
            "Planning and strategic thinking",
            "Reviewing mistakes calmly",
            "Fair play and sportsmanship",
        ),
        frequency="1x per week, 60 minutes",
        why_recommended="Strengthens careful thinking and reflection on decisions.",
    ),
    # ── Mindfulness & reflection ──────────────────────────────────────────────
    ActivityCandidate(
        id="kids-yoga",
        name="Kids Yoga & Mindfulness",
        category=Cat.MINDFULNESS,
        target_attributes=("Reflective", "Balanced", "Caring", "Principled"),
        priority=Tier.MEDIUM,
        activity_type=Setting.INDOOR,
        cost=_cost(40, 80),
        age_range=_ages(3, 12),
        description="Playful yoga with breathing exercises and simple meditation.",
        benefits=(
            "Develops self-awareness and reflection",
            "Teaches self-regulation techniques",
            "Provides calming strategies",
        ),
        frequency="1x per week, 30-45 minutes (daily practice at home)",
        why_recommended="Directly develops reflection and can be practised at home.",
    ),
    ActivityCandidate(
        id="expressive-arts",
        name="Art Therapy / Expressive Arts",
        category=Cat.MINDFULNESS,
        target_attributes=("Reflective", "Communicator", "Caring", "Balanced"),
        priority=Tier.MEDIUM,
        activity_type=Setting.INDOOR,
        cost=_cost(80, 150),
        age_range=_ages(4, 14),
        description="Creative expression used to explore emotions and build self-awareness.",
        benefits=(
            "Emotional awareness and regulation",
            "Safe expression of feelings",
            "Coping strategy development",
        ),
        frequency="1-2x per month, 45-60 minutes",
        why_recommended="Supports reflective thinking about self.",
    ),
    # ── Creative expression ───────────────────────────────────────────────────
    ActivityCandidate(
        id="creative-drama",
        name="Creative Drama / Theater Arts",
        category=Cat.CREATIVE,
        target_attributes=("Communicator", "Risk-taker", "Open-minded", "Reflective"),
        priority=Tier.MEDIUM,
        activity_type=Setting.INDOOR,
        cost=_cost(60, 120),
        age_range=_ages(4, 14),
        description="Imaginative play, storytelling, and performance activities.",
        benefits=(
            "Builds confidence through performance",
            "Develops perspective-taking",
            "Risk-taking in a creative context",
        ),
        frequency="1x per week, 45-60 minutes",
        why_recommended="Builds on communication while stretching comfort zones.",
    ),
    ActivityCandidate(
        id="visual-arts",
        name="Visual Arts & Painting Class",
        category=Cat.CREATIVE,
        target_attributes=("Reflective", "Communicator", "Open-minded"),
        priority=Tier.LOW,
        activity_type=Setting.INDOOR,
        cost=_cost(50, 100),
        age_range=_ages(3, 14),
        description="Drawing, painting and mixed media with time to talk about each piece.",
        benefits=(
            "Fine motor development",
            "Expressing ideas visually",
            "Looking at others' work with curiosity",
        ),
        frequency="1x per week, 60 minutes",
        why_recommended="A calm outlet for expression and reflection.",
    ),
    # ── Social & community ────────────────────────────────────────────────────
    ActivityCandidate(
        id="junior-scouts",
        name="Scouts / Junior Guides",
        category=Cat.SOCIAL,
        target_attributes=("Caring", "Principled", "Communicator", "Risk-taker"),
        priority=Tier.MEDIUM,
        activity_type=Setting.OUTDOOR,
        cost=_cost(20, 50),
        age_range=_ages(6, 14),
        description="Weekly troop meetings, camping trips and community service badges.",
        benefits=(
            "Teamwork and leadership",
            "Service to the community",
            "Outdoor skills and independence",
        ),
        frequency="1x per week, 90 minutes + occasional trips",
        why_recommended="Values-driven group activity with real responsibility.",
    ),
    ActivityCandidate(
        id="community-garden",
        name="Community Garden Volunteers",
        category=Cat.SOCIAL,
        target_attributes=("Caring", "Principled", "Inquirer", "Balanced"),
        priority=Tier.LOW,
        activity_type=Setting.OUTDOOR,
        cost=_cost(0, 20),
        age_range=_ages(4, 14),
        regional=_MILD,
        description="Family-friendly volunteering growing food for a local food bank.",
        benefits=(
            "Responsibility for living things",
            "Contribution to the community",
            "Learning where food comes from",
        ),
        frequency="2x per month, 90 minutes",
        why_recommended="Hands-on caring with visible results.",
    ),
    # ── Language & literacy ───────────────────────────────────────────────────
    ActivityCandidate(
        id="library-storytime",
        name="Library Storytime & Book Club",
        category=Cat.LITERACY,
        target_attributes=("Communicator", "Knowledgeable", "Reflective"),
        priority=Tier.LOW,
        activity_type=Setting.INDOOR,
        cost=_cost(0, 30),
        age_range=_ages(3, 10),
        description="Read-aloud sessions and age-banded book discussions at the local library.",
        benefits=(
            "Vocabulary and listening skills",
            "Confidence sharing opinions",
            "Habit of reading for pleasure",
        ),
        frequency="1x per week, 45 minutes",
        why_recommended="Free, low-pressure literacy and discussion practice.",
    ),
    # ── Home-based ────────────────────────────────────────────────────────────
    ActivityCandidate(
        id="home-science",
        name="Kitchen Science Experiments at Home",
        category=Cat.STEM,
        target_attributes=("Inquirer", "Thinker", "Knowledgeable"),
        priority=Tier.MEDIUM,
        activity_type=Setting.INDOOR,
        cost=_cost(10, 30),
        age_range=_ages(4, 12),
        home_based=True,
        description="Simple weekly experiments with household materials and a prediction journal.",
        benefits=(
            "Curiosity driven by the child's own questions",
            "Parent-child collaboration",
            "Very low cost",
        ),
        frequency="1x per week, 30 minutes",
        why_recommended="Brings inquiry into everyday family time.",
    ),
    ActivityCandidate(
        id="family-reading",
        name="Family Reading Circle",
        category=Cat.LITERACY,
        target_attributes=("Communicator", "Knowledgeable", "Reflective"),
        priority=Tier.MEDIUM,
        activity_type=Setting.INDOOR,
        cost=_cost(0, 20),
        age_range=_ages(3, 12),
        home_based=True,
        description="Shared reading with turn-taking and a short chat about each story.",
        benefits=(
            "Language development",
            "Talking about feelings and choices in stories",
            "Daily connection time",
        ),
        frequency="Daily, 15-20 minutes",
        why_recommended="The simplest high-impact habit for communication.",
    ),
    ActivityCandidate(
        id="nature-journal",
        name="Backyard Nature Journal",
        category=Cat.MINDFULNESS,
        target_attributes=("Reflective", "Inquirer", "Caring"),
        priority=Tier.LOW,
        activity_type=Setting.OUTDOOR,
        cost=_cost(0, 15),
        age_range=_ages(4, 14),
        home_based=True,
        regional=_NOT_ARID,
        description="Observe, sketch and write about plants, insects and weather near home.",
        benefits=(
            "Patient observation",
            "Reflection through drawing and writing",
            "Care for the local environment",
        ),
        frequency="2-3x per week, 20 minutes",
        why_recommended="Quiet outdoor reflection that needs no venue.",
    ),
)

_BY_ID: dict[str, ActivityCandidate] = {a.id: a for a in ACTIVITY_CATALOG}


def get_catalog() -> tuple[ActivityCandidate, ...]:
    """Return the immutable catalog in insertion order."""
    return ACTIVITY_CATALOG


def get_activity(activity_id: str) -> Optional[ActivityCandidate]:
    """Return a catalog entry by id, or ``None``."""
    return _BY_ID.get(activity_id)
