"""
Home-action templates used by the ParentActionGenerator.

IMPROVEMENT_TEMPLATES
    One action plan per weak attribute.  ``principled`` and ``knowledgeable``
    have no template yet; the generator skips them.
FOUNDATIONAL_TEMPLATES
    Age-bracket fallbacks appended when fewer than five actions exist:
    ``"early-literacy"`` (age <= 5) and ``"reading-writing"`` (age <= 10).
strength_maintenance_action(attr)
    Generic LOW-priority plan for keeping a strength active.
"""

from __future__ import annotations

from typing import Optional

from activity_advisor.models.recommendation import HomeActivity, ParentAction
from activity_advisor.taxonomy.activity_taxonomy import PriorityTier

# TODO: author templates for "principled" and "knowledgeable".
IMPROVEMENT_TEMPLATES: dict[str, ParentAction] = {
    "risk-taker": ParentAction(
        target_area="risk-taker",
        priority=PriorityTier.HIGH,
        category="improvement",
        title="Build Confidence to Try New Things",
        description=(
            "Create low-stakes chances for your child to attempt something "
            "unfamiliar and to see mistakes as part of learning."
        ),
        activities=(
            HomeActivity(
                activity="\"New thing\" challenge",
                frequency="Weekly",
                duration="15-20 minutes",
                tips=(
                    "Let your child pick from three new foods, games or skills",
                    "Praise the attempt, not the result",
                    "Share a time you tried something new and found it hard",
                ),
            ),
            HomeActivity(
                activity="Playground obstacle course",
                frequency="2x per week",
                duration="30 minutes",
                tips=(
                    "Start with easy steps and let your child add harder ones",
                    "Stay close but avoid stepping in too early",
                ),
            ),
        ),
        expected_outcome="More willingness to volunteer answers and try unfamiliar tasks.",
        time_to_see_results="4-6 weeks",
    ),
    "communicator": ParentAction(
        target_area="communicator",
        priority=PriorityTier.HIGH,
        category="improvement",
        title="Daily Conversation and Storytelling",
        description=(
            "Give your child regular, relaxed opportunities to explain ideas "
            "and tell stories in their own words."
        ),
        activities=(
            HomeActivity(
                activity="Dinner-table \"best and hardest\" share",
                frequency="Daily",
                duration="10 minutes",
                tips=(
                    "Ask open questions such as \"What happened next?\"",
                    "Wait a few seconds before helping with words",
                ),
            ),
            HomeActivity(
                activity="Picture-book retelling",
                frequency="3x per week",
                duration="15 minutes",
                tips=(
                    "Let your child tell the story from the pictures first",
                    "Swap roles and let them ask you questions",
                ),
            ),
        ),
        expected_outcome="Longer, clearer explanations and more confidence speaking in groups.",
        time_to_see_results="3-4 weeks",
    ),
    "inquirer": ParentAction(
        target_area="inquirer",
        priority=PriorityTier.HIGH,
        category="improvement",
        title="Nurture Curiosity with Questions",
        description=(
            "Turn everyday moments into small investigations driven by your "
            "child's own questions."
        ),
        activities=(
            HomeActivity(
                activity="Wonder jar",
                frequency="Weekly",
                duration="20 minutes",
                tips=(
                    "Write down questions your child asks during the week",
                    "Pick one each weekend and find the answer together",
                ),
            ),
            HomeActivity(
                activity="Kitchen experiments",
                frequency="Weekly",
                duration="30 minutes",
                tips=(
                    "Ask \"What do you think will happen?\" before each step",
                    "Keep a simple drawing journal of results",
                ),
            ),
        ),
        expected_outcome="More spontaneous questions and interest in finding things out.",
        time_to_see_results="4-6 weeks",
    ),
    "thinker": ParentAction(
        target_area="thinker",
        priority=PriorityTier.MEDIUM,
        category="improvement",
        title="Problem-Solving Games",
        description="Use games and puzzles that reward planning and trying different strategies.",
        activities=(
            HomeActivity(
                activity="Family puzzle or strategy game night",
                frequency="Weekly",
                duration="30-45 minutes",
                tips=(
                    "Ask your child to explain why they chose a move",
                    "Choose cooperative games for younger children",
                ),
            ),
            HomeActivity(
                activity="Build-it challenge with blocks",
                frequency="2x per week",
                duration="20 minutes",
                tips=("Set a goal such as \"a bridge that holds a toy car\"",),
            ),
        ),
        expected_outcome="More persistence and willingness to try a second approach.",
        time_to_see_results="4-8 weeks",
    ),
    "open-minded": ParentAction(
        target_area="open-minded",
        priority=PriorityTier.MEDIUM,
        category="improvement",
        title="Explore Other Cultures Together",
        description="Introduce stories, food and music from different cultures at home.",
        activities=(
            HomeActivity(
                activity="Around-the-world night",
                frequency="2x per month",
                duration="60 minutes",
                tips=(
                    "Cook a simple dish and find the country on a map",
                    "Listen to music or a folk tale from the same place",
                ),
            ),
            HomeActivity(
                activity="Perspective questions during reading",
                frequency="3x per week",
                duration="10 minutes",
                tips=("Ask how a different character might feel about the same event",),
            ),
        ),
        expected_outcome="Greater curiosity about differences and more flexible thinking.",
        time_to_see_results="6-8 weeks",
    ),
    "caring": ParentAction(
        target_area="caring",
        priority=PriorityTier.MEDIUM,
        category="improvement",
        title="Everyday Kindness Habits",
        description="Give your child small, real responsibilities for helping others.",
        activities=(
            HomeActivity(
                activity="Kindness calendar",
                frequency="Daily",
                duration="5 minutes",
                tips=(
                    "Plan one small kind act each day",
                    "Talk about how the other person might have felt",
                ),
            ),
            HomeActivity(
                activity="Care for a plant or pet",
                frequency="Daily",
                duration="10 minutes",
                tips=("Let your child own one task from start to finish",),
            ),
        ),
        expected_outcome="More noticing of others' needs and offering help unprompted.",
        time_to_see_results="4-6 weeks",
    ),
    "balanced": ParentAction(
        target_area="balanced",
        priority=PriorityTier.MEDIUM,
        category="improvement",
        title="A Balanced Weekly Rhythm",
        description="Mix active play, quiet time and rest in a predictable weekly routine.",
        activities=(
            HomeActivity(
                activity="Family movement time",
                frequency="Daily",
                duration="30 minutes",
                tips=("Walk, dance or cycle together; keep screens off",),
            ),
            HomeActivity(
                activity="Visual weekly planner",
                frequency="Weekly",
                duration="15 minutes",
                tips=("Let your child place pictures for play, rest and chores",),
            ),
        ),
        expected_outcome="Better energy regulation and smoother transitions between activities.",
        time_to_see_results="3-4 weeks",
    ),
    "reflective": ParentAction(
        target_area="reflective",
        priority=PriorityTier.MEDIUM,
        category="improvement",
        title="Reflection at Bedtime",
        description="Build a short daily habit of thinking back over the day.",
        activities=(
            HomeActivity(
                activity="Three questions at bedtime",
                frequency="Daily",
                duration="5-10 minutes",
                tips=(
                    "What went well? What was tricky? What will you try tomorrow?",
                    "Model your own answers first",
                ),
            ),
            HomeActivity(
                activity="Drawing journal",
                frequency="3x per week",
                duration="15 minutes",
                tips=("Younger children can draw instead of writing",),
            ),
        ),
        expected_outcome="More ability to describe feelings and learn from mistakes.",
        time_to_see_results="4-6 weeks",
    ),
}


FOUNDATIONAL_TEMPLATES: dict[str, ParentAction] = {
    "early-literacy": ParentAction(
        target_area="early literacy",
        priority=PriorityTier.MEDIUM,
        category="foundational",
        title="Early Literacy Foundations",
        description="Daily shared reading and playful sound games build the base for reading.",
        activities=(
            HomeActivity(
                activity="Shared picture-book reading",
                frequency="Daily",
                duration="15-20 minutes",
                tips=(
                    "Point to words as you read",
                    "Pause to let your child finish familiar lines",
                ),
            ),
            HomeActivity(
                activity="Rhyme and sound games",
                frequency="3x per week",
                duration="10 minutes",
                tips=("Play \"I spy something that starts with...\"",),
            ),
        ),
        expected_outcome="Stronger vocabulary, letter-sound awareness and love of books.",
        time_to_see_results="6-8 weeks",
    ),
    "reading-writing": ParentAction(
        target_area="reading and writing",
        priority=PriorityTier.MEDIUM,
        category="foundational",
        title="Reading and Writing Routine",
        description="Keep independent reading and everyday writing part of each week.",
        activities=(
            HomeActivity(
                activity="Independent reading time",
                frequency="Daily",
                duration="20 minutes",
                tips=(
                    "Let your child choose the book",
                    "Ask one question about the story afterwards",
                ),
            ),
            HomeActivity(
                activity="Family notes and lists",
                frequency="2x per week",
                duration="10 minutes",
                tips=("Ask your child to write the shopping list or a note to a relative",),
            ),
        ),
        expected_outcome="More fluent reading and willingness to write for real purposes.",
        time_to_see_results="6-8 weeks",
    ),
}


def foundational_template_for_age(age: int) -> Optional[ParentAction]:
    """Age-bracket foundational action, or ``None`` above age 10."""
    if age <= 5:
        return FOUNDATIONAL_TEMPLATES["early-literacy"]
    if age <= 10:
        return FOUNDATIONAL_TEMPLATES["reading-writing"]
    return None


def strength_maintenance_action(attribute: str) -> ParentAction:
    label = attribute.replace("-", " ").title()
    return ParentAction(
        target_area=attribute,
        priority=PriorityTier.LOW,
        category="strength-maintenance",
        title=f"Keep {label} Strong",
        description=(
            f"Your child already shows strength as a {attribute}. Give it "
            "regular room to grow so it stays a source of confidence."
        ),
        activities=(
            HomeActivity(
                activity=f"Weekly {attribute} spotlight",
                frequency="Weekly",
                duration="15-20 minutes",
                tips=(
                    "Notice and name the strength when you see it",
                    "Invite your child to use it to help a sibling or friend",
                ),
            ),
        ),
        expected_outcome=f"Sustained confidence as a {attribute}.",
        time_to_see_results="Ongoing",
    )
