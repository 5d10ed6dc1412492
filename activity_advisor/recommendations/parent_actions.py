"""
ParentActionGenerator: home-based action plans for parents.

Flow
----
1. covered = union of ``infer_activity_attributes(name)`` over the child's
   current activities (the same keyword table the evaluator uses).
2. Top weak attributes not covered   → ``IMPROVEMENT_TEMPLATES[attr]``
   (attributes without a template are skipped).
3. Top strong attributes not covered → LOW-priority strength maintenance.
4. Fewer than ``max_actions`` so far → one age-bracket foundational action.
5. Stable sort HIGH > MEDIUM > LOW, cap at ``max_actions`` (5).
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from activity_advisor.catalog.home_actions import (
    IMPROVEMENT_TEMPLATES,
    foundational_template_for_age,
    strength_maintenance_action,
)
from activity_advisor.config import ParentActionConfig
from activity_advisor.models.recommendation import ParentAction
from activity_advisor.models.report import LearnerAttributeProfile
from activity_advisor.taxonomy.activity_taxonomy import PRIORITY_RANK
from activity_advisor.taxonomy.learner_profile import infer_activity_attributes

logger = logging.getLogger(__name__)


def covered_attributes(activity_names: Optional[Iterable[str]]) -> set[str]:
    """Attributes already developed by the child's current activities."""
    covered: set[str] = set()
    for name in activity_names or ():
        if name and name.strip():
            covered.update(infer_activity_attributes(name))
    return covered


def generate_parent_actions(
    profile: LearnerAttributeProfile,
    age: int,
    current_activities: Optional[Iterable[str]] = None,
    config: Optional[ParentActionConfig] = None,
) -> list[ParentAction]:
    """Build the parent action list for one child.

    Args:
        profile:            Learner profile.
        age:                Approximate age (shared Age/Grade rule).
        current_activities: Names of activities the child already does.
        config:             Limits; defaults when ``None``.

    Returns:
        At most ``config.max_actions`` actions, priority-sorted (stable).
    """
    cfg = config or ParentActionConfig()
    covered = covered_attributes(current_activities)
    actions: list[ParentAction] = []

    for attr in profile.top_weak(cfg.weak_focus_count):
        if attr in covered:
            continue
        template = IMPROVEMENT_TEMPLATES.get(attr)
        if template is None:
            logger.debug("No improvement template for '%s'; skipped", attr)
            continue
        actions.append(template)

    for attr in profile.top_strong(cfg.strength_focus_count):
        if attr not in covered:
            actions.append(strength_maintenance_action(attr))

    if len(actions) < cfg.max_actions:
        foundational = foundational_template_for_age(age)
        if foundational is not None:
            actions.append(foundational)

    ordered = sorted(actions, key=lambda a: -PRIORITY_RANK[a.priority])
    return ordered[: cfg.max_actions]
