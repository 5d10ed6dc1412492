"""
AttributeAnalyzer: derive weak/strong learner attributes from a report.

Classification flow
-------------------
1. For each ``learner_profile_attributes`` entry, lower-case the evidence
   and look for keywords from the shared tables in
   ``taxonomy.learner_profile``:

       strength  iff  any STRENGTH_KEYWORD present
                      and no DEVELOPING_KEYWORD present
       weak      otherwise (missing evidence counts as weak)

   The bias is conservative: ambiguous evidence is treated as an area to
   develop rather than a strength.

2. Secondary scan of the free-text summary:
       summary.areas_needing_attention → weak
       summary.key_strengths           → strong
   Any of the ten canonical attribute names (hyphen- and space-insensitive)
   is added if it is not already in either list.

The analyzer is total: it never raises, and missing data yields empty lists.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from activity_advisor.models.report import LearnerAttributeProfile, ReportSource
from activity_advisor.taxonomy.learner_profile import (
    DEVELOPING_KEYWORDS,
    STRENGTH_KEYWORDS,
    attributes_mentioned,
    canonical_attribute,
)

logger = logging.getLogger(__name__)

EvidenceClass = Literal["strength", "weak"]


def classify_evidence(evidence: Optional[str]) -> EvidenceClass:
    """Classify report evidence text as ``"strength"`` or ``"weak"``."""
    text = (evidence or "").lower()
    has_strength = any(kw in text for kw in STRENGTH_KEYWORDS)
    has_developing = any(kw in text for kw in DEVELOPING_KEYWORDS)
    if has_strength and not has_developing:
        return "strength"
    return "weak"


def analyze_attributes(report: Optional[ReportSource]) -> LearnerAttributeProfile:
    """Build a ``LearnerAttributeProfile`` from a report.

    Args:
        report: Parsed report, or ``None``.

    Returns:
        Profile with ordered, de-duplicated canonical attribute names.
        An attribute from the report's profile list lands in exactly one of
        the two lists.
    """
    if report is None:
        return LearnerAttributeProfile()

    weak: list[str] = []
    strong: list[str] = []

    for entry in report.learner_profile_attributes:
        name = canonical_attribute(entry.attribute)
        if not name or name in weak or name in strong:
            continue
        if classify_evidence(entry.evidence) == "strength":
            strong.append(name)
        else:
            weak.append(name)

    if report.summary is not None:
        for text in report.summary.areas_needing_attention:
            for name in attributes_mentioned(text):
                if name not in weak and name not in strong:
                    weak.append(name)
        for text in report.summary.key_strengths:
            for name in attributes_mentioned(text):
                if name not in weak and name not in strong:
                    strong.append(name)

    logger.debug(
        "Attribute profile: weak=%s strong=%s", weak, strong,
    )
    return LearnerAttributeProfile(
        weak_attributes=tuple(weak),
        strong_attributes=tuple(strong),
    )
