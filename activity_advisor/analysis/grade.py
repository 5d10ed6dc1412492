"""
Shared Age/Grade rule.

Reports carry a free-text grade label.  The engine needs an approximate
age for age-appropriateness filtering and for the foundational parent
action.  The rule is a documented approximation, not calendar-accurate:

    "EYP n"    → age = min(2 + n, 6)      (Early Years Programme)
    otherwise  → age = 5 + n               (n ≤ 0 or no number → 5)

``n`` is the first run of digits in the label.
"""

from __future__ import annotations

import re
from typing import Optional

_DIGITS = re.compile(r"\d+")
_EARLY_YEARS = re.compile(r"\beyp", re.IGNORECASE)

EARLY_YEARS_BASE_AGE = 2
EARLY_YEARS_MAX_AGE = 6
SCHOOL_BASE_AGE = 5


def parse_grade_number(grade: Optional[str]) -> int:
    """Return the first integer in ``grade``, or 0 if there is none."""
    if not grade:
        return 0
    match = _DIGITS.search(grade)
    return int(match.group()) if match else 0


def is_early_years(grade: Optional[str]) -> bool:
    return bool(grade) and bool(_EARLY_YEARS.search(grade))


def age_from_grade(grade: Optional[str]) -> int:
    """Approximate a child's age in years from a grade label.

    Examples::

        age_from_grade("EYP 3")    # 5
        age_from_grade("EYP 5")    # 6  (capped)
        age_from_grade("Grade 4")  # 9
        age_from_grade(None)       # 5
    """
    number = parse_grade_number(grade)
    if is_early_years(grade):
        return min(EARLY_YEARS_BASE_AGE + number, EARLY_YEARS_MAX_AGE)
    if number <= 0:
        return SCHOOL_BASE_AGE
    return SCHOOL_BASE_AGE + number
