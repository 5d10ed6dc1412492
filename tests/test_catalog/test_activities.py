"""
Catalog integrity tests.

What we test
------------
  - Ids unique; get_activity() looks them up.
  - Every target attribute is one of the ten learner attributes.
  - A physical activity is available at every age from 3 to 14.
  - At least 15 activities for each age from 5 to 10.
  - Home-based entries exist and sit in age ranges the selector can reach.
"""

from __future__ import annotations

from activity_advisor.catalog.activities import get_activity, get_catalog
from activity_advisor.taxonomy.activity_taxonomy import is_physical_category
from activity_advisor.taxonomy.learner_profile import LearnerAttribute


class TestCatalogIntegrity:
    def test_ids_unique(self):
        ids = [a.id for a in get_catalog()]
        assert len(ids) == len(set(ids))

    def test_lookup(self):
        entry = get_activity("swimming-lessons")
        assert entry is not None
        assert entry.name.lower().startswith("swimming")
        assert get_activity("no-such-activity") is None

    def test_targets_valid(self):
        valid = {a.value for a in LearnerAttribute}
        for entry in get_catalog():
            assert entry.target_attributes, entry.id
            assert set(entry.target_attributes) <= valid, entry.id

    def test_descriptions_present(self):
        for entry in get_catalog():
            assert entry.description, entry.id
            assert entry.why_recommended, entry.id


class TestCatalogCoverage:
    def test_physical_for_every_age(self):
        for age in range(3, 15):
            assert any(
                is_physical_category(a.category) and a.is_age_appropriate(age)
                for a in get_catalog()
            ), f"no physical activity for age {age}"

    def test_enough_choice_for_primary_ages(self):
        for age in range(5, 11):
            count = sum(1 for a in get_catalog() if a.is_age_appropriate(age))
            assert count >= 15, f"only {count} activities for age {age}"

    def test_home_based_entries(self):
        home = [a for a in get_catalog() if a.home_based]
        assert len(home) >= 2
        assert all(a.is_age_appropriate(6) for a in home)
