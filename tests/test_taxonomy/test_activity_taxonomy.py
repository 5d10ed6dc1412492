"""Tests for activity taxonomy integrity and the physical-category rule."""

from __future__ import annotations

from activity_advisor.taxonomy.activity_taxonomy import (
    PRIORITY_RANK,
    ActivityCategory,
    PriorityTier,
    is_physical_category,
)


class TestActivityCategoryEnum:
    def test_no_duplicate_values(self):
        values = [m.value for m in ActivityCategory]
        assert len(values) == len(set(values))


class TestPriorityRank:
    def test_every_tier_ranked(self):
        assert set(PRIORITY_RANK) == set(PriorityTier)

    def test_high_above_medium_above_low(self):
        assert (
            PRIORITY_RANK[PriorityTier.HIGH]
            > PRIORITY_RANK[PriorityTier.MEDIUM]
            > PRIORITY_RANK[PriorityTier.LOW]
        )


class TestIsPhysicalCategory:
    def test_physical_categories(self):
        assert is_physical_category(ActivityCategory.PHYSICAL)
        assert is_physical_category(ActivityCategory.OUTDOOR_ADVENTURE)

    def test_label_mentioning_sport(self):
        assert is_physical_category("Team Sports")

    def test_non_physical(self):
        assert not is_physical_category(ActivityCategory.STEM)
        assert not is_physical_category(ActivityCategory.CULTURAL)
