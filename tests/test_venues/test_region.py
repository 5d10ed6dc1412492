"""
Tests for activity_advisor/venues/region.py.

What we test
------------
  - Bounding-box region lookup (UK checked before the Eurozone).
  - Unknown regions fall back to USD and the fallback is logged.
  - convert_range() formatting and the "Free" case.
  - A custom RegionLookup can stand in for the bounding boxes.
"""

from __future__ import annotations

import logging

import pytest

from activity_advisor.venues.region import (
    DEFAULT_CURRENCY,
    BoundingBoxRegionLookup,
    convert_range,
    currency_for,
)


class TestBoundingBoxRegionLookup:
    @pytest.mark.parametrize(
        "lat, lng, expected",
        [
            (19.07, 72.87, "IN"),    # Mumbai
            (51.51, -0.13, "GB"),    # London
            (48.86, 2.35, "EU"),     # Paris
            (-33.87, 151.21, "AU"),  # Sydney
            (40.71, -74.01, None),   # New York
        ],
    )
    def test_cities(self, lat, lng, expected):
        assert BoundingBoxRegionLookup().region_for(lat, lng) == expected

    def test_custom_boxes(self):
        lookup = BoundingBoxRegionLookup(boxes=())
        assert lookup.region_for(19.07, 72.87) is None


class TestCurrencyFor:
    def test_known(self):
        assert currency_for("IN").code == "INR"

    def test_fallback_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="activity_advisor.venues.region"):
            assert currency_for(None) is DEFAULT_CURRENCY
        assert "USD" in caplog.text


class TestConvertRange:
    def test_rupees(self):
        assert convert_range(100, 150, "IN") == "₹8,300-12,450 per month"

    def test_euros(self):
        assert convert_range(100, 150, "EU") == "€92-138 per month"

    def test_usd_fallback(self):
        assert convert_range(100, 150, None) == "$100-150 per month"

    def test_free(self):
        assert convert_range(0, 0, "GB") == "Free"
