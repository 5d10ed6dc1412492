"""
Region and currency lookup for displaying catalog costs in local currency.

Catalog costs are USD per month.  ``RegionLookup`` maps coordinates to a
region code and ``convert_range`` renders a USD range in that region's
currency.

``BoundingBoxRegionLookup`` is a coarse approximation: four hard-coded
regions (India, United Kingdom, Eurozone, Australia) with fixed exchange
rates.  Everything else falls back to USD, and the fallback is logged so it
is visible rather than silent.  Swap in another ``RegionLookup`` for a real
geocoding/currency service; nothing in scoring depends on it.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Protocol

from activity_advisor.venues.climate import BoundingBox

logger = logging.getLogger(__name__)


class CurrencyInfo(NamedTuple):
    code: str
    symbol: str
    rate: float          # local units per USD


DEFAULT_CURRENCY = CurrencyInfo("USD", "$", 1.0)

CURRENCY_TABLE: dict[str, CurrencyInfo] = {
    "IN": CurrencyInfo("INR", "₹", 83.0),
    "GB": CurrencyInfo("GBP", "£", 0.79),
    "EU": CurrencyInfo("EUR", "€", 0.92),
    "AU": CurrencyInfo("AUD", "A$", 1.52),
}

# Checked in order: the UK box overlaps the Eurozone box.
REGION_BOXES: tuple[tuple[str, BoundingBox], ...] = (
    ("IN", BoundingBox(6.0, 37.0, 68.0, 98.0)),
    ("GB", BoundingBox(49.9, 60.9, -8.2, 1.8)),
    ("EU", BoundingBox(35.0, 71.0, -10.0, 40.0)),
    ("AU", BoundingBox(-44.0, -10.0, 112.0, 154.0)),
)


class RegionLookup(Protocol):
    """Maps coordinates to a ``CURRENCY_TABLE`` key (``None`` = unknown)."""

    def region_for(self, latitude: float, longitude: float) -> Optional[str]: ...


class BoundingBoxRegionLookup:
    """Region lookup over ``REGION_BOXES``."""

    def __init__(
        self,
        boxes: tuple[tuple[str, BoundingBox], ...] = REGION_BOXES,
    ) -> None:
        self.boxes = boxes

    def region_for(self, latitude: float, longitude: float) -> Optional[str]:
        for code, box in self.boxes:
            if box.contains(latitude, longitude):
                return code
        return None


def currency_for(region: Optional[str]) -> CurrencyInfo:
    """Currency for a region code; USD (logged) when unknown."""
    if region in CURRENCY_TABLE:
        return CURRENCY_TABLE[region]
    logger.info(
        "No currency mapping for region %r; showing costs in USD (approximation)",
        region,
    )
    return DEFAULT_CURRENCY


def _format_amount(value: float) -> str:
    return f"{round(value):,}"


def convert_range(min_usd: float, max_usd: float, region: Optional[str]) -> str:
    """Render a monthly USD range in the region's currency.

    Examples::

        convert_range(100, 150, "IN")   # "₹8,300-12,450 per month"
        convert_range(100, 150, None)   # "$100-150 per month"
        convert_range(0, 0, "GB")       # "Free"
    """
    if max_usd <= 0:
        return "Free"
    currency = currency_for(region)
    low = _format_amount(min_usd * currency.rate)
    high = _format_amount(max_usd * currency.rate)
    return f"{currency.symbol}{low}-{high} per month"
