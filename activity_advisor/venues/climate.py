"""
Climate zone and coastal detection from coordinates.

Both checks are coarse bounding-box approximations:

  - climate zone: arid boxes first (Middle East, Sahara, central Australia,
    south-west US/Mexico), then latitude bands
        |lat| <= 23.5 → tropical, <= 35 → subtropical, <= 50 → temperate,
        else cold.
  - coastal: a fixed list of coastal regions (Indian coasts, South-East
    Asia, UAE, Australian east coast and Perth, US coasts, UK,
    Mediterranean).

Good enough to drive feasibility scoring; not a geospatial service.
"""

from __future__ import annotations

from typing import NamedTuple

from activity_advisor.taxonomy.activity_taxonomy import ClimateZone


class BoundingBox(NamedTuple):
    """Inclusive latitude/longitude box in decimal degrees."""

    lat_min: float
    lat_max: float
    lng_min: float
    lng_max: float

    def contains(self, lat: float, lng: float) -> bool:
        return self.lat_min <= lat <= self.lat_max and self.lng_min <= lng <= self.lng_max


ARID_REGIONS: tuple[BoundingBox, ...] = (
    BoundingBox(15, 35, 35, 60),        # Middle East & Arabian Peninsula
    BoundingBox(15, 35, -15, 35),       # North Africa (Sahara)
    BoundingBox(-30, -20, 115, 145),    # Central Australia
    BoundingBox(25, 40, -120, -100),    # South-west US & Mexico
)

COASTAL_REGIONS: tuple[BoundingBox, ...] = (
    BoundingBox(8, 22, 72, 76),         # India west coast
    BoundingBox(8, 22, 78, 85),         # India east coast
    BoundingBox(1.2, 1.5, 103.6, 104),  # Singapore
    BoundingBox(24, 26, 54, 56),        # UAE
    BoundingBox(-38, -27, 150, 154),    # Australia east coast
    BoundingBox(-32, -31, 115, 116),    # Perth
    BoundingBox(32, 42, -125, -117),    # California
    BoundingBox(24, 31, -87, -80),      # Florida
    BoundingBox(38, 43, -75, -70),      # US north-east
    BoundingBox(50, 59, -6, 2),         # UK
    BoundingBox(35, 45, -5, 20),        # Mediterranean
)

# South-East Asia counts as coastal except for the mainland interior.
_SEA_REGION = BoundingBox(-10, 20, 95, 125)
_SEA_INLAND = BoundingBox(5, 15, 100, 105)

_DESCRIPTIONS: dict[ClimateZone, str] = {
    ClimateZone.TROPICAL:    "Warm year-round with high humidity",
    ClimateZone.SUBTROPICAL: "Hot summers with mild winters",
    ClimateZone.TEMPERATE:   "Four distinct seasons with moderate temperatures",
    ClimateZone.COLD:        "Cold winters with short summers",
    ClimateZone.ARID:        "Dry climate with minimal rainfall",
}

_SEASONAL_TIPS: dict[ClimateZone, tuple[str, ...]] = {
    ClimateZone.TROPICAL: (
        "Indoor activities recommended during monsoon season",
        "Early morning or evening outdoor activities to avoid midday heat",
        "Water activities available year-round",
    ),
    ClimateZone.SUBTROPICAL: (
        "Outdoor activities ideal in winter and early spring",
        "Indoor alternatives recommended during hot summer months",
        "Swimming popular in summer",
    ),
    ClimateZone.TEMPERATE: (
        "Outdoor activities best in spring and fall",
        "Winter sports available in cold months",
        "Indoor activities recommended in extreme temperatures",
    ),
    ClimateZone.COLD: (
        "Winter sports and activities during long cold season",
        "Indoor activities dominant for much of the year",
        "Outdoor activities concentrated in short summer",
    ),
    ClimateZone.ARID: (
        "Early morning or evening outdoor activities",
        "Indoor air-conditioned venues preferred",
        "Water activities especially valued",
    ),
}


def is_arid_region(lat: float, lng: float) -> bool:
    return any(box.contains(lat, lng) for box in ARID_REGIONS)


def detect_climate_zone(lat: float, lng: float) -> ClimateZone:
    """Classify coordinates into one of the five climate zones."""
    if is_arid_region(lat, lng):
        return ClimateZone.ARID

    abs_lat = abs(lat)
    if abs_lat <= 23.5:
        return ClimateZone.TROPICAL
    if abs_lat <= 35:
        return ClimateZone.SUBTROPICAL
    if abs_lat <= 50:
        return ClimateZone.TEMPERATE
    return ClimateZone.COLD


def is_coastal_region(lat: float, lng: float) -> bool:
    """True when the coordinates fall in one of the known coastal regions."""
    if _SEA_REGION.contains(lat, lng) and not _SEA_INLAND.contains(lat, lng):
        return True
    return any(box.contains(lat, lng) for box in COASTAL_REGIONS)


def climate_description(zone: ClimateZone) -> str:
    return _DESCRIPTIONS[zone]


def seasonal_recommendations(zone: ClimateZone) -> list[str]:
    """Seasonal planning tips for a climate zone."""
    return list(_SEASONAL_TIPS[zone])
