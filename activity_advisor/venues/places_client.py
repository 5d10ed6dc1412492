"""
Google Places venue search client (async, httpx).

API:   https://maps.googleapis.com/maps/api/
Docs:  https://developers.google.com/maps/documentation/places/web-service

Credential setup (.env, gitignored):
  GOOGLE_PLACES_API_KEY=your_key

Endpoints used:
  Nearby search:
    GET /place/nearbysearch/json?location={lat},{lng}&radius={m}&keyword={q}&key=...
  Geocoding:
    GET /geocode/json?address={address}&key=...

Behaviour:
  - No API key → venue search returns ``[]`` and geocoding returns ``None``
    (logged once per call at INFO).
  - ``OK`` / ``ZERO_RESULTS`` → up to ``max_venues`` venues, closest-first as
    returned by Google, each with a Haversine distance label.
  - Any other status raises ``VenueSearchError``; transport errors propagate
    as ``httpx.HTTPError``.  The enricher degrades the single item either way.
  - A geocoding response that is not JSON or lacks a location is treated as
    "not found" (``None``).
  - The key travels as a query parameter, so failures are logged through
    ``describe_error`` and never with the request URL.

Usage::

    async with GooglePlacesClient(api_key=cfg.venues.places_api_key) as client:
        venues = await client.search_venues_for_activity(
            "Swimming Lessons", "Physical Development", 17.44, 78.38, 5000,
        )
"""

from __future__ import annotations

import logging
import math
from typing import Any, ClassVar, Optional, Protocol

import httpx

from activity_advisor.errors import VenueSearchError
from activity_advisor.models.recommendation import Venue
from activity_advisor.utils.logging import redact_api_keys

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0


class VenueSearchCollaborator(Protocol):
    """Anything that can look up venues and geocode addresses."""

    async def search_venues_for_activity(
        self,
        activity_name: str,
        category: str,
        latitude: float,
        longitude: float,
        radius_meters: int = 5000,
    ) -> list[Venue]: ...

    async def geocode_location(self, address: str) -> Optional[tuple[float, float]]: ...


# ── Search query mapping ──────────────────────────────────────────────────────

# (substrings in the activity name, search keyword); first match wins
_NAME_QUERIES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("gymnastics", "tumbling"), "gymnastics school children"),
    (("swimming",), "swimming lessons children pool"),
    (("multi-sport", "sports"), "kids sports program recreation center"),
    (("martial", "karate", "taekwondo"), "martial arts kids classes"),
    (("climbing", "bouldering"), "climbing gym kids"),
    (("surf",), "junior surf school"),
    (("cycling", "bike"), "kids cycling club"),
    (("yoga",), "kids yoga mindfulness"),
    (("music",), "music classes children"),
    (("language",), "language school children immersion"),
    (("science", "stem"), "science center kids museum STEM"),
    (("coding", "robotics"), "coding robotics classes kids"),
    (("chess",), "chess club kids"),
    (("drama", "theater"), "theater arts drama kids"),
    (("scout", "guides"), "scouts group children"),
    (("garden", "volunteer"), "community garden volunteering family"),
    (("library", "book"), "public library children storytime"),
    (("art",), "art classes children"),
    (("nature", "outdoor"), "nature center outdoor education kids"),
    (("engineering", "building"), "engineering kids robotics LEGO"),
)

# (substring in the category label, search keyword)
_CATEGORY_QUERIES: tuple[tuple[str, str], ...] = (
    ("physical", "kids sports recreation center"),
    ("sport", "kids sports recreation center"),
    ("cultural", "cultural center kids classes"),
    ("stem", "STEM education kids"),
    ("creative", "art music theater kids classes"),
)


def build_search_query(activity_name: str, category: str) -> str:
    """Map an activity to a Places search keyword.

    Name keywords win over category keywords; otherwise
    ``"<name> children classes"``.
    """
    name = activity_name.lower()
    for needles, query in _NAME_QUERIES:
        if any(n in name for n in needles):
            return query
    cat = category.lower()
    for needle, query in _CATEGORY_QUERIES:
        if needle in cat:
            return query
    return f"{activity_name} children classes"


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2))
        * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def format_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> str:
    """``"850 m"`` below one kilometre, ``"2.4 km"`` otherwise."""
    km = haversine_km(lat1, lng1, lat2, lng2)
    if km < 1:
        return f"{round(km * 1000)} m"
    return f"{km:.1f} km"


# ── Errors ────────────────────────────────────────────────────────────────────

def describe_error(exc: BaseException) -> str:
    """Log-safe summary of a failed lookup, without the request URL or API key."""
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    if isinstance(exc, httpx.HTTPError):
        return type(exc).__name__
    return redact_api_keys(str(exc)) or type(exc).__name__


# ── Client ─────────────────────────────────────────────────────────────────────

class GooglePlacesClient:
    """Async Google Places / Geocoding client.

    Pass ``client`` to share an ``httpx.AsyncClient`` (tests inject one built
    on ``httpx.MockTransport``); otherwise one is created and closed by the
    async context manager.
    """

    BASE_URL: ClassVar[str] = "https://maps.googleapis.com/maps/api"
    NEARBY_PATH: ClassVar[str] = "/place/nearbysearch/json"
    GEOCODE_PATH: ClassVar[str] = "/geocode/json"

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        max_venues: int = 5,
        timeout_seconds: float = 15.0,
    ) -> None:
        self.api_key = api_key
        self.max_venues = max_venues
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout_seconds)

    async def __aenter__(self) -> "GooglePlacesClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        resp = await self._client.get(
            f"{self.BASE_URL}{path}", params={**params, "key": self.api_key},
        )
        resp.raise_for_status()
        return resp.json()

    async def search_venues_for_activity(
        self,
        activity_name: str,
        category: str,
        latitude: float,
        longitude: float,
        radius_meters: int = 5000,
    ) -> list[Venue]:
        """Nearby venues offering an activity, at most ``max_venues``.

        Raises:
            VenueSearchError: Places returned a status other than
                ``OK`` / ``ZERO_RESULTS``.
            httpx.HTTPError: Transport or HTTP status failure.
        """
        if not self.is_configured:
            logger.info("Google Places API key not configured; skipping venue search")
            return []

        data = await self._get(
            self.NEARBY_PATH,
            {
                "location": f"{latitude},{longitude}",
                "radius": radius_meters,
                "keyword": build_search_query(activity_name, category),
            },
        )
        status = data.get("status", "UNKNOWN_ERROR")
        if status not in ("OK", "ZERO_RESULTS"):
            raise VenueSearchError(activity_name, status)

        results = data.get("results") or []
        return [
            self._to_venue(place, latitude, longitude)
            for place in results[: self.max_venues]
        ]

    async def geocode_location(self, address: str) -> Optional[tuple[float, float]]:
        """``(latitude, longitude)`` of the first geocoding result, or ``None``."""
        if not self.is_configured:
            logger.info("Google Places API key not configured; cannot geocode")
            return None

        try:
            data = await self._get(self.GEOCODE_PATH, {"address": address})
            results = data.get("results") or []
            if data.get("status") != "OK" or not results:
                logger.debug("Geocoding '%s' returned status %s", address, data.get("status"))
                return None
            location = results[0]["geometry"]["location"]
            return float(location["lat"]), float(location["lng"])
        except (ValueError, KeyError, TypeError, AttributeError, IndexError) as exc:
            logger.warning(
                "Malformed geocoding response for '%s' (%s)", address, type(exc).__name__,
            )
            return None

    @staticmethod
    def _to_venue(place: dict[str, Any], user_lat: float, user_lng: float) -> Venue:
        location = place["geometry"]["location"]
        lat, lng = float(location["lat"]), float(location["lng"])
        return Venue(
            name=place.get("name", ""),
            address=place.get("vicinity") or place.get("formatted_address") or "Address not available",
            distance=format_distance(user_lat, user_lng, lat, lng),
            rating=place.get("rating"),
            total_ratings=place.get("user_ratings_total"),
            place_id=place.get("place_id", ""),
            latitude=lat,
            longitude=lng,
            types=tuple(place.get("types") or ()),
        )
