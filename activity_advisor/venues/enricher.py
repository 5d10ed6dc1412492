"""
VenueEnricher: attach nearby venues and local-currency costs to a
recommendation set, then re-rank by venue availability.

Flow
----
1. Fan out one venue query per non-home-based recommendation
   (``asyncio.gather``); each query is wrapped so that an exception or the
   optional per-query timeout only degrades that one item.
2. Every item that did not fail gets ``estimated_cost`` re-rendered in local
   currency via ``RegionLookup`` → ``convert_range``; formal items also get
   their ``venues``.  Failed items are returned unchanged.
3. ``rerank_by_venues``: up to ``max_home_based_first`` at-home items first
   (original order), then formal items by venue count descending (stable),
   then any remaining at-home items; truncated to the original size.

The set of recommendation ids is the same before and after; only order,
``venues`` and ``estimated_cost`` change.  ``recommendation_type`` and
``targeted_attributes`` are never touched.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Mapping, Optional, Sequence

from activity_advisor.catalog.activities import get_catalog
from activity_advisor.config import VenueConfig
from activity_advisor.models.activity import ActivityCandidate, CostRange
from activity_advisor.models.recommendation import Recommendation, Venue
from activity_advisor.venues.places_client import VenueSearchCollaborator, describe_error
from activity_advisor.venues.region import (
    BoundingBoxRegionLookup,
    RegionLookup,
    convert_range,
)

logger = logging.getLogger(__name__)


def rerank_by_venues(
    recommendations: Sequence[Recommendation],
    max_home_based_first: int = 2,
) -> list[Recommendation]:
    """Re-order so at-home items lead and formal items follow by venue count."""
    home = [r for r in recommendations if r.home_based]
    formal = [r for r in recommendations if not r.home_based]
    formal_sorted = sorted(formal, key=lambda r: -r.venue_count)
    ordered = home[:max_home_based_first] + formal_sorted + home[max_home_based_first:]
    return ordered[: len(recommendations)]


def convert_costs(
    recommendations: Iterable[Recommendation],
    region: Optional[str],
    costs: Mapping[str, CostRange],
) -> list[Recommendation]:
    """Re-render ``estimated_cost`` in the region's currency.

    Items whose id has no entry in ``costs`` keep their current string.
    """
    converted: list[Recommendation] = []
    for rec in recommendations:
        cost = costs.get(rec.id)
        if cost is None:
            converted.append(rec)
        else:
            converted.append(
                rec.model_copy(
                    update={"estimated_cost": convert_range(cost.min_usd, cost.max_usd, region)}
                )
            )
    return converted


async def _search_one(
    rec: Recommendation,
    collaborator: VenueSearchCollaborator,
    latitude: float,
    longitude: float,
    config: VenueConfig,
) -> Optional[list[Venue]]:
    """Venues for one recommendation, or ``None`` if the lookup failed."""
    try:
        query = collaborator.search_venues_for_activity(
            rec.name, rec.category, latitude, longitude, config.radius_meters,
        )
        if config.query_timeout_seconds is not None:
            venues = await asyncio.wait_for(query, timeout=config.query_timeout_seconds)
        else:
            venues = await query
    except asyncio.TimeoutError:
        logger.warning(
            "Venue search for '%s' timed out after %.1fs; returning it without venues",
            rec.name, config.query_timeout_seconds,
        )
        return None
    except Exception as exc:
        logger.warning(
            "Venue search for '%s' failed (%s); returning it without venues",
            rec.name, describe_error(exc),
        )
        return None
    return list(venues)[: config.max_venues]


async def enrich_recommendations(
    recommendations: Sequence[Recommendation],
    collaborator: VenueSearchCollaborator,
    latitude: float,
    longitude: float,
    config: Optional[VenueConfig] = None,
    region_lookup: Optional[RegionLookup] = None,
    catalog: Optional[Iterable[ActivityCandidate]] = None,
) -> list[Recommendation]:
    """Attach venues and local costs, then re-rank.

    Args:
        recommendations: Output of the DiverseSelector.
        collaborator:    Venue search implementation.
        latitude:        Family location.
        longitude:       Family location.
        config:          Venue settings; defaults when ``None``.
        region_lookup:   Coordinates → region code; bounding boxes by default.
        catalog:         Source of USD cost ranges; the built-in catalog by default.

    Returns:
        Re-ranked list with the same ids as ``recommendations``.
    """
    cfg = config or VenueConfig()
    lookup = region_lookup or BoundingBoxRegionLookup()
    costs = {c.id: c.cost for c in (catalog if catalog is not None else get_catalog())}
    region = lookup.region_for(latitude, longitude)

    formal_idx = [i for i, r in enumerate(recommendations) if not r.home_based]
    results = await asyncio.gather(
        *(
            _search_one(recommendations[i], collaborator, latitude, longitude, cfg)
            for i in formal_idx
        )
    )
    venues_by_idx = dict(zip(formal_idx, results))

    enriched: list[Recommendation] = []
    failures = 0
    for i, rec in enumerate(recommendations):
        if rec.home_based:
            enriched.extend(convert_costs([rec], region, costs))
            continue
        venues = venues_by_idx[i]
        if venues is None:
            failures += 1
            enriched.append(rec)
            continue
        with_venues = rec.model_copy(update={"venues": tuple(venues)})
        enriched.extend(convert_costs([with_venues], region, costs))

    logger.info(
        "Enriched %d recommendation(s) with venues (%d lookup failure(s), region=%s)",
        len(formal_idx) - failures, failures, region or "unknown",
    )
    return rerank_by_venues(enriched, cfg.max_home_based_first)
