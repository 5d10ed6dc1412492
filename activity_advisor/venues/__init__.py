"""
Location-aware enrichment: venue search, climate detection, region/currency
lookup and the async enricher that re-ranks recommendations by venue
availability.

Modules
-------
places_client : VenueSearchCollaborator protocol + GooglePlacesClient (httpx).
climate       : detect_climate_zone() + is_coastal_region() + seasonal tips.
region        : RegionLookup protocol + BoundingBoxRegionLookup + convert_range().
enricher      : enrich_recommendations() (async) + rerank_by_venues().
"""
