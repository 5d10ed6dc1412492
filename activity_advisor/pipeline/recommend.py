"""
Recommendation request pipeline: report in, ``RecommendationBundle`` out.

Flow
----
1. analyze_attributes(report)               → LearnerAttributeProfile
2. age_from_grade(report.grade)             → approximate age
3. location (explicit lat/lng, or geocoded address)
     → climate zone + coastal flag fill any gaps in the request context
4. build_recommendation_set(...)            → 3–5 recommendations
5. evaluate_current_activities(...)         → evaluations
6. generate_parent_actions(...)             → ≤5 parent actions
7. enrich_recommendations(...)              → venues, local cost, re-rank
   (async entry point only, and only when a location resolved)

``build_recommendations`` is the synchronous core (steps 1–6, no network).
``run_recommendation_request`` adds geocoding and venue enrichment.  A
geocoding failure is not fatal: the bundle is returned without venues and
``location_status`` is ``"unavailable"``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from activity_advisor.analysis.attributes import analyze_attributes
from activity_advisor.analysis.grade import age_from_grade
from activity_advisor.config import AppConfig
from activity_advisor.errors import LocationUnavailableError, ReportLoadError
from activity_advisor.models.activity import ActivityCandidate
from activity_advisor.models.recommendation import (
    LocationStatus,
    RecommendationBundle,
    RecommendationContext,
)
from activity_advisor.models.report import ReportSource
from activity_advisor.recommendations.evaluator import evaluate_current_activities
from activity_advisor.recommendations.parent_actions import generate_parent_actions
from activity_advisor.recommendations.selector import build_recommendation_set
from activity_advisor.venues.climate import detect_climate_zone, is_coastal_region
from activity_advisor.venues.enricher import enrich_recommendations
from activity_advisor.venues.places_client import VenueSearchCollaborator, describe_error

logger = logging.getLogger(__name__)

Coordinates = tuple[float, float]


class RecommendationRequest(BaseModel):
    """Everything needed to produce one recommendation bundle.

    Attributes:
        report:             Parsed school report.
        context:            Budget and (optionally) explicit climate/coastal flags.
        current_activities: Names of activities the child already does.
        address:            Free-text address to geocode for venues.
        latitude:           Explicit coordinates (take precedence over address).
        longitude:          Explicit coordinates.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    report: ReportSource = Field(default_factory=ReportSource)
    context: RecommendationContext = Field(default_factory=RecommendationContext)
    current_activities: tuple[str, ...] = ()
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @model_validator(mode="after")
    def validate_coordinates(self) -> "RecommendationRequest":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be given together.")
        if self.latitude is not None and not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude must be in [-90, 90], got {self.latitude}.")
        if self.longitude is not None and not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude must be in [-180, 180], got {self.longitude}.")
        return self

    @property
    def coordinates(self) -> Optional[Coordinates]:
        if self.latitude is None or self.longitude is None:
            return None
        return self.latitude, self.longitude


def load_report(path: Path) -> ReportSource:
    """Read a report JSON file (camelCase or snake_case keys).

    Raises:
        ReportLoadError: Missing file, invalid JSON or failed validation.
    """
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ReportLoadError(f"Cannot read report {path}: {exc}") from exc
    try:
        return ReportSource.model_validate(raw)
    except ValidationError as exc:
        raise ReportLoadError(f"Invalid report {path}: {exc}") from exc


def context_for_location(
    context: RecommendationContext,
    coordinates: Optional[Coordinates],
) -> RecommendationContext:
    """Fill missing climate zone / coastal flag from coordinates.

    Explicit values in ``context`` always win.
    """
    if coordinates is None:
        return context
    lat, lng = coordinates
    update: dict = {}
    if context.climate_zone is None:
        update["climate_zone"] = detect_climate_zone(lat, lng)
    if context.is_coastal is None:
        update["is_coastal"] = is_coastal_region(lat, lng)
    return context.model_copy(update=update) if update else context


def build_recommendations(
    request: RecommendationRequest,
    config: Optional[AppConfig] = None,
    catalog: Optional[Iterable[ActivityCandidate]] = None,
    coordinates: Optional[Coordinates] = None,
    location_status: Optional[LocationStatus] = None,
) -> RecommendationBundle:
    """Synchronous core: profile, selection, evaluations and parent actions.

    Args:
        request:         The request.
        config:          App config; defaults when ``None``.
        catalog:         Candidate pool; the built-in catalog when ``None``.
        coordinates:     Resolved location; defaults to the request's lat/lng.
        location_status: Overrides the status derived from ``coordinates``.

    Returns:
        Bundle without venues.
    """
    cfg = config or AppConfig()
    coords = coordinates if coordinates is not None else request.coordinates
    if location_status is None:
        location_status = "resolved" if coords is not None else "not-provided"

    profile = analyze_attributes(request.report)
    age = age_from_grade(request.report.grade)
    context = context_for_location(request.context, coords)

    recommendations = build_recommendation_set(
        profile, age, context, catalog=catalog, config=cfg.selection,
    )
    evaluations = evaluate_current_activities(request.current_activities, profile)
    parent_actions = generate_parent_actions(
        profile, age, request.current_activities, cfg.parent_actions,
    )

    return RecommendationBundle(
        recommendations=tuple(recommendations),
        current_activity_evaluations=tuple(evaluations),
        parent_actions=tuple(parent_actions),
        profile=profile,
        age=age,
        climate_zone=context.climate_zone,
        is_coastal=context.is_coastal,
        location_status=location_status,
    )


async def resolve_location(
    request: RecommendationRequest,
    collaborator: Optional[VenueSearchCollaborator],
) -> Optional[Coordinates]:
    """Coordinates for the request, or ``None`` when no location was given.

    Raises:
        LocationUnavailableError: An address was given but could not be geocoded.
    """
    if request.coordinates is not None:
        return request.coordinates
    if not request.address:
        return None
    if collaborator is None:
        raise LocationUnavailableError(request.address, "no geocoding service configured")
    try:
        coords = await collaborator.geocode_location(request.address)
    except Exception as exc:
        raise LocationUnavailableError(request.address, describe_error(exc)) from exc
    if coords is None:
        raise LocationUnavailableError(request.address)
    return coords


async def run_recommendation_request(
    request: RecommendationRequest,
    collaborator: Optional[VenueSearchCollaborator] = None,
    config: Optional[AppConfig] = None,
    catalog: Optional[Iterable[ActivityCandidate]] = None,
) -> RecommendationBundle:
    """Full pipeline including geocoding and venue enrichment."""
    cfg = config or AppConfig()
    catalog = tuple(catalog) if catalog is not None else None

    try:
        coords = await resolve_location(request, collaborator)
    except LocationUnavailableError as exc:
        logger.warning("%s; continuing without venues", exc)
        return build_recommendations(
            request, cfg, catalog, location_status="unavailable",
        )

    bundle = build_recommendations(request, cfg, catalog, coordinates=coords)
    if coords is None or collaborator is None or not bundle.recommendations:
        return bundle

    enriched = await enrich_recommendations(
        bundle.recommendations,
        collaborator,
        coords[0],
        coords[1],
        config=cfg.venues,
        catalog=catalog,
    )
    return bundle.model_copy(update={"recommendations": tuple(enriched)})
