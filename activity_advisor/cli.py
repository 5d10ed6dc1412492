"""
Activity Advisor: CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (recommend, evaluate, list catalog).
  5. Report result to stdout (JSON for machine-readable commands).

Install and run::

    pip install -e .
    activity-advisor --help
    activity-advisor validate-config
    activity-advisor catalog --age 6
    activity-advisor recommend report.json --budget 100 --flexibility strict
    activity-advisor recommend report.json --address "Hyderabad, India"
    activity-advisor evaluate report.json -a "Swimming lessons" -a "Piano"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="activity-advisor",
    help="Activity recommendations for parents from school reports.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from activity_advisor.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from activity_advisor.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_report_or_exit(report_path: str):
    """Load a report JSON file, printing a friendly error and exiting on failure."""
    from activity_advisor.errors import ReportLoadError
    from activity_advisor.pipeline.recommend import load_report

    try:
        return load_report(Path(report_path))
    except ReportLoadError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Min feasibility:  {config.selection.min_feasibility}")
    typer.echo(
        f"  Set size:         {config.selection.min_recommendations}"
        f"-{config.selection.max_recommendations}"
    )
    typer.echo(f"  Venue radius:     {config.venues.radius_meters} m")
    typer.echo(f"  Places API key:   {'set' if config.venues.places_api_key else 'not set'}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        dumped = config.model_dump()
        dumped["venues"]["places_api_key"] = "***" if config.venues.places_api_key else None
        typer.echo(json.dumps(dumped, indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("catalog")
def catalog(
    age: Optional[int] = typer.Option(
        None,
        "--age",
        help="Only list activities appropriate for this age.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """List catalog activities (id | category | priority | ages | cost)."""
    from activity_advisor.catalog.activities import get_catalog

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    entries = [
        a for a in get_catalog()
        if age is None or a.is_age_appropriate(age)
    ]
    for a in entries:
        home = " (home)" if a.home_based else ""
        typer.echo(
            f"  {a.id:<24} | {a.category.value:<26} | {a.priority.value:<6} | "
            f"ages {a.age_range.min_age}-{a.age_range.max_age} | {a.cost.label()}{home}"
        )
    typer.echo(f"[OK] {len(entries)} activit{'y' if len(entries) == 1 else 'ies'}.")


@app.command("recommend")
def recommend(
    report_path: str = typer.Argument(..., help="Path to a report JSON file."),
    budget: Optional[float] = typer.Option(
        None,
        "--budget",
        help="Monthly budget in USD (omit for no limit).",
    ),
    flexibility: str = typer.Option(
        "moderate",
        "--flexibility",
        help="Budget flexibility: strict | moderate | flexible.",
    ),
    climate_zone: Optional[str] = typer.Option(
        None,
        "--climate-zone",
        help="tropical | subtropical | temperate | cold | arid (detected from location if omitted).",
    ),
    coastal: Optional[bool] = typer.Option(
        None,
        "--coastal/--inland",
        help="Whether the family lives near the coast (detected if omitted).",
    ),
    address: Optional[str] = typer.Option(
        None,
        "--address",
        help="Address to geocode for nearby venues.",
    ),
    lat: Optional[float] = typer.Option(None, "--lat", help="Latitude (use with --lng)."),
    lng: Optional[float] = typer.Option(None, "--lng", help="Longitude (use with --lat)."),
    current_activities: Optional[list[str]] = typer.Option(
        None,
        "--current-activity",
        "-a",
        help="An activity the child already does (repeatable).",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        help="Write JSON + CSV files here instead of printing JSON.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Recommend 3-5 activities, evaluate current ones and suggest home actions."""
    import asyncio

    from pydantic import ValidationError

    from activity_advisor.models.recommendation import (
        VALID_FLEXIBILITIES,
        RecommendationContext,
    )
    from activity_advisor.pipeline.recommend import (
        RecommendationRequest,
        run_recommendation_request,
    )
    from activity_advisor.recommendations.reporter import (
        bundle_payload,
        write_recommendation_csv,
        write_recommendation_json,
    )
    from activity_advisor.taxonomy.activity_taxonomy import ClimateZone
    from activity_advisor.venues.places_client import GooglePlacesClient

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    if flexibility not in VALID_FLEXIBILITIES:
        typer.echo(
            f"[ERROR] --flexibility must be one of {sorted(VALID_FLEXIBILITIES)}, "
            f"got '{flexibility}'.",
            err=True,
        )
        raise typer.Exit(code=1)

    zone: Optional[ClimateZone] = None
    if climate_zone is not None:
        try:
            zone = ClimateZone(climate_zone.lower())
        except ValueError:
            typer.echo(
                f"[ERROR] Unknown climate zone '{climate_zone}'. "
                f"Use one of: {', '.join(z.value for z in ClimateZone)}.",
                err=True,
            )
            raise typer.Exit(code=1)

    report = _load_report_or_exit(report_path)

    try:
        request = RecommendationRequest(
            report=report,
            context=RecommendationContext(
                budget=budget,
                budget_flexibility=flexibility,
                climate_zone=zone,
                is_coastal=coastal,
            ),
            current_activities=tuple(current_activities or ()),
            address=address,
            latitude=lat,
            longitude=lng,
        )
    except ValidationError as exc:
        typer.echo(f"[ERROR] Invalid request: {exc}", err=True)
        raise typer.Exit(code=1)

    async def _run():
        wants_location = request.address is not None or request.coordinates is not None
        if not (wants_location and config.venues.places_api_key):
            return await run_recommendation_request(request, None, config)
        async with GooglePlacesClient(
            api_key=config.venues.places_api_key,
            max_venues=config.venues.max_venues,
            timeout_seconds=config.venues.request_timeout_seconds,
        ) as client:
            return await run_recommendation_request(request, client, config)

    bundle = asyncio.run(_run())

    if output_dir is None:
        typer.echo(json.dumps(bundle_payload(bundle, Path(report_path).stem), indent=2, default=str))
        return

    out = Path(output_dir)
    label = Path(report_path).stem
    json_path = write_recommendation_json(bundle, out, label)
    csv_path = write_recommendation_csv(bundle.recommendations, out, label)
    typer.echo(f"  JSON: {json_path}")
    typer.echo(f"  CSV:  {csv_path}")
    typer.echo(
        f"[OK] {len(bundle.recommendations)} recommendation(s), "
        f"{len(bundle.parent_actions)} parent action(s)."
    )


@app.command("evaluate")
def evaluate(
    report_path: str = typer.Argument(..., help="Path to a report JSON file."),
    current_activities: list[str] = typer.Option(
        ...,
        "--current-activity",
        "-a",
        help="An activity the child already does (repeatable).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Evaluate current activities and list parent home actions (no venue lookups)."""
    from activity_advisor.analysis.attributes import analyze_attributes
    from activity_advisor.analysis.grade import age_from_grade
    from activity_advisor.recommendations.evaluator import evaluate_current_activities
    from activity_advisor.recommendations.parent_actions import generate_parent_actions

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    report = _load_report_or_exit(report_path)
    profile = analyze_attributes(report)
    age = age_from_grade(report.grade)

    evaluations = evaluate_current_activities(current_activities, profile)
    actions = generate_parent_actions(profile, age, current_activities, config.parent_actions)

    payload = {
        "profile": profile.model_dump(mode="json", by_alias=True),
        "age": age,
        "currentActivityEvaluations": [
            e.model_dump(mode="json", by_alias=True) for e in evaluations
        ],
        "parentActions": [a.model_dump(mode="json", by_alias=True) for a in actions],
    }
    typer.echo(json.dumps(payload, indent=2))


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
