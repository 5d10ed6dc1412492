"""
Recommendation report writer: JSON and CSV output for a recommendation bundle.

All functions are pure I/O.  They consume in-memory models and write
human-readable + machine-readable files.

Output files
------------
  data/outputs/
    recommendations_{label}_{date}.json  -- full bundle, camelCase contract
    recommendations_{label}_{date}.csv   -- one row per recommendation
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Sequence

from activity_advisor.models.recommendation import Recommendation, RecommendationBundle

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1.0.0"


def bundle_payload(
    bundle: RecommendationBundle,
    label: str = "",
    run_date: date | None = None,
) -> dict[str, Any]:
    """Bundle as a JSON-ready dict with provenance metadata."""
    if run_date is None:
        run_date = date.today()
    payload: dict[str, Any] = {
        "schemaVersion": SCHEMA_VERSION,
        "label":         label,
        "generatedAt":   run_date.isoformat(),
    }
    payload.update(bundle.model_dump(mode="json", by_alias=True))
    return payload


def write_recommendation_json(
    bundle: RecommendationBundle,
    output_dir: Path,
    label: str,
    run_date: date | None = None,
) -> Path:
    """Write a recommendation bundle to a structured JSON file.

    Args:
        bundle:     Output of the recommendation pipeline.
        output_dir: Target directory (created if missing).
        label:      Used in filename + metadata (e.g. a student slug).
        run_date:   Date label. Defaults to today.

    Returns:
        Path to the written JSON file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"recommendations_{label}_{run_date}.json"

    payload = bundle_payload(bundle, label, run_date)
    json_path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    logger.info("Recommendation JSON written: %s", json_path)
    return json_path


def write_recommendation_csv(
    recommendations: Sequence[Recommendation],
    output_dir: Path,
    label: str,
    run_date: date | None = None,
) -> Path:
    """Write recommendations to a flat CSV file.

    Columns: rank, id, name, category, priority, recommendation_type,
             targeted_attributes, estimated_cost, budget_match,
             climate_match, feasibility, relevance, venue_count, home_based.

    Returns:
        Path to the written CSV file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir.mkdir(parents=True, exist_ok=True)
    csv_path = output_dir / f"recommendations_{label}_{run_date}.csv"

    fieldnames = [
        "rank", "id", "name", "category", "priority", "recommendation_type",
        "targeted_attributes", "estimated_cost", "budget_match",
        "climate_match", "feasibility", "relevance", "venue_count", "home_based",
    ]

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for rank, rec in enumerate(recommendations, start=1):
            writer.writerow(
                {
                    "rank":                rank,
                    "id":                  rec.id,
                    "name":                rec.name,
                    "category":            rec.category,
                    "priority":            rec.priority.value,
                    "recommendation_type": rec.recommendation_type.value,
                    "targeted_attributes": ";".join(rec.targeted_attributes),
                    "estimated_cost":      rec.estimated_cost,
                    "budget_match":        rec.feasibility_score.budget_match,
                    "climate_match":       rec.feasibility_score.climate_match,
                    "feasibility":         rec.feasibility_score.overall,
                    "relevance":           rec.relevance_score,
                    "venue_count":         rec.venue_count,
                    "home_based":          rec.home_based,
                }
            )

    logger.info("Recommendation CSV written: %s (%d rows)", csv_path, len(recommendations))
    return csv_path
