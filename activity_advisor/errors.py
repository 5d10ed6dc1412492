"""
Domain exceptions for the activity advisor.

Scoring, selection, evaluation and parent-action generation are total
functions and never raise these.  They are reserved for the I/O edges:
loading a report file, resolving a user-supplied location, and talking to
the venue search service.
"""

from __future__ import annotations


class AdvisorError(Exception):
    """Base class for all activity advisor errors."""


class ReportLoadError(AdvisorError):
    """A report file could not be read or failed validation."""


class LocationUnavailableError(AdvisorError):
    """A user-supplied address could not be geocoded.

    Callers fall back to recommendations without venues.
    """

    def __init__(self, address: str, reason: str = "no geocoding result") -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"Location unavailable for '{address}': {reason}")


class VenueSearchError(AdvisorError):
    """The venue search service returned an error status for one query."""

    def __init__(self, activity_name: str, status: str) -> None:
        self.activity_name = activity_name
        self.status = status
        super().__init__(f"Venue search failed for '{activity_name}': {status}")
