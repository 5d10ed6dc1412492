"""
Logging setup for the activity advisor CLI.

``configure_logging(config)`` is called once by each CLI command after the
config is loaded.  Library modules only ever do
``logger = logging.getLogger(__name__)``.

Handlers
--------
- stderr console handler; ``recommend`` and ``evaluate`` print their JSON
  bundle on stdout, so nothing else may write there.
- optional file handler (``[logging] log_file``), parent dirs created.
- every handler carries ``ApiKeyRedactionFilter``: Google requests put the
  Places key in the query string, and any URL that reaches a log message
  has its ``key=`` value masked.

``json_format = true`` switches both handlers to one JSON object per line::

    {"ts": "2026-02-24T15:00:00Z", "level": "WARNING",
     "logger": "activity_advisor.venues.enricher", "msg": "...",
     "activity": "Swimming Lessons"}

Keys passed through ``extra=`` appear at the top level of that object.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from activity_advisor.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Third-party loggers that log full request URLs at INFO.
_URL_LOGGERS = ("httpx", "httpcore")

_API_KEY_PARAM = re.compile(r"(key=)[^&\s'\"]+")

# Attributes every LogRecord carries; anything else came from ``extra=``.
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def redact_api_keys(text: str) -> str:
    """Mask the value of every ``key=`` query parameter in ``text``."""
    return _API_KEY_PARAM.sub(r"\1***", text)


class ApiKeyRedactionFilter(logging.Filter):
    """Rewrite a record's message with ``redact_api_keys`` before it is emitted."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_api_keys(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LOG_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = redact_api_keys(self.formatException(record.exc_info))
        payload.update(
            (key, val)
            for key, val in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        )
        return json.dumps(payload, default=str)


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    handler.addFilter(ApiKeyRedactionFilter())
    return handler


def configure_logging(config: "LoggingConfig") -> None:
    """Install stderr (and optional file) handlers on the root logger.

    Replaces any handlers already on the root logger, so repeated calls in
    one process leave exactly one set.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)
    formatter: logging.Formatter = (
        _JsonFormatter()
        if config.json_format
        else logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    )

    handlers = [_handler(logging.StreamHandler(sys.stderr), level, formatter)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _handler(logging.FileHandler(log_path, encoding="utf-8"), level, formatter)
        )

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name in _URL_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
