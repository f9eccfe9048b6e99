"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (product_id, error_code, path, origin) surfaced when present
    - setup_logging() is idempotent: calling it twice never duplicates output

Design Decisions:
    - JSON format in production, human-readable text locally (LOG_FORMAT)
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "product_id", "error_code", "path", "origin", "error_count", "forced",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _AppHandler(logging.StreamHandler):
    """Marker type so repeated setup replaces our handler instead of stacking."""


def setup_logging(level: str = "INFO", fmt: str = "text"):
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _AppHandler):
            logging.root.removeHandler(existing)
    handler = _AppHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
