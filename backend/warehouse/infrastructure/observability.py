"""Structured Logging — JSON formatter and setup for warehouse diagnostics.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra inventory fields (item_id, item_kind, error_code, attempted, delta)
      surfaced when present
    - JSON format for machine consumption, human-readable text for the console demo

Design Decisions:
    - JSONFormatter is a plain logging.Formatter subclass
    - setup_logging called once on startup by main()
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = ("item_id", "item_kind", "error_code", "attempted", "delta")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

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
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
