"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (operation, user_id, status_code, error_code) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging installs at most one handler on the root logger

Design Decisions:
    - JSONFormatter over third-party libs: stdlib logging.Formatter, full control
    - setup_logging called once by the composition root (main.build_user_controller)
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS: tuple[str, ...] = (
    "operation", "user_id", "status_code", "error_code",
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
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _UserApiHandler(logging.StreamHandler):
    """Marker subclass so repeated setup_logging calls can find the installed handler."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if isinstance(existing, _UserApiHandler):
            logging.root.removeHandler(existing)

    handler = _UserApiHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(
        logging.getLevelNamesMapping().get(level.upper(), logging.INFO),
    )
