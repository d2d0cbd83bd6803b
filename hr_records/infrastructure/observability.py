"""Structured Logging — JSON lines for record-validation rejections.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (entity, operation, error_count, error_code, path) surfaced when present
    - Raw payload values are never logged, only counts and field paths

Design Decisions:
    - Rejections carry entity/operation/error_count so a log query can count failed
      create payloads per entity without ever seeing the payload itself
    - This package only emits; the host that embeds the validators calls
      setup_logging_from_settings() once, so library import never touches root logging
"""

import json
import logging
from datetime import datetime, timezone

from hr_records.config import Settings, get_settings

EXTRA_KEYS = ("entity", "operation", "error_count", "error_code", "path")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging; returns the installed handler."""
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


def setup_logging_from_settings(settings: Settings | None = None) -> logging.Handler:
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
