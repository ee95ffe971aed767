"""Structured Logging — one JSON object per placement event.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Placement extras (vault, remote_path, behavior, method, http_status,
      existence, error_code) and the request path appear only when set
    - Enum extras are written as their wire value ("PATCH", "unknown"),
      so log lines match the API envelope
    - setup_logging is idempotent: re-running the app lifespan (tests, reload)
      replaces its handler instead of stacking another one

Design Decisions:
    - Stdlib logging + a small JSONFormatter, no logging library (ADR: the
      placement engine's only runtime deps are the web and HTTP stack)
    - "text" format for local runs, "json" everywhere else
"""

import logging
import json
from datetime import datetime, timezone
from enum import Enum

PLACEMENT_EXTRAS = (
    "vault", "remote_path", "behavior", "method",
    "http_status", "existence", "error_code", "path",
)


def _wire_value(value):
    return value.value if isinstance(value, Enum) else value


class JSONFormatter(logging.Formatter):
    """Render a record and its placement extras as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in PLACEMENT_EXTRAS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = _wire_value(value)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class _NoteBridgeHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    handler = _NoteBridgeHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _NoteBridgeHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
