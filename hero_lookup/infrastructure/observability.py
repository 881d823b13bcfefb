"""Structured Logging - one root handler for the hero lookup service.

Invariants:
    - Every line has timestamp, level, logger name and message
    - Lookup context (hero_id, error_code, path, stat_count) is added when present
    - setup_logging is idempotent: each create_app lifespan replaces the
      handler it installed earlier instead of stacking another one
    - Handlers installed by an embedder are left untouched

Design Decisions:
    - Stdlib JSON formatter, no logging dependency
    - The installed handler is found again by a marker attribute, not by type,
      so a host's own StreamHandlers survive
"""

import logging
import json
from datetime import datetime, timezone

LOOKUP_FIELDS = ("hero_id", "error_code", "path", "stat_count")
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_HANDLER_MARKER = "_hero_lookup_handler"


class JSONFormatter(logging.Formatter):
    """One JSON object per log line, with any lookup fields the record carries."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in LOOKUP_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def _installed_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if getattr(h, _HANDLER_MARKER, False)]


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or reinstall) the service's root handler and set the level."""
    root = logging.getLogger()
    for previous in _installed_handlers(root):
        root.removeHandler(previous)
        previous.close()

    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    setattr(handler, _HANDLER_MARKER, True)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
