"""Structured Logging — JSON formatter and setup for the enrollment service.

Invariants:
    - Every line carries timestamp, level, logger, service and message
    - Enrollment extras (field, enrollment_id, status_code, ...) only when set
    - setup_logging is idempotent: re-running it replaces our handler, never stacks

Design Decisions:
    - stdlib logging + small JSONFormatter: one line per event, grep/jq friendly
    - httpx and sqlalchemy.engine pinned to WARNING: request/SQL chatter would
      drown the enrollment events at INFO
"""

import logging
import json
from datetime import datetime, timezone

SERVICE_NAME = "enrollment-api"
_HANDLER_NAME = "enrollment"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON object."""

    EXTRA_FIELDS = (
        "error_code", "path", "field", "enrollment_id", "status_code", "outcome",
    )

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": SERVICE_NAME,
            "message": record.getMessage(),
        }
        entry.update({
            key: getattr(record, key)
            for key in self.EXTRA_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the enrollment log handler on the root logger."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for noisy in ("httpx", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
