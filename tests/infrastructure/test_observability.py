"""Structured Logging — JSON lines with enrollment extras.

Invariants:
    - Base keys always present
    - Extras only when set on the record
    - setup_logging never stacks handlers
"""

import json
import logging

from enrollment.infrastructure.observability import (
    JSONFormatter, SERVICE_NAME, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "enrollment.test", logging.WARNING, __file__, 1, "rejected %s", ("email",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_line_has_base_keys():
    line = json.loads(JSONFormatter().format(_record()))
    assert line["level"] == "WARNING"
    assert line["logger"] == "enrollment.test"
    assert line["service"] == SERVICE_NAME
    assert line["message"] == "rejected email"
    assert "field" not in line


def test_json_line_includes_extras():
    line = json.loads(JSONFormatter().format(_record(field="email", status_code=400)))
    assert line["field"] == "email"
    assert line["status_code"] == 400


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    before = len(root.handlers)
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    ours = [h for h in root.handlers if h.get_name() == "enrollment"]
    assert len(ours) == 1
    assert len(root.handlers) <= before + 1
    assert root.level == logging.INFO
    root.removeHandler(ours[0])
