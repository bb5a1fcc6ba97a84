from __future__ import annotations

import json
import logging

from meeting_records.core.logger import JsonFormatter, bind_request_context


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("meeting_records.test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extras_and_request_id():
    bind_request_context("req-42")
    try:
        line = JsonFormatter().format(_record("meeting created", meeting_id="m1", user_id="u1"))
    finally:
        bind_request_context(None)

    payload = json.loads(line)
    assert payload["message"] == "meeting created"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "meeting_records.test"
    assert payload["meeting_id"] == "m1"
    assert payload["user_id"] == "u1"
    assert payload["request_id"] == "req-42"


def test_json_formatter_without_request_context():
    payload = json.loads(JsonFormatter().format(_record("hello")))
    assert "request_id" not in payload
