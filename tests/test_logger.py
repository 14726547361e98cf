"""Tests for structured logging."""

import json
from datetime import datetime, timezone

from taskmanagement.utils.logger import get_logger


def test_each_line_is_a_json_object(capsys):
    logger = get_logger("tests.structured.lines")
    logger.logger.setLevel("INFO")

    logger.info("Task created", task_id="abc", user_id="alice")
    logger.debug("hidden")

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["message"] == "Task created"
    assert record["level"] == "INFO"
    assert record["service"] == "tests.structured.lines"
    assert record["task_id"] == "abc"
    assert "timestamp" in record


def test_non_json_fields_are_stringified(capsys):
    logger = get_logger("tests.structured.default")
    logger.logger.setLevel("WARNING")
    when = datetime(2026, 1, 1, tzinfo=timezone.utc)

    logger.warning("Clock skew", at=when)

    record = json.loads(capsys.readouterr().out.strip())
    assert record["at"] == str(when)
