"""Observability: level resolution, formatters and optional file output."""

import json
import logging

import pytest

from kanban_api.infrastructure.observability import (
    JSONFormatter, TextFormatter, resolve_level, setup_logging,
)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "kanban_api.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


@pytest.mark.parametrize("name,expected", [
    ("debug", logging.DEBUG),
    ("WARN", logging.WARNING),
    ("error", logging.ERROR),
    ("trace", logging.DEBUG),
    ("nonsense", logging.INFO),
])
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_json_formatter_includes_known_extras():
    line = JSONFormatter().format(_record(error_code="UNAUTHORIZED", secret="x"))
    log = json.loads(line)
    assert log["message"] == "hello world"
    assert log["level"] == "WARNING"
    assert log["logger"] == "kanban_api.test"
    assert log["error_code"] == "UNAUTHORIZED"
    assert "secret" not in log


def test_text_formatter_layout():
    line = TextFormatter().format(_record())
    assert line.startswith("[")
    assert line.endswith("[kanban_api.test][WARNING] hello world")


def test_setup_logging_writes_to_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "kanban.log"
    setup_logging("info", "json", str(log_file))

    logging.getLogger("kanban_api.test").info("to file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = log_file.read_text().splitlines()
    assert json.loads(lines[-1])["message"] == "to file"
    assert logging.getLogger().level == logging.INFO
