# e2e/tests/unit/test_logging_config.py

import json
import logging
import sys

from utils.logging_config import JsonFormatter


def make_record(name, msg="Navigated to https://midnight.test", exc_info=None):
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=None,
        exc_info=exc_info,
    )


def test_json_formatter_fields():
    record = make_record("page_objects.base_page")

    log_record = json.loads(JsonFormatter().format(record))

    assert log_record["level"] == "INFO"
    assert log_record["message"] == "Navigated to https://midnight.test"
    assert log_record["module"] == "page_objects.base_page"
    assert log_record["service"] == "page-objects"
    assert "timestamp" in log_record
    assert "process" not in log_record
    assert "thread" not in log_record


def test_json_formatter_merges_extra_context():
    record = make_record("utils.browser_factory")
    record.extra_context = {"headless": True, "browser": "firefox"}

    log_record = json.loads(JsonFormatter().format(record))

    assert log_record["service"] == "runner"
    assert log_record["headless"] is True
    assert log_record["browser"] == "firefox"


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("browser crashed")
    except RuntimeError:
        record = make_record("fixtures.driver", exc_info=sys.exc_info())

    log_record = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: browser crashed" in log_record["exc_info"]
