"""Unit tests for structured logging helpers."""
import io
import json
import logging
import sys

import pytest

import gconfig

from gconfig.logging import StructuredJSONFormatter, configure_logging


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("gconfig.loader", logging.INFO, __file__, 10, "Configuration loaded", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_json_with_extra_fields():
    """Extra fields should appear as top-level JSON keys."""
    output = StructuredJSONFormatter().format(make_record(path="/etc/app/config", profile="dev"))

    entry = json.loads(output)
    assert entry["message"] == "Configuration loaded"
    assert entry["level"] == "INFO"
    assert entry["logger_name"] == "gconfig.loader"
    assert entry["path"] == "/etc/app/config"
    assert entry["profile"] == "dev"


def test_formatter_redacts_sensitive_fields():
    """Secret-looking keys should never reach the log output."""
    entry = json.loads(StructuredJSONFormatter().format(make_record(api_key="CAPIAPI", db_password="pw")))

    assert entry["api_key"] == "[REDACTED]"
    assert entry["db_password"] == "[REDACTED]"


def test_formatter_includes_exception():
    """Exception info should be serialized."""
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "failed", None, None)
        record.exc_info = sys.exc_info()

    entry = json.loads(StructuredJSONFormatter().format(record))
    assert entry["exception"]["type"] == "ValueError"
    assert entry["stack_trace"]


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_plain(restore_root_logger):
    """Plain format writes readable lines to the given stream."""
    stream = io.StringIO()
    configure_logging(level=logging.INFO, json_format=False, stream=stream)

    logging.getLogger("gconfig.test").info("hello")

    assert "INFO gconfig.test: hello" in stream.getvalue()


def test_configure_logging_json(restore_root_logger):
    """JSON format writes one object per line."""
    stream = io.StringIO()
    configure_logging(level=logging.INFO, json_format=True, stream=stream)

    logging.getLogger("gconfig.test").info("hello", extra={"key": "app.name"})

    entry = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert entry["message"] == "hello"
    assert entry["key"] == "app.name"


def test_configure_logging_is_exported_from_package():
    """configure_logging is reachable from the top-level package."""
    assert gconfig.configure_logging is configure_logging
    assert "configure_logging" in gconfig.__all__
