"""Structured JSON log formatters."""
import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}

# Sensitive data patterns to redact
_SENSITIVE_PATTERNS = (
    "api_key",
    "password",
    "passwd",
    "token",
    "secret",
    "authorization",
)


def _serialize_value(value: Any) -> Any:
    """Safely serialize value to JSON-compatible type."""
    if value is None or isinstance(value, (str, int, float, bool, list, dict)):
        return value
    elif hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def _redact_sensitive(data: Dict[str, Any]) -> Dict[str, Any]:
    """Replace values of sensitive-looking keys with [REDACTED]."""
    redacted = {}
    for key, value in data.items():
        key_lower = key.lower()
        if any(pattern in key_lower for pattern in _SENSITIVE_PATTERNS):
            redacted[key] = "[REDACTED]"
        elif isinstance(value, dict):
            redacted[key] = _redact_sensitive(value)
        else:
            redacted[key] = value
    return redacted


def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields attached to a record through ``extra=``."""
    return {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}


class StructuredJSONFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Formats log records as one JSON object per line with consistent fields:
    - timestamp (ISO 8601 UTC)
    - level
    - service_name
    - logger_name
    - message
    - every ``extra=`` field, sensitive keys redacted
    - exception / stack_trace (if applicable)
    """

    def __init__(self, service_name: str = "gconfig"):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "service_name": self.service_name,
            "logger_name": record.name,
            "message": record.getMessage(),
            "source_file": record.pathname,
            "source_line": record.lineno,
        }

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            log_entry["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "message": str(exc_value) if exc_value else None,
            }
            if exc_tb:
                log_entry["stack_trace"] = traceback.format_exception(exc_type, exc_value, exc_tb)

        log_entry.update(_redact_sensitive(extra_fields(record)))

        return json.dumps({key: _serialize_value(value) for key, value in log_entry.items()}, default=str)
