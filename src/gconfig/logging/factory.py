"""Logging setup for applications and the gconfig CLI."""
import logging
import sys
from typing import IO, Optional

from gconfig.logging.formatters import StructuredJSONFormatter

_logger = logging.getLogger(__name__)

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = True,
    stream: Optional[IO[str]] = None,
    service_name: str = "gconfig",
) -> None:
    """Configure the root logger.

    The library itself never calls this; it only logs through
    ``logging.getLogger(__name__)``.

    Args:
        level: Global log level
        json_format: Emit StructuredJSONFormatter lines instead of plain text
        stream: Output stream (default: stderr)
        service_name: service_name field of JSON records
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    if json_format:
        handler.setFormatter(StructuredJSONFormatter(service_name=service_name))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    root_logger.addHandler(handler)

    _logger.debug(
        "Logging configured",
        extra={"level": logging.getLevelName(level), "json_format": json_format},
    )
