"""Structured logging helpers."""

from gconfig.logging.factory import configure_logging
from gconfig.logging.formatters import StructuredJSONFormatter

__all__ = [
    "configure_logging",
    "StructuredJSONFormatter",
]
