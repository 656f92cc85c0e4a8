"""Custom exceptions for gconfig."""

from gconfig.exceptions.base import GConfigError

from gconfig.exceptions.config import (
    ConfigError,
    DirectoryReadError,
    NoConfigFileError,
    ConfigFileReadError,
    PathResolutionError,
    ConfigParseError,
    EnvVarNotFoundError,
    ConfigNotLoadedError,
)

__all__ = [
    # Base exception
    "GConfigError",
    # Configuration exceptions
    "ConfigError",
    "DirectoryReadError",
    "NoConfigFileError",
    "ConfigFileReadError",
    "PathResolutionError",
    "ConfigParseError",
    "EnvVarNotFoundError",
    "ConfigNotLoadedError",
]
