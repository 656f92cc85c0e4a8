"""Configuration-related exceptions."""
from typing import Optional

from gconfig.exceptions.base import GConfigError


class ConfigError(GConfigError):
    """Base exception for configuration loading and lookup errors.

    Args:
        message: Human-readable error message
        error_code: Machine-readable error code
        config_file: Path to the file or directory involved
        details: Additional error context
        original: Wrapped exception, if any
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        config_file: Optional[str] = None,
        details: Optional[dict] = None,
        original: Optional[Exception] = None,
    ):
        self.config_file = config_file
        super().__init__(message, error_code, details, original)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.config_file:
            parts.append(f"Config: {self.config_file}")
        return " | ".join(parts)


class DirectoryReadError(ConfigError):
    """Configuration directory is missing or cannot be listed."""

    def __init__(
        self,
        message: str = "Error reading config directory",
        path: Optional[str] = None,
        original: Optional[Exception] = None,
    ):
        super().__init__(message, "DIRECTORY_READ_FAILED", path, None, original)


class NoConfigFileError(ConfigError):
    """Configuration directory exists but holds no entries."""

    def __init__(
        self,
        message: str = "At least one configuration file is required",
        path: Optional[str] = None,
    ):
        super().__init__(message, "CONFIG_FILE_REQUIRED", path)


class ConfigFileReadError(ConfigError):
    """A matched property file could not be opened or read."""

    def __init__(
        self,
        message: str = "Error opening config file",
        config_file: Optional[str] = None,
        original: Optional[Exception] = None,
    ):
        super().__init__(message, "CONFIG_FILE_READ_FAILED", config_file, None, original)


class PathResolutionError(ConfigError):
    """No config path was given and the fallback base directory is unusable."""

    def __init__(
        self,
        message: str = "Unable to determine configuration directory",
        home: Optional[str] = None,
        cwd: Optional[str] = None,
    ):
        details = {}
        if home is not None:
            details["home"] = home
        if cwd is not None:
            details["cwd"] = cwd
        super().__init__(message, "CONFIG_PATH_UNRESOLVED", None, details)


class ConfigParseError(ConfigError):
    """Malformed line or unparsable typed value (strict mode only)."""

    def __init__(
        self,
        message: str = "Failed to parse configuration value",
        config_file: Optional[str] = None,
        line_number: Optional[int] = None,
        key: Optional[str] = None,
        value: Optional[str] = None,
        original: Optional[Exception] = None,
    ):
        details = {}
        if line_number is not None:
            details["line"] = line_number
        if key is not None:
            details["key"] = key
        if value is not None:
            details["value"] = value
        super().__init__(message, "CONFIG_PARSE_FAILED", config_file, details, original)


class EnvVarNotFoundError(ConfigError):
    """Placeholder names an unset environment variable and has no default (strict mode only)."""

    def __init__(
        self,
        message: str = "Environment variable not found",
        var_name: Optional[str] = None,
        suggestions: Optional[list] = None,
    ):
        details = {}
        if var_name is not None:
            details["var_name"] = var_name
        if suggestions is not None:
            details["suggestions"] = suggestions
        super().__init__(message, "ENV_VAR_NOT_FOUND", None, details)


class ConfigNotLoadedError(ConfigError):
    """The process-wide store was requested before ``load()`` succeeded."""

    def __init__(self, message: str = "Configuration has not been loaded"):
        super().__init__(message, "CONFIG_NOT_LOADED")
