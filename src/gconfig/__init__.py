"""gconfig - Spring Boot style layered .properties configuration.

Two files are read from a config directory:

1. application.properties: default values for every environment
2. application-{profile}.properties: overrides for the active profile,
   e.g. application-prod.properties

Usage:
    import gconfig

    config = gconfig.load()              # -path/-profile flags, GC_PATH/GC_PROFILE
    name = config.get_string("app.name")
    port = config.get_int("server.port")

    gconfig.get_config()                 # same store, from anywhere in the process
"""
from gconfig.exceptions import (
    GConfigError,
    ConfigError,
    DirectoryReadError,
    NoConfigFileError,
    ConfigFileReadError,
    PathResolutionError,
    ConfigParseError,
    EnvVarNotFoundError,
    ConfigNotLoadedError,
)
from gconfig.loader import load, get_config, reset_config
from gconfig.locator import ConfigLocator
from gconfig.logging import configure_logging
from gconfig.parser import PropertyFileParser, PropertyLayer
from gconfig.settings import LoaderSettings
from gconfig.store import ConfigStore
from gconfig.substitutor import EnvSubstitutor

__version__ = "1.0.0"

__all__ = [
    # Loading
    "load",
    "get_config",
    "reset_config",
    "ConfigLocator",
    "LoaderSettings",
    # Parsing and lookup
    "PropertyFileParser",
    "PropertyLayer",
    "ConfigStore",
    "EnvSubstitutor",
    # Logging
    "configure_logging",
    # Exceptions
    "GConfigError",
    "ConfigError",
    "DirectoryReadError",
    "NoConfigFileError",
    "ConfigFileReadError",
    "PathResolutionError",
    "ConfigParseError",
    "EnvVarNotFoundError",
    "ConfigNotLoadedError",
]
