"""Config loader orchestrator - locates, parses and publishes a ConfigStore."""
import logging
import threading
from pathlib import Path
from typing import Mapping, Optional, Sequence, Union

from gconfig.exceptions.config import ConfigNotLoadedError
from gconfig.locator import ConfigLocator
from gconfig.parser import PropertyFileParser
from gconfig.settings import LoaderSettings
from gconfig.store import ConfigStore


logger = logging.getLogger(__name__)

# Most recently loaded store
_global_config: Optional[ConfigStore] = None
_config_lock = threading.Lock()


def load(
    path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    strict: bool = False,
    cwd: Optional[Union[str, Path]] = None,
) -> ConfigStore:
    """Load the default and profile layers from a config directory.

    Pipeline:
    1. Resolve profile and directory (argument > flag > GC_* env > fallback)
    2. List the directory and pick application[-default].properties and
       application-<profile>.properties
    3. Parse both files
    4. Publish the store as the process-wide config

    Nothing is published if any step fails.

    Args:
        path: Config directory (overrides -path and GC_PATH)
        profile: Active profile (overrides -profile and GC_PROFILE)
        argv: Command-line arguments to read flags from (default: sys.argv[1:])
        environ: Environment mapping for GC_* settings and ${VAR} expansion
        strict: Fail on malformed lines, bad typed values and unset variables
        cwd: Working directory used to pick a GC_HOME entry

    Returns:
        Loaded ConfigStore

    Raises:
        PathResolutionError: No path given and GC_HOME unusable
        DirectoryReadError: Directory missing or unreadable
        NoConfigFileError: Directory is empty
        ConfigFileReadError: A matched property file cannot be read
        ConfigParseError: Malformed line (strict mode)
    """
    settings = LoaderSettings.from_environ(environ)
    locator = ConfigLocator(settings=settings, argv=argv, cwd=cwd)

    active_profile = locator.resolve_profile(profile)
    config_path = locator.resolve_path(path)

    logger.info(
        f"Loading configuration from {config_path}",
        extra={"path": str(config_path), "profile": active_profile},
    )

    files = locator.list_property_files(config_path)
    default_file, profile_file = locator.classify(files, active_profile)

    parser = PropertyFileParser(strict=strict)
    default_layer = parser.parse_file(default_file) if default_file else None
    profile_layer = parser.parse_file(profile_file) if profile_file else None

    store = ConfigStore(
        profile=active_profile,
        default_layer=default_layer,
        profile_layer=profile_layer,
        strict=strict,
        environ=environ,
        source_path=config_path,
    )

    _publish(store)

    if store.is_empty():
        logger.warning(
            f"Configuration loaded, but empty for profile: '{active_profile}'",
            extra={"path": str(config_path), "profile": active_profile},
        )
    else:
        logger.info(
            f"Configuration loaded for profile {active_profile}",
            extra={
                "path": str(config_path),
                "profile": active_profile,
                "default_file": default_file.name if default_file else None,
                "profile_file": profile_file.name if profile_file else None,
                "keys": len(store.keys()),
            },
        )

    return store


def _publish(store: ConfigStore) -> None:
    global _global_config
    with _config_lock:
        _global_config = store


def get_config() -> ConfigStore:
    """Get the most recently loaded store.

    Raises:
        ConfigNotLoadedError: load() has not succeeded yet
    """
    with _config_lock:
        store = _global_config
    if store is None:
        raise ConfigNotLoadedError("Configuration has not been loaded, call load() first")
    return store


def reset_config() -> None:
    """Forget the process-wide store (mainly for tests)."""
    global _global_config
    with _config_lock:
        _global_config = None
    logger.debug("Global configuration reset")
