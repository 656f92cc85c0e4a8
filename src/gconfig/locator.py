"""Locates the configuration directory and classifies property files."""
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from gconfig.exceptions.config import DirectoryReadError, NoConfigFileError, PathResolutionError
from gconfig.settings import LoaderSettings


logger = logging.getLogger(__name__)

PROP_EXTENSION = ".properties"
STANDARD_PROP_FILENAME = "application.properties"
DEFAULT_PROP_FILENAME = "application-default.properties"
DEFAULT_PROFILE = "local"
CONFIG_SUBDIR = "config"

FLAG_DESTINATIONS = {
    "-profile": "profile",
    "--profile": "profile",
    "-path": "path",
    "--path": "path",
}


def profile_filename(profile: str) -> str:
    """Name of the override file for a profile, e.g. application-dev.properties."""
    return f"application-{profile}{PROP_EXTENSION}"


def parse_flags(argv: Sequence[str]) -> Tuple[Optional[str], Optional[str]]:
    """Pull ``-profile`` and ``-path`` out of a command line.

    Only the exact tokens ``-profile``, ``--profile``, ``-path`` and
    ``--path`` are recognized, as ``-profile=dev`` or ``-profile dev``.
    Prefixes such as ``-p`` are never expanded; every other argument
    belongs to the host application and is skipped. A flag without a
    value is ignored on its own, the other flag still applies.

    Returns:
        (profile, path), either may be None
    """
    args = list(argv)
    found = {"profile": None, "path": None}

    i = 0
    while i < len(args):
        name, sep, value = args[i].partition("=")
        dest = FLAG_DESTINATIONS.get(name)

        if dest is not None:
            if sep:
                found[dest] = value
            elif i + 1 < len(args) and not args[i + 1].startswith("-"):
                found[dest] = args[i + 1]
                i += 1
            else:
                logger.warning(
                    f"Ignoring config flag without a value: {name}",
                    extra={"flag": name},
                )
        i += 1

    return found["profile"], found["path"]


class ConfigLocator:
    """Resolves profile and directory, then finds the property files to load.

    Resolution order for both profile and path:
    1. Explicit argument
    2. Command-line flag (-profile / -path)
    3. Environment variable (GC_PROFILE / GC_PATH)
    4. Fallback: profile "local"; path <GC_HOME>/config
    """

    def __init__(
        self,
        settings: Optional[LoaderSettings] = None,
        argv: Optional[Sequence[str]] = None,
        cwd: Optional[Union[str, Path]] = None,
    ):
        """Initialize config locator.

        Args:
            settings: Environment settings (default: read from os.environ)
            argv: Command-line arguments without program name (default: sys.argv[1:])
            cwd: Working directory used to choose among GC_HOME entries
        """
        self.settings = settings or LoaderSettings()
        self.flag_profile, self.flag_path = parse_flags(sys.argv[1:] if argv is None else argv)
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

    def resolve_profile(self, explicit: Optional[str] = None) -> str:
        profile = explicit or self.flag_profile or self.settings.profile or DEFAULT_PROFILE
        return profile.lower()

    def resolve_path(self, explicit: Optional[Union[str, Path]] = None) -> Path:
        """Resolve the configuration directory.

        Raises:
            PathResolutionError: Nothing given and GC_HOME is unusable
        """
        path = explicit or self.flag_path or self.settings.path
        if path:
            return Path(path)
        return self._home_config_path()

    def _home_config_path(self) -> Path:
        home = self.settings.home
        if not home:
            logger.error("No config path given and GC_HOME is not set")
            raise PathResolutionError(
                message="GC_HOME not set, it is needed to locate the default config directory",
                cwd=str(self.cwd),
            )

        entries = [Path(entry) for entry in home.split(os.pathsep) if entry]
        if len(entries) == 1:
            return entries[0] / CONFIG_SUBDIR

        cwd = self.cwd.resolve()
        for entry in entries:
            base = entry.resolve()
            if cwd == base or base in cwd.parents:
                return entry / CONFIG_SUBDIR

        logger.error(
            "Working directory is not inside any GC_HOME entry",
            extra={"home": home, "cwd": str(cwd)},
        )
        raise PathResolutionError(
            message=f"Working directory {cwd} is not inside any GC_HOME entry",
            home=home,
            cwd=str(cwd),
        )

    def list_property_files(self, config_path: Path) -> List[Path]:
        """List the ``.properties`` files in a directory, sorted by name.

        Raises:
            DirectoryReadError: Directory missing or unreadable
            NoConfigFileError: Directory has no entries at all
        """
        try:
            entries = sorted(config_path.iterdir())
        except OSError as e:
            logger.error(
                f"Error reading config directory in path {config_path}",
                extra={"path": str(config_path), "error": str(e)},
            )
            raise DirectoryReadError(
                message=f"Error reading config directory in path {config_path}",
                path=str(config_path),
                original=e,
            )

        if not entries:
            logger.error(f"Config file not found in path {config_path}", extra={"path": str(config_path)})
            raise NoConfigFileError(
                message=f"Config file not found in path {config_path}",
                path=str(config_path),
            )

        return [entry for entry in entries if entry.suffix == PROP_EXTENSION and entry.is_file()]

    def classify(self, files: Sequence[Path], profile: str) -> Tuple[Optional[Path], Optional[Path]]:
        """Pick the default-layer and profile-layer files.

        ``application.properties`` wins over ``application-default.properties``
        when both exist. Files matching neither convention are ignored.

        Returns:
            (default_file, profile_file), either may be None
        """
        names = {f.name: f for f in files}
        expected_profile_name = profile_filename(profile)

        default_file = names.get(STANDARD_PROP_FILENAME) or names.get(DEFAULT_PROP_FILENAME)
        profile_file = None
        if expected_profile_name not in (STANDARD_PROP_FILENAME, DEFAULT_PROP_FILENAME):
            profile_file = names.get(expected_profile_name)

        for f in files:
            if f not in (default_file, profile_file):
                logger.debug(
                    f"Ignoring property file: {f.name}",
                    extra={"file": f.name, "profile": profile},
                )

        return default_file, profile_file
