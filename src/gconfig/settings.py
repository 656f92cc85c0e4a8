"""Environment-driven settings for the config loader."""
from typing import Mapping, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PREFIX = "GC_"


class LoaderSettings(BaseSettings):
    """Where to load from and which profile to activate.

    Values are read from ``GC_*`` environment variables. Command-line flags
    and explicit arguments to ``load()`` take precedence over these.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )

    profile: str = Field(
        default="",
        description="Active profile (GC_PROFILE)"
    )
    path: str = Field(
        default="",
        description="Configuration directory (GC_PATH)"
    )
    home: str = Field(
        default="",
        description="Base directory holding a 'config' subdirectory, os.pathsep-separated (GC_HOME)"
    )

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "LoaderSettings":
        """Build settings from an explicit mapping, or from os.environ when None."""
        if environ is None:
            return cls()

        return cls(
            profile=environ.get(f"{ENV_PREFIX}PROFILE", ""),
            path=environ.get(f"{ENV_PREFIX}PATH", ""),
            home=environ.get(f"{ENV_PREFIX}HOME", ""),
        )
