"""Root pytest configuration."""
from pathlib import Path
from typing import Callable, Dict

import pytest

from gconfig.loader import reset_config


FIXTURE_CONFIG_DIR = Path(__file__).parent / "fixtures" / "config"


@pytest.fixture
def config_dir() -> Path:
    """Shared config directory with default, dev and prod files."""
    return FIXTURE_CONFIG_DIR


@pytest.fixture
def write_config(tmp_path) -> Callable[[Dict[str, str]], Path]:
    """Factory writing {filename: content} into a fresh config directory."""

    def _write(files: Dict[str, str]) -> Path:
        directory = tmp_path / "config"
        directory.mkdir(exist_ok=True)
        for name, content in files.items():
            (directory / name).write_text(content, encoding="utf-8")
        return directory

    return _write


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep GC_* and placeholder variables from the real environment out of tests."""
    for name in ("GC_PROFILE", "GC_PATH", "GC_HOME", "CAPI_API_KEY", "CAPI_API_KEY_REG", "DATA_DASHBOARD_ENDPOINT"):
        monkeypatch.delenv(name, raising=False)
    yield
    reset_config()
