"""Unit tests for the gconfig command line."""
import json
import logging

import pytest

from gconfig.cli import EXIT_ERROR, EXIT_KEY_NOT_FOUND, EXIT_OK, main


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() reconfigures the root logger; put it back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_get_prints_resolved_value(config_dir, capsys):
    """get should print the profile-resolved value."""
    code = main([f"-path={config_dir}", "-profile=dev", "get", "app.name"])

    assert code == EXIT_OK
    assert capsys.readouterr().out.strip() == "gconfig dev profile"


def test_get_typed_value(config_dir, capsys):
    """--type should route through the typed getters."""
    assert main(["--path", str(config_dir), "get", "feature.enabled", "--type", "bool"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "true"

    assert main(["--path", str(config_dir), "get", "app.name", "--type", "int"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "0"


def test_get_missing_key(config_dir, capsys):
    """A missing key exits with a distinct code."""
    code = main([f"-path={config_dir}", "get", "no.such.key"])

    assert code == EXIT_KEY_NOT_FOUND
    assert "no.such.key" in capsys.readouterr().err


def test_show_json(config_dir, capsys):
    """show --json prints every effective key."""
    code = main([f"-path={config_dir}", "-profile=dev", "show", "--json"])

    values = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert values["app.name"] == "gconfig dev profile"
    assert values["app.url"] == "https://github.com/narup/gconfig-dev"
    assert "db.url" not in values


def test_show_plain(config_dir, capsys):
    """show prints sorted key=value lines."""
    assert main([f"-path={config_dir}", "show"]) == EXIT_OK

    lines = capsys.readouterr().out.splitlines()
    assert "app.name=gconfig test" in lines
    assert lines == sorted(lines)


def test_load_error_exit_code(tmp_path, capsys):
    """Configuration errors are reported on stderr with exit code 1."""
    code = main([f"-path={tmp_path}", "show"])

    assert code == EXIT_ERROR
    assert "CONFIG_FILE_REQUIRED" in capsys.readouterr().err
