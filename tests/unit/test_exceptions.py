"""Unit tests for the gconfig error hierarchy."""
import logging

from gconfig.exceptions import ConfigFileReadError, GConfigError, NoConfigFileError


def test_error_string_carries_code_and_cause():
    """str() should start with the code and name the wrapped error."""
    error = ConfigFileReadError("Error opening config file x", config_file="/c/x", original=OSError("denied"))

    assert str(error).startswith("[CONFIG_FILE_READ_FAILED] Error opening config file x (OSError: denied)")
    assert "Config: /c/x" in str(error)
    assert isinstance(error, GConfigError)


def test_to_dict_is_usable_as_log_extra(caplog):
    """to_dict() output must be accepted by LogRecord as extra fields."""
    error = ConfigFileReadError(config_file="/c/x", original=OSError("denied"))

    with caplog.at_level(logging.ERROR, logger="gconfig.test"):
        logging.getLogger("gconfig.test").error("failed", extra=error.to_dict())

    record = caplog.records[-1]
    assert record.error_code == "CONFIG_FILE_READ_FAILED"
    assert record.error_type == "ConfigFileReadError"
    assert record.cause == "OSError"


def test_to_dict_without_cause():
    """Errors that wrap nothing omit the cause field."""
    data = NoConfigFileError(path="/c").to_dict()

    assert data == {"error_code": "CONFIG_FILE_REQUIRED", "error_type": "NoConfigFileError", "details": {}}
