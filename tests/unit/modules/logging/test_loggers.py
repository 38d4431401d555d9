import json
import pytest

from src.modules.logging import (
    ColorfulLogger, JsonLogger, PlainLogger, create_logger, describe_comparison
)


def test_create_logger_types():
    assert isinstance(create_logger("plain"), PlainLogger)
    assert isinstance(create_logger("JSON"), JsonLogger)
    assert isinstance(create_logger("colorful", "debug"), ColorfulLogger)


def test_create_logger_invalid_type():
    with pytest.raises(ValueError, match="Invalid output type"):
        create_logger("xml")


def test_create_logger_invalid_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        create_logger("plain", "LOUD")


def test_describe_comparison():
    assert describe_comparison(1) == "newer"
    assert describe_comparison(-1) == "older"
    assert describe_comparison(0) == "the same"


def test_plain_logger_output(capsys):
    logger = create_logger("plain", "DEBUG")

    logger.log_signal("SIGINT", True)
    logger.log_signal("SIGTERM", False)
    logger.log_version_check("1.2.0", "1.3.0", 1)
    logger.log_debug("debug line")

    out = capsys.readouterr().out
    assert "Received SIGINT, closing gracefully" in out
    assert "Received SIGTERM, no view to close, terminating" in out
    assert "Published version 1.3.0 is newer (running 1.2.0)" in out
    assert "debug line" in out


def test_plain_logger_respects_level(capsys):
    logger = create_logger("plain", "WARNING")

    logger.log_info("hidden")
    logger.log_warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_json_logger_version_check(capsys):
    logger = create_logger("json")

    logger.log_version_check("1.2.0", "1.1.0", -1)

    out = capsys.readouterr().out
    assert json.loads(out.strip().splitlines()[-1])["record"]["level"]["name"] == "INFO"
    assert '"version_check"' in out
    assert '"available_version": "1.1.0"' in out
    assert '"new_version_available": false' in out
