import json

import pytest
import structlog

from opstring.config import AppConfig
from opstring.logging import configure_from_config, configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_lines_carry_standard_keys(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("info")
    structlog.get_logger("opstring.tests").info("view.built", clusters=3)
    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["msg"] == "view.built"
    assert record["level"] == "info"
    assert record["component"] == "opstring.tests"
    assert record["clusters"] == 3
    assert "ts" in record


def test_level_filters_lower_events(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("warning")
    structlog.get_logger("opstring.tests").info("dropped")
    assert capsys.readouterr().out == ""


def test_console_renderer_from_config(capsys: pytest.CaptureFixture[str]) -> None:
    config = AppConfig()
    config.logging.renderer = "console"
    configure_from_config(config)
    structlog.get_logger("opstring.tests").info("view.built")
    out = capsys.readouterr().out
    assert "view.built" in out
    with pytest.raises(json.JSONDecodeError):
        json.loads(out.strip().splitlines()[-1])


def test_loggers_are_cached_after_configuration() -> None:
    configure_logging("info")
    assert structlog.get_config()["cache_logger_on_first_use"] is True
