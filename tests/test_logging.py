import json
import logging

import pytest
import structlog

from riichi_hand.errors import HandParseError
from riichi_hand.logging import setup_logging
from riichi_hand.parser import HandParser
from riichi_hand.points import Points
from riichi_hand.schemas import PointsCalculationMode


@pytest.fixture(autouse=True)
def _cleanup_logging():
    """Remove root handlers and structlog configuration after each test."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
    structlog.reset_defaults()


def test_configures_stdout_handler():
    setup_logging()
    root = logging.getLogger()

    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)


def test_clears_existing_handlers_on_repeated_calls():
    setup_logging()
    setup_logging()

    assert len(logging.getLogger().handlers) == 1


def test_custom_log_level():
    setup_logging(level="debug")
    assert logging.getLogger().level == logging.DEBUG

    setup_logging(level=logging.ERROR)
    assert logging.getLogger().level == logging.ERROR


def test_invalid_log_level():
    with pytest.raises(ValueError, match="Invalid log level"):
        setup_logging(level="verbose")


def test_json_output_serializes_enums(capsys):
    setup_logging(level="INFO", json_mode=True)

    structlog.get_logger("riichi_hand.test").info("points calculated", mode=PointsCalculationMode.loose, han=3)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "points calculated"
    assert record["mode"] == "loose"
    assert record["han"] == 3
    assert record["level"] == "info"
    assert "timestamp" in record


def test_messages_below_level_are_dropped(capsys):
    setup_logging(level="WARNING", json_mode=True)

    structlog.get_logger("riichi_hand.test").info("hidden")

    assert capsys.readouterr().out == ""


def test_library_is_silent_without_setup(capsys):
    structlog.reset_defaults()

    Points.from_calculated(PointsCalculationMode.default, 4, 30)
    HandParser.parse("123m")
    with pytest.raises(HandParseError):
        HandParser.parse("8z")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_library_events_reach_configured_handlers(capsys):
    setup_logging(level="DEBUG", json_mode=True)

    Points.from_calculated(PointsCalculationMode.default, 4, 30)

    records = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
    assert any(record["event"] == "points calculated" for record in records)
    record = next(record for record in records if record["event"] == "points calculated")
    assert record["logger"] == "riichi_hand.points"
    assert record["mode"] == "default"


def test_console_output(capsys):
    setup_logging(level="INFO", json_mode=False)

    structlog.get_logger("riichi_hand.test").info("tile set loaded", tile_width=48)

    out = capsys.readouterr().out
    assert "tile set loaded" in out
    assert "tile_width=48" in out
