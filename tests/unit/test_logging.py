"""Unit tests for logging and timing infrastructure."""

import json
import logging
from pathlib import Path

import pytest

from create_roblox_ts.scaffold_logging import (
    LOGGER_NAME,
    JSONFormatter,
    get_logger,
    setup_logging,
)
from create_roblox_ts.timing import PerformanceTimer, format_duration


def _flush(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_default_setup(self, tmp_path: Path) -> None:
        """Test basic logging setup with a log file."""
        log_file = tmp_path / "test.log"
        logger = setup_logging(log_file=log_file)

        logger.info("Test message")
        _flush(logger)

        assert log_file.exists()
        assert "Test message" in log_file.read_text()

    def test_json_format(self, tmp_path: Path) -> None:
        """Test JSON log format."""
        log_file = tmp_path / "json.log"
        logger = setup_logging(log_file=log_file, log_format="json")

        logger.info("JSON test message")
        _flush(logger)

        entry = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert entry["message"] == "JSON test message"
        assert entry["level"] == "INFO"
        assert entry["logger"] == LOGGER_NAME

    def test_console_levels(self) -> None:
        """Quiet wins over verbose; verbose enables debug."""
        logger = setup_logging(quiet=True, verbose=True)
        assert logger.handlers[0].level == logging.ERROR

        logger = setup_logging(verbose=True)
        assert logger.handlers[0].level == logging.DEBUG

        logger = setup_logging()
        assert logger.handlers[0].level == logging.WARNING

    def test_get_logger_is_package_logger(self) -> None:
        assert get_logger().name == LOGGER_NAME


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_includes_timing_extras(self) -> None:
        record = logging.LogRecord(
            name=LOGGER_NAME,
            level=logging.DEBUG,
            pathname=__file__,
            lineno=1,
            msg="step done",
            args=(),
            exc_info=None,
        )
        record.duration_ms = 12.5
        record.operation = "Compiling.."
        entry = json.loads(JSONFormatter().format(record))
        assert entry["duration_ms"] == 12.5
        assert entry["operation"] == "Compiling.."
        assert "command" not in entry


class _FakeClock:
    def __init__(self, *readings: float):
        self.readings = list(readings)

    def __call__(self) -> float:
        return self.readings.pop(0)


class TestPerformanceTimer:
    """Tests for PerformanceTimer context manager."""

    def test_measures_duration(self) -> None:
        with PerformanceTimer("op", clock=_FakeClock(1.0, 1.25)) as timer:
            pass
        assert timer.duration_ms == pytest.approx(250.0)

    def test_duration_set_on_failure(self) -> None:
        """The timer still records when the block raises."""
        timer = PerformanceTimer("op", clock=_FakeClock(0.0, 0.5))
        with pytest.raises(RuntimeError):
            with timer:
                raise RuntimeError("boom")
        assert timer.duration_ms == pytest.approx(500.0)


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        ("duration_ms", "expected"),
        [(0, "0 ms"), (42.4, "42 ms"), (999, "999 ms"), (1000, "1.0 s"), (12300, "12.3 s")],
    )
    def test_rendering(self, duration_ms: float, expected: str) -> None:
        assert format_duration(duration_ms) == expected
