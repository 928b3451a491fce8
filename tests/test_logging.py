"""
Tests for the logging module.

Tests verify:
- JSON output carries service metadata
- DEBUG events are suppressed at INFO level
- Settings drive configuration
- An unconfigured process prints nothing
- Unknown level names are rejected
"""

import json
import logging

import pytest

from fungi.either import Err, do
from fungi.errors import ValidationError
from fungi.iterable import Numbers, take
from fungi.logging import (
    configure_from_settings,
    configure_logging,
    get_logger,
    reset_logging,
    resolve_level,
)
from fungi.settings import FungiSettings


def _json_lines(out: str) -> list[dict]:
    return [json.loads(line) for line in out.splitlines() if line.startswith("{")]


class TestConfigureLogging:
    """Test configure_logging."""

    def teardown_method(self):
        reset_logging()

    def test_json_output(self, capsys):
        """Library debug events render as JSON with service metadata."""
        configure_logging(level="DEBUG", json_format=True, service="test-svc")
        take(Numbers(), 3)

        events = _json_lines(capsys.readouterr().out)
        assert len(events) == 1
        event = events[0]
        assert event["event"] == "take.drained"
        assert event["count"] == 3
        assert event["level"] == "debug"
        assert event["service.name"] == "test-svc"
        assert event["logger"] == "fungi.iterable"
        assert "timestamp" in event

    def test_without_timestamp(self, capsys):
        """Timestamps can be turned off."""
        configure_logging(level="DEBUG", json_format=True, add_timestamp=False)
        do(Err(ValueError("x")), lambda v: v)

        (event,) = _json_lines(capsys.readouterr().out)
        assert event["event"] == "either.short_circuit"
        assert "timestamp" not in event

    def test_debug_suppressed_at_info(self, capsys):
        """Library stays quiet at INFO."""
        configure_logging(level="INFO", json_format=True)
        take(Numbers(), 3)
        assert _json_lines(capsys.readouterr().out) == []

    def test_console_format(self, capsys):
        """Console renderer is used when JSON is off."""
        configure_logging(level="DEBUG", json_format=False)
        get_logger("test").info("hello_console", answer=42)

        out = capsys.readouterr().out
        assert "hello_console" in out
        assert _json_lines(out) == []

    def test_unknown_level_rejected(self):
        """A bad level name is a ValidationError, not an AttributeError."""
        with pytest.raises(ValidationError) as exc:
            configure_logging(level="verbose")
        assert exc.value.context == {"level": "verbose"}

    def test_reconfigure_keeps_one_handler(self, capsys):
        """Calling configure_logging twice does not duplicate output."""
        configure_logging(level="DEBUG", json_format=True)
        configure_logging(level="DEBUG", json_format=True)
        take(Numbers(), 1)
        assert len(_json_lines(capsys.readouterr().out)) == 1


class TestConfigureFromSettings:
    """Test configure_from_settings."""

    def teardown_method(self):
        reset_logging()

    def test_explicit_settings(self, capsys):
        """Settings values are applied."""
        configure_from_settings(
            FungiSettings(log_level="DEBUG", json_logs=True, service_name="from-settings")
        )
        take(Numbers(), 1)

        (event,) = _json_lines(capsys.readouterr().out)
        assert event["service.name"] == "from-settings"

    def test_environment_settings(self, capsys, monkeypatch, tmp_path):
        """Without arguments, settings come from the environment."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("FUNGI_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("FUNGI_JSON_LOGS", "true")
        configure_from_settings()

        take(Numbers(), 2)
        get_logger("test").warning("visible")

        events = _json_lines(capsys.readouterr().out)
        assert [e["event"] for e in events] == ["visible"]


class TestGetLogger:
    def test_returns_bound_logger(self):
        log = get_logger("test.module")
        assert hasattr(log, "info")
        assert hasattr(log, "debug")
        assert hasattr(log, "error")

    def test_wraps_stdlib_logger(self):
        """Logger name comes from the wrapped stdlib logger."""
        log = get_logger("test.module")
        assert isinstance(log._logger, logging.Logger)
        assert log._logger.name == "test.module"


class TestUnconfigured:
    """Library events without any logging configuration."""

    def teardown_method(self):
        reset_logging()

    def test_quiet_by_default(self, capsys):
        """Debug events are dropped when nobody configured logging."""
        reset_logging()
        take(Numbers(), 3)
        do(Err(ValueError("x")), lambda v: v)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_reset_removes_handler(self, capsys):
        """reset_logging undoes configure_logging."""
        configure_logging(level="DEBUG", json_format=True)
        reset_logging()
        take(Numbers(), 3)

        assert capsys.readouterr().out == ""
        assert logging.getLogger().level == logging.WARNING


class TestResolveLevel:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), (" warning ", logging.WARNING)],
    )
    def test_known_names(self, name, expected):
        assert resolve_level(name) == expected

    @pytest.mark.parametrize("name", ["verbose", "", "TRACE"])
    def test_unknown_names(self, name):
        with pytest.raises(ValidationError):
            resolve_level(name)
