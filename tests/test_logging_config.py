"""
Tests for the logging helpers.
"""

import logging

import pytest

from literal_sanitizer import logging_config
from literal_sanitizer.logging_config import Timer, debug_log, debug_timing, error, info, warning


class TestTimer:
    """Test the Timer context manager."""

    def test_measures_duration(self):
        with Timer("noop", auto_log=False) as timer:
            pass
        assert timer.get_duration_ms() >= 0

    def test_not_completed(self):
        timer = Timer("pending")
        with pytest.raises(ValueError):
            timer.get_duration_ms()

    def test_exceptions_propagate(self):
        with pytest.raises(RuntimeError):
            with Timer("failing", auto_log=False):
                raise RuntimeError("boom")


class TestLogFunctions:
    """Messages go to the 'LiteralSanitizer' logger."""

    def test_debug_log(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="LiteralSanitizer"):
            debug_log("[SANITIZER] hello")
            debug_timing("Batch", 2.5)
        assert "[SANITIZER] hello" in caplog.text
        assert "Batch took 2.50s" in caplog.text

    def test_info_and_warning(self, caplog):
        with caplog.at_level(logging.INFO, logger="LiteralSanitizer"):
            info("[CONFIG] loaded")
            warning("[CONFIG] odd file")
        levels = {record.getMessage(): record.levelno for record in caplog.records}
        assert levels["[CONFIG] loaded"] == logging.INFO
        assert levels["[CONFIG] odd file"] == logging.WARNING

    def test_error_traceback_only_in_debug_mode(self, caplog, monkeypatch):
        monkeypatch.setattr(logging_config, "DEBUG_MODE", False)
        with caplog.at_level(logging.ERROR, logger="LiteralSanitizer"):
            try:
                raise KeyError("missing")
            except KeyError:
                error("[CONFIG] quiet", exc_info=True)
        assert caplog.records[-1].exc_info is None

    def test_error_traceback_in_debug_mode(self, caplog, monkeypatch):
        monkeypatch.setattr(logging_config, "DEBUG_MODE", True)
        with caplog.at_level(logging.ERROR, logger="LiteralSanitizer"):
            try:
                raise KeyError("missing")
            except KeyError:
                error("[CONFIG] loud", exc_info=True)
        record = caplog.records[-1]
        assert record.getMessage() == "[CONFIG] loud"
        assert record.exc_info is not None
        assert record.exc_info[0] is KeyError
