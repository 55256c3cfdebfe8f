"""Tests for the structlog logger setup."""

from __future__ import annotations

import pytest

from depfs.logger import setup_logging


class TestSetupLogging:
    def test_debug_level_emits_debug_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        log = setup_logging("DEBUG")
        log.debug("copying directory", src="/a", dst="/b")

        err = capsys.readouterr().err
        assert "copying directory" in err
        assert "src" in err

    def test_default_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        log = setup_logging("WARNING")
        log.debug("quiet")
        log.warning("loud")

        err = capsys.readouterr().err
        assert "quiet" not in err
        assert "loud" in err

    def test_unknown_level_falls_back_to_warning(self, capsys: pytest.CaptureFixture[str]) -> None:
        log = setup_logging("chatty")
        log.info("hidden")

        assert "hidden" not in capsys.readouterr().err

    def test_logs_go_to_stderr_not_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        log = setup_logging("INFO")
        log.info("where am i")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "where am i" in captured.err
