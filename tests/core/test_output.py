"""Tests for the loguru output layer."""

from pathlib import Path

import pytest
from loguru import logger

from teo_catalog.core.config import LoggingConfig
from teo_catalog.core.output import log, set_quiet_mode, setup_from_config, setup_loguru


@pytest.fixture
def restore_logger():
    """Drop the sinks setup_loguru added."""
    yield
    logger.remove()


class TestSetupLoguru:
    def test_writes_to_log_file(self, tmp_path: Path, restore_logger) -> None:
        log_file = tmp_path / "logs" / "teo.log"

        setup_loguru(log_file, level="DEBUG")
        logger.debug("queue loaded")
        logger.complete()

        content = log_file.read_text(encoding="utf-8")
        assert "Loguru initialized" in content
        assert "queue loaded" in content

    def test_respects_level(self, tmp_path: Path, restore_logger) -> None:
        log_file = tmp_path / "teo.log"

        setup_from_config(LoggingConfig(level="WARNING", log_file=str(log_file)))
        logger.info("hidden")
        logger.warning("shown")

        content = log_file.read_text(encoding="utf-8")
        assert "hidden" not in content
        assert "shown" in content


class TestLog:
    def test_echoes_unless_quiet(self, capsys: pytest.CaptureFixture) -> None:
        set_quiet_mode(False)
        log("Playing playlist: Night Drive")
        assert capsys.readouterr().out == "Playing playlist: Night Drive\n"

        set_quiet_mode(True)
        log("silent")
        assert capsys.readouterr().out == ""

    def test_debug_is_never_echoed(self, capsys: pytest.CaptureFixture) -> None:
        set_quiet_mode(False)
        log("details", level="debug")
        assert capsys.readouterr().out == ""

    def test_goes_to_logger(self, log_messages: list[str]) -> None:
        log("Track removed from playlist.", level="success")
        assert log_messages == ["Track removed from playlist."]
