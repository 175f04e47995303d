"""Tests for logging setup."""

import logging
import sys
from pathlib import Path

from tsdoc_readme.utils.logging import setup_logging


class TestSetupLogging:
    """Tests for the setup_logging function."""

    def test_configures_package_logger(self) -> None:
        logger = setup_logging()
        assert logger.name == "tsdoc_readme"
        assert logger.level == logging.INFO

    def test_custom_level(self) -> None:
        logger = setup_logging(level="debug")
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        logger = setup_logging(level="CHATTY")
        assert logger.level == logging.INFO

    def test_console_handler_on_stderr(self) -> None:
        logger = setup_logging()
        streams = [
            h.stream for h in logger.handlers if type(h) is logging.StreamHandler
        ]
        assert streams == [sys.stderr]

    def test_no_file_handler_by_default(self) -> None:
        logger = setup_logging()
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)

    def test_repeated_setup_does_not_duplicate(self) -> None:
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_module_loggers_reach_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "tsdoc.log"
        logger = setup_logging(level="INFO", log_file=str(log_file))
        logging.getLogger("tsdoc_readme.generators.api_docs").info(
            "-- generating docs for MDCDrawer"
        )
        for handler in logger.handlers:
            handler.flush()
        assert "generating docs for MDCDrawer" in log_file.read_text()
