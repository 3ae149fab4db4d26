"""
Tests for logging setup — levels, formats, file output.
"""

import logging
from pathlib import Path

import pytest

from scaffolder.core.observability.logging_config import _parse_level, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    def test_known_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_fallback_to_warning(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("") == logging.WARNING
        assert _parse_level("chatty") == logging.WARNING


class TestSetupLogging:
    def test_console_level(self):
        setup_logging(level="INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler_lowers_root_level(self, tmp_path: Path):
        log_file = tmp_path / "scaffold.log"
        setup_logging(level="WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        logging.getLogger("scaffolder.test").debug("hello file")
        for handler in root.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text()

    def test_third_party_quieted(self):
        logging.getLogger("yaml").setLevel(logging.DEBUG)
        setup_logging(level="INFO")
        assert logging.getLogger("yaml").level == logging.WARNING
