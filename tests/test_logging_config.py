"""
Tests for logging setup and library log records.
"""

import logging

import pytest

from pymatrix import Matrix
from pymatrix.logging_config import setup_logging


@pytest.fixture
def clean_logger():
    """Restore the pymatrix logger after each test."""
    logger = logging.getLogger("pymatrix")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestSetupLogging:
    """setup_logging configures the pymatrix namespace."""

    def test_console_handler(self, clean_logger):
        logger = setup_logging(logging.DEBUG)
        assert logger is clean_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_repeated_calls_do_not_duplicate(self, clean_logger):
        setup_logging()
        setup_logging()
        assert len(clean_logger.handlers) == 1

    def test_file_handler(self, clean_logger, tmp_path):
        log_file = tmp_path / "pymatrix.log"
        logger = setup_logging(logging.DEBUG, log_file=str(log_file))
        assert len(logger.handlers) == 2
        Matrix(2, 3) * Matrix(3, 1)
        for handler in logger.handlers:
            handler.flush()
        assert "multiply: 2x3 by 3x1 -> 2x1" in log_file.read_text(encoding="utf-8")


class TestLibraryRecords:
    """Library modules log at DEBUG under pymatrix.*."""

    def test_product_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pymatrix"):
            Matrix(1, 2) * Matrix(2, 2)
        assert any(
            r.name == "pymatrix.dense.matrix" and "1x2 by 2x2" in r.getMessage()
            for r in caplog.records
        )

    def test_non_square_literal_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pymatrix"):
            assert Matrix.square([1, 2, 3]) is None
        assert any("not a perfect square" in r.getMessage() for r in caplog.records)


class TestLevelNames:
    """setup_logging accepts level names as well as numbers."""

    def test_name_is_case_insensitive(self, clean_logger):
        logger = setup_logging("debug")
        assert logger.level == logging.DEBUG
        assert logger.handlers[0].level == logging.DEBUG

    def test_unknown_name_rejected(self, clean_logger):
        with pytest.raises(ValueError, match="unknown logging level 'chatty'"):
            setup_logging("chatty")
