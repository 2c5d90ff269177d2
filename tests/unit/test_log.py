"""Unit tests for CLI logging setup."""

import logging

import pytest

from mdxlint.config import LogLevel
from mdxlint.log import configure_logging


@pytest.fixture
def mdxlint_logger():
    logger = logging.getLogger("mdxlint")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


class TestConfigureLogging:
    """Test configure_logging."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("error", logging.ERROR),
            ("warn", logging.WARNING),
            (LogLevel.INFO, logging.INFO),
            ("debug", logging.DEBUG),
        ],
    )
    def test_level_mapping(self, mdxlint_logger, level, expected):
        configure_logging(level)
        assert mdxlint_logger.level == expected

    def test_repeated_calls_keep_one_handler(self, mdxlint_logger):
        first = configure_logging("warn")
        second = configure_logging("debug")

        assert first is not second
        assert first not in mdxlint_logger.handlers
        assert mdxlint_logger.handlers.count(second) == 1
        assert isinstance(second, logging.StreamHandler)

    def test_handler_writes_to_current_stderr(self, mdxlint_logger, capsys):
        configure_logging("warn")
        logging.getLogger("mdxlint.discovery").warning("git unavailable")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.count("WARNING mdxlint.discovery: git unavailable") == 1

    def test_records_below_level_dropped(self, mdxlint_logger, caplog):
        configure_logging("error")
        with caplog.at_level(logging.ERROR, logger="mdxlint"):
            logging.getLogger("mdxlint.lint").warning("quiet")
            logging.getLogger("mdxlint.lint").error("loud")

        assert [r.getMessage() for r in caplog.records] == ["loud"]

    def test_invalid_level_rejected(self, mdxlint_logger):
        with pytest.raises(ValueError):
            configure_logging("verbose")
