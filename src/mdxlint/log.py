"""Logging setup for the mdxlint CLI.

Diagnostics go to stderr so that stdout carries only the report.
"""

import logging

from mdxlint.config import LogLevel

_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

_handler: logging.Handler | None = None


def configure_logging(level: LogLevel | str = LogLevel.WARN) -> logging.Handler:
    """Attach a fresh stderr handler to the mdxlint logger at the given level.

    A handler installed by an earlier call is removed first, so repeated
    invocations in one process write to the current stderr only once.
    """
    global _handler

    logger = logging.getLogger("mdxlint")
    logger.setLevel(_LEVELS[LogLevel(level).value])

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(_handler)
    return _handler
