"""Logger hierarchy and handler setup for seedmap runs.

Pipeline modules log through ``get_logger("<component>")``. Nothing is
emitted until the CLI calls ``configure_logging``; errors recorded by the
exit status always reach stderr, and ``--log-file`` mirrors the run to disk
with timestamps.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "seedmap"

_CONSOLE_FORMAT = "[seedmap] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{component}" if component else ROOT_LOGGER)


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route seedmap records to stderr and, when given, to ``log_file``.

    Calling this again replaces the previous handlers.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    _reset_handlers(logger)

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
