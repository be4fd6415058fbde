"""Tests for the exit status accumulator."""

from __future__ import annotations

import logging

from seedmap.errors import Cancelled, DirectoryNotFound, ExitStatus, UnreadableFile


def test_fresh_status_is_success() -> None:
    status = ExitStatus()

    assert status.code == 0
    assert not status.failed


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


def test_failures_set_non_zero_code() -> None:
    logger = logging.getLogger("seedmap.tests.status")
    handler = _ListHandler()
    logger.addHandler(handler)
    try:
        status = ExitStatus(logger)
        status.record(DirectoryNotFound("/missing"))
        status.record(UnreadableFile("/lib/a.svelte", "permission denied"))
    finally:
        logger.removeHandler(handler)

    assert status.code == 1
    assert len(status.failures) == 2
    assert handler.messages[0] == "directory not found: /missing"


def test_cancelled_does_not_fail() -> None:
    status = ExitStatus()

    status.record(Cancelled())

    assert status.code == 0
    assert status.cancellations and not status.failures


def test_cancelled_after_failure_keeps_failure() -> None:
    status = ExitStatus()

    status.record(DirectoryNotFound("/missing"))
    status.record(Cancelled())

    assert status.failed
