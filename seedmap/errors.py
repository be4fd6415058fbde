"""Error kinds and the run-scoped exit status accumulator."""

from __future__ import annotations

import logging
from pathlib import Path

from .logging import get_logger


class SeedmapError(RuntimeError):
    """Base class for failures surfaced by seedmap pipelines."""


class DirectoryNotFound(SeedmapError):
    """Raised when a scan target is missing or is not a directory."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"directory not found: {path}")
        self.path = Path(path)


class UnreadableFile(SeedmapError):
    """Raised when a listed source file cannot be read as text."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"cannot read {path}: {reason}")
        self.path = Path(path)


class Cancelled(SeedmapError):
    """Explicit short-circuit that must not count as a failure."""

    def __init__(self, message: str = "cancelled") -> None:
        super().__init__(message)


class ExitStatus:
    """Collects pipeline failures and decides the final process exit code.

    Every caught error is logged as it happens; the status is only consulted
    once all requested pipelines have finished.
    """

    FAILURE_CODE = 1

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._code = 0
        self._logger = logger or get_logger("status")
        self.failures: list[SeedmapError] = []
        self.cancellations: list[Cancelled] = []

    def record(self, exc: SeedmapError) -> None:
        if isinstance(exc, Cancelled):
            self._logger.warning("%s", exc)
            self.cancellations.append(exc)
            return
        self._logger.error("%s", exc)
        self.failures.append(exc)
        self._code = self.FAILURE_CODE

    @property
    def code(self) -> int:
        return self._code

    @property
    def failed(self) -> bool:
        return self._code != 0


__all__ = [
    "Cancelled",
    "DirectoryNotFound",
    "ExitStatus",
    "SeedmapError",
    "UnreadableFile",
]
