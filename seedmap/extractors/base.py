"""Base class for per-file recorders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, List, TypeVar

from ..models import FileKind
from .patterns import PatternExtractor

T = TypeVar("T")


class Recorder(ABC, Generic[T]):
    """Contract for recorders that turn one source file into ordered facts."""

    def __init__(
        self,
        extractor: PatternExtractor | None = None,
        *,
        component_extension: str = ".svelte",
        module_extension: str = ".ts",
    ) -> None:
        self.component_extension = component_extension
        self.module_extension = module_extension
        self.extractor = extractor or PatternExtractor(component_extension)

    def classify(self, path: Path) -> FileKind | None:
        """Return the file kind for ``path`` or None for unrecognized extensions."""
        if path.suffix == self.component_extension:
            return FileKind.COMPONENT
        if path.suffix == self.module_extension:
            return FileKind.MODULE
        return None

    @abstractmethod
    def record(self, path: Path) -> List[T]:
        """Return the facts recorded for ``path`` in source order."""
