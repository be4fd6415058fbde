"""Dependency recorder: sibling component imports per component file."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..models import ComponentEntry, FileKind
from ..scanner import read_source
from .base import Recorder
from .patterns import IMPORT_EDGE, VERSION

DEFAULT_VERSION = "0.0.0"


class DependencyRecorder(Recorder[str]):
    """Recovers the component files a component imports.

    Targets are not checked against the scanned directory; an import of a
    file that does not exist is still recorded.
    """

    def record(self, path: Path) -> List[str]:
        source = read_source(path, FileKind.COMPONENT)
        return self._dependencies(source.text)

    def describe(self, path: Path, *, include_version: bool = False) -> ComponentEntry:
        """Return the dependency entry for ``path``, optionally with its version marker."""
        source = read_source(path, FileKind.COMPONENT)
        entry = ComponentEntry(dependencies=self._dependencies(source.text))
        if include_version:
            entry.version = self.extractor.first(source.text, VERSION) or DEFAULT_VERSION
        return entry

    def _dependencies(self, text: str) -> List[str]:
        return [
            f"{name}{self.component_extension}"
            for name in self.extractor.extract(text, IMPORT_EDGE)
        ]
