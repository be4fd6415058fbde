"""Helper utilities for constructing temporary component libraries in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping


class LibraryBuilder:
    """Utility for writing source files into a throwaway library directory."""

    def __init__(self, tmp_path: Path, name: str = "lib") -> None:
        self.root = tmp_path / name
        self.root.mkdir(parents=True)

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the library."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def path(self, relative: str = "") -> Path:
        """Return the library root, or a path inside it."""
        return self.root / relative if relative else self.root


__all__ = ["LibraryBuilder"]
