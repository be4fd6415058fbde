"""Directory scanning with deterministic ordering."""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from .errors import DirectoryNotFound, UnreadableFile
from .logging import get_logger
from .models import FileKind, SourceFile

_EXCLUDED_FILES = {
    ".DS_Store",
    "Thumbs.db",
}


def _is_excluded(name: str, patterns: Sequence[str]) -> bool:
    return name in _EXCLUDED_FILES or any(fnmatchcase(name, pattern) for pattern in patterns)


def _iter_files(directory: Path, patterns: Sequence[str]) -> Iterator[Path]:
    for entry in directory.iterdir():
        if not entry.is_file():
            continue
        if _is_excluded(entry.name, patterns):
            continue
        yield entry


def ensure_directory(path: Path | str) -> Path:
    """Return ``path`` resolved, or raise DirectoryNotFound."""
    resolved = Path(path).expanduser().resolve()
    if not resolved.is_dir():
        raise DirectoryNotFound(path)
    return resolved


class DirectoryScanner:
    """Lists the regular files of one directory in a reproducible order.

    Subdirectories are never descended into. When several extensions are
    requested the result is grouped by extension, in the order given, and
    each group is sorted by full path. Generated output depends on this
    ordering, so nothing downstream re-sorts.
    """

    def __init__(self, exclude_paths: Sequence[str] | None = None) -> None:
        self.exclude_paths = list(exclude_paths or [])
        self.logger = get_logger("scanner")

    def scan(self, directory: Path | str, extensions: Sequence[str] | None = None) -> List[Path]:
        root = ensure_directory(directory)
        files = list(_iter_files(root, self.exclude_paths))

        if extensions is None:
            ordered = sorted(files, key=str)
        else:
            ordered = []
            for extension in extensions:
                group = [path for path in files if path.suffix == extension]
                ordered.extend(sorted(group, key=str))

        self.logger.debug("Scanned %s: %d files", root, len(ordered))
        return ordered


def read_source(path: Path, kind: FileKind) -> SourceFile:
    """Read ``path`` once as UTF-8 text."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableFile(path, str(exc)) from exc
    return SourceFile(path=path, text=text, kind=kind)


__all__ = ["DirectoryScanner", "ensure_directory", "read_source"]
