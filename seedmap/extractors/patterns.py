"""Named regular expressions for recovering imports and exports from source text.

Only top-level, literal declarations are recognized:

* ``import-edge``: ``import Name from "./Other.svelte";`` or
  ``import { a } from "./Other.svelte"``. Only sibling paths (``./``) ending in
  the component extension count; nested directories are captured verbatim.
* ``type-export``: ``export type Name =``, ``export interface Name {``,
  ``export interface Name extends Base`` and their generic forms.
* ``value-export``: ``export function|class|const|let|var Name``.
* ``bulk-export``: the interior of ``export { a, b as c }``.
* ``version``: a ``// version: 1.2.3`` marker comment.

Computed import paths, re-exports through ``export * from`` and anything
inside string literals or comments that happens to look like a declaration
are not distinguished from real code.
"""

from __future__ import annotations

import re
from typing import Dict, List, Pattern

IMPORT_EDGE = "import-edge"
TYPE_EXPORT = "type-export"
VALUE_EXPORT = "value-export"
BULK_EXPORT = "bulk-export"
VERSION = "version"

_TYPE_EXPORT_RE = re.compile(r"export\s+(?:type|interface)\s+(\w+)\s*(?:[=<{]|extends\b)")
_VALUE_EXPORT_RE = re.compile(r"export\s+(?:function|class|const|let|var)\s+(\w+)\s*[\s=:{(<]")
_BULK_EXPORT_RE = re.compile(r"export\s*\{([^}]*)\}")
_VERSION_RE = re.compile(r"//\s*version:\s*(\d+\.\d+\.\d+)")


class UnknownPattern(KeyError):
    """Raised when a pattern name is not in the extractor's table."""


def _import_edge_pattern(component_extension: str) -> Pattern[str]:
    extension = re.escape(component_extension)
    return re.compile(
        r"import\s+(?:\{[^}]*\}|\w+)\s+from\s+['\"]\./([^'\"]+)" + extension + r"['\"]\s*;?"
    )


class PatternExtractor:
    """Applies a fixed table of named patterns to raw text."""

    def __init__(self, component_extension: str = ".svelte") -> None:
        self.component_extension = component_extension
        self._patterns: Dict[str, Pattern[str]] = {
            IMPORT_EDGE: _import_edge_pattern(component_extension),
            TYPE_EXPORT: _TYPE_EXPORT_RE,
            VALUE_EXPORT: _VALUE_EXPORT_RE,
            BULK_EXPORT: _BULK_EXPORT_RE,
            VERSION: _VERSION_RE,
        }

    @property
    def names(self) -> List[str]:
        return list(self._patterns)

    def extract(self, text: str, pattern_name: str) -> List[str]:
        """Return the first capture group of every match, in source order."""
        try:
            pattern = self._patterns[pattern_name]
        except KeyError:
            raise UnknownPattern(pattern_name) from None
        return [match.group(1) for match in pattern.finditer(text)]

    def first(self, text: str, pattern_name: str) -> str | None:
        matches = self.extract(text, pattern_name)
        return matches[0] if matches else None


__all__ = [
    "BULK_EXPORT",
    "IMPORT_EDGE",
    "PatternExtractor",
    "TYPE_EXPORT",
    "UnknownPattern",
    "VALUE_EXPORT",
    "VERSION",
]
