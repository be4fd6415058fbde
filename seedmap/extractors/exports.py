"""Export recorder: public symbols per source file."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..models import ExportSymbol, FileKind, SourceFile, SymbolKind
from ..scanner import read_source
from .base import Recorder
from .patterns import BULK_EXPORT, TYPE_EXPORT, VALUE_EXPORT, PatternExtractor
from .utils import default_export_name, split_bulk_names


class ExportRecorder(Recorder[ExportSymbol]):
    """Recovers exported symbols in a fixed category order.

    Components yield their default binding, then types, then values.
    Modules yield bulk export lists, then types, then values. Files of any
    other extension yield nothing.
    """

    def __init__(
        self,
        extractor: PatternExtractor | None = None,
        *,
        component_extension: str = ".svelte",
        module_extension: str = ".ts",
        separator: str = "_",
    ) -> None:
        super().__init__(
            extractor,
            component_extension=component_extension,
            module_extension=module_extension,
        )
        self.separator = separator

    def record(self, path: Path) -> List[ExportSymbol]:
        kind = self.classify(path)
        if kind is None:
            return []
        return self.symbols(read_source(path, kind))

    def symbols(self, source: SourceFile) -> List[ExportSymbol]:
        symbols: List[ExportSymbol] = []
        if source.kind is FileKind.COMPONENT:
            name = default_export_name(source.path, self.component_extension, self.separator)
            symbols.append(ExportSymbol(SymbolKind.DEFAULT, name, source.path))
        else:
            for interior in self.extractor.extract(source.text, BULK_EXPORT):
                symbols.extend(
                    ExportSymbol(SymbolKind.BULK_VALUE, name, source.path)
                    for name in split_bulk_names(interior)
                )
        symbols.extend(self._collect(source, TYPE_EXPORT, SymbolKind.TYPE))
        symbols.extend(self._collect(source, VALUE_EXPORT, SymbolKind.VALUE))
        return _dedupe(symbols)

    def _collect(self, source: SourceFile, pattern: str, kind: SymbolKind) -> List[ExportSymbol]:
        return [
            ExportSymbol(kind, name, source.path)
            for name in self.extractor.extract(source.text, pattern)
        ]


def _dedupe(symbols: List[ExportSymbol]) -> List[ExportSymbol]:
    seen: set[str] = set()
    unique: List[ExportSymbol] = []
    for symbol in symbols:
        rendered = symbol.render()
        if rendered in seen:
            continue
        seen.add(rendered)
        unique.append(symbol)
    return unique
