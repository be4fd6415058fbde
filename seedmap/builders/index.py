"""Barrel index generation from recorded exports."""

from __future__ import annotations

from pathlib import Path

from ..extractors.exports import ExportRecorder
from ..extractors.utils import relative_import_path
from ..logging import get_logger
from ..models import ExportStatement, FileKind, GeneratedIndex
from ..scanner import DirectoryScanner, read_source


class IndexGenerator:
    """Renders one ``export { ... } from "..."`` line per exporting source file.

    Module files come first, then components, each group in path order.
    Module import paths drop their extension so the compiled module resolves;
    component paths keep theirs.
    """

    def __init__(
        self,
        scanner: DirectoryScanner | None = None,
        recorder: ExportRecorder | None = None,
    ) -> None:
        self.scanner = scanner or DirectoryScanner()
        self.recorder = recorder or ExportRecorder()
        self.logger = get_logger("index")

    def generate(self, directory: Path | str, out_path: Path | str) -> GeneratedIndex:
        out_file = Path(out_path).expanduser().resolve()
        out_dir = out_file.parent
        extensions = [self.recorder.module_extension, self.recorder.component_extension]
        index = GeneratedIndex()
        for path in self.scanner.scan(directory, extensions):
            kind = self.recorder.classify(path)
            # The index may live inside the library it is generated from.
            if kind is None or path == out_file:
                continue
            symbols = self.recorder.symbols(read_source(path, kind))
            if not symbols:
                self.logger.debug("%s: no exports", path.name)
                continue
            strip = self.recorder.module_extension if kind is FileKind.MODULE else None
            index.statements.append(
                ExportStatement(
                    names=[symbol.render() for symbol in symbols],
                    source_path=relative_import_path(path, out_dir, strip),
                )
            )
            self.logger.debug("%s: %d exports", path.name, len(symbols))
        return index

    def build(self, directory: Path | str, out_path: Path | str) -> str:
        return self.generate(directory, out_path).render()


__all__ = ["IndexGenerator"]
