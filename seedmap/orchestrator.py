"""Pipeline orchestration for dependency graph and index generation."""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, TypeVar

from .builders import GraphSerializer, IndexGenerator
from .config import SeedmapConfig, default_config
from .errors import Cancelled, SeedmapError
from .extractors import DependencyRecorder, ExportRecorder, PatternExtractor
from .logging import get_logger
from .scanner import DirectoryScanner, ensure_directory

T = TypeVar("T")


@dataclass
class ArtifactOutcome:
    """Result of one pipeline invocation."""

    path: Path
    content: str
    written: bool
    diff: str = ""


class Orchestrator:
    """Wires scanner, recorders and builders from configuration.

    Each pipeline builds its artifact fully in memory and writes it once, so
    a failure on any file leaves the previous artifact untouched.
    """

    def __init__(self, config: SeedmapConfig | None = None) -> None:
        self.config = config or default_config()
        extensions = self.config.extensions
        self.scanner = DirectoryScanner(self.config.exclude_paths)
        self.extractor = PatternExtractor(extensions.component)
        self.graph_serializer = GraphSerializer(
            self.scanner,
            DependencyRecorder(
                self.extractor,
                component_extension=extensions.component,
                module_extension=extensions.module,
            ),
            include_versions=self.config.include_versions,
        )
        self.index_generator = IndexGenerator(
            self.scanner,
            ExportRecorder(
                self.extractor,
                component_extension=extensions.component,
                module_extension=extensions.module,
                separator=self.config.default_name_separator,
            ),
        )
        self.logger = get_logger("orchestrator")

    def run_dependencies(
        self, directory: Path | str | None = None, *, dry_run: bool = False
    ) -> ArtifactOutcome:
        """Write the dependency graph document inside the scanned directory."""
        target = self.config.resolve(directory or self.config.components_dir)
        self.logger.info("Building dependency graph for %s", target)

        def _build() -> str:
            ensure_directory(target)
            graph = self.graph_serializer.build(target)
            self.logger.debug("Recorded %d components", len(graph.components))
            return self.graph_serializer.serialize(graph)

        content = _guard(_build)
        out_path = target / self.config.graph_filename
        return self._emit(out_path, content, dry_run=dry_run)

    def run_index(
        self,
        directory: Path | str | None = None,
        out_path: Path | str | None = None,
        *,
        dry_run: bool = False,
    ) -> ArtifactOutcome:
        """Write the generated index re-exporting every scanned file."""
        target = self.config.resolve(directory or self.config.library_dir)
        out = self.config.resolve(out_path or self.config.index_path)
        self.logger.info("Generating index %s from %s", out, target)

        def _build() -> str:
            ensure_directory(target)
            return self.index_generator.build(target, out)

        content = _guard(_build)
        return self._emit(out, content, dry_run=dry_run)

    def _emit(self, path: Path, content: str, *, dry_run: bool) -> ArtifactOutcome:
        if dry_run:
            return ArtifactOutcome(
                path=path, content=content, written=False, diff=_diff_against(path, content)
            )
        _guard(lambda: _write(path, content))
        self.logger.info("Wrote %s", path)
        return ArtifactOutcome(path=path, content=content, written=True)


def _diff_against(path: Path, content: str) -> str:
    try:
        previous = path.read_text(encoding="utf-8", errors="replace") if path.is_file() else ""
    except OSError as exc:
        raise SeedmapError(f"cannot read {path}: {exc}") from exc
    return "".join(
        difflib.unified_diff(
            previous.splitlines(keepends=True),
            content.splitlines(keepends=True),
            fromfile=f"a/{path.name}",
            tofile=f"b/{path.name}",
        )
    )


def _write(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise SeedmapError(f"cannot write {path}: {exc}") from exc


def _guard(build: Callable[[], T]) -> T:
    try:
        return build()
    except KeyboardInterrupt as exc:
        raise Cancelled("cancelled by user") from exc


__all__ = ["ArtifactOutcome", "Orchestrator"]
