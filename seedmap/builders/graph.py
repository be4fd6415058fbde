"""Dependency graph assembly and serialization."""

from __future__ import annotations

import json
from pathlib import Path

from ..extractors.dependencies import DependencyRecorder
from ..logging import get_logger
from ..models import DependencyGraph
from ..scanner import DirectoryScanner


class GraphSerializer:
    """Builds the dependency graph of every component in one directory."""

    def __init__(
        self,
        scanner: DirectoryScanner | None = None,
        recorder: DependencyRecorder | None = None,
        *,
        include_versions: bool = False,
    ) -> None:
        self.scanner = scanner or DirectoryScanner()
        self.recorder = recorder or DependencyRecorder()
        self.include_versions = include_versions
        self.logger = get_logger("graph")

    def build(self, directory: Path | str) -> DependencyGraph:
        graph = DependencyGraph()
        for path in self.scanner.scan(directory, [self.recorder.component_extension]):
            entry = self.recorder.describe(path, include_version=self.include_versions)
            graph.components[path.name] = entry
            self.logger.debug("%s: %d dependencies", path.name, len(entry.dependencies))
        return graph

    @staticmethod
    def serialize(graph: DependencyGraph) -> str:
        return json.dumps(graph.to_dict(), separators=(",", ":"))


__all__ = ["GraphSerializer"]
