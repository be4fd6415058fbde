"""Core data models shared across seedmap components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional


class FileKind(str, Enum):
    """Extension class of a scanned source file."""

    COMPONENT = "component"
    MODULE = "module"


class SymbolKind(str, Enum):
    """Category of an exported symbol."""

    DEFAULT = "default"
    TYPE = "type"
    VALUE = "value"
    BULK_VALUE = "bulk-value"


@dataclass(frozen=True)
class SourceFile:
    """A source file read once for a single pipeline run."""

    path: Path
    text: str
    kind: FileKind

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class DependencyEdge:
    """One-hop import declared literally in ``source``."""

    source: str
    target: str


@dataclass
class ComponentEntry:
    """Dependency facts recorded for one component file."""

    dependencies: List[str] = field(default_factory=list)
    version: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {"dependencies": list(self.dependencies)}
        if self.version is not None:
            payload["version"] = self.version
        return payload


@dataclass
class DependencyGraph:
    """Component file name to its recorded dependencies, in scan order."""

    components: Dict[str, ComponentEntry] = field(default_factory=dict)

    def edges(self) -> List[DependencyEdge]:
        """Flatten the graph into edges, preserving duplicates and order."""
        return [
            DependencyEdge(source=name, target=target)
            for name, entry in self.components.items()
            for target in entry.dependencies
        ]

    def to_dict(self) -> Dict[str, object]:
        return {
            "components": {
                name: entry.to_dict() for name, entry in self.components.items()
            }
        }


@dataclass(frozen=True)
class ExportSymbol:
    """A public symbol recovered from a source file."""

    kind: SymbolKind
    name: str
    origin: Path

    def render(self) -> str:
        """Return the symbol as it appears inside an export list."""
        if self.kind is SymbolKind.DEFAULT:
            return f"default as {self.name}"
        if self.kind is SymbolKind.TYPE:
            return f"type {self.name}"
        return self.name


@dataclass
class ExportStatement:
    """One ``export { ... } from "..."`` line of the generated index."""

    names: List[str]
    source_path: str

    def render(self) -> str:
        return f'export {{ {", ".join(self.names)} }} from "{self.source_path}";\n'


@dataclass
class GeneratedIndex:
    """Ordered export statements making up the generated index file."""

    statements: List[ExportStatement] = field(default_factory=list)

    def render(self) -> str:
        return "".join(statement.render() for statement in self.statements)
