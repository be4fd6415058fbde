"""Configuration loading for seedmap (.seedmap.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import SeedmapError

CONFIG_FILENAME = ".seedmap.yml"


class ConfigError(SeedmapError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ExtensionConfig:
    """File extensions that classify source files."""

    component: str = ".svelte"
    module: str = ".ts"


@dataclass
class SeedmapConfig:
    """Represents the settings defined in .seedmap.yml."""

    root: Path
    components_dir: Path = Path("_svseeds")
    library_dir: Path = Path("src/lib/_svseeds")
    index_path: Path = Path("src/lib/index.ts")
    graph_filename: str = "dep.json"
    extensions: ExtensionConfig = field(default_factory=ExtensionConfig)
    default_name_separator: str = "_"
    include_versions: bool = False
    exclude_paths: List[str] = field(default_factory=list)

    def resolve(self, path: Path | str) -> Path:
        """Resolve ``path`` against the configuration root."""
        candidate = Path(path).expanduser()
        if not candidate.is_absolute():
            candidate = self.root / candidate
        return candidate.resolve()


def default_config(root: Path | None = None) -> SeedmapConfig:
    return SeedmapConfig(root=(root or Path.cwd()).resolve())


def load_config(config_path: Path) -> SeedmapConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SeedmapConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = SeedmapConfig(root=root)

    components_dir = _as_str(data.get("components_dir"))
    if components_dir:
        config.components_dir = Path(components_dir)
    library_dir = _as_str(data.get("library_dir"))
    if library_dir:
        config.library_dir = Path(library_dir)
    index_path = _as_str(data.get("index_path"))
    if index_path:
        config.index_path = Path(index_path)
    graph_filename = _as_str(data.get("graph_filename"))
    if graph_filename:
        config.graph_filename = graph_filename

    extension_data = _as_dict(data.get("extensions"))
    if extension_data:
        component = _as_extension(extension_data.get("component"))
        module = _as_extension(extension_data.get("module"))
        if component:
            config.extensions.component = component
        if module:
            config.extensions.module = module
        if config.extensions.component == config.extensions.module:
            raise ConfigError("component and module extensions must differ")

    separator = data.get("default_name_separator")
    if separator is not None:
        if not isinstance(separator, str):
            raise ConfigError("default_name_separator must be a string")
        config.default_name_separator = separator

    include_versions = _as_bool(data.get("include_versions"))
    if include_versions is not None:
        config.include_versions = include_versions

    config.exclude_paths = _as_str_list(data.get("exclude_paths"))
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_extension(value: Any) -> Optional[str]:
    text = _as_str(value)
    if not text:
        return None
    text = text.strip()
    return text if text.startswith(".") else f".{text}"


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []
