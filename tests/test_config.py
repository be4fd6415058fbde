"""Tests for seedmap.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from seedmap.config import ConfigError, ExtensionConfig, SeedmapConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, SeedmapConfig)
    assert config.root == tmp_path.resolve()
    assert config.components_dir == Path("_svseeds")
    assert config.library_dir == Path("src/lib/_svseeds")
    assert config.index_path == Path("src/lib/index.ts")
    assert config.graph_filename == "dep.json"
    assert config.extensions == ExtensionConfig(component=".svelte", module=".ts")
    assert config.default_name_separator == "_"
    assert config.include_versions is False
    assert config.exclude_paths == []


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / ".seedmap.yml").write_text(
        """
components_dir: components
library_dir: src/components
index_path: src/index.js
graph_filename: graph.json
extensions:
  component: vue
  module: .js
default_name_separator: "-"
include_versions: yes
exclude_paths:
  - "*.test.js"
  - "*.stories.vue"
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path / ".seedmap.yml")

    assert config.components_dir == Path("components")
    assert config.library_dir == Path("src/components")
    assert config.index_path == Path("src/index.js")
    assert config.graph_filename == "graph.json"
    assert config.extensions.component == ".vue"
    assert config.extensions.module == ".js"
    assert config.default_name_separator == "-"
    assert config.include_versions is True
    assert config.exclude_paths == ["*.test.js", "*.stories.vue"]
    assert config.resolve(config.library_dir) == (tmp_path / "src" / "components").resolve()


def test_load_config_accepts_empty_file(tmp_path: Path) -> None:
    (tmp_path / ".seedmap.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).graph_filename == "dep.json"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".seedmap.yml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".seedmap.yml").write_text("extensions: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_identical_extensions(tmp_path: Path) -> None:
    (tmp_path / ".seedmap.yml").write_text(
        "extensions:\n  component: .ts\n  module: .ts\n", encoding="utf-8"
    )

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_resolve_keeps_absolute_paths(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.resolve(tmp_path / "elsewhere") == (tmp_path / "elsewhere").resolve()
