"""Tests for the dependency graph serializer."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from seedmap.builders import GraphSerializer
from seedmap.errors import DirectoryNotFound
from seedmap.extractors import DependencyRecorder


def test_build_matches_expected_document(library) -> None:
    library.write(
        {
            "a.component": 'import B from "./b.component";\n',
            "b.component": "<div></div>\n",
        }
    )
    serializer = GraphSerializer(recorder=DependencyRecorder(component_extension=".component"))

    document = serializer.serialize(serializer.build(library.path()))

    assert document == (
        '{"components":{"a.component":{"dependencies":["b.component"]},'
        '"b.component":{"dependencies":[]}}}'
    )


def test_every_component_is_a_key_and_nothing_else(library) -> None:
    library.write(
        {
            "_Badge.svelte": "<span></span>\n",
            "Accordion.svelte": 'import Disclosure from "./_Disclosure.svelte";\n',
            "core.ts": 'import A from "./Accordion.svelte";\n',
            "dep.json": "{}",
        }
    )

    graph = GraphSerializer().build(library.path())

    assert list(graph.components) == ["Accordion.svelte", "_Badge.svelte"]
    assert graph.components["_Badge.svelte"].dependencies == []
    assert graph.components["Accordion.svelte"].dependencies == ["_Disclosure.svelte"]


def test_edges_keep_duplicates_in_source_order(library) -> None:
    library.write(
        {
            "a.svelte": 'import B from "./b.svelte";\nimport C from "./c.svelte";\nimport B2 from "./b.svelte";\n',
        }
    )

    graph = GraphSerializer().build(library.path())

    assert [(edge.source, edge.target) for edge in graph.edges()] == [
        ("a.svelte", "b.svelte"),
        ("a.svelte", "c.svelte"),
        ("a.svelte", "b.svelte"),
    ]


def test_versions_are_serialised_when_enabled(library) -> None:
    library.write({"a.svelte": "<!-- x -->\n<script>\n// version: 0.3.0\n</script>\n"})

    serializer = GraphSerializer(include_versions=True)
    payload = json.loads(serializer.serialize(serializer.build(library.path())))

    assert payload == {"components": {"a.svelte": {"dependencies": [], "version": "0.3.0"}}}


def test_build_is_deterministic(library) -> None:
    library.write(
        {
            "z.svelte": 'import A from "./a.svelte";\n',
            "a.svelte": 'import M from "./m.svelte";\n',
            "m.svelte": "",
        }
    )
    serializer = GraphSerializer()

    first = serializer.serialize(serializer.build(library.path()))
    second = serializer.serialize(serializer.build(library.path()))

    assert first == second


def test_build_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(DirectoryNotFound):
        GraphSerializer().build(tmp_path / "nope")
