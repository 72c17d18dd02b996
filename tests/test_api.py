"""Tests for the module-level API functions."""

from __future__ import annotations

import json

import pytest

import device_schema
from device_schema import (
    SchemaConfig,
    SchemaTree,
    SchemaValidationError,
    build_tree,
    example_message,
    find_subtree,
    load_descriptors,
    try_build_tree,
)

NODES = [
    {"name": "root", "type": "object", "children": ["v"]},
    {"name": "v", "type": "double", "parent": "root"},
]


class TestBuildTree:
    def test_from_dicts(self) -> None:
        tree = build_tree(NODES)
        assert isinstance(tree, SchemaTree)
        assert tree.root.name == "root"

    def test_from_json_text(self) -> None:
        tree = build_tree(json.dumps({"treeNodes": NODES}))
        assert len(tree) == 2

    def test_invalid_raises(self) -> None:
        with pytest.raises(SchemaValidationError) as exc_info:
            build_tree([{"name": "root", "type": "object"}])
        assert exc_info.value.invalid_fields == {
            "treeNodes": ["Node root is not connected to the tree."]
        }

    def test_config_forwarded(self) -> None:
        with pytest.raises(SchemaValidationError, match="must be <= 1"):
            build_tree(NODES, config=SchemaConfig(max_depth=1))

    def test_none_rejected(self) -> None:
        with pytest.raises(TypeError):
            build_tree(None)


class TestTryBuildTree:
    def test_success(self) -> None:
        result = try_build_tree(NODES)
        assert result.ok

    def test_failure_returns_report(self) -> None:
        result = try_build_tree(
            [
                {"name": "root", "type": "object", "children": ["v", "w"]},
                {"name": "v", "type": "double", "parent": "root"},
                {"name": "W", "type": "double", "parent": "root"},
                {"name": "w", "type": "double", "parent": "root"},
            ]
        )
        assert result.tree is None
        assert result.report.messages == ["Node W has no unique name."]


class TestExampleMessage:
    def test_from_descriptors(self) -> None:
        assert example_message(NODES) == '{"value": {"v": 24.5}}'

    def test_from_tree(self) -> None:
        assert example_message(build_tree(NODES)) == '{"value": {"v": 24.5}}'


class TestFindSubtree:
    def test_delegates_to_tree(self) -> None:
        tree = build_tree(NODES)
        v = tree.node("v")
        assert v is not None
        result = find_subtree(tree, v)
        assert result.mappings == (({"v": "v"},),)

    def test_none_tree_rejected(self) -> None:
        tree = build_tree(NODES)
        with pytest.raises(TypeError):
            find_subtree(None, tree.root)  # type: ignore[arg-type]


def test_load_descriptors_reexported() -> None:
    assert [d.name for d in load_descriptors(NODES)] == ["root", "v"]


def test_public_names() -> None:
    for name in device_schema.__all__:
        assert hasattr(device_schema, name)
