"""Tests for the SchemaNode arena record.

Verifies:
- Descriptor fields are exposed through properties
- Parent and child indices resolve against the shared arena
- Nodes compare and hash by identity
- Leaf/root flags and the ancestor chain
"""

from dataclasses import FrozenInstanceError

import pytest

from device_schema.tree.descriptor import NodeDescriptor
from device_schema.tree.nodes import SchemaNode, bind_arena
from device_schema.tree.schema_tree import SchemaTree
from device_schema.tree.types import DataType


def _pair() -> tuple[SchemaNode, ...]:
    root = SchemaNode(
        index=0,
        descriptor=NodeDescriptor(name="root", type="object", children=("v",)),
        data_type=DataType.OBJECT,
        children=(1,),
    )
    v = SchemaNode(
        index=1,
        descriptor=NodeDescriptor(name="v", type="double", parent="root", unit="volt"),
        data_type=DataType.DOUBLE,
        parent=0,
    )
    return bind_arena([root, v])


class TestSchemaNode:
    """Tests for SchemaNode properties."""

    def test_descriptor_fields(self) -> None:
        _, v = _pair()
        assert v.name == "v"
        assert v.unit == "volt"
        assert v.size == -1

    def test_navigation(self) -> None:
        root, v = _pair()
        assert v.parent_node is root
        assert root.child_nodes == (v,)
        assert root.parent_node is None

    def test_flags(self) -> None:
        root, v = _pair()
        assert root.is_root and not root.is_leaf
        assert v.is_leaf and not v.is_root

    def test_identity_semantics(self) -> None:
        first, _ = _pair()
        second, _ = _pair()
        assert first != second
        assert len({first, second}) == 2

    def test_path_empty_until_traversed(self) -> None:
        _, v = _pair()
        assert v.path is None
        assert v.path_string == ""
        assert v.depth == 0

    def test_repr_omits_arena(self) -> None:
        root, _ = _pair()
        assert "arena" not in repr(root)

    def test_ancestors_nearest_first(self, weather_tree: SchemaTree) -> None:
        timestamp = weather_tree.node("timestamp")
        assert timestamp is not None
        assert [a.name for a in timestamp.ancestors()] == [
            "reading",
            "readings",
            "station",
        ]


class TestImmutability:
    """Built nodes and their arena cannot be changed."""

    @pytest.mark.parametrize(
        ("attribute", "value"),
        [("parent", 3), ("children", ()), ("path", None), ("depth", 9)],
    )
    def test_links_cannot_be_reassigned(
        self, weather_tree: SchemaTree, attribute: str, value: object
    ) -> None:
        with pytest.raises(FrozenInstanceError):
            setattr(weather_tree.root, attribute, value)

    def test_tree_unchanged_after_rejected_assignment(
        self, weather_tree: SchemaTree
    ) -> None:
        with pytest.raises(FrozenInstanceError):
            weather_tree.root.children = ()  # type: ignore[misc]
        assert len(list(weather_tree)) == len(weather_tree) == 6

    def test_arena_is_the_trees_tuple(self, weather_tree: SchemaTree) -> None:
        arena = weather_tree.root.arena
        assert isinstance(arena, tuple)
        assert arena is weather_tree.nodes
        assert not hasattr(arena, "append")

    def test_bind_rejects_misplaced_index(self) -> None:
        with pytest.raises(ValueError, match="index 1, expected 0"):
            bind_arena(
                [
                    SchemaNode(
                        index=1,
                        descriptor=NodeDescriptor(name="x", type="object"),
                        data_type=DataType.OBJECT,
                    ),
                    SchemaNode(
                        index=0,
                        descriptor=NodeDescriptor(name="y", type="object"),
                        data_type=DataType.OBJECT,
                    ),
                ]
            )

    def test_bind_rejects_bound_node(self) -> None:
        root, v = _pair()
        with pytest.raises(ValueError, match="already bound"):
            bind_arena([root, v])
