"""Tests for PreOrderIterator."""

from __future__ import annotations

from device_schema.tree.descriptor import NodeDescriptor
from device_schema.tree.nodes import SchemaNode
from device_schema.tree.schema_tree import SchemaTree
from device_schema.tree.traversal import PreOrderIterator
from device_schema.tree.types import DataType


def _arena(links: dict[int, tuple[int | None, tuple[int, ...]]]) -> list[SchemaNode]:
    """Hand-built arena: index -> (parent, children); every node an object."""
    arena: list[SchemaNode] = []
    for index in sorted(links):
        parent, children = links[index]
        arena.append(
            SchemaNode(
                index=index,
                descriptor=NodeDescriptor(name=f"n{index}", type="object"),
                data_type=DataType.OBJECT,
                parent=parent,
                children=children,
            )
        )
    return arena


class TestOrder:
    def test_parent_before_children_in_declared_order(
        self, weather_tree: SchemaTree
    ) -> None:
        assert [n.name for n in weather_tree] == [
            "station",
            "readings",
            "reading",
            "temperature",
            "timestamp",
            "location",
        ]

    def test_tree_iteration_is_restartable(self, weather_tree: SchemaTree) -> None:
        first = [n.name for n in weather_tree]
        second = [n.name for n in weather_tree]
        assert first == second

    def test_iterator_is_single_pass(self, weather_tree: SchemaTree) -> None:
        it = iter(weather_tree)
        assert len(list(it)) == 6
        assert list(it) == []


class TestIntegrityFlags:
    def test_well_formed_arena(self) -> None:
        arena = _arena({0: (None, (1, 2)), 1: (0, ()), 2: (0, ())})
        it = PreOrderIterator(arena, 0)
        assert it.exhaust() == 3
        assert not it.cyclic

    def test_back_edge_sets_cyclic_and_terminates(self) -> None:
        arena = _arena({0: (None, (1,)), 1: (0, (0,))})
        it = PreOrderIterator(arena, 0)
        assert [n.index for n in it] == [0, 1]
        assert it.cyclic

    def test_shared_child_sets_cyclic(self) -> None:
        arena = _arena({0: (None, (1, 2)), 1: (0, (3,)), 2: (0, (3,)), 3: (1, ())})
        it = PreOrderIterator(arena, 0)
        assert it.exhaust() == 4
        assert it.cyclic

    def test_child_with_other_parent_is_skipped(self) -> None:
        arena = _arena({0: (None, (1,)), 1: (2, ()), 2: (None, ())})
        it = PreOrderIterator(arena, 0)
        assert [n.index for n in it] == [0]
        assert it.cyclic

    def test_root_with_parent_is_cyclic(self) -> None:
        arena = _arena({0: (1, (1,)), 1: (0, (0,))})
        it = PreOrderIterator(arena, 0)
        it.exhaust()
        assert it.cyclic

    def test_unreachable_nodes_not_counted(self) -> None:
        arena = _arena({0: (None, (1,)), 1: (0, ()), 2: (0, ())})
        it = PreOrderIterator(arena, 0)
        assert it.exhaust() == 2
        assert not it.cyclic

    def test_no_root(self) -> None:
        it = PreOrderIterator([], None)
        assert list(it) == []
        assert it.visited_count == 0
