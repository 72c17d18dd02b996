"""SchemaNode: one node of a built schema tree.

The tree is an arena: every SchemaNode lives in one tuple owned by its
SchemaTree, and parent/child relations are indices into that tuple.  Nodes
still navigate in O(1) both ways through the ``parent_node`` and
``child_nodes`` properties, which resolve the indices against the arena.

Nodes are frozen.  The builder creates them unbound, then ``bind_arena``
turns the finished list into the arena tuple and points every node at it.

Nodes compare by identity, so they can key dictionaries during matching.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from device_schema.tree.descriptor import NodeDescriptor
from device_schema.tree.types import DataType

if TYPE_CHECKING:
    from device_schema.tree.paths import SchemaPath

__all__ = ["SchemaNode", "bind_arena"]


@dataclass(frozen=True, slots=True, eq=False)
class SchemaNode:
    """A node in the schema tree arena.

    Attributes:
        index:      Position of this node in the arena.
        descriptor: The normalized descriptor this node wraps.
        data_type:  Resolved type of the descriptor.
        parent:     Arena index of the parent; None for the root.
        children:   Arena indices of the children, in declared order.
        path:       Root-to-node path, set by the traversal pass.
        depth:      Tree level of the node, root = 1; 0 until traversed.
        arena:      All nodes of the same tree, set by ``bind_arena``.  Not
                    part of the repr to keep it readable.
    """

    index: int
    descriptor: NodeDescriptor
    data_type: DataType
    parent: int | None = None
    children: tuple[int, ...] = ()
    path: SchemaPath | None = None
    depth: int = 0
    arena: tuple[SchemaNode, ...] = field(default=(), repr=False)

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def size(self) -> int:
        return self.descriptor.size

    @property
    def unit(self) -> str:
        return self.descriptor.unit

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def parent_node(self) -> SchemaNode | None:
        return None if self.parent is None else self.arena[self.parent]

    @property
    def child_nodes(self) -> tuple[SchemaNode, ...]:
        return tuple(self.arena[i] for i in self.children)

    @property
    def path_string(self) -> str:
        """The node's path as a string; empty until the node was traversed."""
        return "" if self.path is None else self.path.path

    def ancestors(self) -> list[SchemaNode]:
        """Return the chain from the parent up to the root (nearest first)."""
        chain: list[SchemaNode] = []
        current = self.parent_node
        while current is not None:
            chain.append(current)
            current = current.parent_node
        return chain


def bind_arena(nodes: Sequence[SchemaNode]) -> tuple[SchemaNode, ...]:
    """Return ``nodes`` as an arena tuple, every node pointing back at it.

    Raises:
        ValueError: If a node's ``index`` is not its position, or a node is
            already bound to another arena.
    """
    arena = tuple(nodes)
    for position, node in enumerate(arena):
        if node.index != position:
            msg = f"Node {node.name!r} has index {node.index}, expected {position}"
            raise ValueError(msg)
        if node.arena:
            msg = f"Node {node.name!r} is already bound to an arena"
            raise ValueError(msg)
    for node in arena:
        # The tuple only exists once every node does
        object.__setattr__(node, "arena", arena)
    return arena
