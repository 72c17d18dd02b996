"""PreOrderIterator: depth-first, parent-before-children traversal of an arena.

The iterator doubles as the builder's integrity check.  It keeps a visited
set; when a child was already visited, or when the child's recorded parent is
not the node being expanded (the same node reachable over two parent chains),
``cyclic`` is set and that child is skipped.  Iteration therefore always
terminates, even on a malformed arena.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from device_schema.tree.nodes import SchemaNode

__all__ = ["PreOrderIterator"]


class PreOrderIterator(Iterator[SchemaNode]):
    """Single-pass preorder iterator over the nodes reachable from a root.

    Restart by creating a new iterator; ``SchemaTree.__iter__`` does this on
    every call.

    Example::

        it = PreOrderIterator(arena, root_index)
        names = [node.name for node in it]
        if it.cyclic:
            ...
    """

    def __init__(self, arena: Sequence[SchemaNode], root: int | None) -> None:
        self._arena = arena
        self._stack: list[int] = [] if root is None else [root]
        self._visited: set[int] = set()
        self._cyclic = False
        if root is not None and arena[root].parent is not None:
            # A root that has a parent sits on a cycle or below another node
            self._cyclic = True

    @property
    def cyclic(self) -> bool:
        """True once a revisit or an inconsistent parent link was seen."""
        return self._cyclic

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    def __iter__(self) -> PreOrderIterator:
        return self

    def __next__(self) -> SchemaNode:
        if not self._stack:
            raise StopIteration

        index = self._stack.pop()
        self._visited.add(index)
        node = self._arena[index]

        # Push in reverse so the first declared child is visited first
        for child_index in reversed(node.children):
            child = self._arena[child_index]
            if child_index in self._visited or child_index in self._stack:
                self._cyclic = True
                continue
            if child.parent != index:
                self._cyclic = True
                continue
            self._stack.append(child_index)

        return node

    def exhaust(self) -> int:
        """Consume the remaining nodes and return the total visited count."""
        for _ in self:
            pass
        return self.visited_count
