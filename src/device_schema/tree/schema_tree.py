"""SchemaTree: the built, read-only schema tree.

A SchemaTree is only ever produced by ``TreeBuilder``; once it exists every
structural invariant holds (single object root, arity per type, no cycles,
depth limit).  It exposes the read operations consumers need:

- preorder iteration (restartable, ``iter(tree)`` starts over every time),
- ``lookup(path)`` against the path index,
- ``example()``, the sample device message,
- ``find_subtree(pattern_root)``, type-isomorphic subtree search,
- ``leaf_paths_for(pattern_root)``, leaves able to feed a single-chain pattern.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from device_schema.config import SchemaConfig
from device_schema.result import LeafPath, SubtreeMatchResult
from device_schema.tree.descriptor import NodeDescriptor
from device_schema.tree.example import ExampleGenerator
from device_schema.tree.nodes import SchemaNode
from device_schema.tree.paths import PathEntry, PathIndex
from device_schema.tree.traversal import PreOrderIterator
from device_schema.tree.types import DataType

__all__ = ["SchemaTree"]


class SchemaTree:
    """Immutable schema tree over an arena of SchemaNodes.

    Args:
        arena: Every node of the tree, indexed by ``SchemaNode.index``.
        root: The single parentless OBJECT node.
        path_index: Path string -> ``PathEntry`` for every node.
        descriptors: The normalized descriptors the tree was built from.
        config: Limits the tree was validated against.
    """

    def __init__(
        self,
        *,
        arena: Sequence[SchemaNode],
        root: SchemaNode,
        path_index: PathIndex,
        descriptors: Sequence[NodeDescriptor],
        config: SchemaConfig,
    ) -> None:
        self._arena = tuple(arena)
        self._root = root
        self._path_index = path_index
        self._descriptors = tuple(descriptors)
        self._config = config
        self._leaves = tuple(node for node in self if node.is_leaf)
        self._by_name = {node.name: node for node in self._arena}

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def root(self) -> SchemaNode:
        return self._root

    @property
    def nodes(self) -> tuple[SchemaNode, ...]:
        """All nodes in arena (declaration) order."""
        return self._arena

    @property
    def leaf_nodes(self) -> tuple[SchemaNode, ...]:
        """Leaves in preorder."""
        return self._leaves

    @property
    def descriptors(self) -> tuple[NodeDescriptor, ...]:
        return self._descriptors

    @property
    def config(self) -> SchemaConfig:
        return self._config

    @property
    def depth(self) -> int:
        """Number of levels, the root counting as level 1."""
        return max((leaf.depth for leaf in self._leaves), default=1)

    @property
    def path_index(self) -> PathIndex:
        return self._path_index

    def node(self, name: str) -> SchemaNode | None:
        """Return the node called ``name`` (exact match), or None."""
        if name is None:
            raise TypeError("name must not be None")
        return self._by_name.get(name)

    def __iter__(self) -> Iterator[SchemaNode]:
        return PreOrderIterator(self._arena, self._root.index)

    def __len__(self) -> int:
        return len(self._arena)

    def __repr__(self) -> str:
        return f"SchemaTree(root={self._root.name!r}, nodes={len(self._arena)})"

    def __str__(self) -> str:
        return "".join(f"{node.name} jsonPath: {node.path_string}\n" for node in self)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def lookup(self, path: str) -> PathEntry | None:
        """Return the ``PathEntry`` stored for ``path``, or None if unknown."""
        return self._path_index.lookup(path)

    def example(self) -> str:
        """Return the example message ``{"value": <document>}`` as JSON."""
        return ExampleGenerator(self).render()

    def example_document(self) -> dict[str, Any]:
        """Return the unwrapped example document."""
        return ExampleGenerator(self).document()

    def find_subtree(self, pattern_root: SchemaNode) -> SubtreeMatchResult:
        """Find every subtree of this tree that is type-isomorphic to a pattern.

        Args:
            pattern_root: Root of the pattern, usually a node of another
                SchemaTree.  Only its type topology is used.

        Returns:
            Matched nodes in preorder with their correspondence maps.

        Raises:
            TypeError: If ``pattern_root`` is None.
        """
        if pattern_root is None:
            raise TypeError("pattern_root must not be None")
        from device_schema.algorithm.subtree import SubtreeMatcher

        return SubtreeMatcher(self).find(pattern_root)

    def leaf_paths_for(self, pattern_root: SchemaNode) -> list[LeafPath]:
        """Return the leaves that can feed a single-chain pattern.

        The pattern is followed from ``pattern_root`` down its first child
        until a leaf is reached.  Its ARRAY nodes give the required array
        dimension.  A leaf of this tree qualifies when it has the pattern
        leaf's type and at least that many ARRAY nodes on its way to the
        root.

        Raises:
            TypeError: If ``pattern_root`` is None.
        """
        if pattern_root is None:
            raise TypeError("pattern_root must not be None")

        dimension = 0
        pattern_leaf = pattern_root
        while True:
            if pattern_leaf.data_type == DataType.ARRAY:
                dimension += 1
            if pattern_leaf.is_leaf:
                break
            pattern_leaf = pattern_leaf.child_nodes[0]

        found: list[LeafPath] = []
        for leaf in self._leaves:
            if leaf.data_type != pattern_leaf.data_type:
                continue
            chain = [leaf, *leaf.ancestors()]
            arrays = sum(1 for n in chain if n.data_type == DataType.ARRAY)
            if arrays >= dimension:
                found.append(
                    LeafPath(
                        name=leaf.name,
                        data_type=pattern_root.data_type,
                        dimension=pattern_root.size,
                        unit=leaf.unit,
                        path=leaf.path_string,
                    )
                )
        return found
