"""TreeBuilder: converts a flat descriptor list into a validated SchemaTree.

Pipeline, each stage returning a ``ValidationReport`` and stopping the
pipeline when it is not empty:

1. ``SchemaValidator``: per-descriptor rules, then collection-wide rules.
2. Linking: one node per descriptor, parent and children resolved by
   exact name match, then per-node link checks (unknown parent, self parent,
   unknown children, self child).
3. Integrity: preorder traversal from the root.  A cyclic/multi-parent flag
   or a visited count different from the descriptor count fails the build.
   The same pass computes every node's path and depth and fills the path
   index.
4. Depth: the deepest leaf must not exceed ``config.max_depth``.

Nothing partially built ever escapes: ``try_build`` returns either a tree or
the report, ``build`` raises ``SchemaValidationError``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from device_schema.config import SchemaConfig
from device_schema.errors import SchemaValidationError
from device_schema.result import BuildResult, ValidationReport
from device_schema.tree.descriptor import NodeDescriptor
from device_schema.tree.nodes import SchemaNode, bind_arena
from device_schema.tree.paths import PathEntry, PathIndex, SchemaPath
from device_schema.tree.schema_tree import SchemaTree
from device_schema.tree.traversal import PreOrderIterator
from device_schema.tree.types import DataType
from device_schema.tree.validator import SchemaValidator

__all__ = ["TreeBuilder"]

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds SchemaTrees from NodeDescriptor lists.

    The builder is stateless between calls; one instance may build any
    number of trees.

    Example::

        builder = TreeBuilder()
        tree = builder.build([
            NodeDescriptor(name="root", type="object", children=("v",)),
            NodeDescriptor(name="v", type="double", parent="root"),
        ])
        tree.lookup("v").data_type   # DataType.DOUBLE
    """

    def __init__(self, config: SchemaConfig | None = None) -> None:
        self._config = config if config is not None else SchemaConfig()
        self._validator = SchemaValidator(self._config)

    @property
    def config(self) -> SchemaConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, descriptors: Sequence[NodeDescriptor]) -> SchemaTree:
        """Build a tree or raise.

        Raises:
            SchemaValidationError: With every problem found by the first
                failing stage.
            TypeError: If ``descriptors`` is None.
        """
        result = self.try_build(descriptors)
        if result.tree is None:
            raise SchemaValidationError(result.report)
        return result.tree

    def try_build(self, descriptors: Sequence[NodeDescriptor]) -> BuildResult:
        """Build a tree, returning the report instead of raising."""
        if descriptors is None:
            raise TypeError("descriptors must not be None")

        normalized, report = self._validator.validate(descriptors)
        if not report.ok:
            return self._reject(report)

        linked, report = self._link(normalized)
        if not report.ok:
            return self._reject(report)

        root_index = next(node.index for node in linked if node.parent is None)

        placed, path_index, report = self._traverse(linked, root_index)
        if not report.ok:
            return self._reject(report)

        report = self._check_depth(placed)
        if not report.ok:
            return self._reject(report)

        arena = bind_arena(placed)
        tree = SchemaTree(
            arena=arena,
            root=arena[root_index],
            path_index=path_index,
            descriptors=normalized,
            config=self._config,
        )
        logger.debug(
            "Built schema tree with %d nodes (depth %d)", len(arena), tree.depth
        )
        return BuildResult(tree=tree, report=report)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _link(
        self, descriptors: Sequence[NodeDescriptor]
    ) -> tuple[list[SchemaNode], ValidationReport]:
        """Create one unbound node per descriptor with parent/children indices.

        O(n^2) name matching; schemas are small because of the depth limit.
        """
        names = [descriptor.name for descriptor in descriptors]
        nodes: list[SchemaNode] = []
        report = ValidationReport()
        for index, declared in enumerate(descriptors):
            parent: int | None = None
            children: list[int] = []
            for candidate, name in enumerate(names):
                if declared.has_parent and declared.parent == name:
                    parent = candidate
                if name in declared.child_names:
                    children.append(candidate)
            order = declared.child_names
            children.sort(key=lambda i: order.index(names[i]))

            if parent is None and declared.has_parent:
                report = report.add(f"Parent {declared.parent} is not a known node.")
            if parent is not None and parent == index:
                report = report.add(f"{declared.name} cannot have itself as a parent.")
            if len(children) != len(declared.child_names):
                report = report.add(
                    "There are unknown children nodes in the children list "
                    f"of node {declared.name}."
                )
            if index in children:
                report = report.add(f"Node {declared.name} cannot be its own child.")

            nodes.append(
                SchemaNode(
                    index=index,
                    descriptor=declared,
                    # Stage 1 guarantees the type resolves
                    data_type=DataType(declared.type.strip().lower()),
                    parent=parent,
                    children=tuple(children),
                )
            )

        return nodes, report

    def _traverse(
        self, nodes: list[SchemaNode], root_index: int
    ) -> tuple[list[SchemaNode], PathIndex, ValidationReport]:
        """Walk the tree once: integrity check, paths, depths, path index.

        Returns the nodes with ``path`` and ``depth`` filled in.
        """
        report = ValidationReport()
        entries: dict[str, PathEntry] = {}
        paths: dict[int, SchemaPath] = {}
        depths: dict[int, int] = {}

        it = PreOrderIterator(nodes, root_index)
        for node in it:
            if node.parent is None:
                path = SchemaPath()
                depths[node.index] = 1
            else:
                parent = nodes[node.parent]
                if parent.data_type == DataType.ARRAY:
                    path = paths[parent.index].element()
                else:
                    path = paths[parent.index].child(node.name)
                depths[node.index] = depths[parent.index] + 1
            paths[node.index] = path
            entries[path.path] = PathEntry(path.expression, node.data_type)

        if it.cyclic:
            report = report.add("Tree is cyclic or one node has multiple parents.")
        if it.visited_count != len(nodes):
            report = report.add("Tree is not properly traversable.")
        if not report.ok:
            return nodes, PathIndex(), report

        placed = [
            replace(node, path=paths[node.index], depth=depths[node.index])
            for node in nodes
        ]
        return placed, PathIndex(entries), report

    def _check_depth(self, nodes: list[SchemaNode]) -> ValidationReport:
        depth = max((node.depth for node in nodes if node.is_leaf), default=0)
        if depth > self._config.max_depth:
            return ValidationReport().add(
                f"The level of the tree must be <= {self._config.max_depth}"
            )
        return ValidationReport()

    def _reject(self, report: ValidationReport) -> BuildResult:
        logger.debug("Rejected schema with %d validation errors", len(report.errors))
        return BuildResult(tree=None, report=report)
