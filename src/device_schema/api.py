"""Public API functions for device-schema-tree.

Module-level shortcuts over ``TreeBuilder`` and ``SchemaTree``.  Each call
creates a fresh ``TreeBuilder`` so no state is shared between calls; use
``TreeCache`` when the same schema is built repeatedly.

Every ``source`` argument accepts whatever ``load_descriptors`` accepts: a
sequence of ``NodeDescriptor``, a list of descriptor dicts, a data-model dict
with a ``"treeNodes"`` list, or the JSON text of either.
"""

from __future__ import annotations

from typing import Any

from device_schema.config import SchemaConfig
from device_schema.result import BuildResult, SubtreeMatchResult
from device_schema.tree.builder import TreeBuilder
from device_schema.tree.descriptor import load_descriptors
from device_schema.tree.nodes import SchemaNode
from device_schema.tree.schema_tree import SchemaTree

__all__ = [
    "build_tree",
    "example_message",
    "find_subtree",
    "load_descriptors",
    "try_build_tree",
]


def build_tree(source: Any, config: SchemaConfig | None = None) -> SchemaTree:
    """Validate a schema and build its tree.

    Args:
        source: The schema's node descriptors (see module docstring).
        config: Structural limits.  Defaults to ``SchemaConfig()`` when None.

    Returns:
        The built ``SchemaTree``.

    Raises:
        SchemaValidationError: Listing every problem found in the schema.
        TypeError: If ``source`` is None or not a list of descriptors.
    """
    return TreeBuilder(config).build(load_descriptors(source))


def try_build_tree(source: Any, config: SchemaConfig | None = None) -> BuildResult:
    """Like ``build_tree`` but return the validation report instead of raising.

    Returns:
        A ``BuildResult``; ``result.tree`` is None when the schema is invalid
        and ``result.report`` then lists every problem.
    """
    return TreeBuilder(config).try_build(load_descriptors(source))


def example_message(source: Any, config: SchemaConfig | None = None) -> str:
    """Return the example message ``{"value": ...}`` for a schema.

    ``source`` may also be an already built ``SchemaTree``.

    Raises:
        SchemaValidationError: If ``source`` is not a valid schema.
    """
    tree = source if isinstance(source, SchemaTree) else build_tree(source, config)
    return tree.example()


def find_subtree(tree: SchemaTree, pattern_root: SchemaNode) -> SubtreeMatchResult:
    """Find every subtree of ``tree`` that is type-isomorphic to a pattern.

    Args:
        tree: The tree to search.
        pattern_root: Root node of the pattern; only its type topology counts.

    Returns:
        Matched nodes (preorder) and, aligned with them, their deduplicated
        correspondence maps ``pattern name -> matched name``.

    Raises:
        TypeError: If either argument is None.
    """
    if tree is None:
        raise TypeError("tree must not be None")
    return tree.find_subtree(pattern_root)
