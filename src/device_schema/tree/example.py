"""ExampleGenerator: renders a sample device message for a schema tree.

Recursive descent from the root's children (the root is not emitted as a
key; its children populate the document directly):

- OBJECT: a nested dict, filled with the node's children.
- ARRAY: a nested list holding ``size`` independently expanded copies of the
  node's single child.
- primitives: the type's canonical example value.

The final message wraps the document as ``{"value": <document>}``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from device_schema.tree.types import DataType

if TYPE_CHECKING:
    from device_schema.tree.nodes import SchemaNode
    from device_schema.tree.schema_tree import SchemaTree

__all__ = ["ExampleGenerator"]


class ExampleGenerator:
    """Generates example documents for one SchemaTree.

    Output is deterministic for a given tree; every call re-runs the
    generation.

    Example::

        ExampleGenerator(tree).render()
        # '{"value": {"v": 24.5}}'
    """

    def __init__(self, tree: SchemaTree) -> None:
        if tree is None:
            raise TypeError("tree must not be None")
        self._tree = tree

    def document(self) -> dict[str, Any]:
        """Return the unwrapped example document as Python objects."""
        document: dict[str, Any] = {}
        for child in self._tree.root.child_nodes:
            self._emit(child, document)
        return document

    def render(self) -> str:
        """Return the example message as a JSON string."""
        return json.dumps({"value": self.document()})

    def _emit(self, node: SchemaNode, container: dict[str, Any] | list[Any]) -> None:
        """Add ``node`` by name to a dict or by position to a list."""
        value = self._value_of(node)
        if isinstance(container, list):
            container.append(value)
        else:
            container[node.name] = value

    def _value_of(self, node: SchemaNode) -> Any:
        if node.data_type == DataType.OBJECT:
            obj: dict[str, Any] = {}
            for child in node.child_nodes:
                self._emit(child, obj)
            return obj

        if node.data_type == DataType.ARRAY:
            arr: list[Any] = []
            element = node.child_nodes[0]
            for _ in range(node.size):
                self._emit(element, arr)
            return arr

        return node.data_type.example
