"""Checks whether a JSON document has the shape a SchemaTree describes.

The tree is translated into a JSON Schema (draft 2020-12) and the document is
validated with ``jsonschema``:

- OBJECT: ``"type": "object"`` with one property per child, every child
  required and no additional properties.
- ARRAY: ``"type": "array"`` whose ``items`` is the single child's schema and
  whose length is pinned to the declared size (``minItems == maxItems``).
- primitives: the JSON type of the value (see ``_PRIMITIVE_SCHEMAS``).

``check_document`` returns every violation found, an empty list meaning the
document conforms.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from device_schema.tree.types import DataType

if TYPE_CHECKING:
    from device_schema.tree.nodes import SchemaNode
    from device_schema.tree.schema_tree import SchemaTree

__all__ = ["check_document", "to_json_schema"]

_INT32 = 2**31
_INT64 = 2**63

# DATE and BINARY keep their annotations only; formats are not asserted
_PRIMITIVE_SCHEMAS: dict[DataType, dict[str, Any]] = {
    DataType.STRING: {"type": "string"},
    DataType.DOUBLE: {"type": "number"},
    DataType.INT: {"type": "integer", "minimum": -_INT32, "maximum": _INT32 - 1},
    DataType.LONG: {"type": "integer", "minimum": -_INT64, "maximum": _INT64 - 1},
    DataType.DECIMAL128: {"type": "number"},
    DataType.BOOLEAN: {"type": "boolean"},
    DataType.DATE: {"type": "string", "format": "date-time"},
    DataType.BINARY: {"type": "string", "contentEncoding": "base64"},
}


def to_json_schema(tree: SchemaTree) -> dict[str, Any]:
    """Return the JSON Schema of the documents ``tree`` describes.

    The schema covers the unwrapped document, not the ``{"value": ...}``
    message around it.

    Example::

        to_json_schema(tree)
        # {"$schema": "https://json-schema.org/draft/2020-12/schema",
        #  "title": "root", "type": "object",
        #  "properties": {"v": {"type": "number"}},
        #  "required": ["v"], "additionalProperties": False}
    """
    if tree is None:
        raise TypeError("tree must not be None")
    return {
        "$schema": Draft202012Validator.META_SCHEMA["$id"],
        "title": tree.root.name,
        **_schema_of(tree.root),
    }


def check_document(tree: SchemaTree, document: Any) -> list[str]:
    """Return the violations of ``document`` against ``tree``.

    Args:
        tree: The schema to check against.
        document: Either the unwrapped document or a full example message
            ``{"value": <document>}``; the wrapper is detected when the root
            has no child called ``value``.

    Returns:
        Human-readable violations, each prefixed with the JSONPath of the
        offending value (``$`` for the document itself).
    """
    if tree is None:
        raise TypeError("tree must not be None")

    root = tree.root
    if (
        isinstance(document, dict)
        and set(document) == {"value"}
        and "value" not in {child.name for child in root.child_nodes}
    ):
        document = document["value"]

    validator = Draft202012Validator(to_json_schema(tree))
    return [_format_error(error) for error in validator.iter_errors(document)]


def _schema_of(node: SchemaNode) -> dict[str, Any]:
    if node.data_type == DataType.OBJECT:
        children = node.child_nodes
        return {
            "type": "object",
            "properties": {child.name: _schema_of(child) for child in children},
            "required": [child.name for child in children],
            "additionalProperties": False,
        }

    if node.data_type == DataType.ARRAY:
        return {
            "type": "array",
            "items": _schema_of(node.child_nodes[0]),
            "minItems": node.size,
            "maxItems": node.size,
        }

    schema = dict(_PRIMITIVE_SCHEMAS[node.data_type])
    if node.unit:
        schema["description"] = f"unit: {node.unit}"
    return schema


def _format_error(error: ValidationError) -> str:
    return f"{error.json_path}: {error.message}"
