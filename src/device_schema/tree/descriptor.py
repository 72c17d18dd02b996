"""NodeDescriptor: the raw, externally supplied description of one schema node.

Descriptors are immutable.  Normalization during validation produces new
instances via ``dataclasses.replace`` rather than mutating the input.

The JSON shape used by collaborators::

    {"name": "temp", "type": "double", "parent": "root", "children": [],
     "size": -1, "unit": "°C", "description": ""}
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["UNSET_SIZE", "NodeDescriptor", "load_descriptors"]

# Size of every non-array node after normalization
UNSET_SIZE = -1


@dataclass(frozen=True, slots=True)
class NodeDescriptor:
    """One schema node before tree linking.

    Attributes:
        name:        Node name, unique across a schema (case-insensitive).
        type:        Declared type name; must resolve via ``DataType.lookup``.
        parent:      Name of the parent node; empty string for the root.
        children:    Ordered child names.  ``None`` means "not given" and is
                     normalized to an empty tuple by the validator.
        size:        Array dimension.  Only meaningful for arrays.
        unit:        Free-text measurement unit of the value.
        description: Free-text description.
    """

    name: str
    type: str
    parent: str = ""
    children: tuple[str, ...] | None = ()
    size: int = UNSET_SIZE
    unit: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        # Lists are accepted for convenience but stored as tuples (hashable).
        if self.children is not None and not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def has_parent(self) -> bool:
        return bool(self.parent)

    @property
    def child_names(self) -> tuple[str, ...]:
        """Declared children, treating a missing list as empty."""
        return self.children if self.children is not None else ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NodeDescriptor:
        """Build a descriptor from its JSON object form.

        Unknown keys are ignored.  ``null`` values for string fields become
        empty strings; a missing or ``null`` size becomes ``UNSET_SIZE``.

        Raises:
            TypeError: If ``data`` is not a mapping or ``children`` is not a list.
        """
        if not isinstance(data, Mapping):
            msg = f"Node descriptor must be a JSON object, got {type(data)!r}"
            raise TypeError(msg)

        children = data.get("children")
        if children is not None and not isinstance(children, (list, tuple)):
            msg = f"'children' must be a list, got {type(children)!r}"
            raise TypeError(msg)

        size = data.get("size")
        return cls(
            name=_as_str(data.get("name")),
            type=_as_str(data.get("type")),
            parent=_as_str(data.get("parent")),
            children=None if children is None else tuple(str(c) for c in children),
            size=UNSET_SIZE if size is None else int(size),
            unit=_as_str(data.get("unit")),
            description=_as_str(data.get("description")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of this descriptor."""
        return {
            "name": self.name,
            "type": self.type,
            "parent": self.parent,
            "children": list(self.child_names),
            "size": self.size,
            "unit": self.unit,
            "description": self.description,
        }


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def load_descriptors(source: Any) -> tuple[NodeDescriptor, ...]:
    """Convert collaborator input into a tuple of NodeDescriptors.

    Args:
        source: A JSON string or bytes, a list of descriptor dicts (or
            ``NodeDescriptor`` instances), or a data-model dict carrying the
            list under ``"treeNodes"``.

    Returns:
        The descriptors in input order.

    Raises:
        TypeError: If ``source`` does not contain a list of objects.
    """
    if source is None:
        raise TypeError("source must not be None")

    if isinstance(source, (str, bytes, bytearray)):
        source = json.loads(source)

    if isinstance(source, Mapping):
        source = source.get("treeNodes")

    if not isinstance(source, Iterable) or isinstance(source, (str, bytes)):
        msg = f"Expected a list of node descriptors, got {type(source)!r}"
        raise TypeError(msg)

    return tuple(
        item if isinstance(item, NodeDescriptor) else NodeDescriptor.from_dict(item)
        for item in source
    )
