"""SchemaPath and PathIndex: symbolic node paths and their lookup table.

Path syntax (root-relative, the root itself has the empty path ""):

- A child of an object is addressed by name, joined with ".":
  ``"sensor.temperature"``.  A name containing ``.``, ``[``, ``]`` or ``'``
  is written in bracket-quoted form instead, backslashes and single quotes
  escaped by a backslash: ``"sensor['temp.c']"``.  Distinct nodes therefore
  never share a path string.
- The single child of an array is addressed with the symbolic bracket
  ``"[*]"`` appended to the array's path: ``"readings[*]"``,
  ``"matrix[*][*]"``, ``"readings[*].value"``.

The bracket is not expanded per index at schema level.  ``instantiate``
substitutes concrete indices when a consumer extracts values from a payload.

Each path is compiled once into a ``jsonpath_ng`` expression tree (built from
expression nodes, never parsed, so arbitrary node names are safe).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import NamedTuple

from jsonpath_ng.jsonpath import Child, Fields, Index, JSONPath, Root, Slice

from device_schema.tree.types import DataType

__all__ = ["PathEntry", "PathIndex", "SchemaPath"]

# Segment value standing for "any array index"
WILDCARD = None

# Characters that force the bracket-quoted form of a name
_QUOTE_TRIGGERS = frozenset(".[]'")


@dataclass(frozen=True, slots=True)
class SchemaPath:
    """Path from the schema root to one node.

    Attributes:
        segments: Field names, with ``None`` for each array level.
        path: String form of the path (see module docstring).
        expression: Compiled ``jsonpath_ng`` expression for the path.
    """

    segments: tuple[str | None, ...] = ()
    path: str = field(init=False)
    expression: JSONPath = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", _render(self.segments))
        object.__setattr__(self, "expression", _compile(self.segments))

    @property
    def wildcard_count(self) -> int:
        """Number of array levels on the path."""
        return sum(1 for s in self.segments if s is WILDCARD)

    def child(self, name: str) -> SchemaPath:
        """Path of a named child of an object at this path."""
        return SchemaPath((*self.segments, name))

    def element(self) -> SchemaPath:
        """Path of the element child of an array at this path."""
        return SchemaPath((*self.segments, WILDCARD))

    def instantiate(self, *indices: int) -> tuple[str, JSONPath]:
        """Replace every ``[*]`` with a concrete index, outermost first.

        Returns:
            ``(path_string, expression)`` for the concrete path.

        Raises:
            ValueError: If the number of indices differs from the number of
                array levels, or an index is negative.
        """
        if len(indices) != self.wildcard_count:
            msg = (
                f"Path {self.path!r} has {self.wildcard_count} array levels, "
                f"got {len(indices)} indices"
            )
            raise ValueError(msg)
        if any(i < 0 for i in indices):
            msg = f"Array indices must be >= 0, got {indices}"
            raise ValueError(msg)

        remaining = iter(indices)
        concrete = tuple(
            next(remaining) if s is WILDCARD else s for s in self.segments
        )
        return _render(concrete), _compile(concrete)

    def __str__(self) -> str:
        return self.path


def _render(segments: tuple[str | int | None, ...]) -> str:
    out = ""
    for segment in segments:
        if segment is WILDCARD:
            out += "[*]"
        elif isinstance(segment, int):
            out += f"[{segment}]"
        elif _QUOTE_TRIGGERS.isdisjoint(segment):
            out = f"{out}.{segment}" if out else segment
        else:
            escaped = segment.replace("\\", "\\\\").replace("'", "\\'")
            out += f"['{escaped}']"
    return out


def _compile(segments: tuple[str | int | None, ...]) -> JSONPath:
    expression: JSONPath = Root()
    for segment in segments:
        if segment is WILDCARD:
            step: JSONPath = Slice()
        elif isinstance(segment, int):
            step = Index(segment)
        else:
            step = Fields(segment)
        expression = Child(expression, step)
    return expression


class PathEntry(NamedTuple):
    """Value stored in the PathIndex for one node."""

    expression: JSONPath
    data_type: DataType


class PathIndex(Mapping[str, PathEntry]):
    """Read-only mapping from path string to ``PathEntry``.

    Built once by the tree builder; there is no mutation API.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, PathEntry] | None = None) -> None:
        self._entries: dict[str, PathEntry] = dict(entries or {})

    def lookup(self, path: str) -> PathEntry | None:
        """Return the entry stored for ``path``, or None when unknown.

        Raises:
            TypeError: If ``path`` is None.
        """
        if path is None:
            raise TypeError("path must not be None")
        return self._entries.get(path)

    def __getitem__(self, path: str) -> PathEntry:
        return self._entries[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PathIndex({len(self._entries)} paths)"
