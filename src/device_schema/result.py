"""Result dataclasses returned by validation, building and subtree search.

``ValidationReport`` is an immutable accumulator: every validation stage
returns one and stages combine them with ``merge``.  ``BuildResult`` carries
either a finished tree or the report that prevented it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from device_schema.tree.nodes import SchemaNode
    from device_schema.tree.schema_tree import SchemaTree
    from device_schema.tree.types import DataType

__all__ = [
    "TREE_NODES_FIELD",
    "BuildResult",
    "FieldError",
    "LeafPath",
    "SubtreeMatchResult",
    "ValidationReport",
]

# Logical field every structural problem is reported under
TREE_NODES_FIELD = "treeNodes"


@dataclass(frozen=True, slots=True)
class FieldError:
    """One validation failure.

    Attributes:
        field:   Logical field name the failure belongs to.
        message: Human-readable description.
    """

    field: str
    message: str


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Aggregated validation failures of one validation pass.

    An empty report means "valid".
    """

    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def add(self, message: str, field: str = TREE_NODES_FIELD) -> ValidationReport:
        """Return a new report with one more failure appended."""
        return ValidationReport((*self.errors, FieldError(field, message)))

    def merge(self, other: ValidationReport) -> ValidationReport:
        """Return a new report holding the failures of both, self first."""
        if not other.errors:
            return self
        return ValidationReport((*self.errors, *other.errors))

    def as_dict(self) -> dict[str, list[str]]:
        """Group messages by field name, preserving discovery order."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Outcome of ``TreeBuilder.try_build``: exactly one of the fields is set."""

    tree: SchemaTree | None
    report: ValidationReport

    @property
    def ok(self) -> bool:
        return self.tree is not None


@dataclass(frozen=True, slots=True)
class SubtreeMatchResult:
    """Result of a subtree search.

    Attributes:
        matched_nodes: Root of every subtree that is type-isomorphic to the
            pattern, in preorder.
        mappings: Aligned with ``matched_nodes``.  ``mappings[i]`` lists the
            deduplicated correspondence maps (pattern node name -> matched
            node name) of ``matched_nodes[i]``, one per admissible sibling
            permutation.
    """

    matched_nodes: tuple[SchemaNode, ...]
    mappings: tuple[tuple[dict[str, str], ...], ...]

    def pairs(self) -> list[tuple[SchemaNode, tuple[dict[str, str], ...]]]:
        """Return ``(node, mappings)`` pairs."""
        return list(zip(self.matched_nodes, self.mappings, strict=True))

    def __len__(self) -> int:
        return len(self.matched_nodes)


@dataclass(frozen=True, slots=True)
class LeafPath:
    """A leaf of a schema that can feed a single-chain pattern.

    Attributes:
        name:      Name of the leaf node.
        data_type: Type of the pattern root the leaf was resolved for.
        dimension: Declared size of the pattern root.
        unit:      Unit of the leaf node.
        path:      Symbolic path of the leaf in its schema.
    """

    name: str
    data_type: DataType
    dimension: int
    unit: str
    path: str
