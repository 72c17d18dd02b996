"""SchemaValidator: descriptor-level and collection-wide schema checks.

Validation runs in two stages, each returning a ``ValidationReport``:

1. Per-descriptor checks.  Every descriptor is checked; within one
   descriptor, the name/type gate and the "connected" gate stop the remaining
   checks for that descriptor only, because they assume a minimally sane node.
2. Collection-wide checks (unique names, exactly one object root).  Only run
   when stage 1 found nothing.

Descriptors are normalized on the way (missing children -> empty tuple,
non-array size -> ``UNSET_SIZE``); the normalized tuple is returned next to
the report.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import replace

from device_schema.config import SchemaConfig
from device_schema.result import ValidationReport
from device_schema.tree.descriptor import UNSET_SIZE, NodeDescriptor
from device_schema.tree.types import DataType

__all__ = ["SchemaValidator"]


class SchemaValidator:
    """Validates a flat list of NodeDescriptors before tree linking.

    Example::

        validator = SchemaValidator()
        normalized, report = validator.validate(descriptors)
        if not report.ok:
            print(report.messages)
    """

    def __init__(self, config: SchemaConfig | None = None) -> None:
        self._config = config if config is not None else SchemaConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(
        self, descriptors: Sequence[NodeDescriptor]
    ) -> tuple[tuple[NodeDescriptor, ...], ValidationReport]:
        """Run both validation stages.

        Args:
            descriptors: The complete descriptor list of one schema.

        Returns:
            ``(normalized, report)``.  ``normalized`` is only meaningful when
            ``report.ok`` is True.

        Raises:
            TypeError: If ``descriptors`` is None.
        """
        if descriptors is None:
            raise TypeError("descriptors must not be None")

        normalized: list[NodeDescriptor] = []
        report = ValidationReport()
        for descriptor in descriptors:
            node, node_report = self.validate_node(descriptor)
            report = report.merge(node_report)
            if node is not None:
                normalized.append(node)

        if not report.ok:
            return tuple(normalized), report

        return tuple(normalized), self.validate_collection(normalized)

    def validate_node(
        self, descriptor: NodeDescriptor
    ) -> tuple[NodeDescriptor | None, ValidationReport]:
        """Check one descriptor on its own, ignoring the rest of the schema.

        Returns:
            ``(normalized, report)``.  ``normalized`` is None when the
            name/type gate failed.
        """
        report = ValidationReport()

        # Gate 1: name and type
        if not descriptor.name:
            report = report.add("All data model tree nodes need a valid name.")
        data_type = DataType.lookup(descriptor.type)
        if not descriptor.type:
            report = report.add("All data model tree nodes need a valid type.")
        elif data_type is None:
            report = report.add(f"{descriptor.type} is not a known type.")
        if not report.ok or data_type is None:
            return None, report

        node = replace(
            descriptor,
            children=descriptor.child_names,
            size=descriptor.size if data_type == DataType.ARRAY else UNSET_SIZE,
        )
        name = node.name
        children = node.child_names

        # Gate 2: floating node
        if not children and not node.has_parent:
            return node, report.add(f"Node {name} is not connected to the tree.")

        if data_type.is_primitive and children:
            report = report.add(f"Node {name} is a primitive type but has children.")

        if data_type == DataType.OBJECT and not children:
            report = report.add(f"Node {name} is an object but has no children.")

        if data_type == DataType.ARRAY:
            if len(children) != 1:
                report = report.add(
                    f"Node {name} is an array and needs exactly one child."
                )
            if node.size < self._config.min_array_size:
                report = report.add(
                    f"Node {name} is an array and needs a predefined dimension "
                    f"of at least {self._config.min_array_size}."
                )

        if name in children:
            report = report.add(
                f"Node {name} is not allowed to have itself as a child."
            )

        if node.has_parent and node.parent in children:
            report = report.add(
                f"Node {name} is not allowed to have a parent which is also a child."
            )

        return node, report

    def validate_collection(
        self, descriptors: Sequence[NodeDescriptor]
    ) -> ValidationReport:
        """Check the rules that span the whole descriptor list."""
        report = ValidationReport()

        counts = Counter(d.name.lower() for d in descriptors)
        reported: set[str] = set()
        for descriptor in descriptors:
            key = descriptor.name.lower()
            if counts[key] > 1 and key not in reported:
                reported.add(key)
                report = report.add(f"Node {descriptor.name} has no unique name.")

        roots = [d for d in descriptors if not d.has_parent]
        if len(roots) != 1:
            report = report.add("Tree is missing a root or has too many roots.")
        elif DataType.lookup(roots[0].type) != DataType.OBJECT:
            report = report.add("Tree root must be an object.")

        return report
