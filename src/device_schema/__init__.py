"""Device schema trees - validation, path indexing, examples and subtree search."""

from __future__ import annotations

from device_schema.api import (
    build_tree,
    example_message,
    find_subtree,
    load_descriptors,
    try_build_tree,
)
from device_schema.cache import TreeCache
from device_schema.config import SchemaConfig
from device_schema.errors import SchemaValidationError
from device_schema.result import (
    BuildResult,
    FieldError,
    LeafPath,
    SubtreeMatchResult,
    ValidationReport,
)
from device_schema.tree import (
    DataType,
    NodeDescriptor,
    PathEntry,
    SchemaNode,
    SchemaTree,
    TreeBuilder,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "BuildResult",
    "DataType",
    "FieldError",
    "LeafPath",
    "NodeDescriptor",
    "PathEntry",
    "SchemaConfig",
    "SchemaNode",
    "SchemaTree",
    "SchemaValidationError",
    "SubtreeMatchResult",
    "TreeBuilder",
    "TreeCache",
    "ValidationReport",
    "build_tree",
    "example_message",
    "find_subtree",
    "load_descriptors",
    "try_build_tree",
]
