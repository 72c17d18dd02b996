"""Tree subpackage: schema descriptors to validated, indexed trees.

Re-exports the public API for the tree module:
- NodeDescriptor: one raw schema node as supplied by a device data model
- DataType: StrEnum of the supported node types
- SchemaValidator: per-node and collection-wide descriptor checks
- TreeBuilder: links descriptors into a SchemaTree
- SchemaTree / SchemaNode: the built tree and its arena nodes
- SchemaPath / PathIndex / PathEntry: node paths and their lookup table
- PreOrderIterator: parent-before-children traversal
- ExampleGenerator: sample device messages for a tree
- check_document / to_json_schema: payload conformance through JSON Schema
"""

from device_schema.tree.builder import TreeBuilder
from device_schema.tree.conformance import check_document, to_json_schema
from device_schema.tree.descriptor import UNSET_SIZE, NodeDescriptor, load_descriptors
from device_schema.tree.example import ExampleGenerator
from device_schema.tree.nodes import SchemaNode
from device_schema.tree.paths import PathEntry, PathIndex, SchemaPath
from device_schema.tree.schema_tree import SchemaTree
from device_schema.tree.traversal import PreOrderIterator
from device_schema.tree.types import DataType
from device_schema.tree.validator import SchemaValidator

__all__ = [
    "UNSET_SIZE",
    "DataType",
    "ExampleGenerator",
    "NodeDescriptor",
    "PathEntry",
    "PathIndex",
    "PreOrderIterator",
    "SchemaNode",
    "SchemaPath",
    "SchemaTree",
    "SchemaValidator",
    "TreeBuilder",
    "check_document",
    "load_descriptors",
    "to_json_schema",
]
