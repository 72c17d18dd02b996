"""DataType StrEnum: the closed catalog of schema node types.

Two structural types (OBJECT, ARRAY) and the primitive kinds a device payload
may carry.  Every primitive has a canonical example value used by the
example generator.

Type names are matched case-insensitively via ``DataType.lookup``.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

__all__ = ["DataType"]


class DataType(StrEnum):
    """Enumeration of the supported schema node types.

    StrEnum values are the lowercased member names:
    - OBJECT     -> "object"     : JSON object, at least one child
    - ARRAY      -> "array"      : JSON array, exactly one child, fixed size
    - STRING     -> "string"
    - DOUBLE     -> "double"
    - INT        -> "int"
    - LONG       -> "long"
    - DECIMAL128 -> "decimal128"
    - BOOLEAN    -> "boolean"
    - DATE       -> "date"       : ISO-8601 string
    - BINARY     -> "binary"     : base64 string

    Member order is the sort order used when child type multisets are compared.
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    DOUBLE = auto()
    INT = auto()
    LONG = auto()
    DECIMAL128 = auto()
    BOOLEAN = auto()
    DATE = auto()
    BINARY = auto()

    @classmethod
    def lookup(cls, name: str | None) -> DataType | None:
        """Return the member whose value equals ``name`` ignoring case, or None."""
        if not name:
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None

    @property
    def is_primitive(self) -> bool:
        """True for every type that is neither OBJECT nor ARRAY."""
        return self not in (DataType.OBJECT, DataType.ARRAY)

    @property
    def example(self) -> Any:
        """Canonical example value for a primitive type.

        Raises:
            ValueError: For OBJECT and ARRAY, which have no scalar example.
        """
        if not self.is_primitive:
            msg = f"{self.value} has no scalar example value"
            raise ValueError(msg)
        return _EXAMPLES[self]

    @property
    def sort_key(self) -> int:
        """Position of the member in declaration order."""
        return _ORDER[self]


_EXAMPLES: dict[DataType, Any] = {
    DataType.STRING: "example",
    DataType.DOUBLE: 24.5,
    DataType.INT: 42,
    DataType.LONG: 1700000000000,
    DataType.DECIMAL128: 1234.5678,
    DataType.BOOLEAN: True,
    DataType.DATE: "2024-01-01T12:00:00Z",
    DataType.BINARY: "ZXhhbXBsZQ==",
}

_ORDER: dict[DataType, int] = {member: i for i, member in enumerate(DataType)}
