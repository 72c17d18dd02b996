"""SchemaConfig: structural limits applied while building a schema tree.

SchemaConfig is a frozen (immutable) dataclass.  The defaults are the limits
device data models have always been held to: at most five tree levels (the
root counts as level 1) and arrays with a declared size of at least two.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SchemaConfig"]


@dataclass(frozen=True, slots=True)
class SchemaConfig:
    """Immutable configuration for schema validation and tree building.

    Attributes:
        max_depth: Maximum number of tree levels, root included (>= 1).
        min_array_size: Smallest declared size an ARRAY node may have (>= 1).
    """

    max_depth: int = 5
    min_array_size: int = 2

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
        if self.min_array_size < 1:
            msg = f"min_array_size must be >= 1, got {self.min_array_size}"
            raise ValueError(msg)
