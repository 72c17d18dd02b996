"""Tests for the DataType catalog."""

from __future__ import annotations

import pytest

from device_schema.tree.types import DataType


class TestLookup:
    @pytest.mark.parametrize("name", ["double", "DOUBLE", "Double", "  double "])
    def test_case_insensitive(self, name: str) -> None:
        assert DataType.lookup(name) is DataType.DOUBLE

    def test_unknown_returns_none(self) -> None:
        assert DataType.lookup("float") is None

    @pytest.mark.parametrize("name", ["", None])
    def test_empty_returns_none(self, name: str | None) -> None:
        assert DataType.lookup(name) is None

    def test_values_are_lowercase_names(self) -> None:
        assert DataType.DECIMAL128 == "decimal128"
        assert str(DataType.OBJECT) == "object"


class TestPrimitive:
    def test_structural_types_are_not_primitive(self) -> None:
        assert not DataType.OBJECT.is_primitive
        assert not DataType.ARRAY.is_primitive

    def test_every_other_type_is_primitive(self) -> None:
        primitives = [t for t in DataType if t.is_primitive]
        assert len(primitives) == len(DataType) - 2


class TestExample:
    def test_double_example(self) -> None:
        assert DataType.DOUBLE.example == 24.5

    def test_boolean_example_is_bool(self) -> None:
        assert DataType.BOOLEAN.example is True

    def test_every_primitive_has_example(self) -> None:
        for data_type in DataType:
            if data_type.is_primitive:
                assert data_type.example is not None

    @pytest.mark.parametrize("data_type", [DataType.OBJECT, DataType.ARRAY])
    def test_structural_types_have_no_example(self, data_type: DataType) -> None:
        with pytest.raises(ValueError, match="no scalar example"):
            _ = data_type.example


def test_sort_key_follows_declaration_order() -> None:
    keys = [t.sort_key for t in DataType]
    assert keys == sorted(keys)
    assert DataType.OBJECT.sort_key == 0
