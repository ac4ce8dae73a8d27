"""Tests for schema introspection."""

from collections import namedtuple
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional

import pytest
from pydantic import BaseModel

from formula_y.analysis.introspector import declared_fields, introspect
from formula_y.errors import (
    CompileError,
    CompileErrorGroup,
    UnsupportedFieldType,
    UnsupportedRecordShape,
)
from formula_y.models.field_definitions import FieldKind


class Data(BaseModel):
    name: Optional[str]
    email: str
    agree_to_terms: bool
    subscribe_to_updates: Optional[bool]


@dataclass
class DataclassData:
    email: str
    agree_to_terms: bool
    nickname: str | None = None


class Order(BaseModel):
    email: str
    quantity: int
    note: str | None = None
    price: float = 0.0


class Color(Enum):
    RED = "red"


class Point(NamedTuple):
    x: str
    y: str


class Plain:
    email: str


class TestDeclaredFields:
    """Tests for declared_fields()."""

    def test_pydantic_model(self):
        """Test field extraction from a pydantic model."""
        assert [name for name, _ in declared_fields(Data)] == [
            "name", "email", "agree_to_terms", "subscribe_to_updates",
        ]

    def test_dataclass(self):
        """Test field extraction from a dataclass."""
        assert declared_fields(DataclassData) == [
            ("email", str),
            ("agree_to_terms", bool),
            ("nickname", str | None),
        ]

    def test_dataclass_skips_init_false(self):
        """Test that fields outside the constructor are left out."""

        @dataclass
        class Article:
            title: str
            slug: str = field(init=False, default="")

        assert declared_fields(Article) == [("title", str)]

    @pytest.mark.parametrize(
        "record",
        [Color, Point, namedtuple("Pair", "a b"), tuple, Plain, Data(name=None, email="", agree_to_terms=False, subscribe_to_updates=None), "Data", 42],
    )
    def test_unsupported_shapes(self, record):
        """Test that non-record shapes are rejected."""
        with pytest.raises(UnsupportedRecordShape):
            declared_fields(record)


class TestIntrospect:
    """Tests for introspect()."""

    def test_schema_from_model(self):
        """Test the schema of a pydantic model."""
        schema = introspect(Data)
        assert schema.record_name == "Data"
        assert schema.record_type is Data
        assert [(f.name, f.kind) for f in schema.fields] == [
            ("name", FieldKind.OPTIONAL_TEXT),
            ("email", FieldKind.TEXT),
            ("agree_to_terms", FieldKind.BOOLEAN),
            ("subscribe_to_updates", FieldKind.OPTIONAL_BOOLEAN),
        ]

    def test_schema_from_dataclass(self):
        """Test the schema of a dataclass."""
        schema = introspect(DataclassData)
        assert [f.kind for f in schema.fields] == [
            FieldKind.TEXT,
            FieldKind.BOOLEAN,
            FieldKind.OPTIONAL_TEXT,
        ]

    def test_fail_fast(self):
        """Test that the first unsupported field is reported alone."""
        with pytest.raises(UnsupportedFieldType) as exc_info:
            introspect(Order)
        assert exc_info.value.field_name == "quantity"

    def test_collect_all_errors(self):
        """Test reporting every unsupported field."""
        with pytest.raises(CompileErrorGroup) as exc_info:
            introspect(Order, collect_all_errors=True)
        assert exc_info.value.field_names == ["quantity", "price"]
        assert exc_info.value.record_name == "Order"

    def test_collect_all_errors_from_config(self, fresh_config):
        """Test the collect_all_errors setting."""
        fresh_config.collect_all_errors = True
        with pytest.raises(CompileErrorGroup):
            introspect(Order)

    def test_errors_share_a_base(self):
        """Test that every compile failure is a CompileError."""
        for record in (Order, Color):
            with pytest.raises(CompileError):
                introspect(record)

    def test_empty_record(self):
        """Test a record without fields."""

        class Empty(BaseModel):
            pass

        assert introspect(Empty).fields == ()
