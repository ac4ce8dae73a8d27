"""
Field definition models for compiled forms.

A record class is reduced to a Schema: an ordered tuple of
FieldDescriptors, each carrying one of the four supported FieldKinds.
Every place that treats kinds differently (initialization, validation,
rendering) asks the FieldKind rather than re-inspecting Python types.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from formula_y.constants import CHECKBOX_FAMILY, TEXT_FAMILY


class FieldKind(str, Enum):
    """The closed set of field kinds a form can be compiled from."""

    TEXT = "text"
    BOOLEAN = "boolean"
    OPTIONAL_TEXT = "optional_text"
    OPTIONAL_BOOLEAN = "optional_boolean"

    @property
    def is_optional(self) -> bool:
        return self in (FieldKind.OPTIONAL_TEXT, FieldKind.OPTIONAL_BOOLEAN)

    @property
    def is_required(self) -> bool:
        return not self.is_optional

    @property
    def family(self) -> str:
        """Class-name family: 'txt' for text-like kinds, 'checkbox' for flags."""
        if self in (FieldKind.TEXT, FieldKind.OPTIONAL_TEXT):
            return TEXT_FAMILY
        return CHECKBOX_FAMILY

    @property
    def value_type(self) -> Any:
        return _VALUE_TYPES[self]

    @property
    def zero_value(self) -> str | bool | None:
        return _ZERO_VALUES[self]

    def is_satisfied_by(self, value: Any) -> bool:
        """
        Check a value against this kind's required-field rule.

        Text must be non-empty and booleans must be True. Optional kinds
        accept anything, including None.
        """
        if self is FieldKind.TEXT:
            return value != ""
        if self is FieldKind.BOOLEAN:
            return value is True
        return True


_VALUE_TYPES: dict[FieldKind, Any] = {
    FieldKind.TEXT: str,
    FieldKind.BOOLEAN: bool,
    FieldKind.OPTIONAL_TEXT: str | None,
    FieldKind.OPTIONAL_BOOLEAN: bool | None,
}

_ZERO_VALUES: dict[FieldKind, str | bool | None] = {
    FieldKind.TEXT: "",
    FieldKind.BOOLEAN: False,
    FieldKind.OPTIONAL_TEXT: None,
    FieldKind.OPTIONAL_BOOLEAN: None,
}


class FieldDescriptor(BaseModel):
    """A single named field of a record and its classified kind."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name as declared on the record")
    kind: FieldKind = Field(..., description="Supported kind of the field")


class Schema(BaseModel):
    """
    Ordered field descriptors of one record class.

    Produced once by the introspector and shared read-only by every
    controller compiled from it. Field order is declaration order.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    record_name: str = Field(..., description="Name of the record class")
    record_type: type[Any] = Field(..., description="The record class itself")
    fields: tuple[FieldDescriptor, ...] = Field(
        default=(),
        description="Field descriptors in declaration order",
    )

    @property
    def field_names(self) -> list[str]:
        return [field.name for field in self.fields]

    @property
    def required_fields(self) -> list[FieldDescriptor]:
        """Fields that take part in the required-field check."""
        return [field for field in self.fields if field.kind.is_required]

    def get_field(self, name: str) -> FieldDescriptor:
        """Get a field descriptor by name, raising KeyError if unknown."""
        for field in self.fields:
            if field.name == name:
                return field
        raise KeyError(f"{self.record_name} has no field '{name}'")
