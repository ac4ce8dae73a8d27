"""Compile-time errors raised while turning a record class into a form.

- CompileError: Base exception for every compile failure
- UnsupportedRecordShape: The record is not a class with named fields
- UnsupportedFieldType: A field's type is outside the supported kinds
- CompileErrorGroup: Several field failures reported together

All of these abort compilation; no partial form definition is ever built.
"""

from typing import Any


class CompileError(Exception):
    """Base exception for formula-y compilation.

    Args:
        message: Human-readable description of the failure.
        record_name: Name of the record class being compiled, if known.
    """

    def __init__(self, message: str, *, record_name: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.record_name = record_name


class UnsupportedRecordShape(CompileError):
    """Raised when the record definition is not a flat named-field class.

    Enums, tuple-like classes and plain classes without declared fields
    all end up here.
    """

    def __init__(self, record: Any) -> None:
        record_name = getattr(record, "__name__", None) or type(record).__name__
        super().__init__(
            f"Forms can only be compiled from pydantic models or dataclasses "
            f"with named fields, got {record!r}",
            record_name=record_name,
        )
        self.record = record


class UnsupportedFieldType(CompileError):
    """Raised when a field's declared type has no supported kind.

    Example:
        >>> raise UnsupportedFieldType("age", int, record_name="Signup")
    """

    def __init__(
        self,
        field_name: str,
        declared_type: Any,
        *,
        record_name: str | None = None,
    ) -> None:
        location = f"{record_name}.{field_name}" if record_name else field_name
        super().__init__(
            f"Field '{location}' has unsupported type {_type_repr(declared_type)}; "
            f"expected str, bool, str | None or bool | None",
            record_name=record_name,
        )
        self.field_name = field_name
        self.declared_type = declared_type


class CompileErrorGroup(CompileError):
    """Every unsupported field of one record, collected before aborting."""

    def __init__(self, errors: list[UnsupportedFieldType], *, record_name: str | None = None) -> None:
        lines = "\n".join(f"  - {error.message}" for error in errors)
        super().__init__(
            f"{len(errors)} unsupported field(s) in {record_name or 'record'}:\n{lines}",
            record_name=record_name,
        )
        self.errors = errors

    @property
    def field_names(self) -> list[str]:
        return [error.field_name for error in self.errors]


def _type_repr(declared_type: Any) -> str:
    if isinstance(declared_type, type):
        return declared_type.__name__
    return repr(declared_type)
