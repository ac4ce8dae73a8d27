"""
Schema introspection for record classes.

A record class is either a pydantic model or a dataclass. Its fields
are read in declaration order and classified one by one; the result is
an immutable Schema.
"""

import dataclasses
import logging
from enum import Enum
from typing import Any, get_type_hints

from pydantic import BaseModel

from formula_y.analysis.classifier import classify
from formula_y.config import get_config
from formula_y.constants import LOGGER_NAME
from formula_y.errors import (
    CompileErrorGroup,
    UnsupportedFieldType,
    UnsupportedRecordShape,
)
from formula_y.models.field_definitions import FieldDescriptor, Schema

logger = logging.getLogger(LOGGER_NAME)


def declared_fields(record_type: Any) -> list[tuple[str, Any]]:
    """
    Get (name, annotation) pairs of a record class in declaration order.

    Dataclass fields declared with init=False are not constructor
    arguments and are left out.

    Raises:
        UnsupportedRecordShape: If the record is not a pydantic model or
            dataclass class (enums and tuple-like classes included).
    """
    if not isinstance(record_type, type):
        raise UnsupportedRecordShape(record_type)
    if issubclass(record_type, (Enum, tuple)):
        raise UnsupportedRecordShape(record_type)

    if issubclass(record_type, BaseModel):
        return [
            (name, field_info.annotation)
            for name, field_info in record_type.model_fields.items()
        ]

    if dataclasses.is_dataclass(record_type):
        hints = get_type_hints(record_type)
        return [
            (field.name, hints.get(field.name, field.type))
            for field in dataclasses.fields(record_type)
            if field.init
        ]

    raise UnsupportedRecordShape(record_type)


def introspect(record_type: Any, *, collect_all_errors: bool | None = None) -> Schema:
    """
    Build the Schema of a record class.

    Args:
        record_type: A pydantic model class or dataclass.
        collect_all_errors: If True, classify every field and raise all
            failures together. If None, uses config.collect_all_errors.
            By default the first unsupported field aborts introspection.

    Returns:
        Schema with one descriptor per field, in declaration order.

    Raises:
        UnsupportedRecordShape: If the record has no named fields shape.
        UnsupportedFieldType: On the first unsupported field (fail-fast).
        CompileErrorGroup: With every unsupported field (collect mode).
    """
    if collect_all_errors is None:
        collect_all_errors = get_config().collect_all_errors

    fields = declared_fields(record_type)
    record_name = record_type.__name__

    descriptors: list[FieldDescriptor] = []
    failures: list[UnsupportedFieldType] = []
    for name, annotation in fields:
        try:
            kind = classify(annotation, field_name=name, record_name=record_name)
        except UnsupportedFieldType as e:
            logger.warning(f"Cannot compile {record_name}: {e.message}")
            if not collect_all_errors:
                raise
            failures.append(e)
            continue
        descriptors.append(FieldDescriptor(name=name, kind=kind))

    if failures:
        raise CompileErrorGroup(failures, record_name=record_name)

    logger.debug(f"Introspected {record_name}: {[(d.name, d.kind.value) for d in descriptors]}")
    return Schema(
        record_name=record_name,
        record_type=record_type,
        fields=tuple(descriptors),
    )
