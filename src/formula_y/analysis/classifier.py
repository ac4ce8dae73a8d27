"""
Field type classifier.

Maps a field's declared Python type onto one of the four FieldKinds.
Only exact matches count: str, bool, and an optional wrapper around
either of them. Subclasses, aliases to other types, collections and
nested records are all rejected.
"""

import types
from typing import Any, Union, get_args, get_origin

from formula_y.errors import UnsupportedFieldType
from formula_y.models.field_definitions import FieldKind

_NONE_TYPE = type(None)

_PLAIN_KINDS: dict[Any, FieldKind] = {
    str: FieldKind.TEXT,
    bool: FieldKind.BOOLEAN,
}

_OPTIONAL_KINDS: dict[Any, FieldKind] = {
    str: FieldKind.OPTIONAL_TEXT,
    bool: FieldKind.OPTIONAL_BOOLEAN,
}


def unwrap_optional(declared_type: Any) -> Any | None:
    """
    Return T for Optional[T], Union[T, None] or T | None.

    Returns None when the type is not a one-argument optional wrapper,
    including unions of two concrete types.
    """
    origin = get_origin(declared_type)
    if origin is not Union and origin is not types.UnionType:
        return None
    args = get_args(declared_type)
    if len(args) != 2 or _NONE_TYPE not in args:
        return None
    return args[0] if args[1] is _NONE_TYPE else args[1]


def classify(
    declared_type: Any,
    field_name: str = "<field>",
    record_name: str | None = None,
) -> FieldKind:
    """
    Classify a declared field type.

    Args:
        declared_type: The resolved annotation of the field.
        field_name: Field name, used in the error message.
        record_name: Record class name, used in the error message.

    Returns:
        The FieldKind for the type.

    Raises:
        UnsupportedFieldType: If the type has no supported kind.
    """
    if _is_hashable(declared_type) and declared_type in _PLAIN_KINDS:
        return _PLAIN_KINDS[declared_type]

    inner = unwrap_optional(declared_type)
    if inner is not None and _is_hashable(inner) and inner in _OPTIONAL_KINDS:
        return _OPTIONAL_KINDS[inner]

    raise UnsupportedFieldType(field_name, declared_type, record_name=record_name)


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True
