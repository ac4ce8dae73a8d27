"""
Compile-time analysis of record classes.

This package contains:
- Type classification (declared type -> FieldKind)
- Identifier transforms (field name -> action, label and class names)
- Schema introspection (record class -> Schema)
"""

from formula_y.analysis.classifier import classify, unwrap_optional
from formula_y.analysis.introspector import declared_fields, introspect
from formula_y.analysis.naming import (
    action_name,
    form_class,
    input_class,
    label_class,
    label_text,
    split_words,
    to_kebab,
    to_title,
    to_upper_camel,
)

__all__ = [
    "classify",
    "unwrap_optional",
    "declared_fields",
    "introspect",
    "action_name",
    "form_class",
    "input_class",
    "label_class",
    "label_text",
    "split_words",
    "to_kebab",
    "to_title",
    "to_upper_camel",
]
