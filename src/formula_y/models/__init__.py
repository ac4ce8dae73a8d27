"""
Data models for formula-y.

This module contains Pydantic models for:
- Field kinds, descriptors and schemas (compile output)
- Controller state
- Render descriptors (render output)
"""

from formula_y.models.field_definitions import (
    FieldDescriptor,
    FieldKind,
    Schema,
)
from formula_y.models.form_state import (
    FormPhase,
    FormState,
)
from formula_y.models.render_output import (
    FormRender,
    InputKind,
    RenderDescriptor,
)

__all__ = [
    # Schema
    "FieldKind",
    "FieldDescriptor",
    "Schema",
    # State
    "FormPhase",
    "FormState",
    # Render output
    "InputKind",
    "RenderDescriptor",
    "FormRender",
]
