"""
Render output models.

These models describe what a host UI runtime should draw for a form.
They carry no drawing logic of their own; to_config() exports them as
plain dicts for runtimes that consume JSON.
"""

from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from formula_y.constants import FORM_ITEM_CLASS
from formula_y.models.field_definitions import FieldKind


class InputKind(str, Enum):
    """Input element to render for a field."""

    TEXT = "text"
    CHECKBOX = "checkbox"


class RenderDescriptor(BaseModel):
    """Render binding for a single field."""

    model_config = ConfigDict(frozen=True)

    field_name: str = Field(..., description="Field name/key")
    kind: FieldKind = Field(..., description="Kind of the field")
    label_text: str = Field(..., description="Human-readable label")
    label_class: str = Field(..., description="Class attribute for the label")
    input_class: str = Field(..., description="Class attribute for the input")
    input_kind: InputKind = Field(..., description="Input element type")
    current_value: str | bool = Field(..., description="Value to display in the input")
    required_warning: bool = Field(
        default=False,
        description="Whether the required decoration is applied",
    )
    item_class: str = Field(default=FORM_ITEM_CLASS, description="Wrapper class")

    # Maps a raw input value (text or checked flag) to an update action
    on_change: Callable[[Any], Any] = Field(..., exclude=True)

    def to_config(self) -> dict[str, Any]:
        """Export the descriptor for a host runtime (without the handler)."""
        return {
            "name": self.field_name,
            "itemClass": self.item_class,
            "label": {
                "text": self.label_text,
                "class": self.label_class,
            },
            "input": {
                "type": self.input_kind.value,
                "class": self.input_class,
                "value": self.current_value,
            },
            "required": self.required_warning,
        }


class FormRender(BaseModel):
    """Everything needed to draw a form for one controller state."""

    model_config = ConfigDict(frozen=True)

    form_class: str = Field(..., description="Class attribute for the form element")
    submit_button_text: str = Field(default="Submit", description="Submit button text")
    fields: list[RenderDescriptor] = Field(default_factory=list, description="Fields in declaration order")

    def get_field(self, name: str) -> RenderDescriptor:
        for descriptor in self.fields:
            if descriptor.field_name == name:
                return descriptor
        raise KeyError(name)

    def to_config(self) -> dict[str, Any]:
        """Export complete form configuration for client runtimes."""
        return {
            "formClass": self.form_class,
            "submitButtonText": self.submit_button_text,
            "fields": [descriptor.to_config() for descriptor in self.fields],
        }
