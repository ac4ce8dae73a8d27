"""
Render descriptor generation.

Turns a compiled form and one controller state into the per-field
bindings a host UI runtime draws: label text, class attributes, input
type, displayed value and the change handler that builds the update
action from a raw input value.
"""

from functools import partial
from typing import TYPE_CHECKING, Any, Callable

from formula_y.analysis.naming import input_class, label_class, label_text
from formula_y.compiler.actions import UpdateField
from formula_y.config import get_config
from formula_y.models.field_definitions import FieldDescriptor, FieldKind
from formula_y.models.form_state import FormState
from formula_y.models.render_output import FormRender, InputKind, RenderDescriptor

if TYPE_CHECKING:
    from formula_y.compiler.controller import FormDefinition


def _unchanged(raw: Any) -> Any:
    return raw


def _absent_if_empty(raw: str) -> str | None:
    return None if raw == "" else raw


# Raw input value -> action payload. Optional booleans always map to the
# present value; there is no way back to None from a checkbox.
_RAW_TO_VALUE: dict[FieldKind, Callable[[Any], Any]] = {
    FieldKind.TEXT: _unchanged,
    FieldKind.BOOLEAN: _unchanged,
    FieldKind.OPTIONAL_TEXT: _absent_if_empty,
    FieldKind.OPTIONAL_BOOLEAN: _unchanged,
}

# Stored value -> displayed value
_DISPLAY_VALUE: dict[FieldKind, Callable[[Any], str | bool]] = {
    FieldKind.TEXT: _unchanged,
    FieldKind.BOOLEAN: _unchanged,
    FieldKind.OPTIONAL_TEXT: lambda value: "" if value is None else value,
    FieldKind.OPTIONAL_BOOLEAN: lambda value: False if value is None else value,
}

_INPUT_KINDS: dict[FieldKind, InputKind] = {
    FieldKind.TEXT: InputKind.TEXT,
    FieldKind.BOOLEAN: InputKind.CHECKBOX,
    FieldKind.OPTIONAL_TEXT: InputKind.TEXT,
    FieldKind.OPTIONAL_BOOLEAN: InputKind.CHECKBOX,
}


def _build_action(action_cls: type[UpdateField], convert: Callable[[Any], Any], raw: Any) -> UpdateField:
    return action_cls(value=convert(raw))


def change_handler(field: FieldDescriptor, action_cls: type[UpdateField]) -> Callable[[Any], UpdateField]:
    """Build the raw-input -> update action mapping for a field."""
    return partial(_build_action, action_cls, _RAW_TO_VALUE[field.kind])


def needs_required_warning(field: FieldDescriptor, state: FormState) -> bool:
    """
    Whether a field gets the 'required' class.

    Only required kinds are decorated, and only after a failed submit
    while the field still fails its own rule.
    """
    if not state.display_required_warnings or field.kind.is_optional:
        return False
    return not field.kind.is_satisfied_by(state.values[field.name])


def render_field(
    field: FieldDescriptor,
    state: FormState,
    action_cls: type[UpdateField],
) -> RenderDescriptor:
    required = needs_required_warning(field, state)
    family = field.kind.family
    return RenderDescriptor(
        field_name=field.name,
        kind=field.kind,
        label_text=label_text(field.name),
        label_class=label_class(field.name, family, required),
        input_class=input_class(field.name, family, required),
        input_kind=_INPUT_KINDS[field.kind],
        current_value=_DISPLAY_VALUE[field.kind](state.values[field.name]),
        required_warning=required,
        on_change=change_handler(field, action_cls),
    )


def render_fields(definition: "FormDefinition", state: FormState) -> list[RenderDescriptor]:
    """Render descriptors for every field, in declaration order."""
    return [
        render_field(field, state, definition.actions.for_field(field.name))
        for field in definition.schema.fields
    ]


def render_form(
    definition: "FormDefinition",
    state: FormState,
    submit_button_text: str | None = None,
) -> FormRender:
    """
    Render the whole form for a state.

    Args:
        definition: The compiled form.
        state: Current controller state.
        submit_button_text: Button text. If None, uses config.submit_button_text.
    """
    return FormRender(
        form_class=definition.form_class,
        submit_button_text=submit_button_text or get_config().submit_button_text,
        fields=render_fields(definition, state),
    )
