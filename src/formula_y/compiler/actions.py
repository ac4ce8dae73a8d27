"""
Actions a form controller can dispatch.

Each compiled form gets its own closed set of update action classes,
one per field, named after the field (email -> UpdateEmail). They all
derive from UpdateField. Submit and ShowRequiredWarnings are shared by
every form.
"""

import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, ClassVar, Iterator

from pydantic import TypeAdapter

from formula_y.analysis.naming import action_name
from formula_y.models.field_definitions import FieldDescriptor, FieldKind, Schema


@dataclass(frozen=True)
class FormAction:
    """Base class for every controller action."""


@dataclass(frozen=True)
class Submit(FormAction):
    """Attempt to submit the form."""


@dataclass(frozen=True)
class ShowRequiredWarnings(FormAction):
    """Turn on the required-field decoration."""


@lru_cache(maxsize=None)
def _value_adapter(kind: FieldKind) -> TypeAdapter:
    return TypeAdapter(kind.value_type)


def check_value(kind: FieldKind, value: Any) -> None:
    """Raise pydantic.ValidationError unless value has the kind's exact type."""
    _value_adapter(kind).validate_python(value, strict=True)


@dataclass(frozen=True)
class UpdateField(FormAction):
    """
    Replace the value of one field.

    Concrete subclasses are generated per field by build_update_action();
    the payload is checked against the field kind on construction, so
    UpdateEmail(value=3) raises pydantic.ValidationError.
    """

    value: Any

    field_name: ClassVar[str] = ""
    kind: ClassVar[FieldKind | None] = None

    def __post_init__(self) -> None:
        if self.kind is None:
            raise TypeError("UpdateField cannot be used directly; use a compiled action class")
        check_value(self.kind, self.value)


def build_update_action(field: FieldDescriptor) -> type[UpdateField]:
    """Generate the update action class for a single field."""
    return dataclasses.make_dataclass(
        action_name(field.name),
        [("value", field.kind.value_type)],
        bases=(UpdateField,),
        namespace={"field_name": field.name, "kind": field.kind},
        frozen=True,
    )


class ActionSet:
    """
    The update action classes of one compiled form.

    Lookup by field name with for_field(), or by action name as an
    attribute:

        actions = ActionSet(schema)
        actions.UpdateEmail(value="a@b.com")
        actions.update("email", "a@b.com")  # same action
    """

    def __init__(self, schema: Schema):
        self._by_field: dict[str, type[UpdateField]] = {}
        self._by_name: dict[str, type[UpdateField]] = {}
        for field in schema.fields:
            action_cls = build_update_action(field)
            self._by_field[field.name] = action_cls
            self._by_name.setdefault(action_cls.__name__, action_cls)

    def for_field(self, field_name: str) -> type[UpdateField]:
        """Get the update action class of a field, raising KeyError if unknown."""
        return self._by_field[field_name]

    def update(self, field_name: str, value: Any) -> UpdateField:
        return self.for_field(field_name)(value=value)

    def owns(self, action: FormAction) -> bool:
        """Whether an update action was built by this set."""
        if not isinstance(action, UpdateField):
            return False
        return self._by_field.get(action.field_name) is type(action)

    @property
    def names(self) -> list[str]:
        return [action_cls.__name__ for action_cls in self._by_field.values()]

    def __getattr__(self, name: str) -> type[UpdateField]:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._by_name[name]
        except KeyError:
            raise AttributeError(f"No update action named '{name}'") from None

    def __iter__(self) -> Iterator[type[UpdateField]]:
        return iter(self._by_field.values())

    def __len__(self) -> int:
        return len(self._by_field)
