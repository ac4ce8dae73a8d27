"""
Form controller compilation.

FormDefinition is the compiled form: the schema, its generated action
classes, the initializer, the required-field predicate and the pure
transition function. FormController is one live form session built
from a definition; it owns its state and talks to the submit consumer.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

from opentelemetry.trace import Span
from pydantic import BaseModel

from formula_y.analysis.naming import form_class
from formula_y.compiler.actions import (
    ActionSet,
    FormAction,
    ShowRequiredWarnings,
    Submit,
    UpdateField,
    check_value,
)
from formula_y.compiler.render import render_form
from formula_y.config import get_config
from formula_y.constants import LOGGER_NAME
from formula_y.models.field_definitions import FieldDescriptor, Schema
from formula_y.models.form_state import FormPhase, FormState
from formula_y.models.render_output import FormRender, RenderDescriptor
from formula_y.tracing import FIELD_ATTRIBUTE, FORM_ATTRIBUTE, get_tracer, record_outcome

logger = logging.getLogger(LOGGER_NAME)


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of applying one action to a state."""

    state: FormState
    changed: bool
    emitted: Any = None
    follow_up: FormAction | None = None


class FormDefinition:
    """
    A form compiled from a record class.

    Usage:
        definition = FormDefinition(introspect(Signup))

        controller = definition.controller(submit_consumer=print)
        controller.update("email", "a@b.com")
        controller.submit()
    """

    def __init__(self, schema: Schema):
        self.schema = schema
        self.actions = ActionSet(schema)
        self.form_class = form_class(schema.record_name)

    @property
    def name(self) -> str:
        return self.schema.record_name

    @property
    def record_type(self) -> type:
        return self.schema.record_type

    def __repr__(self) -> str:
        return f"FormDefinition({self.name}, fields={self.schema.field_names})"

    # Initialization

    def zero_values(self) -> dict[str, Any]:
        return {field.name: field.kind.zero_value for field in self.schema.fields}

    def initial_values(self, initial_record: Any = None) -> dict[str, Any]:
        """
        Values a new session starts with.

        Args:
            initial_record: Optional record instance. When given, every
                field is taken from it as is; zero values are not merged in.

        Raises:
            TypeError: If initial_record is not an instance of the record class.
            pydantic.ValidationError: If a field holds a value of the wrong type.
        """
        if initial_record is None:
            return self.zero_values()
        if not isinstance(initial_record, self.record_type):
            raise TypeError(
                f"initial_record must be a {self.name}, got {type(initial_record).__name__}"
            )
        values = {}
        for field in self.schema.fields:
            value = getattr(initial_record, field.name)
            check_value(field.kind, value)
            values[field.name] = value
        return values

    def initial_state(self, initial_record: Any = None) -> FormState:
        return FormState(values=self.initial_values(initial_record))

    def build_record(self, values: dict[str, Any]) -> Any:
        """
        Build a record instance from field values.

        Pydantic records are assembled with model_construct, which takes
        field names even where the model declares aliases. The values
        have already been strictly checked.
        """
        fields = {field.name: values[field.name] for field in self.schema.fields}
        if issubclass(self.record_type, BaseModel):
            return self.record_type.model_construct(**fields)
        return self.record_type(**fields)

    def zero_record(self) -> Any:
        """A record instance with every field at its zero value."""
        return self.build_record(self.zero_values())

    # Validation

    def field_satisfied(self, field: FieldDescriptor, values: dict[str, Any]) -> bool:
        return field.kind.is_satisfied_by(values[field.name])

    def required_satisfied(self, values: dict[str, Any]) -> bool:
        """
        Check that every required field is filled in.

        Text fields must be non-empty and boolean fields must be True.
        Optional fields never affect the result.
        """
        return all(self.field_satisfied(field, values) for field in self.schema.required_fields)

    # Transitions

    def transition(
        self,
        state: FormState,
        action: FormAction,
        *,
        enforce_required_fields: bool = True,
    ) -> TransitionResult:
        """
        Apply one action to a state.

        This is pure: the submit consumer is not called here, the record to
        emit (if any) is returned in the result instead.

        Raises:
            ValueError: If an update action belongs to another form.
            TypeError: If the action is not a FormAction.
        """
        if isinstance(action, UpdateField):
            return self._apply_update(state, action)
        if isinstance(action, Submit):
            return self._apply_submit(state, enforce_required_fields)
        if isinstance(action, ShowRequiredWarnings):
            return TransitionResult(
                state=state.model_copy(update={"display_required_warnings": True}),
                changed=True,
            )
        raise TypeError(f"Unsupported action for {self.name}: {action!r}")

    def _apply_update(self, state: FormState, action: UpdateField) -> TransitionResult:
        if not self.actions.owns(action):
            raise ValueError(f"{action!r} is not an update action of {self.name}")
        changed = state.values[action.field_name] != action.value
        values = dict(state.values)
        values[action.field_name] = action.value
        return TransitionResult(state=state.model_copy(update={"values": values}), changed=changed)

    def _apply_submit(self, state: FormState, enforce_required_fields: bool) -> TransitionResult:
        if not enforce_required_fields or self.required_satisfied(state.values):
            return TransitionResult(
                state=state.model_copy(update={"submitted": True, "display_required_warnings": False}),
                changed=True,
                emitted=self.build_record(state.values),
            )
        return TransitionResult(state=state, changed=True, follow_up=ShowRequiredWarnings())

    # Rendering

    def render(self, state: FormState) -> FormRender:
        return render_form(self, state)

    # Sessions

    def controller(
        self,
        submit_consumer: Callable[[Any], Any],
        *,
        initial_record: Any = None,
        enforce_required_fields: bool | None = None,
    ) -> "FormController":
        return FormController(
            self,
            submit_consumer,
            initial_record=initial_record,
            enforce_required_fields=enforce_required_fields,
        )


class FormController:
    """
    One live form session.

    Holds the current FormState and processes actions one at a time.
    On a successful submit the finalized record is passed to
    submit_consumer before the new state is committed; if the consumer
    raises, the exception propagates and the state is left unchanged.
    """

    def __init__(
        self,
        definition: FormDefinition,
        submit_consumer: Callable[[Any], Any],
        *,
        initial_record: Any = None,
        enforce_required_fields: bool | None = None,
    ):
        """
        Initialize a form session.

        Args:
            definition: The compiled form.
            submit_consumer: Called with the finalized record on successful submit.
            initial_record: Optional record whose values replace the zero values.
            enforce_required_fields: Whether submit requires the required
                fields. If None, uses config.enforce_required_fields (True).
        """
        if enforce_required_fields is None:
            enforce_required_fields = get_config().enforce_required_fields
        self.definition = definition
        self.submit_consumer = submit_consumer
        self.enforce_required_fields = enforce_required_fields
        self._state = definition.initial_state(initial_record)

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def values(self) -> dict[str, Any]:
        return dict(self._state.values)

    @property
    def submitted(self) -> bool:
        return self._state.submitted

    @property
    def display_required_warnings(self) -> bool:
        return self._state.display_required_warnings

    @property
    def phase(self) -> FormPhase:
        return self._state.phase

    @property
    def actions(self) -> ActionSet:
        return self.definition.actions

    def required_satisfied(self) -> bool:
        return self.definition.required_satisfied(self._state.values)

    def dispatch(self, action: FormAction) -> bool:
        """
        Process an action and any follow-up actions it queues.

        Returns:
            True if the form should be re-rendered.
        """
        pending: deque[FormAction] = deque([action])
        should_render = False
        tracer = get_tracer()
        while pending:
            current = pending.popleft()
            with tracer.start_as_current_span(
                type(current).__name__,
                attributes=self._span_attributes(current),
            ) as span:
                result = self.definition.transition(
                    self._state,
                    current,
                    enforce_required_fields=self.enforce_required_fields,
                )
                if result.emitted is not None:
                    logger.info(f"Submitting {self.definition.name}")
                    self.submit_consumer(result.emitted)
                self._state = result.state
                self._trace(current, result, span)
            should_render = should_render or result.changed
            if result.follow_up is not None:
                logger.debug(f"{type(current).__name__} queued {type(result.follow_up).__name__}")
                pending.append(result.follow_up)
        return should_render

    def update(self, field_name: str, value: Any) -> bool:
        return self.dispatch(self.actions.update(field_name, value))

    def submit(self) -> bool:
        return self.dispatch(Submit())

    def render(self) -> FormRender:
        return self.definition.render(self._state)

    def render_fields(self) -> list[RenderDescriptor]:
        return self.render().fields

    def _span_attributes(self, action: FormAction) -> dict[str, str]:
        attributes = {FORM_ATTRIBUTE: self.definition.name}
        if isinstance(action, UpdateField):
            attributes[FIELD_ATTRIBUTE] = action.field_name
        return attributes

    def _trace(self, action: FormAction, result: TransitionResult, span: Span) -> None:
        logger.debug(
            f"{self.definition.name}: {type(action).__name__} "
            f"changed={result.changed} submitted={result.state.submitted} "
            f"warnings={result.state.display_required_warnings}"
        )
        record_outcome(
            span,
            changed=result.changed,
            emitted=result.emitted is not None,
            submitted=result.state.submitted,
            display_required_warnings=result.state.display_required_warnings,
        )
