"""
formula-y: Interactive form controllers compiled from record classes.

Declare the form once as a pydantic model or dataclass whose fields are
str, bool, str | None or bool | None, and compile it into a controller
that tracks values, checks required fields and hands the finished
record to your code on submit.

Simple Usage:
    from pydantic import BaseModel
    from formula_y import compile_form

    class Signup(BaseModel):
        email: str
        agree_to_terms: bool

    definition = compile_form(Signup)
    controller = definition.controller(submit_consumer=save_signup)

    controller.update("email", "a@b.com")
    controller.dispatch(definition.actions.UpdateAgreeToTerms(value=True))
    controller.submit()  # save_signup(Signup(email="a@b.com", agree_to_terms=True))

Rendering:
    form = controller.render()
    for field in form.fields:
        field.label_text, field.input_class, field.current_value
        controller.dispatch(field.on_change(raw_value_from_ui))

Tracing:
    from formula_y.tracing import setup_tracing

    # Print every transition
    setup_tracing(console=True, verbose=True)

    # Or append spans to a JSON Lines file
    setup_tracing(console=False, file_path="transitions.jsonl")
"""

from formula_y.builder import (
    FormCompiler,
    compile_form,
)
from formula_y.analysis import (
    classify,
    introspect,
)
from formula_y.compiler import (
    FormController,
    FormDefinition,
    ShowRequiredWarnings,
    Submit,
    UpdateField,
)
from formula_y.errors import (
    CompileError,
    CompileErrorGroup,
    UnsupportedFieldType,
    UnsupportedRecordShape,
)
from formula_y.models import (
    FieldDescriptor,
    FieldKind,
    FormPhase,
    FormRender,
    FormState,
    InputKind,
    RenderDescriptor,
    Schema,
)
from formula_y.tracing import (
    setup_tracing,
    disable_tracing,
    enable_tracing,
    shutdown_tracing,
)

__all__ = [
    # Main interface
    "FormCompiler",
    "compile_form",
    "classify",
    "introspect",
    # Controller
    "FormDefinition",
    "FormController",
    "UpdateField",
    "Submit",
    "ShowRequiredWarnings",
    # Models
    "FieldKind",
    "FieldDescriptor",
    "Schema",
    "FormPhase",
    "FormState",
    "InputKind",
    "RenderDescriptor",
    "FormRender",
    # Errors
    "CompileError",
    "CompileErrorGroup",
    "UnsupportedFieldType",
    "UnsupportedRecordShape",
    # Tracing
    "setup_tracing",
    "disable_tracing",
    "enable_tracing",
    "shutdown_tracing",
]

__version__ = "0.1.0"
