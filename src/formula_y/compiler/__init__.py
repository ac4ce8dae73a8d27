"""
Form compilation and sessions.

This package contains:
- Generated update actions and the shared control actions
- FormDefinition (compiled form) and FormController (live session)
- Render descriptor generation
"""

from formula_y.compiler.actions import (
    ActionSet,
    FormAction,
    ShowRequiredWarnings,
    Submit,
    UpdateField,
    build_update_action,
    check_value,
)
from formula_y.compiler.controller import (
    FormController,
    FormDefinition,
    TransitionResult,
)
from formula_y.compiler.render import (
    change_handler,
    needs_required_warning,
    render_field,
    render_fields,
    render_form,
)

__all__ = [
    # Actions
    "ActionSet",
    "FormAction",
    "ShowRequiredWarnings",
    "Submit",
    "UpdateField",
    "build_update_action",
    "check_value",
    # Controller
    "FormController",
    "FormDefinition",
    "TransitionResult",
    # Rendering
    "change_handler",
    "needs_required_warning",
    "render_field",
    "render_fields",
    "render_form",
]
