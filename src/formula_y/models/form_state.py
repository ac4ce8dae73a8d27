"""
Controller state models.

FormState is the whole state of one form session. It is immutable;
every transition produces a new FormState.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FormPhase(str, Enum):
    """Where a form session is in its lifecycle."""

    EDITING = "editing"
    SUBMITTED = "submitted"


class FormState(BaseModel):
    """Current values and submission flags of one form session."""

    model_config = ConfigDict(frozen=True)

    values: dict[str, Any] = Field(..., description="One value per schema field")
    submitted: bool = Field(
        default=False,
        description="Set once a submit succeeds; never cleared by edits",
    )
    display_required_warnings: bool = Field(
        default=False,
        description="Set by a failed submit, cleared by the next successful one",
    )

    @property
    def phase(self) -> FormPhase:
        return FormPhase.SUBMITTED if self.submitted else FormPhase.EDITING
