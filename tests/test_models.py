"""Tests for formula-y data models."""

import pytest
from pydantic import BaseModel, ValidationError

from formula_y.models.field_definitions import (
    FieldDescriptor,
    FieldKind,
    Schema,
)
from formula_y.models.form_state import FormPhase, FormState
from formula_y.models.render_output import (
    FormRender,
    InputKind,
    RenderDescriptor,
)


class Contact(BaseModel):
    email: str
    nickname: str | None = None


class TestFieldKind:
    """Tests for FieldKind."""

    def test_zero_values(self):
        """Test each kind's zero value."""
        assert FieldKind.TEXT.zero_value == ""
        assert FieldKind.BOOLEAN.zero_value is False
        assert FieldKind.OPTIONAL_TEXT.zero_value is None
        assert FieldKind.OPTIONAL_BOOLEAN.zero_value is None

    def test_families(self):
        """Test class-name families."""
        assert FieldKind.TEXT.family == "txt"
        assert FieldKind.OPTIONAL_TEXT.family == "txt"
        assert FieldKind.BOOLEAN.family == "checkbox"
        assert FieldKind.OPTIONAL_BOOLEAN.family == "checkbox"

    def test_optional_kinds(self):
        """Test optional/required split."""
        assert FieldKind.OPTIONAL_TEXT.is_optional
        assert FieldKind.OPTIONAL_BOOLEAN.is_optional
        assert FieldKind.TEXT.is_required
        assert FieldKind.BOOLEAN.is_required

    def test_required_rules(self):
        """Test the per-kind required-field rule."""
        assert not FieldKind.TEXT.is_satisfied_by("")
        assert FieldKind.TEXT.is_satisfied_by(" ")
        assert not FieldKind.BOOLEAN.is_satisfied_by(False)
        assert FieldKind.BOOLEAN.is_satisfied_by(True)

    def test_optional_kinds_always_satisfied(self):
        """Test that optional kinds accept absence and false."""
        for value in (None, "", False):
            assert FieldKind.OPTIONAL_TEXT.is_satisfied_by(value)
            assert FieldKind.OPTIONAL_BOOLEAN.is_satisfied_by(value)


class TestFieldDescriptor:
    """Tests for FieldDescriptor model."""

    def test_basic_descriptor(self):
        """Test creating a descriptor."""
        descriptor = FieldDescriptor(name="email", kind=FieldKind.TEXT)
        assert descriptor.name == "email"
        assert descriptor.kind is FieldKind.TEXT

    def test_descriptor_is_frozen(self):
        """Test that descriptors cannot be modified."""
        descriptor = FieldDescriptor(name="email", kind=FieldKind.TEXT)
        with pytest.raises(ValidationError):
            descriptor.name = "other"


class TestSchema:
    """Tests for Schema model."""

    def _schema(self) -> Schema:
        return Schema(
            record_name="Contact",
            record_type=Contact,
            fields=(
                FieldDescriptor(name="email", kind=FieldKind.TEXT),
                FieldDescriptor(name="nickname", kind=FieldKind.OPTIONAL_TEXT),
            ),
        )

    def test_field_names_keep_order(self):
        """Test field order."""
        assert self._schema().field_names == ["email", "nickname"]

    def test_required_fields(self):
        """Test required field selection."""
        assert [f.name for f in self._schema().required_fields] == ["email"]

    def test_get_field(self):
        """Test lookup by name."""
        schema = self._schema()
        assert schema.get_field("nickname").kind is FieldKind.OPTIONAL_TEXT
        with pytest.raises(KeyError):
            schema.get_field("missing")


class TestFormState:
    """Tests for FormState model."""

    def test_defaults(self):
        """Test a fresh state."""
        state = FormState(values={"email": ""})
        assert state.submitted is False
        assert state.display_required_warnings is False
        assert state.phase is FormPhase.EDITING

    def test_submitted_phase(self):
        """Test the submitted phase."""
        state = FormState(values={}, submitted=True)
        assert state.phase is FormPhase.SUBMITTED


class TestFormRender:
    """Tests for render output models."""

    def _descriptor(self) -> RenderDescriptor:
        return RenderDescriptor(
            field_name="email",
            kind=FieldKind.TEXT,
            label_text="Email",
            label_class="email-label formula-y-txt-label",
            input_class="email-input formula-y-txt-input",
            input_kind=InputKind.TEXT,
            current_value="",
            on_change=lambda raw: raw,
        )

    def test_descriptor_config(self):
        """Test exporting a descriptor."""
        config = self._descriptor().to_config()
        assert config["name"] == "email"
        assert config["itemClass"] == "formula-y-form-item"
        assert config["label"] == {"text": "Email", "class": "email-label formula-y-txt-label"}
        assert config["input"]["type"] == "text"
        assert config["required"] is False

    def test_handler_not_serialized(self):
        """Test that the change handler is excluded from dumps."""
        assert "on_change" not in self._descriptor().model_dump()

    def test_form_config_export(self):
        """Test exporting form configuration."""
        form = FormRender(
            form_class="contact-form formula-y-form",
            fields=[self._descriptor()],
        )
        config = form.to_config()
        assert config["formClass"] == "contact-form formula-y-form"
        assert config["submitButtonText"] == "Submit"
        assert len(config["fields"]) == 1
        assert form.get_field("email").label_text == "Email"
