"""Tests for identifier transforms."""

import pytest

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


class TestSplitWords:
    """Tests for word splitting."""

    @pytest.mark.parametrize(
        "identifier, words",
        [
            ("agree_to_terms", ["agree", "to", "terms"]),
            ("firstName", ["first", "Name"]),
            ("HTMLParser", ["HTML", "Parser"]),
            ("address2", ["address", "2"]),
            ("kebab-case here", ["kebab", "case", "here"]),
            ("__private__", ["private"]),
            ("ABC", ["ABC"]),
        ],
    )
    def test_boundaries(self, identifier, words):
        """Test word boundaries."""
        assert split_words(identifier) == words

    def test_no_words(self):
        """Test identifiers without alphanumerics."""
        assert split_words("_") == []
        assert split_words("") == []


class TestCaseConversions:
    """Tests for case conversions."""

    def test_upper_camel(self):
        """Test upper camel case."""
        assert to_upper_camel("agree_to_terms") == "AgreeToTerms"
        assert to_upper_camel("HTMLParser") == "HtmlParser"

    def test_title(self):
        """Test title case."""
        assert to_title("agree_to_terms") == "Agree To Terms"
        assert to_title("email") == "Email"

    def test_kebab(self):
        """Test kebab case."""
        assert to_kebab("agree_to_terms") == "agree-to-terms"
        assert to_kebab("SignupData") == "signup-data"


class TestGeneratedNames:
    """Tests for names derived from fields."""

    def test_action_name(self):
        """Test update action names."""
        assert action_name("agree_to_terms") == "UpdateAgreeToTerms"
        assert action_name("email") == "UpdateEmail"

    def test_action_name_is_total(self):
        """Test that odd identifiers still produce a name."""
        assert action_name("_") == "Update"

    def test_label_text(self):
        """Test label text."""
        assert label_text("subscribe_to_updates") == "Subscribe To Updates"

    def test_text_classes(self):
        """Test text field classes."""
        assert label_class("first_name", "txt") == "first-name-label formula-y-txt-label"
        assert input_class("first_name", "txt") == "first-name-input formula-y-txt-input"

    def test_checkbox_classes(self):
        """Test checkbox field classes."""
        assert label_class("agree_to_terms", "checkbox") == "agree-to-terms-label formula-y-checkbox-label"
        assert input_class("agree_to_terms", "checkbox") == "agree-to-terms-input formula-y-checkbox-input"

    def test_required_decoration(self):
        """Test the required token."""
        assert label_class("email", "txt", required=True) == "email-label formula-y-txt-label required"
        assert input_class("email", "txt", required=True) == "email-input formula-y-txt-input required"

    def test_form_class(self):
        """Test the form element class."""
        assert form_class("Data") == "data-form formula-y-form"
        assert form_class("SignupData") == "signup-data-form formula-y-form"
