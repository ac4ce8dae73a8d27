"""
Identifier transforms for generated names.

Every generated name (action class, label text, CSS class) is derived
from a field's declared identifier through these functions. They are
pure and total: any string is accepted, including ones that produce
no words at all.
"""

from formula_y.constants import (
    ACTION_PREFIX,
    CLASS_NAMESPACE,
    FORM_CLASS_SUFFIX,
    REQUIRED_CLASS,
)


def split_words(identifier: str) -> list[str]:
    """
    Split an identifier into words.

    Boundaries are non-alphanumeric characters, lower-to-upper case
    changes, letter/digit changes, and the end of an acronym that is
    followed by a capitalized word.

    Example:
        >>> split_words("agree_to_terms")
        ['agree', 'to', 'terms']
        >>> split_words("HTMLParser2")
        ['HTML', 'Parser', '2']
    """
    words: list[str] = []
    current = ""
    for index, char in enumerate(identifier):
        if not char.isalnum():
            if current:
                words.append(current)
                current = ""
            continue
        following = identifier[index + 1:index + 2]
        if current and _is_boundary(current[-1], char, following):
            words.append(current)
            current = ""
        current += char
    if current:
        words.append(current)
    return words


def _is_boundary(previous: str, char: str, following: str) -> bool:
    if previous.isdigit() != char.isdigit():
        return True
    if previous.islower() and char.isupper():
        return True
    # "HTMLParser" splits before the "P"
    return previous.isupper() and char.isupper() and following.islower()


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_upper_camel(identifier: str) -> str:
    return "".join(_capitalize(word) for word in split_words(identifier))


def to_title(identifier: str) -> str:
    return " ".join(_capitalize(word) for word in split_words(identifier))


def to_kebab(identifier: str) -> str:
    return "-".join(word.lower() for word in split_words(identifier))


def action_name(field_name: str) -> str:
    """agree_to_terms -> UpdateAgreeToTerms"""
    return to_upper_camel(f"{ACTION_PREFIX}_{field_name}")


def label_text(field_name: str) -> str:
    """agree_to_terms -> Agree To Terms"""
    return to_title(field_name)


def _decorate(base: str, required: bool) -> str:
    return f"{base} {REQUIRED_CLASS}" if required else base


def label_class(field_name: str, family: str, required: bool = False) -> str:
    """
    Class attribute for a field's label.

    Example:
        >>> label_class("agree_to_terms", "checkbox", required=True)
        'agree-to-terms-label formula-y-checkbox-label required'
    """
    return _decorate(
        f"{to_kebab(field_name)}-label {CLASS_NAMESPACE}-{family}-label",
        required,
    )


def input_class(field_name: str, family: str, required: bool = False) -> str:
    """Class attribute for a field's input, same scheme as label_class."""
    return _decorate(
        f"{to_kebab(field_name)}-input {CLASS_NAMESPACE}-{family}-input",
        required,
    )


def form_class(record_name: str) -> str:
    """SignupData -> 'signup-data-form formula-y-form'"""
    return f"{to_kebab(record_name)}-{FORM_CLASS_SUFFIX} {CLASS_NAMESPACE}-{FORM_CLASS_SUFFIX}"
