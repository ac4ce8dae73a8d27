"""
Constants for generated form artifacts.

This module contains the fixed tokens used when deriving action names
and CSS class names. Centralizing these keeps the class-name scheme
consistent between the compiler and any host stylesheet.
"""

# Namespace token shared by every generated class name
CLASS_NAMESPACE = "formula-y"

# Kind families used in label/input class names
TEXT_FAMILY = "txt"
CHECKBOX_FAMILY = "checkbox"

# Appended to label/input classes of required fields after a failed submit
REQUIRED_CLASS = "required"

# Wrapper around a single label + input pair
FORM_ITEM_CLASS = f"{CLASS_NAMESPACE}-form-item"

# Suffix for the <form> element class
FORM_CLASS_SUFFIX = "form"

# Prefix joined with the field name to build update action names
ACTION_PREFIX = "update"

# Name of the package logger
LOGGER_NAME = "formula-y"
