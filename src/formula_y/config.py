"""
Configuration module for formula-y.

Handles environment variables and default settings.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from formula_y.constants import LOGGER_NAME

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass
class FormulaConfig:
    """Configuration settings for formula-y."""

    # Controller defaults
    enforce_required_fields: bool = True

    # Compiler settings
    collect_all_errors: bool = False  # Report every bad field, not just the first

    # Render settings
    submit_button_text: str = "Submit"

    # Tracing settings
    enable_tracing: bool = False
    trace_to_console: bool = False
    trace_verbose: bool = False
    trace_file: str | None = None

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "FormulaConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            enforce_required_fields=_env_flag("FORMULA_Y_ENFORCE_REQUIRED_FIELDS", _defaults.enforce_required_fields),
            collect_all_errors=_env_flag("FORMULA_Y_COLLECT_ALL_ERRORS", _defaults.collect_all_errors),
            submit_button_text=os.getenv("FORMULA_Y_SUBMIT_BUTTON_TEXT", _defaults.submit_button_text),
            enable_tracing=_env_flag("FORMULA_Y_ENABLE_TRACING", _defaults.enable_tracing),
            trace_to_console=_env_flag("FORMULA_Y_TRACE_TO_CONSOLE", _defaults.trace_to_console),
            trace_verbose=_env_flag("FORMULA_Y_TRACE_VERBOSE", _defaults.trace_verbose),
            trace_file=os.getenv("FORMULA_Y_TRACE_FILE", _defaults.trace_file),
            log_level=os.getenv("FORMULA_Y_LOG_LEVEL", _defaults.log_level).upper(),
        )


config = FormulaConfig.from_env()


def get_config() -> FormulaConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormulaConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Apply a log level to the formula-y logger.

    Args:
        level: Level name or number. If None, uses config.log_level.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level if level is not None else config.log_level)
    return logger
