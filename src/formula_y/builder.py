"""
Form compiler entry point.

This is the main entry point for formula-y. It provides a simple
interface: give it a record class, get back a compiled form.
"""

import logging
from typing import Any

from formula_y.analysis.introspector import introspect
from formula_y.compiler.controller import FormDefinition
from formula_y.config import configure_logging, get_config
from formula_y.constants import LOGGER_NAME
from formula_y.models.field_definitions import Schema
from formula_y.tracing import setup_tracing

logger = logging.getLogger(LOGGER_NAME)


class FormCompiler:
    """
    Compiles record classes into form definitions.

    Usage:
        compiler = FormCompiler(trace_to_console=True)

        definition = compiler.compile(Signup)
        controller = definition.controller(submit_consumer=save_signup)
    """

    def __init__(
        self,
        collect_all_errors: bool | None = None,
        enable_tracing: bool | None = None,
        trace_to_console: bool = False,
        trace_verbose: bool = False,
        trace_file: str | None = None,
    ):
        """
        Initialize the compiler.

        Args:
            collect_all_errors: Report every unsupported field at once instead
                of stopping at the first. If None, uses config.collect_all_errors.
            enable_tracing: Whether to trace controller transitions. If None,
                tracing is left as configured.
            trace_to_console: Whether to print transitions to console.
            trace_verbose: Whether to print flags after each transition.
            trace_file: Optional file path to append transitions to.

        The formula-y logger level is set from config.log_level.
        """
        config = get_config()
        configure_logging(config.log_level)
        self.collect_all_errors = (
            config.collect_all_errors if collect_all_errors is None else collect_all_errors
        )

        if enable_tracing is not None:
            setup_tracing(
                enabled=enable_tracing,
                console=trace_to_console,
                verbose=trace_verbose,
                file_path=trace_file,
            )

    def introspect(self, record_type: Any) -> Schema:
        """
        Build the schema of a record class without compiling it.

        Raises:
            CompileError: If the record or one of its fields is unsupported.
        """
        return introspect(record_type, collect_all_errors=self.collect_all_errors)

    def compile(self, record_type: Any) -> FormDefinition:
        """
        Compile a record class into a form definition.

        Args:
            record_type: A pydantic model class or dataclass whose fields are
                str, bool, str | None or bool | None.

        Returns:
            FormDefinition ready to create controllers from.

        Raises:
            UnsupportedRecordShape: If the record is not a named-field class.
            UnsupportedFieldType: If a field has an unsupported type.
            CompileErrorGroup: If collect_all_errors is on and fields fail.

        Example:
            >>> definition = FormCompiler().compile(Signup)
            >>> definition.actions.names
            ['UpdateEmail', 'UpdateAgreeToTerms']
        """
        schema = self.introspect(record_type)
        definition = FormDefinition(schema)
        logger.info(f"Compiled {definition.name} form with {len(schema.fields)} field(s)")
        return definition


def compile_form(
    record_type: Any,
    collect_all_errors: bool | None = None,
) -> FormDefinition:
    """
    Convenience function to compile a form.

    Args:
        record_type: Record class to compile.
        collect_all_errors: Report every unsupported field at once.

    Returns:
        FormDefinition

    Example:
        >>> from formula_y import compile_form
        >>> definition = compile_form(Signup)
        >>> controller = definition.controller(submit_consumer=print)
    """
    compiler = FormCompiler(collect_all_errors=collect_all_errors)
    return compiler.compile(record_type)
