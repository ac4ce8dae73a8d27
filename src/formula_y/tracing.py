"""
Transition tracing for formula-y controllers.

Every action a controller processes runs inside an OpenTelemetry span
named after the action class. The span carries the form name, the
updated field (for update actions) and the flags after the transition
as attributes; field values are never recorded. Spans can be printed to
the console or appended to a JSON Lines file. Tracing is off unless
enabled with setup_tracing() or the FORMULA_Y_ENABLE_TRACING setting.
"""

import sys
from collections.abc import Sequence

from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import ReadableSpan, SpanProcessor, TracerProvider
from opentelemetry.sdk.trace.export import (
    ConsoleSpanExporter,
    SimpleSpanProcessor,
    SpanExporter,
    SpanExportResult,
)
from opentelemetry.trace import Span, Tracer

from formula_y.config import get_config
from formula_y.constants import LOGGER_NAME

# Span attribute keys
FORM_ATTRIBUTE = "formula_y.form"
FIELD_ATTRIBUTE = "formula_y.field"
CHANGED_ATTRIBUTE = "formula_y.changed"
EMITTED_ATTRIBUTE = "formula_y.emitted"
SUBMITTED_ATTRIBUTE = "formula_y.submitted"
WARNINGS_ATTRIBUTE = "formula_y.display_required_warnings"


def format_transition(span: ReadableSpan, verbose: bool = False) -> str:
    """Render a transition span as one console line (two when verbose)."""
    attributes = span.attributes or {}
    field_name = attributes.get(FIELD_ATTRIBUTE)
    target = f" ({field_name})" if field_name else ""
    line = f"[TRANSITION] {attributes.get(FORM_ATTRIBUTE)}: {span.name}{target}\n"
    if verbose:
        line += (
            f"  └─ changed={attributes.get(CHANGED_ATTRIBUTE)} "
            f"emitted={attributes.get(EMITTED_ATTRIBUTE)} "
            f"submitted={attributes.get(SUBMITTED_ATTRIBUTE)} "
            f"warnings={attributes.get(WARNINGS_ATTRIBUTE)}\n"
        )
    return line


def console_exporter(verbose: bool = False) -> ConsoleSpanExporter:
    """
    A span exporter that prints transitions to the console.

    Useful for development and debugging.
    """
    return ConsoleSpanExporter(
        out=sys.stdout,
        formatter=lambda span: format_transition(span, verbose=verbose),
    )


class FileSpanExporter(SpanExporter):
    """
    A span exporter that appends transitions to a JSON Lines file.

    Each line is the OpenTelemetry JSON form of one span.
    """

    def __init__(self, file_path: str = "transitions.jsonl"):
        self.file_path = file_path

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        with open(self.file_path, "a", encoding="utf-8") as f:
            for span in spans:
                f.write(span.to_json(indent=None) + "\n")
        return SpanExportResult.SUCCESS


_provider: TracerProvider | None = None
_enabled = False


def _new_provider() -> TracerProvider:
    return TracerProvider(resource=Resource.create({SERVICE_NAME: LOGGER_NAME}))


def setup_tracing(
    enabled: bool = True,
    console: bool = True,
    verbose: bool = False,
    file_path: str | None = None,
) -> None:
    """
    Configure transition tracing.

    Shuts down any previously configured tracer provider.

    Args:
        enabled: Whether tracing is enabled.
        console: Whether to print transitions to console.
        verbose: Whether to print the flags after each transition.
        file_path: Optional file path to append transitions to.

    Example:
        >>> from formula_y.tracing import setup_tracing
        >>> setup_tracing(console=True, verbose=True)
    """
    global _provider, _enabled
    shutdown_tracing()
    if not enabled:
        return

    _provider = _new_provider()
    if console:
        _provider.add_span_processor(SimpleSpanProcessor(console_exporter(verbose)))
    if file_path:
        _provider.add_span_processor(SimpleSpanProcessor(FileSpanExporter(file_path)))
    _enabled = True


def setup_tracing_from_config() -> None:
    """Configure tracing from the FORMULA_Y_* tracing settings."""
    config = get_config()
    setup_tracing(
        enabled=config.enable_tracing,
        console=config.trace_to_console,
        verbose=config.trace_verbose,
        file_path=config.trace_file,
    )


def add_span_processor(processor: SpanProcessor) -> None:
    """Register an additional span processor."""
    global _provider
    if _provider is None:
        _provider = _new_provider()
    _provider.add_span_processor(processor)


def disable_tracing() -> None:
    """Disable all tracing."""
    global _enabled
    _enabled = False


def enable_tracing() -> None:
    """Enable tracing with the registered span processors."""
    global _enabled
    _enabled = True


def is_tracing_enabled() -> bool:
    return _enabled and _provider is not None


def get_tracer() -> Tracer:
    """The formula-y tracer, or a no-op tracer while tracing is off."""
    if not is_tracing_enabled():
        return trace.NoOpTracer()
    return _provider.get_tracer(LOGGER_NAME)


def record_outcome(
    span: Span,
    *,
    changed: bool,
    emitted: bool,
    submitted: bool,
    display_required_warnings: bool,
) -> None:
    """Set the transition flags on a span."""
    span.set_attributes(
        {
            CHANGED_ATTRIBUTE: changed,
            EMITTED_ATTRIBUTE: emitted,
            SUBMITTED_ATTRIBUTE: submitted,
            WARNINGS_ATTRIBUTE: display_required_warnings,
        }
    )


def shutdown_tracing() -> None:
    """Flush and release the tracer provider, disabling tracing."""
    global _provider, _enabled
    if _provider is not None:
        _provider.shutdown()
    _provider = None
    _enabled = False


if get_config().enable_tracing:
    setup_tracing_from_config()
