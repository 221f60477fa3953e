"""
TracingProvider backed by the current OpenTelemetry span.
"""

from __future__ import annotations

from typing import Dict, Optional

from opentelemetry import trace
from opentelemetry.trace import Span, SpanContext

from core.interfaces import TracingProvider


def format_trace_id(trace_id: int) -> str:
    return f"{trace_id:032x}"


def format_span_id(span_id: int) -> str:
    return f"{span_id:016x}"


class OtelTracingProvider(TracingProvider):
    """Reads IDs and span tags from `trace.get_current_span()`.

    IDs are rendered as lower-case hex, the same way OpenTelemetry exporters
    print them. Parent span and attributes are only known for SDK spans;
    for other spans they come back empty.
    """

    def _current_span(self) -> Span:
        return trace.get_current_span()

    def _current_context(self) -> Optional[SpanContext]:
        span_context = self._current_span().get_span_context()
        return span_context if span_context.is_valid else None

    def get_trace_id(self) -> Optional[str]:
        span_context = self._current_context()
        if span_context is None:
            return None
        return format_trace_id(span_context.trace_id)

    def get_span_id(self) -> Optional[str]:
        span_context = self._current_context()
        if span_context is None:
            return None
        return format_span_id(span_context.span_id)

    def get_parent_span_id(self) -> Optional[str]:
        if self._current_context() is None:
            return None
        parent = getattr(self._current_span(), "parent", None)
        if parent is None or not parent.is_valid:
            return None
        return format_span_id(parent.span_id)

    def get_span_specific_tags(self) -> Dict[str, str]:
        attributes = getattr(self._current_span(), "attributes", None) or {}
        return {
            str(key): value
            for key, value in attributes.items()
            if isinstance(value, str)
        }
