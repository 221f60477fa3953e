"""
Access to the OpenTelemetry tracer used by the Ticks log bridge.

The bridge never configures a TracerProvider itself; the application does
that once at startup and the bridge reads whatever span is current.
"""

from __future__ import annotations

from typing import Optional

from opentelemetry import trace

from config.settings import TracingConfig


def get_tracer(name: Optional[str] = None) -> trace.Tracer:
    """
    Get an OpenTelemetry tracer.

    Example:
        from observability.tracing import get_tracer

        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my-span"):
            ...
    """
    tracer_name = name or TracingConfig.from_env().tracer_name
    return trace.get_tracer(tracer_name)
