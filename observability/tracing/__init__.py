"""
OpenTelemetry collaborators of the processing handler.

This package exposes:
- `get_tracer` – central way to get a tracer.
- `OtelTracingProvider` – trace context of the current span.
- `OtelEventLogger` – records events on the current span.
"""

from .tracer import get_tracer
from .provider import OtelTracingProvider
from .event_logger import OtelEvent, OtelEventLogger

__all__ = [
    "get_tracer",
    "OtelTracingProvider",
    "OtelEvent",
    "OtelEventLogger",
]
