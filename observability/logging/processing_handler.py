"""
Logging handler that turns log records into structured Ticks events.

Every record handled becomes one event carrying the trace context of the
code that logged it:

    handler = ProcessingHandler(event_logger, OtelTracingProvider())
    logging.getLogger("app").addHandler(handler)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from config.settings import DEFAULT_EVENT_NAME
from core.code_exceptions import SpanUnavailableError, TraceUnavailableError
from core.interfaces import EventLogger, Scalar, TracingProvider
from core.precision import Precision

# Attributes every LogRecord has; anything else was attached as 'extra'.
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_TRACEBACK_FORMATTER = logging.Formatter()


def lookup_string(mapping: Mapping[str, Any], key: str) -> Optional[str]:
    """Return mapping[key] if it is a string, None otherwise."""
    value = mapping.get(key)
    return value if isinstance(value, str) else None


def is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


def type_name_of(value: Any) -> str:
    """Qualified class name of a value; builtins keep their bare name."""
    cls = value if isinstance(value, type) else type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def record_extra(record: logging.LogRecord) -> Dict[str, Any]:
    """Attributes attached to a record through `extra=` or by filters."""
    return {
        k: v
        for k, v in record.__dict__.items()
        if k not in _STANDARD_ATTRS and not k.startswith("_")
    }


def record_exception(record: logging.LogRecord) -> Optional[BaseException]:
    if not record.exc_info:
        return None
    exc = record.exc_info[1]
    return exc if isinstance(exc, BaseException) else None


def timestamp_micros(record: logging.LogRecord) -> int:
    return round(record.created * 1_000_000)


class ProcessingHandler(logging.Handler):
    """Records each handled log record as an event via an EventLogger.

    Level filtering and formatting are left to `logging`: the handler level,
    filters and formatter behave as for any other handler.

    A missing trace or span ID raises TraceUnavailableError or
    SpanUnavailableError out of `handle()` to the logging call site, before
    any event is created. These are not routed through `handleError`; every
    other failure (formatting, the event sink) goes to `handleError` like in
    any stdlib handler.
    """

    TAG_KEYS = ("levelName", "channel", "file", "class", "function")
    FIELD_KEYS = ("message", "level", "line", "traceID", "spanID", "parentSpanID")

    def __init__(
        self,
        event_logger: EventLogger,
        tracing_provider: TracingProvider,
        level: int = logging.DEBUG,
        event_name: str = DEFAULT_EVENT_NAME,
    ) -> None:
        super().__init__(level)
        self.event_logger = event_logger
        self.tracing_provider = tracing_provider
        self.event_name = event_name

    def emit(self, record: logging.LogRecord) -> None:
        trace_id = self.tracing_provider.get_trace_id()
        if trace_id is None:
            raise TraceUnavailableError("Trace ID not available!")

        span_id = self.tracing_provider.get_span_id()
        if span_id is None:
            raise SpanUnavailableError("Span ID not available!")

        parent_span_id = self.tracing_provider.get_parent_span_id()

        # Only missing trace context reaches the caller; anything else is a
        # regular handler failure.
        try:
            self._record_event(record, trace_id, span_id, parent_span_id)
        except Exception:
            self.handleError(record)

    def _record_event(
        self,
        record: logging.LogRecord,
        trace_id: str,
        span_id: str,
        parent_span_id: Optional[str],
    ) -> None:
        extra = record_extra(record)
        formatted = self.format(record)
        line = extra.get("line")

        fields: Dict[str, Optional[Scalar]] = {
            "message": formatted if isinstance(formatted, str) else None,
            "level": record.levelno,
            "line": line if is_scalar(line) else None,
        }

        tags: Dict[str, Optional[str]] = {
            "levelName": record.levelname,
            "channel": record.name,
            "file": lookup_string(extra, "file"),
            "class": lookup_string(extra, "class"),
            "function": lookup_string(extra, "function"),
        }

        for key, value in extra.items():
            if key in self.TAG_KEYS or key in self.FIELD_KEYS:
                continue
            if not is_scalar(value):
                continue
            fields[str(key)] = value

        exc = record_exception(record)
        if exc is not None:
            tags["exception"] = type_name_of(exc)
            fields["stacktrace"] = _TRACEBACK_FORMATTER.formatException(
                (type(exc), exc, exc.__traceback__)
            )

        event = self.event_logger.new_event(self.event_name)

        event.set_timestamp(timestamp_micros(record))
        event.set_trace_id(trace_id)
        event.set_span_id(span_id)
        if parent_span_id is not None:
            event.set_parent_span_id(parent_span_id)

        # Tags derived from the record win over span tags with the same name.
        event.add_tags({**self.tracing_provider.get_span_specific_tags(), **tags})
        event.add_fields(fields)
        event.record(Precision.MICROSECONDS)
