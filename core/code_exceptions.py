"""Custom exception hierarchy for the Ticks log bridge."""

class TicksError(Exception):
    """Base exception for all Ticks errors."""


class TraceUnavailableError(TicksError, RuntimeError):
    """Raised when no trace ID is available for the current context."""


class SpanUnavailableError(TicksError, RuntimeError):
    """Raised when no span ID is available for the current context."""


class EventAlreadyRecordedError(TicksError):
    """Raised when an event is modified or recorded after it was recorded."""
