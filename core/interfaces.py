# interfaces.py
"""Abstract interfaces for the Ticks log bridge.

Defines the contracts of the collaborators the processing handler talks to:
an event sink and a provider of the current tracing context. Enables loose
coupling and testability.
"""

from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional, Union

from core.precision import Precision

Scalar = Union[str, int, float, bool]


class Event(ABC):
    """Abstract interface for a structured event."""

    @abstractmethod
    def set_timestamp(self, timestamp: int) -> None:
        """Set the event timestamp.

        Args:
            timestamp: Epoch timestamp, in the unit later passed to `record`.
        """
        pass

    @abstractmethod
    def add_tags(self, tags: Mapping[str, Optional[str]]) -> None:
        """Add low-cardinality dimensions to the event.

        Args:
            tags: Tag names mapped to string values (or None).
        """
        pass

    @abstractmethod
    def add_fields(self, fields: Mapping[str, Optional[Scalar]]) -> None:
        """Add value data to the event.

        Args:
            fields: Field names mapped to scalar values (or None).
        """
        pass

    @abstractmethod
    def set_trace_id(self, trace_id: str) -> None:
        """Set the trace ID the event belongs to."""
        pass

    @abstractmethod
    def set_span_id(self, span_id: str) -> None:
        """Set the span ID the event belongs to."""
        pass

    @abstractmethod
    def set_parent_span_id(self, parent_span_id: str) -> None:
        """Set the ID of the parent of the event's span."""
        pass

    @abstractmethod
    def record(self, precision: Precision = Precision.NANOSECONDS) -> None:
        """Submit the event to its sink.

        Args:
            precision: Unit of the timestamp set on the event.

        Raises:
            EventAlreadyRecordedError: If the event was already recorded.
        """
        pass


class EventLogger(ABC):
    """Abstract interface for event sinks."""

    @abstractmethod
    def new_event(self, name: str) -> Event:
        """Create a new, empty event.

        Args:
            name: Event name.

        Returns:
            Event bound to this logger.
        """
        pass


class TracingProvider(ABC):
    """Abstract interface for the current tracing context."""

    @abstractmethod
    def get_trace_id(self) -> Optional[str]:
        """Get the current trace ID, None if there is none."""
        pass

    @abstractmethod
    def get_span_id(self) -> Optional[str]:
        """Get the current span ID, None if there is none."""
        pass

    @abstractmethod
    def get_parent_span_id(self) -> Optional[str]:
        """Get the parent of the current span, None for a root span."""
        pass

    @abstractmethod
    def get_span_specific_tags(self) -> Dict[str, str]:
        """Get tags scoped to the current span.

        Returns:
            Dictionary of tag names to values.
        """
        pass
