# events.py
"""Event implementations shared by the bundled event loggers.

`BaseEvent` keeps the event state and enforces the record-once lifecycle;
subclasses only decide where a recorded event goes.
"""

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from core.code_exceptions import EventAlreadyRecordedError
from core.interfaces import Event, EventLogger, Scalar
from core.precision import Precision


class BaseEvent(Event):
    """Event that accumulates tags and fields until it is recorded."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.timestamp: Optional[int] = None
        self.tags: Dict[str, Optional[str]] = {}
        self.fields: Dict[str, Optional[Scalar]] = {}
        self._recorded = False

    @property
    def recorded(self) -> bool:
        return self._recorded

    def _ensure_open(self) -> None:
        if self._recorded:
            raise EventAlreadyRecordedError(f"Event '{self.name}' was already recorded")

    def set_timestamp(self, timestamp: int) -> None:
        self._ensure_open()
        self.timestamp = timestamp

    def add_tags(self, tags: Mapping[str, Optional[str]]) -> None:
        self._ensure_open()
        self.tags.update(tags)

    def add_fields(self, fields: Mapping[str, Optional[Scalar]]) -> None:
        self._ensure_open()
        self.fields.update(fields)

    # Trace identifiers travel with the event as regular fields.
    def set_trace_id(self, trace_id: str) -> None:
        self._ensure_open()
        self.fields["traceID"] = trace_id

    def set_span_id(self, span_id: str) -> None:
        self._ensure_open()
        self.fields["spanID"] = span_id

    def set_parent_span_id(self, parent_span_id: str) -> None:
        self._ensure_open()
        self.fields["parentSpanID"] = parent_span_id

    def record(self, precision: Precision = Precision.NANOSECONDS) -> None:
        self._ensure_open()
        self._recorded = True
        self._submit(precision)

    @abstractmethod
    def _submit(self, precision: Precision) -> None:
        """Hand the finished event to its sink."""
        pass


@dataclass(frozen=True)
class RecordedEvent:
    """Snapshot of an event at the time it was recorded."""
    name: str
    timestamp: Optional[int]
    precision: Precision
    tags: Dict[str, Optional[str]] = field(default_factory=dict)
    fields: Dict[str, Optional[Scalar]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "timestamp": self.timestamp,
            "precision": self.precision.name,
            "tags": dict(self.tags),
            "fields": dict(self.fields),
        }


class InMemoryEvent(BaseEvent):
    """Event that appends itself to its logger's buffer when recorded."""

    def __init__(self, name: str, sink: "InMemoryEventLogger") -> None:
        super().__init__(name)
        self._sink = sink

    def _submit(self, precision: Precision) -> None:
        self._sink.events.append(
            RecordedEvent(
                name=self.name,
                timestamp=self.timestamp,
                precision=precision,
                tags=dict(self.tags),
                fields=dict(self.fields),
            )
        )


class InMemoryEventLogger(EventLogger):
    """Event logger keeping recorded events in a list."""

    def __init__(self) -> None:
        self.events: List[RecordedEvent] = []

    def new_event(self, name: str) -> InMemoryEvent:
        return InMemoryEvent(name, self)

    def clear(self) -> None:
        self.events.clear()
