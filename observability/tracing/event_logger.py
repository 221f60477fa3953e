"""
EventLogger that records events on the current OpenTelemetry span.

Phoenix and other OTEL backends surface span events in the trace timeline,
next to the spans the log lines were written from.
"""

from __future__ import annotations

from typing import Dict, Union

from opentelemetry import trace

from config.logger import log
from core.events import BaseEvent
from core.interfaces import EventLogger
from core.precision import Precision

AttributeValue = Union[str, bool, int, float]

FIELD_PREFIX = "field."


class OtelEvent(BaseEvent):
    """Event written as a span event when recorded."""

    def attributes(self) -> Dict[str, AttributeValue]:
        """Flatten tags and fields into one span event attribute set.

        Tags keep their names. A field whose name is also a tag is written as
        `field.<name>` so neither value is lost.
        """
        # OTEL attributes cannot hold None; unset tags and fields are dropped.
        attributes: Dict[str, AttributeValue] = {}
        for key, value in self.tags.items():
            if value is not None:
                attributes[key] = value
        for key, value in self.fields.items():
            if value is None:
                continue
            if key in self.tags:
                key = f"{FIELD_PREFIX}{key}"
            attributes[key] = value
        return attributes

    def _submit(self, precision: Precision) -> None:
        current_span = trace.get_current_span()
        if not current_span or not current_span.is_recording():
            log.debug("No recording span, dropping event %s", self.name)
            return

        timestamp = None
        if self.timestamp is not None:
            timestamp = precision.to_nanoseconds(self.timestamp)

        current_span.add_event(self.name, attributes=self.attributes(), timestamp=timestamp)


class OtelEventLogger(EventLogger):
    """Creates events that land on the span current at record time."""

    def new_event(self, name: str) -> OtelEvent:
        return OtelEvent(name)
