import logging
import unittest

from opentelemetry.sdk.trace import TracerProvider

from core.code_exceptions import TraceUnavailableError
from observability.logging import ProcessingHandler
from observability.tracing import OtelEventLogger, OtelTracingProvider, get_tracer
from observability.tracing.provider import format_span_id, format_trace_id


class TestOtelBridge(unittest.TestCase):
    def setUp(self):
        self.tracer = TracerProvider().get_tracer(__name__)
        self.logger = logging.getLogger(f"ticks.test.otel.{self._testMethodName}")
        self.logger.propagate = False
        self.logger.setLevel(logging.DEBUG)
        self.handler = ProcessingHandler(OtelEventLogger(), OtelTracingProvider())
        self.logger.addHandler(self.handler)
        self.addCleanup(self.logger.removeHandler, self.handler)

    def test_log_inside_span_adds_span_event(self):
        with self.tracer.start_as_current_span("parent") as parent:
            with self.tracer.start_as_current_span(
                "child", attributes={"call": "controller/method", "retries": 2}
            ) as child:
                self.logger.warning("cache miss", extra={"meta": "bar", "object": object()})

        self.assertEqual(len(child.events), 1)
        event = child.events[0]
        attributes = dict(event.attributes)
        self.assertEqual(event.name, "php_log")
        self.assertEqual(attributes["traceID"], format_trace_id(child.get_span_context().trace_id))
        self.assertEqual(attributes["spanID"], format_span_id(child.get_span_context().span_id))
        self.assertEqual(attributes["parentSpanID"], format_span_id(parent.get_span_context().span_id))
        self.assertEqual(attributes["call"], "controller/method")
        self.assertNotIn("retries", attributes)
        self.assertEqual(attributes["levelName"], "WARNING")
        self.assertEqual(attributes["level"], logging.WARNING)
        self.assertEqual(attributes["message"], "cache miss")
        self.assertEqual(attributes["meta"], "bar")
        self.assertNotIn("object", attributes)
        self.assertNotIn("file", attributes)

    def test_timestamp_is_record_time(self):
        records = []

        class _Capture(logging.Handler):
            def emit(self, record):
                records.append(record)

        capture = _Capture()
        self.logger.addHandler(capture)
        self.addCleanup(self.logger.removeHandler, capture)

        with self.tracer.start_as_current_span("root") as root:
            self.logger.info("tick")

        expected = round(records[0].created * 1_000_000) * 1_000
        self.assertEqual(root.events[0].timestamp, expected)
        self.assertNotIn("parentSpanID", dict(root.events[0].attributes))

    def test_log_outside_span_fails(self):
        with self.assertRaises(TraceUnavailableError):
            self.logger.error("no span")


class TestOtelTracingProvider(unittest.TestCase):
    def test_no_current_span(self):
        provider = OtelTracingProvider()
        self.assertIsNone(provider.get_trace_id())
        self.assertIsNone(provider.get_span_id())
        self.assertIsNone(provider.get_parent_span_id())
        self.assertEqual(provider.get_span_specific_tags(), {})

    def test_event_dropped_without_recording_span(self):
        event = OtelEventLogger().new_event("php_log")
        event.add_fields({"level": 10})
        event.record()
        self.assertTrue(event.recorded)


class TestOtelEventAttributes(unittest.TestCase):
    def test_field_sharing_a_tag_name_is_kept(self):
        tracer = TracerProvider().get_tracer(__name__)
        with tracer.start_as_current_span("work") as span:
            event = OtelEventLogger().new_event("php_log")
            event.add_tags({"call": "c/m", "file": None})
            event.add_fields({"call": "field-value", "level": 30, "line": None})
            event.record()

        attributes = dict(span.events[0].attributes)
        self.assertEqual(attributes["call"], "c/m")
        self.assertEqual(attributes["field.call"], "field-value")
        self.assertEqual(attributes["level"], 30)
        self.assertNotIn("file", attributes)
        self.assertNotIn("line", attributes)

    def test_extra_colliding_with_span_tag(self):
        tracer = TracerProvider().get_tracer(__name__)
        logger = logging.getLogger("ticks.test.otel.collision")
        logger.propagate = False
        handler = ProcessingHandler(OtelEventLogger(), OtelTracingProvider())
        logger.addHandler(handler)
        self.addCleanup(logger.removeHandler, handler)

        with tracer.start_as_current_span("work", attributes={"call": "c/m"}) as span:
            logger.warning("collide", extra={"call": "field-value"})

        attributes = dict(span.events[0].attributes)
        self.assertEqual(attributes["call"], "c/m")
        self.assertEqual(attributes["field.call"], "field-value")


class TestGetTracer(unittest.TestCase):
    def test_spans_from_tracer_feed_provider(self):
        tracer = get_tracer("ticks.test")
        provider = OtelTracingProvider()
        with tracer.start_as_current_span("work") as span:
            trace_id = provider.get_trace_id()
            if span.get_span_context().is_valid:
                self.assertEqual(trace_id, format_trace_id(span.get_span_context().trace_id))
            else:
                self.assertIsNone(trace_id)


if __name__ == "__main__":
    unittest.main()
