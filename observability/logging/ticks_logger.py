"""
Wiring helpers attaching the processing handler to stdlib loggers.
"""

from __future__ import annotations

import logging
from typing import Optional

from config.logger import log
from config.settings import TicksConfig
from core.interfaces import EventLogger, TracingProvider

from .introspection import IntrospectionFilter
from .processing_handler import ProcessingHandler


def build_processing_handler(
    event_logger: Optional[EventLogger] = None,
    tracing_provider: Optional[TracingProvider] = None,
    config: Optional[TicksConfig] = None,
) -> ProcessingHandler:
    """
    Build a handler from configuration, defaulting to the OpenTelemetry
    event logger and tracing provider.
    """
    # OTEL collaborators are only needed for the defaults.
    from observability.tracing import OtelEventLogger, OtelTracingProvider

    config = config or TicksConfig.from_env()
    handler = ProcessingHandler(
        event_logger or OtelEventLogger(),
        tracing_provider or OtelTracingProvider(),
        level=config.handler.level,
        event_name=config.handler.event_name,
    )
    if config.handler.introspection:
        handler.addFilter(IntrospectionFilter())
    return handler


def get_ticks_logger(
    name: str,
    event_logger: Optional[EventLogger] = None,
    tracing_provider: Optional[TracingProvider] = None,
    config: Optional[TicksConfig] = None,
) -> logging.Logger:
    """
    Get a logger whose records are recorded as Ticks events.
    """
    logger = logging.getLogger(name)

    # Ensure only one processing handler is added to avoid duplicate events
    if any(isinstance(h, ProcessingHandler) for h in logger.handlers):
        return logger

    handler = build_processing_handler(event_logger, tracing_provider, config)
    logger.addHandler(handler)
    # Leave an explicitly configured logger level alone.
    if logger.level == logging.NOTSET:
        logger.setLevel(handler.level)

    log.debug("Attached processing handler to logger %s (event %s)", name, handler.event_name)
    return logger
