"""
Bridge from stdlib logging to Ticks events with trace & span IDs.

You can use:

    from observability.logging import get_ticks_logger

    logger = get_ticks_logger(__name__)
    with tracer.start_as_current_span("request"):
        logger.warning("retrieval slow", extra={"retrieved": 10})
"""

from .introspection import IntrospectionFilter
from .processing_handler import (
    ProcessingHandler,
    is_scalar,
    lookup_string,
    type_name_of,
)
from .ticks_logger import build_processing_handler, get_ticks_logger

__all__ = [
    "IntrospectionFilter",
    "ProcessingHandler",
    "build_processing_handler",
    "get_ticks_logger",
    "is_scalar",
    "lookup_string",
    "type_name_of",
]
