"""
Filter adding the log call site to a record's extra data.

Attach it to a logger (or to the processing handler) so events get the
`file`, `line`, `class` and `function` the record was logged from.
"""

from __future__ import annotations

import logging
import sys
from types import FrameType
from typing import Any, Dict, Optional

from .processing_handler import type_name_of


def _find_call_frame(record: logging.LogRecord) -> Optional[FrameType]:
    frame: Optional[FrameType] = sys._getframe(1)
    while frame is not None:
        code = frame.f_code
        if (
            code.co_filename == record.pathname
            and frame.f_lineno == record.lineno
            and code.co_name == record.funcName
        ):
            return frame
        frame = frame.f_back
    return None


def calling_class(record: logging.LogRecord) -> Optional[str]:
    """Class of the method that emitted the record, if it can be resolved."""
    frame = _find_call_frame(record)
    if frame is None:
        return None
    owner = frame.f_locals.get("self")
    if owner is not None:
        return type_name_of(owner)
    owner = frame.f_locals.get("cls")
    if isinstance(owner, type):
        return type_name_of(owner)
    return None


class IntrospectionFilter(logging.Filter):
    """Adds call-site extras without overwriting ones already present."""

    def filter(self, record: logging.LogRecord) -> bool:
        call_site: Dict[str, Any] = {
            "file": record.pathname,
            "line": record.lineno,
            "class": calling_class(record),
            "function": record.funcName,
        }
        for key, value in call_site.items():
            if value is None or key in record.__dict__:
                continue
            setattr(record, key, value)
        return True
