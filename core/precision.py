# precision.py
"""Time resolution at which event timestamps are expressed."""

from enum import Enum


class Precision(Enum):
    """Unit of an epoch timestamp handed to an event."""

    SECONDS = 1_000_000_000
    MILLISECONDS = 1_000_000
    MICROSECONDS = 1_000
    NANOSECONDS = 1

    def to_nanoseconds(self, timestamp: int) -> int:
        """Convert an epoch timestamp expressed in this unit to nanoseconds."""
        return int(timestamp) * self.value
