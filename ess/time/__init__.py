"""
ESS Time - Public API
=======================
Explicit clock protocol and timestamp text helpers.
Clocks are injected, never global.
"""

from ess.time.clock import (
    UNIX_EPOCH,
    Clock,
    FixedClock,
    SystemClock,
    unix_nanoseconds,
)
from ess.time.temporal import format_timestamp, parse_timestamp

__all__ = [
    "Clock",
    "FixedClock",
    "SystemClock",
    "UNIX_EPOCH",
    "unix_nanoseconds",
    "format_timestamp",
    "parse_timestamp",
]
