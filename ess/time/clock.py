"""
ESS Time - Clocks
===================
Every timestamp ESS writes comes from a Clock handed to it:
the 'now' field of an acknowledged command, occurred_on when the
application stamps published events, persisted_at when a store
appends them. The same reading also seeds the identifier of a
command sent without one (see unix_nanoseconds).

Application and EventsOnDisk take their clock as a constructor
argument. Nothing in the package reads the wall clock on its own.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


# ══════════════════════════════════════════════════════════════
# CLOCK PROTOCOL
# ══════════════════════════════════════════════════════════════

class Clock(Protocol):
    def now_utc(self) -> datetime:
        """Current moment as an aware UTC datetime."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class SystemClock:
    """Wall clock, used when an Application is built without one."""

    def now_utc(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Clock frozen at one moment until advanced.

    At the epoch, a command acknowledged without an identifier
    receives "0":

        clock = FixedClock(UNIX_EPOCH)
        app = Application("blog", clock=clock)
        clock.advance(1)  # next command id: "1000000000"
    """

    def __init__(self, fixed_dt: datetime) -> None:
        if fixed_dt.tzinfo is None:
            raise ValueError("FixedClock requires timezone-aware datetime.")
        self._now = fixed_dt

    def now_utc(self) -> datetime:
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += timedelta(seconds=seconds)


# ══════════════════════════════════════════════════════════════
# COMMAND IDENTIFIERS
# ══════════════════════════════════════════════════════════════

def unix_nanoseconds(moment: datetime) -> int:
    """
    Nanoseconds between the Unix epoch and moment.

    datetime resolves microseconds, so the last three digits are
    always zero. Command.acknowledge() renders this as decimal text
    for commands that arrive without an identifier.
    """
    return (moment - UNIX_EPOCH) // timedelta(microseconds=1) * 1000
