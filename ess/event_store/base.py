"""
ESS Event Store - Store Contract
==================================
The event store is the single source of truth: an append-only,
totally ordered log, logically partitioned by stream id.

Rules:
- store() appends in the order given, never reorders or removes
- replay(stream_id) yields exactly the events of that stream, in append order
- replay("*") yields every event, in append order
- No prefix or glob matching beyond the single wildcard
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from ess.contracts import EventHandler
    from ess.events.event import Event

ALL_STREAMS = "*"


@runtime_checkable
class EventStore(Protocol):
    """Persists events and restores state from the persisted log."""

    def store(self, events: Sequence["Event"]) -> None:
        """
        Append events so that later replay() calls see them.

        Raises EventStoreError if persisting failed.
        """
        ...

    def replay(self, stream_id: str, handler: "EventHandler") -> None:
        """
        Call handler once per event of stream_id, in append order.

        ALL_STREAMS selects every event regardless of stream id.
        Raises EventStoreError if the log cannot be read.
        """
        ...


def stream_matches(stream_id: str, event: "Event") -> bool:
    """Does event belong to the selection stream_id?"""
    return stream_id == ALL_STREAMS or stream_id == event.stream_id
