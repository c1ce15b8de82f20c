"""
ESS Event Store - In-Memory Store
===================================
Process-local list of events. Nothing survives a restart.

Also serves as the per-command transaction: the application binds
a fresh instance as the aggregate's publisher, and only moves the
buffered events to the durable store once the command succeeded.
Publishing does not seal; storing does.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Sequence

from ess.event_store.base import stream_matches

if TYPE_CHECKING:
    from ess.contracts import EventHandler
    from ess.events.event import Event

logger = logging.getLogger("ess.event_store")


class EventsInMemory:
    """In-memory EventStore and EventPublisher."""

    def __init__(self) -> None:
        self._events: List["Event"] = []

    def store(self, events: Sequence["Event"]) -> None:
        """Append events. Never raises."""
        batch = list(events)
        for event in batch:
            event.seal()
        self._events.extend(batch)
        logger.debug(f"Stored {len(batch)} event(s) in memory")

    def replay(self, stream_id: str, handler: "EventHandler") -> None:
        """Linear scan over all events. Never raises on its own."""
        for event in list(self._events):
            if stream_matches(stream_id, event):
                handler(event)

    def publish_event(self, event: "Event") -> "EventsInMemory":
        """Buffer event without sealing it."""
        self._events.append(event)
        return self

    @property
    def events(self) -> List["Event"]:
        """All events held by this instance, in append order."""
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)
