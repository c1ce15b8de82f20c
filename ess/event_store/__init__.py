"""
ESS Event Store - Public API
==============================
The append-only log of facts, in memory or on disk.
"""

from ess.event_store.base import ALL_STREAMS, EventStore, stream_matches
from ess.event_store.disk import EventsOnDisk
from ess.event_store.errors import (
    EventStoreError,
    EventStoreReadError,
    EventStoreWriteError,
)
from ess.event_store.memory import EventsInMemory

__all__ = [
    "ALL_STREAMS",
    "EventStore",
    "EventsInMemory",
    "EventsOnDisk",
    "EventStoreError",
    "EventStoreReadError",
    "EventStoreWriteError",
    "stream_matches",
]
