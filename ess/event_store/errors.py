"""
ESS Event Store - Errors
==========================
Storage failures. Opaque to the application: they are wrapped,
returned to the caller of Application.send(), and never retried.
"""


class EventStoreError(Exception):
    """Base error for event store operations."""
    pass


class EventStoreReadError(EventStoreError):
    """The log could not be opened or decoded during replay."""

    def __init__(self, location: str, detail: str):
        self.location = location
        self.detail = detail
        super().__init__(f"Cannot replay events from {location}: {detail}")


class EventStoreWriteError(EventStoreError):
    """Appending events failed. Earlier lines of the batch may remain."""

    def __init__(self, location: str, detail: str, written: int = 0):
        self.location = location
        self.detail = detail
        self.written = written
        super().__init__(
            f"Cannot store events in {location} "
            f"({written} written before failure): {detail}"
        )
