"""
ESS Events - Event Record
===========================
An Event records a state change that has already happened.
Events are named in the past tense, e.g. "user.signed-up".

Lifecycle:
- Created empty by Event.new(name)
- Populated through the fluent builder (for_aggregate, add, occur, persist)
- Queued on a publisher while the command is being handled
- Sealed by the event store once appended; sealed events never change
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Optional

from ess.events.errors import EventSealedError

if TYPE_CHECKING:
    from ess.contracts import Aggregate
    from ess.time import Clock


@dataclass
class Event:
    """
    Fields:
        name:         Type of the event (past tense).
        stream_id:    Id of the aggregate that emitted this event.
        id:           Unique identifier. Optional, not enforced.
        occurred_on:  When the application saw the event.
        persisted_at: When the event was written to storage.
        payload:      Data needed to reconstruct state. Read-only once sealed.
    """

    name: str
    stream_id: str = ""
    id: str = ""
    occurred_on: Optional[datetime] = None
    persisted_at: Optional[datetime] = None
    payload: Dict[str, Any] = field(default_factory=dict)
    _sealed: bool = field(default=False, init=False, repr=False, compare=False)

    @classmethod
    def new(cls, name: str) -> "Event":
        """Create a new, empty event of type name."""
        return cls(name=name)

    def __setattr__(self, attribute: str, value: Any) -> None:
        if self.__dict__.get("_sealed", False):
            raise EventSealedError(self.name, attribute)
        super().__setattr__(attribute, value)

    # ══════════════════════════════════════════════════════════
    # BUILDER
    # ══════════════════════════════════════════════════════════

    def for_aggregate(self, source: "Aggregate") -> "Event":
        """Mark the event as being emitted by source."""
        self.stream_id = source.id
        return self

    def add(self, name: str, value: Any) -> "Event":
        """Set the payload for field name to value."""
        if self._sealed:
            raise EventSealedError(self.name, f"payload[{name!r}]")
        self.payload[name] = value
        return self

    def occur(self, clock: "Clock") -> "Event":
        """Mark the occurrence time according to clock."""
        self.occurred_on = clock.now_utc()
        return self

    def persist(self, clock: "Clock") -> "Event":
        """Mark the time of persisting according to clock."""
        self.persisted_at = clock.now_utc()
        return self

    # ══════════════════════════════════════════════════════════
    # SEALING
    # ══════════════════════════════════════════════════════════

    def seal(self) -> "Event":
        """Freeze the event. Called by event stores after appending."""
        if self._sealed:
            return self
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))
        object.__setattr__(self, "_sealed", True)
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed
