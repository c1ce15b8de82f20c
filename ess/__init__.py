"""
ESS - Event Sourcing Runtime
==============================
State changes are captured as immutable, ordered events appended
to a log. Current state is rebuilt by replaying the log.

    Client ---> Command ---> Application ---> Aggregate
                                  |
                                  +---> Event Store ---> Projections

Reads are served by projections; writes only ever append events.
"""

from ess.application import (
    Application,
    ApplicationError,
    DuplicateProjectionError,
    ReplayResult,
)
from ess.commands import (
    Command,
    CommandDefinition,
    CommandDefinitionError,
    CommandError,
    CommandResult,
    Identifier,
    ProjectionFailure,
    String,
    StringValue,
    Time,
    TrimmedString,
    UnknownFieldError,
    ValueParseError,
)
from ess.contracts import Aggregate, EventHandler, EventPublisher, Form, Value
from ess.event_store import (
    ALL_STREAMS,
    EventStore,
    EventStoreError,
    EventStoreReadError,
    EventStoreWriteError,
    EventsInMemory,
    EventsOnDisk,
)
from ess.events import ALL_ERRORS_FIELD, Event, EventSealedError, ValidationError
from ess.time import Clock, FixedClock, SystemClock

__all__ = [
    # ── Application ───────────────────────────────────────────
    "Application",
    "ApplicationError",
    "DuplicateProjectionError",
    "ReplayResult",
    # ── Commands ──────────────────────────────────────────────
    "Command",
    "CommandDefinition",
    "CommandResult",
    "ProjectionFailure",
    "CommandError",
    "CommandDefinitionError",
    "UnknownFieldError",
    "ValueParseError",
    "String",
    "StringValue",
    "TrimmedString",
    "Identifier",
    "Time",
    # ── Contracts ─────────────────────────────────────────────
    "Aggregate",
    "EventHandler",
    "EventPublisher",
    "Form",
    "Value",
    # ── Events ────────────────────────────────────────────────
    "Event",
    "ValidationError",
    "EventSealedError",
    "ALL_ERRORS_FIELD",
    # ── Event Store ───────────────────────────────────────────
    "ALL_STREAMS",
    "EventStore",
    "EventsInMemory",
    "EventsOnDisk",
    "EventStoreError",
    "EventStoreReadError",
    "EventStoreWriteError",
    # ── Time ──────────────────────────────────────────────────
    "Clock",
    "FixedClock",
    "SystemClock",
]
