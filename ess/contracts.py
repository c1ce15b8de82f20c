"""
ESS Contracts - Capability Protocols
======================================
The core talks to domain code, parameter values and inbound
requests only through these protocols. Concrete implementations
(aggregates, stores, test doubles) satisfy them structurally;
nothing here is meant to be subclassed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ess.commands.command import Command
    from ess.events.event import Event


EventHandler = Callable[["Event"], None]


# ══════════════════════════════════════════════════════════════
# EVENTS
# ══════════════════════════════════════════════════════════════

@runtime_checkable
class EventPublisher(Protocol):
    """Target for events published by aggregates."""

    def publish_event(self, event: "Event") -> "EventPublisher":
        """Queue event for publishing."""
        ...


# ══════════════════════════════════════════════════════════════
# AGGREGATE
# ══════════════════════════════════════════════════════════════

@runtime_checkable
class Aggregate(Protocol):
    """
    Receiver of commands and emitter of events.

    id:             Routes commands to the aggregate and tags the
                    events it emits (the stream id).
    publish_with:   Binds the publisher used by handle_command().
    handle_command: Processes a command. Raises ValidationError when
                    business rules refuse it; nothing may be
                    published in that case.
    handle_event:   Folds one historic event into internal state.
    """

    @property
    def id(self) -> str: ...

    def publish_with(self, publisher: EventPublisher) -> "Aggregate": ...

    def handle_command(self, command: "Command") -> None: ...

    def handle_event(self, event: "Event") -> None: ...


# ══════════════════════════════════════════════════════════════
# COMMAND PARAMETERS
# ══════════════════════════════════════════════════════════════

@runtime_checkable
class Value(Protocol):
    """
    Captures, sanitizes and validates one command parameter.

    parse():   Accept text as the value's content. Raises ValueError
               when text is not acceptable.
    __str__(): Render the sanitized content.
    copy():    Independent instance with the same state.
    """

    def parse(self, text: str) -> None: ...

    def copy(self) -> "Value": ...


@runtime_checkable
class Form(Protocol):
    """
    Read access to submitted form fields.

    A dict or a Django QueryDict already satisfies this protocol.
    """

    def get(self, field: str, default: str = "") -> str: ...
