"""
ESS Application - Command Pipeline
====================================
Any interaction with an application happens by sending it commands.

Flow of Application.send(), strictly sequential:
    1. Acknowledge the command (stamp 'now', default the identifier)
    2. Resolve the receiving aggregate
    3. Replay the receiver's own history into it
    4. Bind a fresh in-memory transaction as its publisher
    5. Execute the command
    6. Stamp occurrence time on the published events
    7. Append the events to the durable store
    8. Dispatch every event to every projection
    9. Return the receiver's id

Any failure in steps 3 to 7 ends the pipeline with an error result.
A failing projection in step 8 does not stop the other projections,
but the result still carries its exception as the error.
Nothing is retried and nothing is rolled back.

Projections derive query models from events. On startup the whole
history is replayed through them (init), so they must be idempotent.

send() is NOT safe for concurrent use: two sends for the same stream
can interleave replay and store and lose updates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from ess.application.errors import DuplicateProjectionError
from ess.commands.result import CommandResult, ProjectionFailure
from ess.event_store.base import ALL_STREAMS
from ess.event_store.memory import EventsInMemory
from ess.time import SystemClock

if TYPE_CHECKING:
    from ess.commands.command import Command
    from ess.contracts import EventHandler
    from ess.event_store.base import EventStore
    from ess.events.event import Event
    from ess.time import Clock


# ══════════════════════════════════════════════════════════════
# REPLAY RESULT
# ══════════════════════════════════════════════════════════════

@dataclass
class ReplayResult:
    """Structured result of replaying history through projections."""

    events_processed: int = 0
    events_dispatched: int = 0
    dispatch_failures: int = 0
    failures: List[ProjectionFailure] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.dispatch_failures == 0


# ══════════════════════════════════════════════════════════════
# APPLICATION
# ══════════════════════════════════════════════════════════════

class Application:
    """
    An event sourced application.

    Usage:
        app = Application(
            "signup",
            store=EventsOnDisk("var/events.jsonl", SystemClock()),
        )
        app.register_projection("all-users", all_users.handle_event)
        app.init()

        result = app.send(SIGN_UP.from_form(form))
        if not result.ok:
            ...
    """

    def __init__(
        self,
        name: str,
        *,
        store: Optional["EventStore"] = None,
        clock: Optional["Clock"] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.name = name
        self.store: "EventStore" = store if store is not None else EventsInMemory()
        self.clock: "Clock" = clock if clock is not None else SystemClock()
        self.logger = logger if logger is not None else logging.getLogger(f"ess.app.{name}")
        self._projections: Dict[str, "EventHandler"] = {}

    # ══════════════════════════════════════════════════════════
    # PROJECTIONS
    # ══════════════════════════════════════════════════════════

    def register_projection(self, name: str, handler: "EventHandler") -> "Application":
        """Register handler under name. Names are unique."""
        if not callable(handler):
            raise TypeError(f"Projection '{name}' must be callable.")
        if name in self._projections:
            raise DuplicateProjectionError(name)

        self._projections[name] = handler
        self.logger.info(f"Projection registered: {name}")
        return self

    def projection_names(self) -> List[str]:
        return list(self._projections)

    def project(self, event: "Event") -> List[ProjectionFailure]:
        """
        Pass event to every projection.

        A failing projection is logged and reported; the remaining
        projections still see the event.
        """
        failures: List[ProjectionFailure] = []
        for name, handler in list(self._projections.items()):
            self.logger.info(f"PROJECT {event.name} TO {name}")
            try:
                handler(event)
            except Exception as exc:
                failures.append(
                    ProjectionFailure(
                        projection=name,
                        event_name=event.name,
                        error=str(exc),
                        error_type=type(exc).__name__,
                        exception=exc,
                    )
                )
                self.logger.error(
                    f"Projection failed: {name} for {event.name} "
                    f"(stream: {event.stream_id}): {exc}",
                    exc_info=True,
                )
        return failures

    def init(self) -> ReplayResult:
        """
        Rebuild all projections from history. Call once after
        configuring the application.

        Raises EventStoreError if the history cannot be read.
        """
        result = ReplayResult()

        def dispatch(event: "Event") -> None:
            result.events_processed += 1
            failures = self.project(event)
            result.events_dispatched += len(self._projections) - len(failures)
            result.dispatch_failures += len(failures)
            result.failures.extend(failures)

        self.store.replay(ALL_STREAMS, dispatch)
        self.logger.info(
            f"Init complete: {result.events_processed} event(s) replayed, "
            f"{result.dispatch_failures} projection failure(s)"
        )
        return result

    # ══════════════════════════════════════════════════════════
    # SEND (main pipeline)
    # ══════════════════════════════════════════════════════════

    def send(self, command: "Command") -> CommandResult:
        """Process command. Never raises for pipeline failures."""

        # ── Step 1: Acknowledge ───────────────────────────────
        command.acknowledge(self.clock)

        # ── Step 2: Resolve receiver ──────────────────────────
        receiver = command.receiver()

        # ── Step 3: Rehydrate ─────────────────────────────────
        try:
            self.store.replay(receiver.id, receiver.handle_event)
        except Exception as exc:
            self.logger.error(f"REPLAY FAILED {receiver.id}: {exc}")
            return CommandResult.failure(exc)

        # ── Step 4: Bind transient publisher ──────────────────
        transaction = EventsInMemory()
        receiver.publish_with(transaction)

        # ── Step 5: Execute ───────────────────────────────────
        self.logger.info(f"EXECUTE {command}")
        try:
            command.execute()
        except Exception as exc:
            self.logger.info(f"DENY {exc}")
            return CommandResult.failure(exc)

        # ── Steps 6-7: Stamp occurrence and persist ───────────
        events = transaction.events
        try:
            for event in events:
                event.occur(self.clock)
                self.logger.info(f"EVENT {event.name}")
            self.store.store(events)
        except Exception as exc:
            self.logger.error(f"STORE FAILED {command}: {exc}")
            return CommandResult.failure(exc)

        # ── Step 8: Project ───────────────────────────────────
        projection_failures: List[ProjectionFailure] = []
        for event in events:
            projection_failures.extend(self.project(event))

        if projection_failures:
            self.logger.warning(
                f"PROJECTION FAILED {command}: "
                f"{len(projection_failures)} failure(s), events kept"
            )

        # ── Step 9: Report ────────────────────────────────────
        return CommandResult.success(
            receiver,
            events=tuple(events),
            projection_failures=projection_failures,
        )
