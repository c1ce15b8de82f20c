"""
ESS Testing Kit
=================
Helpers for testing code built on ESS.

StubAggregate:      Configurable aggregate recording what it sees.
EventStoreContract: Test mixin asserting the EventStore invariants.
                    Any store implementation, inside or outside this
                    package, can be checked by subclassing it in a
                    pytest class that provides a `store` fixture:

    class TestMyStore(EventStoreContract):
        @pytest.fixture
        def store(self, tmp_path):
            return MyStore(tmp_path / "events")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional

from ess.event_store.base import ALL_STREAMS
from ess.events.event import Event

if TYPE_CHECKING:
    from ess.commands.command import Command
    from ess.contracts import EventPublisher
    from ess.event_store.base import EventStore


# ══════════════════════════════════════════════════════════════
# STUB AGGREGATE
# ══════════════════════════════════════════════════════════════

class StubAggregate:
    """
    Aggregate double.

    on_event:   Called with every event folded into the aggregate.
    on_command: Called with the aggregate when a command is handled.
    fail_with:  Exception raised by handle_command() after on_command.
    """

    def __init__(self, id: str):
        self._id = id
        self.events: Optional["EventPublisher"] = None
        self.error: Optional[BaseException] = None
        self.seen_events: List[Event] = []
        self.handled_commands: List["Command"] = []
        self.on_event: Optional[Callable[[Event], None]] = None
        self.on_command: Optional[Callable[["StubAggregate"], None]] = None

    @classmethod
    def from_command(cls, command: "Command") -> "StubAggregate":
        return cls(command.aggregate_id)

    @property
    def id(self) -> str:
        return self._id

    def fail_with(self, error: Optional[BaseException]) -> "StubAggregate":
        self.error = error
        return self

    def publish_with(self, publisher: "EventPublisher") -> "StubAggregate":
        self.events = publisher
        return self

    def handle_event(self, event: Event) -> None:
        self.seen_events.append(event)
        if self.on_event is not None:
            self.on_event(event)

    def handle_command(self, command: "Command") -> None:
        self.handled_commands.append(command)
        if self.on_command is not None:
            self.on_command(self)
        if self.error is not None:
            raise self.error


# ══════════════════════════════════════════════════════════════
# EVENT STORE CONTRACT
# ══════════════════════════════════════════════════════════════

def _history() -> List[Event]:
    subject = StubAggregate("id")
    other = StubAggregate("other")
    return [
        Event.new("test.run-1").for_aggregate(subject).add("param", "value"),
        Event.new("test.run-1").for_aggregate(other).add("param", "other"),
        Event.new("test.run-2").for_aggregate(subject).add("param", "new-value"),
    ]


class EventStoreContract:
    """Behavior every EventStore implementation must show."""

    def test_stored_events_can_be_replayed_by_stream_id(self, store: "EventStore"):
        history = _history()
        store.store(history)

        seen: List[Event] = []
        store.replay("id", seen.append)

        assert [e.name for e in seen] == ["test.run-1", "test.run-2"]
        assert [e.payload["param"] for e in seen] == ["value", "new-value"]
        assert all(e.stream_id == "id" for e in seen)

    def test_stored_events_can_be_replayed_over_all_streams(self, store: "EventStore"):
        history = _history()
        store.store(history)

        seen: List[Event] = []
        store.replay(ALL_STREAMS, seen.append)

        assert [(e.name, e.stream_id) for e in seen] == [
            (e.name, e.stream_id) for e in history
        ]

    def test_later_batches_are_appended_after_earlier_ones(self, store: "EventStore"):
        first, second, third = _history()
        store.store([first])
        store.store([second, third])

        seen: List[Event] = []
        store.replay(ALL_STREAMS, seen.append)

        assert [e.payload["param"] for e in seen] == ["value", "other", "new-value"]

    def test_unknown_stream_replays_nothing(self, store: "EventStore"):
        store.store(_history())

        seen: List[Event] = []
        store.replay("missing", seen.append)

        assert seen == []

    def test_stream_id_is_matched_exactly(self, store: "EventStore"):
        store.store(_history())

        seen: List[Event] = []
        store.replay("i", seen.append)
        store.replay("id*", seen.append)

        assert seen == []

    def test_storing_empty_batch_changes_nothing(self, store: "EventStore"):
        store.store(_history())
        store.store([])

        seen: List[Event] = []
        store.replay(ALL_STREAMS, seen.append)

        assert len(seen) == 3
