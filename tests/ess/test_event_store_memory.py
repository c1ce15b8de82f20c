"""
Tests for ess.event_store.memory.EventsInMemory.
"""

import pytest

from ess.event_store import ALL_STREAMS, EventStore, EventsInMemory
from ess.contracts import EventPublisher
from ess.events import Event, EventSealedError
from ess.testing import EventStoreContract, StubAggregate


class TestEventsInMemoryContract(EventStoreContract):
    @pytest.fixture
    def store(self):
        return EventsInMemory()


class TestEventsInMemory:
    def test_satisfies_protocols(self):
        store = EventsInMemory()
        assert isinstance(store, EventStore)
        assert isinstance(store, EventPublisher)

    def test_stores_the_same_instances(self):
        store = EventsInMemory()
        event = Event.new("test.run")
        store.store([event])
        assert store.events[0] is event

    def test_store_seals_events(self):
        store = EventsInMemory()
        event = Event.new("test.run")
        store.store([event])
        with pytest.raises(EventSealedError):
            event.add("late", True)

    def test_stored_payload_cannot_be_changed_in_place(self):
        store = EventsInMemory()
        event = Event.new("test.run").add("k", 1)
        store.store([event])

        with pytest.raises(TypeError):
            event.payload["k"] = 2

        seen = []
        store.replay(ALL_STREAMS, seen.append)
        assert seen[0].payload["k"] == 1

    def test_publish_buffers_without_sealing(self):
        transaction = EventsInMemory()
        event = Event.new("test.run")
        assert transaction.publish_event(event) is transaction
        assert transaction.events == [event]
        event.add("still", "mutable")
        assert event.sealed is False

    def test_published_events_are_replayable(self):
        transaction = EventsInMemory()
        transaction.publish_event(Event.new("test.run").for_aggregate(StubAggregate("a")))
        seen = []
        transaction.replay("a", seen.append)
        assert len(seen) == 1

    def test_events_returns_a_copy(self):
        store = EventsInMemory()
        store.store([Event.new("test.run")])
        store.events.clear()
        assert len(store) == 1

    def test_store_accepts_any_iterable_order_preserved(self):
        store = EventsInMemory()
        store.store(tuple(Event.new(f"test.run-{n}") for n in range(5)))
        seen = []
        store.replay(ALL_STREAMS, lambda e: seen.append(e.name))
        assert seen == [f"test.run-{n}" for n in range(5)]

    def test_events_stored_during_replay_are_not_visited(self):
        store = EventsInMemory()
        store.store([Event.new("test.run")])
        seen = []

        def handler(event):
            seen.append(event)
            store.store([Event.new("test.echo")])

        store.replay(ALL_STREAMS, handler)

        assert len(seen) == 1
        assert len(store) == 2
