"""
Tests for ess.events.event - fluent builder and sealing.
"""

from datetime import datetime, timezone

import pytest

from ess.events import Event, EventSealedError
from ess.testing import StubAggregate
from ess.time import FixedClock

THE_TIME = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)


class TestEventBuilder:
    def test_new_event_is_empty(self):
        event = Event.new("test.run")
        assert event.name == "test.run"
        assert event.stream_id == ""
        assert event.id == ""
        assert event.occurred_on is None
        assert event.persisted_at is None
        assert event.payload == {}

    def test_for_aggregate_uses_aggregate_id_as_stream_id(self):
        aggregate = StubAggregate("id")
        event = Event.new("test.run").for_aggregate(aggregate)
        assert event.stream_id == aggregate.id

    def test_add_adds_fields_to_payload(self):
        event = Event.new("test.run").add("a", 1).add("b", 2)
        assert event.payload == {"a": 1, "b": 2}

    def test_add_overwrites_existing_values(self):
        event = Event.new("test.run").add("a", 1).add("a", 2)
        assert event.payload["a"] == 2

    def test_occur_sets_occurred_on_from_clock(self):
        event = Event.new("test.run").occur(FixedClock(THE_TIME))
        assert event.occurred_on == THE_TIME

    def test_persist_sets_persisted_at_from_clock(self):
        event = Event.new("test.run").persist(FixedClock(THE_TIME))
        assert event.persisted_at == THE_TIME

    def test_builder_returns_same_instance(self):
        event = Event.new("test.run")
        assert event.add("a", 1) is event
        assert event.for_aggregate(StubAggregate("x")) is event

    def test_payloads_are_not_shared(self):
        first = Event.new("test.run").add("a", 1)
        second = Event.new("test.run")
        assert second.payload == {}
        assert first.payload == {"a": 1}


class TestEventSealing:
    def test_unsealed_by_default(self):
        assert Event.new("test.run").sealed is False

    def test_sealed_event_rejects_attribute_assignment(self):
        event = Event.new("test.run").seal()
        with pytest.raises(EventSealedError, match="stream_id"):
            event.stream_id = "other"

    def test_sealed_event_rejects_builder_calls(self):
        event = Event.new("test.run").seal()
        with pytest.raises(EventSealedError):
            event.add("a", 1)
        with pytest.raises(EventSealedError):
            event.occur(FixedClock(THE_TIME))
        with pytest.raises(EventSealedError):
            event.persist(FixedClock(THE_TIME))
        assert event.payload == {}

    def test_sealing_keeps_values(self):
        event = Event.new("test.run").add("a", 1).occur(FixedClock(THE_TIME)).seal()
        assert event.payload == {"a": 1}
        assert event.occurred_on == THE_TIME

    def test_sealing_does_not_affect_equality(self):
        sealed = Event.new("test.run").add("a", 1).seal()
        unsealed = Event.new("test.run").add("a", 1)
        assert sealed == unsealed

    def test_sealed_payload_is_read_only(self):
        event = Event.new("test.run").add("k", 1).seal()
        with pytest.raises(TypeError):
            event.payload["k"] = 2
        assert event.payload["k"] == 1

    def test_sealed_payload_is_detached_from_builder_dict(self):
        payload = {"k": 1}
        event = Event("test.run", payload=payload).seal()
        payload["k"] = 2
        assert event.payload["k"] == 1
