"""
ESS Event Store - Log Line Codec
==================================
One event per line, one JSON object per event, UTF-8.

Keys: Id, StreamId, Name, OccurredOn, PersistedAt, Payload.
Timestamps are RFC 3339 text, null when unset.
Payload keys must be strings at every level; JSON would otherwise
turn them into strings silently.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from ess.events.event import Event
from ess.time.temporal import format_timestamp, parse_timestamp


def _check_keys(value: Any) -> None:
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"payload keys must be strings, got {key!r}")
            _check_keys(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _check_keys(item)


def event_to_record(event: Event) -> Dict[str, Any]:
    payload = dict(event.payload)
    _check_keys(payload)
    return {
        "Id": event.id,
        "StreamId": event.stream_id,
        "Name": event.name,
        "OccurredOn": format_timestamp(event.occurred_on),
        "PersistedAt": format_timestamp(event.persisted_at),
        "Payload": payload,
    }


def encode_event(event: Event) -> str:
    """
    Serialize event as a single log line (without newline).

    Raises TypeError / ValueError when the payload is not JSON
    serializable or has a non-string key.
    """
    return json.dumps(event_to_record(event), ensure_ascii=False)


def decode_event(line: str) -> Event:
    """
    Parse one log line.

    Raises ValueError (json.JSONDecodeError included) on malformed input.
    """
    record = json.loads(line)
    if not isinstance(record, dict):
        raise ValueError(f"expected a JSON object, got {type(record).__name__}")

    payload = record.get("Payload") or {}
    if not isinstance(payload, dict):
        raise ValueError("Payload must be a JSON object")

    return Event(
        name=record.get("Name") or "",
        stream_id=record.get("StreamId") or "",
        id=record.get("Id") or "",
        occurred_on=parse_timestamp(record.get("OccurredOn")),
        persisted_at=parse_timestamp(record.get("PersistedAt")),
        payload=payload,
    )
