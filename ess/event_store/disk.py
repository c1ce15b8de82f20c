"""
ESS Event Store - On-Disk Store
=================================
Append-only log file of newline-delimited JSON events.

Rules:
- One file handle per store()/replay() call, released on every exit path
- Parent directories are created on first write
- Every replay re-reads the whole file from the beginning (no index)
- No file locking: concurrent writers may interleave lines

Failure mode:
    An event that cannot be encoded aborts store(). Lines written
    before it stay in the log; no marker of the failure point is
    recorded. Each line is encoded completely before it is written,
    so the log never ends in half a record because of an encoding
    failure.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Sequence, Union

from ess.event_store.base import stream_matches
from ess.event_store.codec import decode_event, encode_event
from ess.event_store.errors import EventStoreReadError, EventStoreWriteError

if TYPE_CHECKING:
    from ess.contracts import EventHandler
    from ess.events.event import Event
    from ess.time import Clock

logger = logging.getLogger("ess.event_store")


class EventsOnDisk:
    """
    Persistent, file-based EventStore.

    Usage:
        store = EventsOnDisk("var/events.jsonl", SystemClock())
        store.touch()
        store.store([event])
        store.replay("*", print)
    """

    def __init__(self, path: Union[str, os.PathLike], clock: "Clock") -> None:
        self._path = Path(os.path.normpath(os.fspath(path)))
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    def touch(self) -> None:
        """Create the log (and its directories) if it does not exist yet."""
        try:
            self._path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            self._path.touch(mode=0o600, exist_ok=True)
        except OSError as exc:
            raise EventStoreWriteError(str(self._path), str(exc)) from exc

    # ══════════════════════════════════════════════════════════
    # STORE
    # ══════════════════════════════════════════════════════════

    def store(self, events: Sequence["Event"]) -> None:
        """
        Stamp persisted_at on each event, then append it to the log.

        Raises EventStoreWriteError if the log cannot be opened or an
        event cannot be encoded or written.
        """
        written = 0
        try:
            self._path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
            with open(self._path, "a", encoding="utf-8") as out:
                for event in events:
                    event.persist(self._clock)
                    line = encode_event(event)
                    out.write(line + "\n")
                    event.seal()
                    written += 1
        except (OSError, TypeError, ValueError) as exc:
            logger.error(
                f"Store aborted after {written} event(s) "
                f"in {self._path}: {exc}"
            )
            raise EventStoreWriteError(str(self._path), str(exc), written) from exc

        logger.debug(f"Stored {written} event(s) in {self._path}")

    # ══════════════════════════════════════════════════════════
    # REPLAY
    # ══════════════════════════════════════════════════════════

    def replay(self, stream_id: str, handler: "EventHandler") -> None:
        """
        Decode the log line by line and pass matching events to handler.

        Raises EventStoreReadError if the log is missing or a line
        is not valid UTF-8 JSON. Events handled before the bad line
        stay handled.
        """
        try:
            source = open(self._path, "rb")
        except OSError as exc:
            raise EventStoreReadError(str(self._path), str(exc)) from exc

        with source:
            for line_number, raw in enumerate(source, start=1):
                if not raw.strip():
                    continue
                try:
                    event = decode_event(raw.decode("utf-8"))
                except ValueError as exc:
                    raise EventStoreReadError(
                        f"{self._path}:{line_number}", str(exc)
                    ) from exc

                if stream_matches(stream_id, event):
                    handler(event.seal())
