"""
ESS Command Layer - Command Result
====================================
Every Application.send() returns exactly one CommandResult.
Failures are values here, not exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from ess.contracts import Aggregate
    from ess.events.event import Event


@dataclass(frozen=True)
class ProjectionFailure:
    """A projection raised while handling a persisted event."""

    projection: str
    event_name: str
    error: str
    error_type: str
    exception: Optional[BaseException] = field(default=None, repr=False, compare=False)

    def to_dict(self) -> dict:
        return {
            "projection": self.projection,
            "event_name": self.event_name,
            "error": self.error,
            "error_type": self.error_type,
        }


@dataclass(frozen=True)
class CommandResult:
    """
    Fields:
        error:               The failure, unchanged, or None.
        aggregate_id:        Id of the receiver (empty unless events were stored).
        events:              Events persisted by the command.
        projection_failures: Projections that raised. error is then the first
                             projection exception, while aggregate_id and
                             events still report what was persisted.
    """

    error: Optional[BaseException] = None
    aggregate_id: str = ""
    events: Tuple["Event", ...] = ()
    projection_failures: List[ProjectionFailure] = field(default_factory=list)

    @classmethod
    def failure(cls, error: BaseException) -> "CommandResult":
        return cls(error=error)

    @classmethod
    def success(
        cls,
        receiver: "Aggregate",
        events: Tuple["Event", ...] = (),
        projection_failures: Optional[List[ProjectionFailure]] = None,
    ) -> "CommandResult":
        """Events were stored. A failed projection still sets error."""
        failures = list(projection_failures or [])
        first_exception = next(
            (f.exception for f in failures if f.exception is not None), None
        )
        return cls(
            error=first_exception,
            aggregate_id=receiver.id,
            events=tuple(events),
            projection_failures=failures,
        )

    @property
    def ok(self) -> bool:
        return self.error is None
