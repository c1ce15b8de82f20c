"""
ESS Events - Errors
=====================
ValidationError is both the field-scoped error accumulator used by
commands and aggregates, and the error type surfaced to callers of
Application.send().
"""

from __future__ import annotations

from typing import Dict, List, Optional

# Field under which foreign (non-validation) errors are recorded.
ALL_ERRORS_FIELD = "$all"


class ValidationError(Exception):
    """
    Errors about the values of a command's parameters or the state
    of a whole aggregate.

    Raise this from an aggregate's handle_command() to reject a
    command. No event should be published in that case.

    Usage:
        def sign_up(self, email: str, password: str) -> None:
            err = ValidationError()
            if not password:
                err.add("password", "empty")
            if not email:
                err.add("email", "empty")
            if not err.ok():
                raise err
            self.events.publish_event(
                Event.new("user.signed-up").for_aggregate(self).add("email", email)
            )
    """

    def __init__(self, errors: Optional[Dict[str, List[str]]] = None):
        super().__init__()
        self.errors: Dict[str, List[str]] = {
            field: list(messages) for field, messages in (errors or {}).items()
        }

    def ok(self) -> bool:
        """True if no errors have been recorded with this instance."""
        return len(self.errors) == 0

    def add(self, field: str, message: str) -> "ValidationError":
        """Record message as an error for field."""
        self.errors.setdefault(field, []).append(message)
        return self

    def merge(self, err: BaseException) -> "ValidationError":
        """
        Record errors from err into this instance.

        A ValidationError has all of its fields merged, preserving
        message order. Any other error is recorded under $all using
        its string form.
        """
        if not isinstance(err, ValidationError):
            return self.add(ALL_ERRORS_FIELD, str(err))

        for field, messages in err.errors.items():
            self.errors.setdefault(field, []).extend(messages)
        return self

    def or_none(self) -> Optional["ValidationError"]:
        """
        None if no errors have been recorded, this instance otherwise.

        Avoids handing out an error object that is semantically empty.
        """
        if self.ok():
            return None
        return self

    def to_dict(self) -> dict:
        """Serialize for transport."""
        return {"error": {field: list(messages) for field, messages in self.errors.items()}}

    def __str__(self) -> str:
        return "".join(
            f"{field}: {', '.join(messages)}; "
            for field, messages in self.errors.items()
        )

    def __repr__(self) -> str:
        return f"ValidationError({self.errors!r})"


class EventSealedError(Exception):
    """A stored event was modified."""

    def __init__(self, event_name: str, attribute: str):
        self.event_name = event_name
        self.attribute = attribute
        super().__init__(
            f"Event '{event_name}' has been stored and is immutable; "
            f"cannot set '{attribute}'."
        )
