"""
ESS Command Layer - Commands and Definitions
==============================================
A CommandDefinition is a named schema: parameters, one identifier
field and a factory for the aggregate receiving the command.
A Command is one instance of that schema.

Rules:
- Every parameter is attempted; parse failures accumulate per field
- A command with parse failures is never delivered to its receiver
- The receiver is resolved once and then fixed for the command's lifetime
- Acknowledging stamps 'now' and synthesizes a missing identifier
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict, Optional

from ess.commands.errors import CommandDefinitionError, UnknownFieldError
from ess.commands.values import Identifier, StringValue, Time
from ess.events.errors import ValidationError
from ess.time import unix_nanoseconds

if TYPE_CHECKING:
    from ess.contracts import Aggregate, Form, Value
    from ess.time import Clock

logger = logging.getLogger("ess.commands")

DEFAULT_ID_FIELD = "id"
NOW_FIELD = "now"

ReceiverFactory = Callable[["Command"], "Aggregate"]


# ══════════════════════════════════════════════════════════════
# COMMAND DEFINITION
# ══════════════════════════════════════════════════════════════

class CommandDefinition:
    """
    Schema for one kind of command.

    Usage:
        SIGN_UP = (
            CommandDefinition("sign-up")
            .id("username", Identifier())
            .field("name", TrimmedString())
            .target(user_from_command)
        )

        command = SIGN_UP.from_form(request_form)
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.fields: Dict[str, "Value"] = {}
        self.id_field = DEFAULT_ID_FIELD
        self.target_factory: Optional[ReceiverFactory] = None

    def field(self, name: str, value: "Value") -> "CommandDefinition":
        """Declare parameter name with value as its prototype."""
        self.fields[name] = value
        return self

    def id(self, name: str, value: "Value") -> "CommandDefinition":
        """Declare parameter name and designate it as the identifier."""
        self.fields[name] = value
        self.id_field = name
        return self

    def target(self, factory: ReceiverFactory) -> "CommandDefinition":
        """Register the function constructing the command's receiver."""
        self.target_factory = factory
        return self

    def new_command(self) -> "Command":
        """Instantiate the schema with every field at its prototype value."""
        fields: Dict[str, "Value"] = {
            name: prototype.copy() for name, prototype in self.fields.items()
        }
        implicit_id = self.id_field not in fields
        if implicit_id:
            fields[self.id_field] = Identifier()

        return Command(
            name=self.name,
            fields=fields,
            id_field=self.id_field,
            receiver_factory=self.target_factory,
            implicit_id=implicit_id,
        )

    def from_form(self, form: "Form") -> "Command":
        return self.new_command().from_form(form)

    def __repr__(self) -> str:
        return f"CommandDefinition({self.name!r}, fields={sorted(self.fields)})"


# ══════════════════════════════════════════════════════════════
# COMMAND
# ══════════════════════════════════════════════════════════════

class Command:
    """One request for a state change, routed to one aggregate."""

    def __init__(
        self,
        name: str,
        fields: Dict[str, "Value"],
        id_field: str = DEFAULT_ID_FIELD,
        receiver_factory: Optional[ReceiverFactory] = None,
        implicit_id: bool = False,
    ) -> None:
        self.name = name
        self.fields = fields
        self.id_field = id_field
        self.errors = ValidationError()
        self._receiver_factory = receiver_factory
        self._receiver: Optional["Aggregate"] = None
        self._implicit_id = implicit_id

    # ── Parameters ─────────────────────────────────────────────

    def get(self, name: str) -> Optional["Value"]:
        return self.fields.get(name)

    def set(self, name: str, text: str) -> "Command":
        """
        Parse text into parameter name.

        A rejected value is recorded on self.errors; it does not raise.
        """
        value = self.fields.get(name)
        if value is None:
            raise UnknownFieldError(self.name, name)

        try:
            value.parse(text)
        except ValueError as exc:
            self.errors.add(name, str(exc))
        return self

    def from_form(self, form: "Form") -> "Command":
        """Populate every parameter from form, collecting all failures."""
        for name in list(self.fields):
            text = form.get(name, "") or ""
            if name == self.id_field and self._implicit_id and not text:
                continue
            self.set(name, text)
        return self

    @property
    def aggregate_id(self) -> str:
        value = self.get(self.id_field)
        if value is None:
            return ""
        return str(value)

    # ── Lifecycle ──────────────────────────────────────────────

    def acknowledge(self, clock: "Clock") -> None:
        """Stamp receipt time; synthesize an identifier if none was given."""
        now = clock.now_utc()
        self.fields[NOW_FIELD] = Time(now)
        if self.aggregate_id == "":
            self.fields[self.id_field] = StringValue(str(unix_nanoseconds(now)))

    def receiver(self) -> "Aggregate":
        """Resolve the receiving aggregate once, then keep it."""
        if self._receiver is None:
            if self._receiver_factory is None:
                raise CommandDefinitionError(self.name, "no target registered")
            self._receiver = self._receiver_factory(self)
        return self._receiver

    def execute(self) -> None:
        """
        Deliver the command to its receiver.

        Raises the command's ValidationError, without delivering, if any
        parameter failed to parse. Otherwise whatever the receiver's
        handle_command() raises propagates.
        """
        failure = self.errors.or_none()
        if failure is not None:
            logger.debug(f"Not delivering {self}: {failure}")
            raise failure
        self.receiver().handle_command(self)

    def __str__(self) -> str:
        return f"{self.name} {self.aggregate_id}".rstrip()

    def __repr__(self) -> str:
        rendered = {name: str(value) for name, value in self.fields.items()}
        return f"Command({self.name!r}, {rendered!r})"
