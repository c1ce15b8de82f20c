"""
ESS Command Layer - Errors
============================
Misconfiguration of command definitions raises. Bad parameter
input does not: it is collected on the command's ValidationError.
"""


class CommandError(Exception):
    """Base error for command layer operations."""
    pass


class CommandDefinitionError(CommandError):
    """A command definition is incomplete or inconsistent."""

    def __init__(self, command_name: str, detail: str):
        self.command_name = command_name
        self.detail = detail
        super().__init__(f"Command '{command_name}': {detail}")


class UnknownFieldError(CommandError, KeyError):
    """A parameter was set that the command definition does not declare."""

    def __init__(self, command_name: str, field: str):
        self.command_name = command_name
        self.field = field
        super().__init__(
            f"Command '{command_name}' has no field '{field}'."
        )

    def __str__(self) -> str:
        return self.args[0]


class ValueParseError(ValueError):
    """
    Parameter text was rejected by a Value.

    The message is a short machine-readable code, e.g.
    'malformed_identifier' or 'empty'.
    """
    pass
