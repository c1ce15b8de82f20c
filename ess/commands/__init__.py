"""
ESS Command Layer - Public API
================================
Commands express intent. Definitions describe their parameters
and the aggregate that receives them.
"""

from ess.commands.command import (
    DEFAULT_ID_FIELD,
    NOW_FIELD,
    Command,
    CommandDefinition,
)
from ess.commands.errors import (
    CommandDefinitionError,
    CommandError,
    UnknownFieldError,
    ValueParseError,
)
from ess.commands.result import CommandResult, ProjectionFailure
from ess.commands.values import (
    EMPTY,
    MALFORMED_IDENTIFIER,
    MALFORMED_TIME,
    Identifier,
    String,
    StringValue,
    Time,
    TrimmedString,
)

__all__ = [
    # ── Commands ──────────────────────────────────────────────
    "Command",
    "CommandDefinition",
    "DEFAULT_ID_FIELD",
    "NOW_FIELD",
    # ── Results ───────────────────────────────────────────────
    "CommandResult",
    "ProjectionFailure",
    # ── Values ────────────────────────────────────────────────
    "String",
    "TrimmedString",
    "StringValue",
    "Identifier",
    "Time",
    "EMPTY",
    "MALFORMED_IDENTIFIER",
    "MALFORMED_TIME",
    # ── Errors ────────────────────────────────────────────────
    "CommandError",
    "CommandDefinitionError",
    "UnknownFieldError",
    "ValueParseError",
]
