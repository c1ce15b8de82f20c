"""
ESS Command Layer - Parameter Values
======================================
Values turn submitted text into sanitized command parameters.
Each command holds its own copy of every value declared by its
definition.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Callable, Optional

from ess.commands.errors import ValueParseError
from ess.time.temporal import format_timestamp, parse_timestamp

MALFORMED_IDENTIFIER = "malformed_identifier"
MALFORMED_TIME = "malformed_time"
EMPTY = "empty"

_IDENTIFIER_PATTERN = re.compile(r"^[-a-z0-9]+$")


def _unchanged(text: str) -> str:
    return text


# ══════════════════════════════════════════════════════════════
# STRING
# ══════════════════════════════════════════════════════════════

class String:
    """Free text, passed through a sanitizer on parse."""

    def __init__(
        self,
        sanitized: str = "",
        sanitizer: Callable[[str], str] = _unchanged,
        original: str = "",
    ) -> None:
        self.original = original
        self.sanitized = sanitized
        self._sanitizer = sanitizer

    def parse(self, text: str) -> None:
        self.original = text
        self.sanitized = self._sanitizer(text)

    def copy(self) -> "String":
        return String(
            sanitized=self.sanitized,
            sanitizer=self._sanitizer,
            original=self.original,
        )

    def __str__(self) -> str:
        return self.sanitized

    def __repr__(self) -> str:
        return f"String({self.sanitized!r})"


def TrimmedString() -> String:
    """String value stripping leading and trailing whitespace."""
    return String(sanitizer=str.strip)


def StringValue(text: str) -> String:
    """String value rendering exactly text."""
    return String(sanitized=text, original=text)


# ══════════════════════════════════════════════════════════════
# IDENTIFIER
# ══════════════════════════════════════════════════════════════

class Identifier:
    """
    Parameter serving as an identifier: dashes, lowercase letters
    and digits only. The empty string is not a valid identifier.
    """

    def __init__(self, value: str = "") -> None:
        self.value = value

    def parse(self, text: str) -> None:
        candidate = text.strip()
        if not _IDENTIFIER_PATTERN.match(candidate):
            raise ValueParseError(MALFORMED_IDENTIFIER)
        self.value = candidate

    def copy(self) -> "Identifier":
        return Identifier(self.value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Identifier({self.value!r})"


# ══════════════════════════════════════════════════════════════
# TIME
# ══════════════════════════════════════════════════════════════

class Time:
    """Timestamp parameter, RFC 3339 text."""

    def __init__(self, value: Optional[datetime] = None) -> None:
        self.value = value

    def parse(self, text: str) -> None:
        if not text.strip():
            raise ValueParseError(EMPTY)
        try:
            self.value = parse_timestamp(text)
        except ValueError as exc:
            raise ValueParseError(MALFORMED_TIME) from exc

    def copy(self) -> "Time":
        return Time(self.value)

    def __str__(self) -> str:
        return format_timestamp(self.value) or ""

    def __repr__(self) -> str:
        return f"Time({self.value!r})"
