"""
ESS Time - Timestamp Text
===========================
RFC 3339 rendering and parsing shared by the event log and by
command parameters.

Parsing accepts a trailing "Z" and fractions down to nanoseconds;
digits beyond microseconds are truncated.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

_FRACTION = re.compile(r"\.(\d+)")


def format_timestamp(moment: Optional[datetime]) -> Optional[str]:
    if moment is None:
        return None
    return moment.isoformat()


def parse_timestamp(text: Optional[str]) -> Optional[datetime]:
    """Raises ValueError for text that is not a timestamp."""
    if not text:
        return None
    normalized = text.strip()
    if normalized.endswith(("Z", "z")):
        normalized = normalized[:-1] + "+00:00"
    normalized = _FRACTION.sub(
        lambda m: "." + m.group(1)[:6].ljust(6, "0"), normalized, count=1
    )
    return datetime.fromisoformat(normalized)
