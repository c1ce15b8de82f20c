"""
ESS Events - Public API
=========================
Events record facts. ValidationError records why a fact was refused.
"""

from ess.events.errors import (
    ALL_ERRORS_FIELD,
    EventSealedError,
    ValidationError,
)
from ess.events.event import Event

__all__ = [
    "Event",
    "ValidationError",
    "EventSealedError",
    "ALL_ERRORS_FIELD",
]
