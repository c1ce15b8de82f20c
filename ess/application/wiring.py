"""
ESS Application - Settings Wiring
===================================
Builds an Application from Django settings.

Settings:
    ESS_APPLICATION_NAME:  Logger suffix and application name (default "ess").
    ESS_EVENT_STORE:       "memory" (default) or "disk".
    ESS_EVENT_LOG:         Path of the log file. Required for "disk".

This module is glue only: it picks implementations, it does not
change how they behave.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from ess.application.app import Application
from ess.event_store.disk import EventsOnDisk
from ess.event_store.memory import EventsInMemory
from ess.time import SystemClock

if TYPE_CHECKING:
    from ess.event_store.base import EventStore
    from ess.time import Clock

logger = logging.getLogger("ess.app")

DEFAULT_APPLICATION_NAME = "ess"
STORE_MEMORY = "memory"
STORE_DISK = "disk"
VALID_STORES = frozenset({STORE_MEMORY, STORE_DISK})


def build_event_store(clock: "Clock") -> "EventStore":
    """Construct the event store selected by ESS_EVENT_STORE."""
    backend = getattr(settings, "ESS_EVENT_STORE", STORE_MEMORY)
    if backend not in VALID_STORES:
        raise ImproperlyConfigured(
            f"ESS_EVENT_STORE '{backend}' not valid. "
            f"Must be one of: {sorted(VALID_STORES)}"
        )

    if backend == STORE_MEMORY:
        return EventsInMemory()

    path = getattr(settings, "ESS_EVENT_LOG", None)
    if not path:
        raise ImproperlyConfigured(
            "ESS_EVENT_LOG must be set when ESS_EVENT_STORE is 'disk'."
        )

    store = EventsOnDisk(path, clock)
    # A fresh log must be replayable before the first write.
    store.touch()
    return store


def build_application(
    name: Optional[str] = None,
    clock: Optional["Clock"] = None,
) -> Application:
    """Assemble an Application from settings. Projections are registered by the caller."""
    clock = clock if clock is not None else SystemClock()
    name = name or getattr(settings, "ESS_APPLICATION_NAME", DEFAULT_APPLICATION_NAME)
    store = build_event_store(clock)

    logger.info(f"Application '{name}' wired with {type(store).__name__}")
    return Application(name, store=store, clock=clock)
