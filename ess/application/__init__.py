"""
ESS Application - Public API
==============================
Commands in, events out, projections updated.
"""

from ess.application.app import Application, ReplayResult
from ess.application.errors import ApplicationError, DuplicateProjectionError

__all__ = [
    "Application",
    "ReplayResult",
    "ApplicationError",
    "DuplicateProjectionError",
]
