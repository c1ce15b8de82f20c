"""
ESS Application - Errors
==========================
Configuration errors raised while assembling an Application.
Pipeline failures are never raised by send(); they are returned
in the CommandResult.
"""


class ApplicationError(Exception):
    """Base error for application configuration."""
    pass


class DuplicateProjectionError(ApplicationError):
    """A projection with the same name is already registered."""

    def __init__(self, projection_name: str):
        self.projection_name = projection_name
        super().__init__(
            f"Projection '{projection_name}' is already registered."
        )
