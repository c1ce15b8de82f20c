"""
ESS Django adapter.
Thin framework glue: requests in as forms, results out as JSON.
"""

from adapters.django_forms.forms import RequestForm
from adapters.django_forms.responses import (
    COMMAND_FAILED,
    PROJECTION_FAILED,
    VALIDATION_FAILED,
    command_response,
    error_response,
    success_response,
)
from adapters.django_forms.views import command_view

__all__ = [
    "RequestForm",
    "command_response",
    "command_view",
    "error_response",
    "success_response",
    "VALIDATION_FAILED",
    "COMMAND_FAILED",
    "PROJECTION_FAILED",
]
