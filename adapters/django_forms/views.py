"""
ESS Django Adapter - Command Views
====================================
Pass-through view: one command definition per view, form data in,
JSON out. Routing is left to the project's urlconf.
"""

from __future__ import annotations

from typing import Callable

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from adapters.django_forms.forms import RequestForm
from adapters.django_forms.responses import command_response
from ess.application.app import Application
from ess.commands.command import CommandDefinition


def command_view(
    app: Application,
    definition: CommandDefinition,
) -> Callable[[HttpRequest], JsonResponse]:
    """
    Build a POST-only view sending definition's command to app.

    Usage:
        urlpatterns = [
            path("signups", command_view(app, SIGN_UP)),
        ]
    """

    @csrf_exempt
    @require_POST
    def view(request: HttpRequest) -> JsonResponse:
        command = definition.from_form(RequestForm(request))
        return command_response(app.send(command))

    view.__name__ = f"{definition.name.replace('-', '_')}_view"
    return view
