"""
ESS Django Adapter - Request Forms
====================================
Lets a Django HttpRequest populate commands.

Lookup order per field: POST body first, then the query string,
then the default.
"""

from __future__ import annotations

from django.http import HttpRequest


class RequestForm:
    """Form view of an HttpRequest."""

    def __init__(self, request: HttpRequest):
        self._request = request

    def get(self, field: str, default: str = "") -> str:
        if field in self._request.POST:
            return self._request.POST.get(field, default)
        return self._request.GET.get(field, default)
