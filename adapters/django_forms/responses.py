"""
ESS Django Adapter - Command Responses
========================================
Stable JSON mapping for command results.

Envelope:
    {"ok": true,  "data": {"aggregate_id": ..., "events": [...]}}
    {"ok": false, "error": {"code": ..., "message": ..., "details": {...}}}

ValidationError → 400 VALIDATION_FAILED, details carry every field.
Projection     → 500 PROJECTION_FAILED, details list the stored events.
Anything else   → 500 COMMAND_FAILED, message only.
"""

from __future__ import annotations

from typing import Any, Optional

from django.http import JsonResponse

from ess.commands.result import CommandResult
from ess.events.errors import ValidationError

VALIDATION_FAILED = "VALIDATION_FAILED"
COMMAND_FAILED = "COMMAND_FAILED"
PROJECTION_FAILED = "PROJECTION_FAILED"


def error_response(
    *,
    code: str,
    message: str,
    details: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    return {
        "ok": False,
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
        },
    }


def success_response(data: Any) -> dict[str, Any]:
    return {"ok": True, "data": data}


def command_response(result: CommandResult) -> JsonResponse:
    """Render result for an HTTP client."""
    error = result.error
    if error is None:
        return JsonResponse(
            success_response(
                {
                    "aggregate_id": result.aggregate_id,
                    "events": [event.name for event in result.events],
                }
            )
        )

    if result.projection_failures:
        return JsonResponse(
            error_response(
                code=PROJECTION_FAILED,
                message=str(error),
                details={
                    "aggregate_id": result.aggregate_id,
                    "events": [event.name for event in result.events],
                    "projection_failures": [
                        failure.to_dict() for failure in result.projection_failures
                    ],
                },
            ),
            status=500,
        )

    if isinstance(error, ValidationError):
        return JsonResponse(
            error_response(
                code=VALIDATION_FAILED,
                message=str(error),
                details=error.to_dict()["error"],
            ),
            status=400,
        )

    return JsonResponse(
        error_response(code=COMMAND_FAILED, message=str(error)),
        status=500,
    )
