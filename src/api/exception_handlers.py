"""Exception handlers for the API."""

import traceback
import typing as t
from copy import deepcopy

import orjson
import structlog
from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import HttpRequest
from ninja.errors import ValidationError as NinjaValidationError
from ninja.responses import Response

from hotels.service.eligibility import NotFoundError, PaymentRequiredError

logger = structlog.get_logger(__name__)


def handle_general_exception(request: HttpRequest, exc: Exception | t.Type[Exception]) -> Response:
    """Handle a general exception.

    Args:
        request: The incoming HTTP request.
        exc: The exception.

    Returns:
        The response.
    """
    json_payload = None
    if request.method in ("POST", "PUT", "PATCH") and request.headers.get("Content-Type") == "application/json":
        try:
            payload = orjson.loads(request.body)
            json_payload = obfuscate(payload) if isinstance(payload, dict) else payload
        except orjson.JSONDecodeError:  # pragma: no cover
            json_payload = None
    logger.exception(
        "INTERNAL_SERVER_ERROR",
        path=f"{request.method} {request.path}",
        headers=obfuscate(dict(request.headers)),
        query=obfuscate(request.GET.dict()),
        json_payload=json_payload,
    )
    data = {"detail": "Internal Server Error."}
    is_staff = getattr(request, "user", None) and request.user.is_staff
    if settings.DEBUG or is_staff:  # pragma: no cover
        data["traceback"] = traceback.format_exc()
    return Response(status=500, data=data)


def handle_django_validation_error(request: HttpRequest, exc: ValidationError | t.Type[ValidationError]) -> Response:
    """Handle a validation error.

    Args:
        request: The incoming HTTP request.
        exc: The exception.
    """
    logger.error("VALIDATION_ERROR", exc_info=True, stack_info=True)
    error_dict = {k: [ee for e in v for ee in e] for k, v in exc.error_dict.items()}
    return Response(status=400, data={"errors": error_dict})


def handle_request_validation_error(
    request: HttpRequest, exc: NinjaValidationError | t.Type[NinjaValidationError]
) -> Response:
    """Handle malformed request parameters (path, query or body) as a generic client error."""
    return Response(status=400, data={"detail": "Bad request.", "errors": exc.errors})


def handle_not_found_error(request: HttpRequest, exc: NotFoundError | t.Type[NotFoundError]) -> Response:
    """Handle a missing enrollment, ticket or hotel."""
    return Response(status=404, data={"detail": str(exc)})


def handle_payment_required_error(
    request: HttpRequest, exc: PaymentRequiredError | t.Type[PaymentRequiredError]
) -> Response:
    """Handle a ticket that does not entitle its holder to a hotel."""
    return Response(status=402, data={"detail": str(exc)})


SENSITIVE_KEYS = {"password", "token", "x-api-key", "authorization", "authentication", "cookie", "cpf"}


def obfuscate(data: dict[str, t.Any]) -> dict[str, t.Any]:
    """Obfuscate sensitive data in payloads and headers."""
    new_data = deepcopy(data)
    for key in data.keys():
        if key.lower() in SENSITIVE_KEYS:
            new_data[key] = "********"
    return new_data
