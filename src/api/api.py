from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import HttpRequest
from ninja.errors import ValidationError as NinjaValidationError
from ninja_extra import NinjaExtraAPI
from ninja_jwt.controller import NinjaJWTDefaultController

from common.schema import ResponseOk, VersionResponse
from common.throttling import AnonDefaultThrottle, UserDefaultThrottle
from hotels.controllers import HotelController
from hotels.service.eligibility import NotFoundError, PaymentRequiredError

from .exception_handlers import (
    handle_django_validation_error,
    handle_general_exception,
    handle_not_found_error,
    handle_payment_required_error,
    handle_request_validation_error,
)

api = NinjaExtraAPI(
    title="Conference Backend API",
    docs_url="/docs",
    version=settings.VERSION,
    description=f"Conference API {settings.VERSION}",
    app_name=f"conference-api-{settings.VERSION}",
    urls_namespace="api",
    servers=[
        {"url": settings.SERVICE_URL, "description": settings.SERVICE_DESCRIPTION},
    ],
    throttle=[AnonDefaultThrottle(), UserDefaultThrottle()],
)


@api.get("/version", tags=["Version"], response={200: VersionResponse})
def version(request: HttpRequest) -> tuple[int, VersionResponse]:
    """Get the API version.

    Args:
        request: The incoming HTTP request.

    Returns:
        The response status code and message.
    """
    return 200, VersionResponse(version=settings.VERSION)


@api.get("/healthcheck", tags=["Healthcheck"], response={200: ResponseOk})
def healthcheck(request: HttpRequest) -> tuple[int, ResponseOk]:
    """Check the health of the API.

    Args:
        request: The incoming HTTP request.

    Returns:
        The response status code and message.
    """
    return 200, ResponseOk()


api.register_controllers(
    # Auth controllers
    NinjaJWTDefaultController,
    # Hotel controllers
    HotelController,
)

EXCEPTION_HANDLERS = {
    Exception: handle_general_exception,
    ValidationError: handle_django_validation_error,
    NinjaValidationError: handle_request_validation_error,
    NotFoundError: handle_not_found_error,
    PaymentRequiredError: handle_payment_required_error,
}

for exc, handler in EXCEPTION_HANDLERS.items():
    api.add_exception_handler(exc, handler)  # type: ignore[arg-type]
