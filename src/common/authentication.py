import typing as t

import structlog
from django.http import HttpRequest
from ninja_jwt.authentication import JWTAuth

logger = structlog.get_logger(__name__)


class ContextJWTAuth(JWTAuth):
    """JWT authentication that binds the authenticated user to the log context.

    Request context is bound by StructlogContextMiddleware before the API view runs,
    at which point the bearer token has not been validated yet. This class adds the
    ``user_id`` as soon as the token resolves to a user, so every log event emitted
    by the view handler carries it.

    Usage:
        @api_controller("/hotels", auth=ContextJWTAuth())
        class HotelController(UserAwareController):
            ...
    """

    def authenticate(self, request: HttpRequest, token: str) -> t.Any:
        """Authenticate the request and bind the user id to structlog contextvars.

        Args:
            request: The HTTP request object
            token: The JWT token string

        Returns:
            The authenticated user object

        Raises:
            AuthenticationFailed: If authentication fails
            InvalidToken: If the token is invalid
        """
        user = super().authenticate(request, token)

        if user is not None and user.is_authenticated:
            structlog.contextvars.bind_contextvars(user_id=str(user.pk))

        return user
