"""Types and exceptions for the hotel access eligibility check."""

import typing as t
import uuid

from pydantic import BaseModel

from .enums import FailureKind


class HotelAccessEligibility(BaseModel):
    """Result of an eligibility check for a user on the hotel listing."""

    allowed: bool
    user_id: uuid.UUID
    failure: FailureKind | None = None
    reason: str | None = None  # we don't use the enum here because we want translation


class HotelAccessError(Exception):
    """Base class for classified failures on the hotel routes."""

    kind: t.ClassVar[FailureKind]

    def __init__(self, message: str, eligibility: HotelAccessEligibility | None = None) -> None:
        """Initialize the exception with the (optional) eligibility details."""
        super().__init__(message)
        self.message = message
        self.eligibility = eligibility


class NotFoundError(HotelAccessError):
    """Raised when the enrollment, the ticket or the hotel does not exist."""

    kind = FailureKind.NOT_FOUND


class PaymentRequiredError(HotelAccessError):
    """Raised when the user's ticket exists but does not entitle them to a hotel."""

    kind = FailureKind.PAYMENT_REQUIRED


FAILURE_EXCEPTIONS: dict[FailureKind, type[HotelAccessError]] = {
    FailureKind.NOT_FOUND: NotFoundError,
    FailureKind.PAYMENT_REQUIRED: PaymentRequiredError,
}
