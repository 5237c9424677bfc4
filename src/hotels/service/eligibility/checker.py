"""EligibilityChecker for deciding whether a user may browse hotels."""

import typing as t
from uuid import UUID

import structlog
from django.utils.translation import gettext as _

from hotels.protocols import RegistrationLookup
from registrations.models import Ticket

from .enums import FailureKind, Reasons
from .types import FAILURE_EXCEPTIONS, HotelAccessEligibility

logger = structlog.get_logger(__name__)


def ticket_shortcoming(ticket: Ticket) -> Reasons | None:
    """Return the first reason the ticket does not grant hotel access, or None if it does.

    A ticket grants access when it is paid, in person and its type includes accommodation.
    """
    if ticket.status != Ticket.TicketStatus.PAID:
        return Reasons.TICKET_NOT_PAID
    if ticket.ticket_type.is_remote:
        return Reasons.TICKET_IS_REMOTE
    if not ticket.ticket_type.includes_hotel:
        return Reasons.TICKET_EXCLUDES_HOTEL
    return None


class EligibilityChecker:
    """The Eligibility Checker Class.

    Hotels are only shown to users who enrolled and hold a paid, in-person ticket
    whose type includes accommodation. A missing enrollment or ticket is classified
    as NOT_FOUND, an existing but insufficient ticket as PAYMENT_REQUIRED.

    The enrollment is always looked up before the ticket, and the ticket is only
    looked up once the enrollment is known.
    """

    def __init__(self, lookup: RegistrationLookup | None = None) -> None:
        """Initialize the checker with a registration lookup, defaulting to the database."""
        if lookup is None:
            from registrations.service import DatabaseRegistrationLookup

            lookup = DatabaseRegistrationLookup()
        self.lookup = lookup

    def check(self, user_id: UUID) -> HotelAccessEligibility:
        """Check whether the user may browse hotels.

        Returns:
            HotelAccessEligibility with the result of the check.
        """
        enrollment = self.lookup.find_enrollment_by_user(user_id)
        if enrollment is None:
            return self._deny(user_id, FailureKind.NOT_FOUND, Reasons.ENROLLMENT_MISSING)

        ticket = self.lookup.find_ticket_by_enrollment(enrollment.id)
        if ticket is None:
            return self._deny(user_id, FailureKind.NOT_FOUND, Reasons.TICKET_MISSING)

        if reason := ticket_shortcoming(ticket):
            return self._deny(user_id, FailureKind.PAYMENT_REQUIRED, reason)

        return HotelAccessEligibility(allowed=True, user_id=user_id)

    def verify(self, user_id: UUID) -> None:
        """Verify that the user may browse hotels.

        Raises:
            NotFoundError: if the user has no enrollment or no ticket.
            PaymentRequiredError: if the ticket is unpaid, remote or excludes the hotel.
        """
        eligibility = self.check(user_id)
        if eligibility.allowed:
            return
        exception_class = FAILURE_EXCEPTIONS[t.cast(FailureKind, eligibility.failure)]
        raise exception_class(
            message=eligibility.reason or _("You may not access hotels."), eligibility=eligibility
        )

    @staticmethod
    def _deny(user_id: UUID, failure: FailureKind, reason: Reasons) -> HotelAccessEligibility:
        logger.info("hotel_access_denied", user_id=str(user_id), failure=failure.value, reason=reason.name)
        return HotelAccessEligibility(allowed=False, user_id=user_id, failure=failure, reason=_(reason))
