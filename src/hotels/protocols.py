"""Protocol definitions for the lookups the hotel access check depends on."""

from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from registrations.models import Enrollment, Ticket


class RegistrationLookup(Protocol):
    """Read access to a user's enrollment and the enrollment's ticket."""

    def find_enrollment_by_user(self, user_id: UUID) -> "Enrollment | None":
        """Return the enrollment belonging to the user, or None."""
        ...

    def find_ticket_by_enrollment(self, enrollment_id: UUID) -> "Ticket | None":
        """Return the ticket belonging to the enrollment, or None.

        The ticket type must be loaded alongside the ticket.
        """
        ...
