"""Read-side lookups for enrollments and tickets."""

from uuid import UUID

from registrations.models import Enrollment, Ticket


def find_enrollment_by_user(user_id: UUID) -> Enrollment | None:
    """Return the user's enrollment with its address, or None if the user never enrolled."""
    return Enrollment.objects.with_address().filter(user_id=user_id).first()


def find_ticket_by_enrollment(enrollment_id: UUID) -> Ticket | None:
    """Return the enrollment's ticket with its ticket type, or None if no ticket was reserved."""
    return Ticket.objects.with_ticket_type().filter(enrollment_id=enrollment_id).first()


class DatabaseRegistrationLookup:
    """RegistrationLookup backed by the Django ORM."""

    def find_enrollment_by_user(self, user_id: UUID) -> Enrollment | None:
        """See :func:`find_enrollment_by_user`."""
        return find_enrollment_by_user(user_id)

    def find_ticket_by_enrollment(self, enrollment_id: UUID) -> Ticket | None:
        """See :func:`find_ticket_by_enrollment`."""
        return find_ticket_by_enrollment(enrollment_id)
