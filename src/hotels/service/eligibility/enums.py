"""Enums for the hotel access eligibility check."""

from enum import StrEnum

from django.utils.translation import gettext_noop


class FailureKind(StrEnum):
    """Classification of a failed hotel access check.

    The delivery layer maps NOT_FOUND to 404 and PAYMENT_REQUIRED to 402.
    """

    NOT_FOUND = "not_found"
    PAYMENT_REQUIRED = "payment_required"


class Reasons(StrEnum):
    """Reasons why a user may not browse hotels.

    Note: Strings are marked with _noop() for translation extraction.
    The actual translation happens in the checker when using _(Reasons.XXX).
    """

    ENROLLMENT_MISSING = gettext_noop("You are not enrolled.")
    TICKET_MISSING = gettext_noop("You have no ticket.")
    TICKET_NOT_PAID = gettext_noop("Your ticket has not been paid.")
    TICKET_IS_REMOTE = gettext_noop("Remote tickets do not include accommodation.")
    TICKET_EXCLUDES_HOTEL = gettext_noop("Your ticket does not include accommodation.")
    HOTEL_NOT_FOUND = gettext_noop("Hotel not found.")
    NO_HOTELS = gettext_noop("There are no hotels available.")
