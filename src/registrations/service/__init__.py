from .registration_lookup import DatabaseRegistrationLookup, find_enrollment_by_user, find_ticket_by_enrollment

__all__ = ["DatabaseRegistrationLookup", "find_enrollment_by_user", "find_ticket_by_enrollment"]
