"""Hotel access eligibility package.

Decides whether a user's enrollment and ticket entitle them to browse hotels,
and classifies the failure when they do not.
"""

from .checker import EligibilityChecker, ticket_shortcoming
from .enums import FailureKind, Reasons
from .types import HotelAccessEligibility, HotelAccessError, NotFoundError, PaymentRequiredError

__all__ = [
    "EligibilityChecker",
    "FailureKind",
    "HotelAccessEligibility",
    "HotelAccessError",
    "NotFoundError",
    "PaymentRequiredError",
    "Reasons",
    "ticket_shortcoming",
]
