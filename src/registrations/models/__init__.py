from .enrollment import Address, Enrollment
from .ticket import Ticket, TicketType

__all__ = [
    "Address",
    "Enrollment",
    "Ticket",
    "TicketType",
]
