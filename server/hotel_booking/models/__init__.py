"""Models module exporting all database models."""

from .booking import Booking
from .enrollment import Enrollment
from .hotel import Hotel, Room
from .payment import Payment
from .ticket import Ticket, TicketStatus, TicketType
from .user import Session, User

__all__ = [
    # Accounts
    "User",
    "Session",
    "Enrollment",

    # Tickets
    "TicketType",
    "TicketStatus",
    "Ticket",
    "Payment",

    # Lodging
    "Hotel",
    "Room",
    "Booking",
]
