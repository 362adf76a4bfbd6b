"""Persistence access layer, one repository per record type."""

from .booking_repository import BookingRepository
from .enrollment_repository import EnrollmentRepository
from .hotel_repository import HotelRepository
from .payment_repository import PaymentRepository
from .room_repository import RoomRepository
from .session_repository import SessionRepository
from .ticket_repository import TicketRepository
from .user_repository import UserRepository

__all__ = [
    "BookingRepository",
    "EnrollmentRepository",
    "HotelRepository",
    "PaymentRepository",
    "RoomRepository",
    "SessionRepository",
    "TicketRepository",
    "UserRepository",
]
