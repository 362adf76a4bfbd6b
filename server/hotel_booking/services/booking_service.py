"""Booking service for business rule checks before a booking is written."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import ForbiddenError, NotFoundError, RoomFullError, TicketNotEligibleError
from ..core.observability import metrics_collector
from ..models.booking import Booking
from ..models.hotel import Room
from ..models.ticket import Ticket
from ..repositories import (
    BookingRepository,
    EnrollmentRepository,
    PaymentRepository,
    RoomRepository,
    TicketRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)


class BookingService:
    """
    Service for hotel booking operations.

    Every write runs the same linear sequence of checks against the
    enrollment, ticket, payment and room records. Capacity is checked with
    a plain read before the write; nothing locks the room in between.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.bookings = BookingRepository(db)
        self.enrollments = EnrollmentRepository(db)
        self.payments = PaymentRepository(db)
        self.rooms = RoomRepository(db)
        self.tickets = TicketRepository(db)
        self.users = UserRepository(db)

    def _reject(self, operation: str, reason: str, error: Exception, **context) -> Exception:
        """Log and count a rule rejection, returning the error to raise."""
        logger.warning(
            f"Booking {operation} rejected - {reason}",
            extra={"operation": operation, "reason": reason, **context}
        )
        metrics_collector.record_booking_rejected(operation, reason)
        return error

    async def get_booking(self, user_id: int) -> Booking:
        """
        Get the booking held by a user.

        Args:
            user_id: Authenticated user

        Returns:
            The user's first booking, with its room loaded

        Raises:
            NotFoundError: If the user has no booking
        """
        user = await self.users.find_by_id(user_id)

        if not user or not user.bookings:
            logger.info("No booking found for user", extra={"user_id": user_id})
            raise NotFoundError(resource_type="booking")

        return user.bookings[0]

    async def _get_eligible_ticket(self, operation: str, user_id: int) -> Ticket:
        """
        Check the user holds a ticket that grants a hotel room.

        Raises:
            ForbiddenError: If the user has no enrollment or no ticket
            TicketNotEligibleError: If the ticket is unpaid, remote or has no hotel
        """
        enrollment = await self.enrollments.find_by_user_id(user_id)
        if not enrollment:
            raise self._reject(
                operation, "no_enrollment",
                ForbiddenError("User has no enrollment", code="NO_ENROLLMENT"),
                user_id=user_id
            )

        ticket = await self.tickets.find_by_enrollment_id(enrollment.id)
        if not ticket:
            raise self._reject(
                operation, "no_ticket",
                ForbiddenError("User has no ticket", code="NO_TICKET"),
                user_id=user_id,
                enrollment_id=enrollment.id
            )

        payment = await self.payments.find_by_ticket_id(ticket.id)

        reason = None
        if not ticket.ticket_type.includes_hotel:
            reason = "hotel_not_included"
        elif ticket.ticket_type.is_remote:
            reason = "remote_ticket"
        elif not payment:
            reason = "not_paid"

        if reason:
            raise self._reject(
                operation, reason,
                TicketNotEligibleError(reason),
                user_id=user_id,
                ticket_id=ticket.id
            )

        return ticket

    async def _get_room_with_vacancy(
        self,
        operation: str,
        room_id: int,
        exclude_booking_id: int | None = None
    ) -> Room:
        """
        Check the room exists and has room for one more booking.

        Raises:
            NotFoundError: If the room does not exist
            RoomFullError: If the room's bookings already reach its capacity
        """
        room = await self.rooms.find_by_id(room_id)
        if not room:
            logger.warning(
                f"Booking {operation} failed - room not found",
                extra={"room_id": room_id}
            )
            raise NotFoundError(resource_type="room", resource_id=str(room_id))

        occupancy = await self.rooms.count_bookings(room_id, exclude_booking_id=exclude_booking_id)
        if occupancy >= room.capacity:
            raise self._reject(
                operation, "room_full",
                RoomFullError(room_id=room_id, occupancy=occupancy, capacity=room.capacity),
                room_id=room_id,
                occupancy=occupancy,
                capacity=room.capacity
            )

        return room

    async def create_booking(self, user_id: int, room_id: int) -> Booking:
        """
        Book a room for a user.

        Args:
            user_id: Authenticated user
            room_id: Room to book

        Returns:
            Created booking entity

        Raises:
            ForbiddenError: If the user's enrollment or ticket forbids a booking,
                or the room is full
            NotFoundError: If the room does not exist
        """
        await self._get_eligible_ticket("create", user_id)
        room = await self._get_room_with_vacancy("create", room_id)

        booking = await self.bookings.insert(user_id, room_id)

        metrics_collector.record_booking_created(room.hotel_id)
        logger.info(
            "Booking created successfully",
            extra={
                "booking_id": booking.id,
                "user_id": user_id,
                "room_id": room_id,
                "hotel_id": room.hotel_id
            }
        )

        return booking

    async def change_booking(self, user_id: int, booking_id: int, room_id: int) -> Booking:
        """
        Move a user's booking to another room.

        Args:
            user_id: Authenticated user
            booking_id: Booking to move, must belong to the user
            room_id: Target room

        Returns:
            Updated booking entity

        Raises:
            ForbiddenError: If the user is not eligible, has no booking, or the
                target room is full
            NotFoundError: If the booking is not the user's or the room does not exist
        """
        await self._get_eligible_ticket("change", user_id)

        user_bookings = await self.bookings.find_by_user_id(user_id)
        if not user_bookings:
            raise self._reject(
                "change", "no_booking",
                ForbiddenError("User has no booking to change", code="NO_BOOKING"),
                user_id=user_id
            )

        booking = await self.bookings.find_by_id(booking_id)
        if not booking or booking.user_id != user_id:
            logger.warning(
                "Booking change failed - booking not owned by user",
                extra={"user_id": user_id, "booking_id": booking_id}
            )
            raise NotFoundError(resource_type="booking", resource_id=str(booking_id))

        await self._get_room_with_vacancy("change", room_id, exclude_booking_id=booking.id)

        previous_room_id = booking.room_id
        booking = await self.bookings.update_room(booking, room_id)

        metrics_collector.record_booking_changed()
        logger.info(
            "Booking changed successfully",
            extra={
                "booking_id": booking.id,
                "user_id": user_id,
                "from_room_id": previous_room_id,
                "to_room_id": room_id
            }
        )

        return booking
