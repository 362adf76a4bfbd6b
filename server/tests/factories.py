"""Factories that persist test records through the repositories."""

from datetime import date
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from hotel_booking.core.dependencies import create_session_token
from hotel_booking.models import Booking, Enrollment, Hotel, Payment, Room, Ticket, TicketStatus, TicketType, User
from hotel_booking.repositories import (
    BookingRepository,
    EnrollmentRepository,
    HotelRepository,
    PaymentRepository,
    SessionRepository,
    TicketRepository,
    UserRepository,
)


async def create_user(db: AsyncSession, email: str | None = None) -> User:
    return await UserRepository(db).create(
        email=email or f"{uuid4().hex[:12]}@example.com",
        password="$2b$10$not-a-real-hash"
    )


async def generate_valid_token(db: AsyncSession, user: User | None = None) -> str:
    """Sign a token for the user and store the session that makes it valid."""
    user = user or await create_user(db)
    token = create_session_token(user.id)
    await SessionRepository(db).create(user.id, token)
    return token


async def create_enrollment(db: AsyncSession, user: User) -> Enrollment:
    return await EnrollmentRepository(db).create(
        user_id=user.id,
        name="Ada Lovelace",
        cpf="123.456.789-09",
        birthday=date(1990, 12, 10),
        phone="(21) 98999-9999"
    )


async def create_ticket_type(
    db: AsyncSession,
    is_remote: bool = False,
    includes_hotel: bool = True
) -> TicketType:
    return await TicketRepository(db).create_ticket_type(
        name=f"ticket-{uuid4().hex[:6]}",
        price=60000,
        is_remote=is_remote,
        includes_hotel=includes_hotel
    )


async def create_ticket(
    db: AsyncSession,
    enrollment: Enrollment,
    ticket_type: TicketType,
    status: TicketStatus = TicketStatus.PAID
) -> Ticket:
    return await TicketRepository(db).create(enrollment.id, ticket_type.id, status)


async def create_payment(db: AsyncSession, ticket: Ticket, value: int = 60000) -> Payment:
    return await PaymentRepository(db).create(
        ticket_id=ticket.id,
        value=value,
        card_issuer="VISA",
        card_last_digits="4242"
    )


async def create_hotel(db: AsyncSession) -> Hotel:
    return await HotelRepository(db).create(
        name="Driven Resort",
        image="https://images.example.com/hotels/driven.jpg"
    )


async def create_room(db: AsyncSession, hotel: Hotel, capacity: int = 3, name: str = "1020") -> Room:
    return await HotelRepository(db).create_room(hotel.id, name, capacity)


async def create_booking(db: AsyncSession, user: User, room: Room) -> Booking:
    return await BookingRepository(db).insert(user.id, room.id)


async def fill_room(db: AsyncSession, room: Room) -> list[Booking]:
    """Book every place of a room, each for a different user."""
    bookings = []
    for _ in range(room.capacity):
        occupant = await create_user(db)
        bookings.append(await create_booking(db, occupant, room))
    return bookings


async def create_eligible_user(db: AsyncSession) -> tuple[User, str]:
    """Create a user with a paid, in-person, hotel-inclusive ticket and a valid token."""
    user = await create_user(db)
    token = await generate_valid_token(db, user)
    enrollment = await create_enrollment(db, user)
    ticket_type = await create_ticket_type(db, is_remote=False, includes_hotel=True)
    ticket = await create_ticket(db, enrollment, ticket_type, TicketStatus.PAID)
    await create_payment(db, ticket, ticket_type.price)
    return user, token
