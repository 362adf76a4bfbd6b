"""Sample data for local environments."""

import logging
from datetime import date
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .core.dependencies import create_session_token
from .models import Hotel, TicketStatus
from .repositories import (
    EnrollmentRepository,
    HotelRepository,
    PaymentRepository,
    SessionRepository,
    TicketRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)

SAMPLE_HOTELS = {
    "Driven Resort": ["101", "102", "103", "201", "202"],
    "Driven Palace": ["1010", "1020", "1030"],
}

DEMO_USER_EMAIL = "demo@example.com"

# Sign-in is not served by this API, so the demo account never gets a password hash
UNUSABLE_PASSWORD = "!"


async def seed_sample_data(db: AsyncSession) -> Optional[str]:
    """
    Create hotels, rooms, ticket types and a demo user able to book.

    Args:
        db: Database session

    Returns:
        Bearer token of the demo user's session, or None when data already exists
    """
    existing_hotels = await db.execute(select(func.count(Hotel.id)))
    if existing_hotels.scalar() > 0:
        logger.info("Sample data already exists, skipping...")
        return None

    hotels = HotelRepository(db)
    for hotel_name, room_names in SAMPLE_HOTELS.items():
        hotel = await hotels.create(
            name=hotel_name,
            image="https://images.example.com/hotels/placeholder.jpg"
        )
        for room_name in room_names:
            # Rooms on the first floor are singles, the rest sleep three
            capacity = 1 if room_name.startswith("1") and len(room_name) == 3 else 3
            await hotels.create_room(hotel.id, room_name, capacity)

    tickets = TicketRepository(db)
    await tickets.create_ticket_type("Online", 10000, is_remote=True, includes_hotel=False)
    await tickets.create_ticket_type("Presential", 25000, is_remote=False, includes_hotel=False)
    hotel_ticket_type = await tickets.create_ticket_type(
        "Presential + Hotel", 60000, is_remote=False, includes_hotel=True
    )

    token = await _seed_demo_user(db, hotel_ticket_type.id, hotel_ticket_type.price)

    logger.info("Sample data created", extra={"hotels": len(SAMPLE_HOTELS)})
    return token


async def _seed_demo_user(db: AsyncSession, ticket_type_id: int, price: int) -> str:
    user = await UserRepository(db).create(email=DEMO_USER_EMAIL, password=UNUSABLE_PASSWORD)
    enrollment = await EnrollmentRepository(db).create(
        user_id=user.id,
        name="Demo Attendee",
        cpf="000.000.000-00",
        birthday=date(1990, 1, 1),
        phone="(21) 90000-0000"
    )
    ticket = await TicketRepository(db).create(enrollment.id, ticket_type_id, TicketStatus.PAID)
    await PaymentRepository(db).create(
        ticket_id=ticket.id,
        value=price,
        card_issuer="VISA",
        card_last_digits="0000"
    )

    token = create_session_token(user.id)
    await SessionRepository(db).create(user.id, token)

    return token
