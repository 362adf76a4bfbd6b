"""Booking repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.booking import Booking


class BookingRepository:
    """Data access for bookings."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_user_id(self, user_id: int) -> list[Booking]:
        """Return the user's bookings with their rooms, oldest first."""
        stmt = (
            select(Booking)
            .options(selectinload(Booking.room))
            .where(Booking.user_id == user_id)
            .order_by(Booking.id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars())

    async def find_by_id(self, booking_id: int) -> Optional[Booking]:
        stmt = select(Booking).where(Booking.id == booking_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def insert(self, user_id: int, room_id: int) -> Booking:
        """Create a booking of ``room_id`` for ``user_id``."""
        booking = Booking(user_id=user_id, room_id=room_id)

        self.db.add(booking)
        await self.db.commit()
        await self.db.refresh(booking)

        return booking

    async def update_room(self, booking: Booking, room_id: int) -> Booking:
        """Move an existing booking to another room."""
        booking.room_id = room_id

        self.db.add(booking)
        await self.db.commit()
        await self.db.refresh(booking)

        return booking
