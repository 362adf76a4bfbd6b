"""Room repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.booking import Booking
from ..models.hotel import Room


class RoomRepository:
    """Data access for hotel rooms and their occupancy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, room_id: int) -> Optional[Room]:
        stmt = select(Room).where(Room.id == room_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def count_bookings(self, room_id: int, exclude_booking_id: Optional[int] = None) -> int:
        """
        Count the bookings currently held in a room.

        Args:
            room_id: Room to count bookings for
            exclude_booking_id: Booking left out of the count, used when a
                booking is being moved and may already sit in this room

        Returns:
            Number of bookings in the room
        """
        stmt = select(func.count(Booking.id)).where(Booking.room_id == room_id)
        if exclude_booking_id is not None:
            stmt = stmt.where(Booking.id != exclude_booking_id)

        result = await self.db.execute(stmt)
        return result.scalar_one()
