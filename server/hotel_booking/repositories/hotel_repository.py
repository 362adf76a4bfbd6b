"""Hotel repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.hotel import Hotel, Room


class HotelRepository:
    """Data access for hotels and the rooms they offer."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, name: str, image: str) -> Hotel:
        hotel = Hotel(name=name, image=image)

        self.db.add(hotel)
        await self.db.commit()
        await self.db.refresh(hotel)

        return hotel

    async def create_room(self, hotel_id: int, name: str, capacity: int) -> Room:
        room = Room(hotel_id=hotel_id, name=name, capacity=capacity)

        self.db.add(room)
        await self.db.commit()
        await self.db.refresh(room)

        return room
