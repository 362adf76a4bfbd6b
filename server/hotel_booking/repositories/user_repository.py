"""User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.booking import Booking
from ..models.user import User


class UserRepository:
    """Data access for users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, email: str, password: str) -> User:
        """Create a user, ``password`` is expected to be hashed already."""
        user = User(email=email, password=password)

        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)

        return user

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Get a user with their bookings and the booked rooms loaded."""
        stmt = (
            select(User)
            .options(selectinload(User.bookings).selectinload(Booking.room))
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
