"""Session repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user import Session


class SessionRepository:
    """Data access for sign-in sessions."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user_id: int, token: str) -> Session:
        session = Session(user_id=user_id, token=token)

        self.db.add(session)
        await self.db.commit()
        await self.db.refresh(session)

        return session

    async def find_by_token(self, token: str) -> Optional[Session]:
        stmt = select(Session).where(Session.token == token)
        result = await self.db.execute(stmt)
        return result.scalars().first()
