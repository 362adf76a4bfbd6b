"""Enrollment repository."""

from datetime import date
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.enrollment import Enrollment


class EnrollmentRepository:
    """Data access for enrollments."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user_id: int, name: str, cpf: str, birthday: date, phone: str) -> Enrollment:
        enrollment = Enrollment(
            user_id=user_id,
            name=name,
            cpf=cpf,
            birthday=birthday,
            phone=phone
        )

        self.db.add(enrollment)
        await self.db.commit()
        await self.db.refresh(enrollment)

        return enrollment

    async def find_by_user_id(self, user_id: int) -> Optional[Enrollment]:
        stmt = select(Enrollment).where(Enrollment.user_id == user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
