"""Payment repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.payment import Payment


class PaymentRepository:
    """Data access for ticket payments."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_ticket_id(self, ticket_id: int) -> Optional[Payment]:
        stmt = select(Payment).where(Payment.ticket_id == ticket_id).order_by(Payment.id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def create(
        self,
        ticket_id: int,
        value: int,
        card_issuer: str,
        card_last_digits: str
    ) -> Payment:
        payment = Payment(
            ticket_id=ticket_id,
            value=value,
            card_issuer=card_issuer,
            card_last_digits=card_last_digits
        )

        self.db.add(payment)
        await self.db.commit()
        await self.db.refresh(payment)

        return payment
