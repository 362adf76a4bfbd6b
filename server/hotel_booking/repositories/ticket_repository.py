"""Ticket and ticket type repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.ticket import Ticket, TicketStatus, TicketType


class TicketRepository:
    """Data access for tickets and their types."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_ticket_type(
        self,
        name: str,
        price: int,
        is_remote: bool,
        includes_hotel: bool
    ) -> TicketType:
        ticket_type = TicketType(
            name=name,
            price=price,
            is_remote=is_remote,
            includes_hotel=includes_hotel
        )

        self.db.add(ticket_type)
        await self.db.commit()
        await self.db.refresh(ticket_type)

        return ticket_type

    async def create(self, enrollment_id: int, ticket_type_id: int, status: TicketStatus) -> Ticket:
        ticket = Ticket(
            enrollment_id=enrollment_id,
            ticket_type_id=ticket_type_id,
            status=status
        )

        self.db.add(ticket)
        await self.db.commit()
        await self.db.refresh(ticket)

        return ticket

    async def find_by_enrollment_id(self, enrollment_id: int) -> Optional[Ticket]:
        """Get the enrollment's ticket with its ticket type loaded."""
        stmt = (
            select(Ticket)
            .options(selectinload(Ticket.ticket_type))
            .where(Ticket.enrollment_id == enrollment_id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
