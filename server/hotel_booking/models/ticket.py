"""Ticket and TicketType model definitions."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base

if TYPE_CHECKING:
    from .enrollment import Enrollment
    from .payment import Payment


class TicketStatus(str, Enum):
    """Ticket status enumeration."""
    RESERVED = "RESERVED"
    PAID = "PAID"


class TicketType(Base):
    """Ticket category, flags whether it is remote and whether it includes a hotel."""

    __tablename__ = "ticket_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Minor units, e.g. cents
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    is_remote: Mapped[bool] = mapped_column(Boolean, nullable=False)
    includes_hotel: Mapped[bool] = mapped_column(Boolean, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now(),
        server_onupdate=func.now()
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_ticket_type_price_non_negative"),
    )

    tickets: Mapped[list["Ticket"]] = relationship("Ticket", back_populates="ticket_type")

    def __repr__(self) -> str:
        return (
            f"<TicketType(id={self.id}, name='{self.name}', "
            f"is_remote={self.is_remote}, includes_hotel={self.includes_hotel})>"
        )


class Ticket(Base):
    """Ticket bought for an enrollment."""

    __tablename__ = "tickets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ticket_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ticket_types.id"),
        nullable=False,
        index=True
    )
    enrollment_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("enrollments.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True
    )
    status: Mapped[TicketStatus] = mapped_column(
        String(20),
        nullable=False,
        default=TicketStatus.RESERVED
    )

    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now(),
        server_onupdate=func.now()
    )

    ticket_type: Mapped["TicketType"] = relationship("TicketType", back_populates="tickets")
    enrollment: Mapped["Enrollment"] = relationship("Enrollment", back_populates="ticket")
    payments: Mapped[list["Payment"]] = relationship(
        "Payment",
        back_populates="ticket",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return (
            f"<Ticket(id={self.id}, enrollment_id={self.enrollment_id}, "
            f"ticket_type_id={self.ticket_type_id}, status={self.status})>"
        )
