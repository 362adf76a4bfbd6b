"""Payment model definition."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base

if TYPE_CHECKING:
    from .ticket import Ticket


class Payment(Base):
    """Payment entity recording that a ticket was paid for."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ticket_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tickets.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Payment details, value in minor units
    value: Mapped[int] = mapped_column(Integer, nullable=False)
    card_issuer: Mapped[str] = mapped_column(String(64), nullable=False)
    card_last_digits: Mapped[str] = mapped_column(String(4), nullable=False)

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
        CheckConstraint("value >= 0", name="ck_payment_value_non_negative"),
    )

    ticket: Mapped["Ticket"] = relationship("Ticket", back_populates="payments")

    def __repr__(self) -> str:
        return f"<Payment(id={self.id}, ticket_id={self.ticket_id}, value={self.value})>"
