from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, Boolean, DateTime, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from app.models.ground import Ground
    from app.models.user import User

BOOKING_STATUS_CONFIRMED = "confirmed"
BOOKING_STATUS_COMPLETED = "completed"
BOOKING_STATUS_CANCELLED = "cancelled"
BOOKING_STATUSES = (
    BOOKING_STATUS_CONFIRMED,
    BOOKING_STATUS_COMPLETED,
    BOOKING_STATUS_CANCELLED,
)


class Booking(Base):
    """A confirmed reservation of consecutive or scattered slots on one date."""

    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("users.id"), nullable=False, index=True)
    ground_id: Mapped[int] = mapped_column(BigInteger, ForeignKey("grounds.id"), nullable=False, index=True)
    date: Mapped[str] = mapped_column(String(10), nullable=False)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    duration: Mapped[Decimal] = mapped_column(Numeric(3, 1), nullable=False)
    total_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    used_loyalty_points: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=BOOKING_STATUS_CONFIRMED)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    user: Mapped["User"] = relationship("User", back_populates="bookings", lazy="joined")
    ground: Mapped["Ground"] = relationship("Ground", back_populates="bookings", lazy="joined")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            "<Booking(id={id}, ground_id={ground}, date={date}, start={start}, end={end})>"
        ).format(
            id=self.id,
            ground=self.ground_id,
            date=self.date,
            start=self.start_time,
            end=self.end_time,
        )
