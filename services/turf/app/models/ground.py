from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import JSON, BigInteger, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from app.models.booking import Booking
    from app.models.slot_pricing import SlotPricing


class Ground(Base):
    """A bookable sports ground with its operating hours and base hourly price."""

    __tablename__ = "grounds"

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    sports: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    # HH:MM wall clock; a close time before the open time means next-day close
    open_time: Mapped[str] = mapped_column(String(5), nullable=False)
    close_time: Mapped[str] = mapped_column(String(5), nullable=False)
    rating: Mapped[Decimal] = mapped_column(Numeric(3, 2), nullable=False, default=Decimal("0"))
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    pricing_rules: Mapped[list["SlotPricing"]] = relationship(
        "SlotPricing", back_populates="ground", cascade="all, delete-orphan"
    )
    bookings: Mapped[list["Booking"]] = relationship("Booking", back_populates="ground")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Ground(id={self.id}, name={self.name!r})>"
