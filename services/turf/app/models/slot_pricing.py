from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:  # pragma: no cover
    from app.models.ground import Ground


class SlotPricing(Base):
    """Demand tier and multiplier applied to one half-hour slot of a ground."""

    __tablename__ = "slot_pricing"
    __table_args__ = (UniqueConstraint("ground_id", "time_slot", name="uq_slot_pricing_ground_time"),)

    id: Mapped[int] = mapped_column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True)
    ground_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("grounds.id", ondelete="CASCADE"), nullable=False, index=True
    )
    time_slot: Mapped[str] = mapped_column(String(5), nullable=False)
    demand: Mapped[str] = mapped_column(String(10), nullable=False)
    multiplier: Mapped[Decimal] = mapped_column(Numeric(3, 2), nullable=False)

    ground: Mapped["Ground"] = relationship("Ground", back_populates="pricing_rules")
