"""Booking analytics for the admin dashboard."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models.booking import BOOKING_STATUS_CANCELLED, BOOKING_STATUSES, Booking
from app.repository import booking_repository, user_repository


class AdminService:
    """Encapsulates admin reporting logic."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def get_stats(self) -> dict:
        by_status = {status_value: 0 for status_value in BOOKING_STATUSES}
        by_status.update(booking_repository.count_by_status(self._db))

        # cancelled bookings earn nothing
        revenue = booking_repository.sum_revenue(
            self._db, excluded_statuses=(BOOKING_STATUS_CANCELLED,)
        )
        billable = sum(
            count
            for status_value, count in by_status.items()
            if status_value != BOOKING_STATUS_CANCELLED
        )
        average = (revenue / billable) if billable else Decimal(0)

        return {
            "revenue": int(revenue.quantize(Decimal("1"), rounding=ROUND_HALF_UP)),
            "bookings": sum(by_status.values()),
            "active_users": user_repository.count_users(self._db),
            "bookings_by_status": by_status,
            "average_booking_value": average.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP),
        }

    def list_bookings(
        self,
        *,
        ground_id: Optional[int] = None,
        status_filter: Optional[str] = None,
    ) -> List[Booking]:
        return booking_repository.list_bookings(
            self._db,
            ground_id=ground_id,
            status_filter=status_filter,
        )
