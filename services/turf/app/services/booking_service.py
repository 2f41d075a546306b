"""Quote, confirm and cancel bookings priced from the ground's slot grid."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.models.booking import (
    BOOKING_STATUS_CANCELLED,
    BOOKING_STATUS_CONFIRMED,
    Booking,
)
from app.models.user import User
from app.repository import booking_repository
from app.schemas.booking import BookingCreate, BookingQuoteRequest
from app.services.ground_service import GroundService
from app.services.slots import (
    BookingTotals,
    BookingWindow,
    compute_totals,
    derive_booking_window,
    normalize_selection,
)

logger = logging.getLogger(__name__)


class BookingService:

    def __init__(self, db: Session):
        self.db = db
        self.ground_service = GroundService(db)

    def _price_selection(
        self,
        *,
        ground_id: int,
        selected: List[str],
        user: Optional[User],
        use_loyalty: bool,
        require_open_slots: bool = False,
    ) -> tuple[BookingTotals, BookingWindow]:
        ground = self.ground_service.get_ground(ground_id)
        slots = self.ground_service.generate_slots_for(ground)

        if require_open_slots:
            open_times = {slot.time for slot in slots}
            outside = [time_value for time_value in selected if time_value not in open_times]
            if outside:
                raise ValidationError(
                    f"Slots outside the opening hours of ground {ground_id}: {', '.join(outside)}"
                )

        loyalty_points = user.loyalty_points if user is not None else 0
        totals = compute_totals(
            selected,
            slots,
            loyalty_points_available=loyalty_points or 0,
            use_loyalty=use_loyalty and user is not None,
            discount_cap=settings.LOYALTY_DISCOUNT_CAP,
        )
        window = derive_booking_window(selected)
        return totals, window

    def quote(self, payload: BookingQuoteRequest, user: Optional[User] = None) -> dict:
        selected = normalize_selection(payload.slots)
        totals, window = self._price_selection(
            ground_id=payload.ground_id,
            selected=selected,
            user=user,
            use_loyalty=payload.use_loyalty,
        )
        return {
            "ground_id": payload.ground_id,
            "slots": selected,
            "start_time": window.start_time,
            "end_time": window.end_time,
            "duration": totals.duration,
            "base_price": totals.base_price,
            "discount": totals.discount,
            "total": totals.total,
        }

    def create_booking(self, user: User, payload: BookingCreate) -> Booking:
        selected = normalize_selection(payload.slots)
        totals, window = self._price_selection(
            ground_id=payload.ground_id,
            selected=selected,
            user=user,
            use_loyalty=payload.use_loyalty,
            require_open_slots=True,
        )

        booking = booking_repository.create_booking(
            self.db,
            {
                "user_id": user.id,
                "ground_id": payload.ground_id,
                "date": payload.date.isoformat(),
                "start_time": window.start_time,
                "end_time": window.end_time,
                "duration": totals.duration,
                "total_price": totals.total,
                "used_loyalty_points": totals.discount > 0,
                "status": BOOKING_STATUS_CONFIRMED,
            },
        )
        logger.info(
            "Booking %s confirmed for user %s on ground %s %s %s-%s",
            booking.id,
            user.id,
            payload.ground_id,
            booking.date,
            booking.start_time,
            booking.end_time,
        )
        return booking

    def list_user_bookings(
        self,
        user: User,
        *,
        status_filter: Optional[str] = None,
    ) -> List[Booking]:
        return booking_repository.list_bookings(
            self.db,
            user_id=user.id,
            status_filter=status_filter,
        )

    def get_user_booking(self, user: User, booking_id: int) -> Booking:
        booking = booking_repository.get_booking(self.db, booking_id)
        if booking is None or (booking.user_id != user.id and not user.is_admin):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Booking not found",
            )
        return booking

    def cancel_booking(self, user: User, booking_id: int) -> Booking:
        booking = self.get_user_booking(user, booking_id)

        if booking.status != BOOKING_STATUS_CONFIRMED:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Only confirmed bookings can be cancelled (status is {booking.status})",
            )

        booking.status = BOOKING_STATUS_CANCELLED
        booking_repository.save_booking(self.db, booking)
        logger.info("Booking %s cancelled by user %s", booking.id, user.id)
        return booking
