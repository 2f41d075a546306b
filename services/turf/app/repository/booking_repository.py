from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.models.booking import Booking


def create_booking(db: Session, booking_data: dict) -> Booking:
    booking = Booking(**booking_data)
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def save_booking(db: Session, booking: Booking) -> Booking:
    db.flush()
    db.commit()
    db.refresh(booking)
    return booking


def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
    return (
        db.query(Booking)
        .options(joinedload(Booking.ground), joinedload(Booking.user))
        .filter(Booking.id == booking_id)
        .first()
    )


def list_bookings(
    db: Session,
    *,
    user_id: Optional[int] = None,
    ground_id: Optional[int] = None,
    status_filter: Optional[str] = None,
) -> list[Booking]:
    query = db.query(Booking).options(
        joinedload(Booking.ground),
        joinedload(Booking.user),
    )

    if user_id is not None:
        query = query.filter(Booking.user_id == user_id)
    if ground_id is not None:
        query = query.filter(Booking.ground_id == ground_id)
    if status_filter is not None:
        query = query.filter(Booking.status == status_filter)

    return query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()


def sum_revenue(db: Session, *, excluded_statuses: tuple[str, ...] = ()) -> Decimal:
    query = db.query(func.coalesce(func.sum(Booking.total_price), 0))
    if excluded_statuses:
        query = query.filter(Booking.status.notin_(excluded_statuses))
    return Decimal(str(query.scalar() or 0))


def count_by_status(db: Session) -> dict[str, int]:
    rows = db.query(Booking.status, func.count(Booking.id)).group_by(Booking.status).all()
    return {status_value: count for status_value, count in rows}
