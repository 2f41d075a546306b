"""API routes for quoting, confirming and cancelling bookings."""

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.dependencies import get_db
from app.models.user import User
from app.schemas.booking import (
    BookingCreate,
    BookingQuoteRequest,
    BookingQuoteResponse,
    BookingResponse,
)
from app.services.booking_service import BookingService

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("/quote", response_model=BookingQuoteResponse)
def quote_booking(
    payload: BookingQuoteRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BookingQuoteResponse:
    """Price a slot selection without creating a booking."""

    service = BookingService(db)
    return service.quote(payload, current_user)


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BookingResponse:
    """Confirm a booking for the current user."""

    service = BookingService(db)
    return service.create_booking(current_user, payload)


@router.get("", response_model=List[BookingResponse])
def list_my_bookings(
    *,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    status_filter: Optional[Literal["confirmed", "completed", "cancelled"]] = Query(
        None, alias="status", description="Filter by booking status"
    ),
) -> List[BookingResponse]:
    """Retrieve the bookings of the current user, newest first."""

    service = BookingService(db)
    return service.list_user_bookings(current_user, status_filter=status_filter)


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BookingResponse:
    service = BookingService(db)
    return service.get_user_booking(current_user, booking_id)


@router.post("/{booking_id}/cancel", response_model=BookingResponse)
def cancel_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BookingResponse:
    """Cancel a confirmed booking."""

    service = BookingService(db)
    return service.cancel_booking(current_user, booking_id)
