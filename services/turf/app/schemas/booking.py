from datetime import date as date_type
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from app.schemas.auth import UserResponse
from app.schemas.base import CamelModel
from app.schemas.ground import GroundResponse


class BookingQuoteRequest(CamelModel):
    ground_id: int = Field(..., gt=0)
    slots: List[str] = Field(default_factory=list, max_length=50)
    use_loyalty: bool = False


class BookingQuoteResponse(CamelModel):
    ground_id: int
    slots: List[str]
    start_time: str
    end_time: str
    duration: Decimal
    base_price: Decimal
    discount: Decimal
    total: Decimal


class BookingCreate(BookingQuoteRequest):
    date: date_type


class BookingResponse(CamelModel):
    id: int
    user_id: int
    ground_id: int
    date: str
    start_time: str
    end_time: str
    duration: Decimal
    total_price: Decimal
    used_loyalty_points: bool
    status: str
    created_at: Optional[datetime] = None
    ground: Optional[GroundResponse] = None


class AdminBookingResponse(BookingResponse):
    user: Optional[UserResponse] = None
