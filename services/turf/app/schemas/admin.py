from decimal import Decimal
from typing import Dict

from app.schemas.base import CamelModel


class AdminStatsResponse(CamelModel):
    revenue: int
    bookings: int
    active_users: int
    bookings_by_status: Dict[str, int]
    average_booking_value: Decimal
