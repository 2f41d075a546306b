from app.schemas.admin import AdminStatsResponse
from app.schemas.auth import LoginRequest, TokenResponse, UserResponse
from app.schemas.booking import (
    AdminBookingResponse,
    BookingCreate,
    BookingQuoteRequest,
    BookingQuoteResponse,
    BookingResponse,
)
from app.schemas.ground import GroundResponse
from app.schemas.slot import (
    PricingRuleItem,
    PricingRuleResponse,
    PricingUpdateRequest,
    SlotGridResponse,
    TimeSlotResponse,
)

__all__ = [
    "AdminBookingResponse",
    "AdminStatsResponse",
    "BookingCreate",
    "BookingQuoteRequest",
    "BookingQuoteResponse",
    "BookingResponse",
    "GroundResponse",
    "LoginRequest",
    "PricingRuleItem",
    "PricingRuleResponse",
    "PricingUpdateRequest",
    "SlotGridResponse",
    "TimeSlotResponse",
    "TokenResponse",
    "UserResponse",
]
