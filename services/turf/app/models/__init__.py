from app.models.booking import Booking
from app.models.ground import Ground
from app.models.slot_pricing import SlotPricing
from app.models.user import User

__all__ = ["Booking", "Ground", "SlotPricing", "User"]
