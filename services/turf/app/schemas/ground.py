from decimal import Decimal
from typing import List, Optional

from app.schemas.base import CamelModel


class GroundResponse(CamelModel):
    id: int
    name: str
    location: str
    city: str
    sports: List[str]
    base_price: Decimal
    open_time: str
    close_time: str
    rating: Decimal
    image_url: Optional[str] = None
