from decimal import Decimal
from typing import List, Literal

from pydantic import Field, field_validator

from app.schemas.base import CamelModel
from app.schemas.ground import GroundResponse

DemandStr = Literal["high", "low"]


class TimeSlotResponse(CamelModel):
    time: str
    demand: DemandStr
    price: int
    available: bool


class SlotGridResponse(CamelModel):
    ground: GroundResponse
    open_time: str
    close_time: str
    slots: List[TimeSlotResponse]


class PricingRuleItem(CamelModel):
    time_slot: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    demand: DemandStr
    multiplier: Decimal = Field(..., gt=0, max_digits=3, decimal_places=2)

    @field_validator("time_slot")
    def validate_time_slot(cls, value: str) -> str:
        hour, minute = (int(part) for part in value.split(":"))
        if hour > 23 or minute > 59:
            raise ValueError("time_slot must be a valid HH:MM wall-clock time")
        return value


class PricingRuleResponse(PricingRuleItem):
    id: int
    ground_id: int


class PricingUpdateRequest(CamelModel):
    rules: List[PricingRuleItem] = Field(..., min_length=1)
    replace: bool = Field(
        False,
        description="Delete the rules of the ground that are not part of this request",
    )

    @field_validator("rules")
    def validate_unique_slots(cls, rules: List[PricingRuleItem]) -> List[PricingRuleItem]:
        seen = set()
        for rule in rules:
            if rule.time_slot in seen:
                raise ValueError(f"Duplicate pricing rule for {rule.time_slot}")
            seen.add(rule.time_slot)
        return rules
