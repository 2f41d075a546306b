"""Ground catalog lookups and slot grid rendering."""

from __future__ import annotations

from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.ground import Ground
from app.repository import ground_repository, pricing_repository
from app.services.slots import PricingRule, TimeSlot, generate_slots


class GroundService:

    def __init__(self, db: Session):
        self.db = db

    def list_grounds(
        self,
        *,
        city: Optional[str] = None,
        sport: Optional[str] = None,
    ) -> List[Ground]:
        return ground_repository.list_grounds(self.db, city=city, sport=sport)

    def get_ground(self, ground_id: int) -> Ground:
        ground = ground_repository.get_ground(self.db, ground_id)
        if ground is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Ground not found",
            )
        return ground

    def get_pricing_rules(self, ground_id: int) -> List[PricingRule]:
        return [
            PricingRule(
                time_slot=rule.time_slot,
                demand=rule.demand,
                multiplier=rule.multiplier,
            )
            for rule in pricing_repository.list_rules_by_ground(self.db, ground_id)
        ]

    def generate_slots_for(self, ground: Ground) -> List[TimeSlot]:
        return generate_slots(
            ground.open_time,
            ground.close_time,
            ground.base_price,
            self.get_pricing_rules(ground.id),
            limit=settings.SLOT_LIMIT,
        )

    def get_slot_grid(self, ground_id: int) -> dict:
        ground = self.get_ground(ground_id)
        return {
            "ground": ground,
            "open_time": ground.open_time,
            "close_time": ground.close_time,
            "slots": self.generate_slots_for(ground),
        }
