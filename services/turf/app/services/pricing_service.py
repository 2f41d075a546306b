"""Admin management of per-slot demand pricing."""

from __future__ import annotations

import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.slot_pricing import SlotPricing
from app.repository import pricing_repository
from app.schemas.slot import PricingUpdateRequest
from app.services.ground_service import GroundService
from app.services.slots import PricingRule, validate_rules

logger = logging.getLogger(__name__)


class PricingService:

    def __init__(self, db: Session):
        self.db = db
        self.ground_service = GroundService(db)

    def list_rules(self, ground_id: int) -> List[SlotPricing]:
        self.ground_service.get_ground(ground_id)
        return pricing_repository.list_rules_by_ground(self.db, ground_id)

    def update_rules(self, ground_id: int, payload: PricingUpdateRequest) -> List[SlotPricing]:
        self.ground_service.get_ground(ground_id)

        validate_rules(
            PricingRule(time_slot=item.time_slot, demand=item.demand, multiplier=item.multiplier)
            for item in payload.rules
        )

        incoming = {item.time_slot: item for item in payload.rules}

        try:
            for rule in pricing_repository.list_rules_by_ground(self.db, ground_id):
                item = incoming.pop(rule.time_slot, None)
                if item is not None:
                    rule.demand = item.demand
                    rule.multiplier = item.multiplier
                elif payload.replace:
                    pricing_repository.delete_rule(self.db, rule)

            for item in incoming.values():
                pricing_repository.create_rule(
                    self.db,
                    SlotPricing(
                        ground_id=ground_id,
                        time_slot=item.time_slot,
                        demand=item.demand,
                        multiplier=item.multiplier,
                    ),
                )
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update pricing rules",
            ) from exc

        logger.info(
            "Updated %d pricing rules for ground %s (replace=%s)",
            len(payload.rules),
            ground_id,
            payload.replace,
        )
        return pricing_repository.list_rules_by_ground(self.db, ground_id)
