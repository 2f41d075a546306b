from __future__ import annotations

from sqlalchemy.orm import Session

from app.models.slot_pricing import SlotPricing


def list_rules_by_ground(db: Session, ground_id: int) -> list[SlotPricing]:
    return (
        db.query(SlotPricing)
        .filter(SlotPricing.ground_id == ground_id)
        .order_by(SlotPricing.time_slot)
        .all()
    )


def create_rule(db: Session, rule: SlotPricing) -> SlotPricing:
    db.add(rule)
    db.flush()
    return rule


def delete_rule(db: Session, rule: SlotPricing) -> None:
    db.delete(rule)
    db.flush()
