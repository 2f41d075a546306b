from __future__ import annotations

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.ground import Ground


def list_grounds(
    db: Session,
    *,
    city: Optional[str] = None,
    sport: Optional[str] = None,
) -> list[Ground]:
    query = db.query(Ground)

    if city is not None:
        query = query.filter(func.lower(Ground.city) == city.strip().lower())

    grounds = query.order_by(Ground.id).all()

    # sports is a JSON list; filtered here to stay portable across backends
    if sport is not None:
        wanted = sport.strip().lower()
        grounds = [
            ground
            for ground in grounds
            if any(str(tag).lower() == wanted for tag in ground.sports or ())
        ]

    return grounds


def get_ground(db: Session, ground_id: int) -> Optional[Ground]:
    return db.query(Ground).filter(Ground.id == ground_id).first()


def create_ground(db: Session, ground: Ground) -> Ground:
    db.add(ground)
    db.flush()
    return ground
