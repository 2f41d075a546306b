"""Demo users, grounds and pricing rules for an empty database."""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from app.core.security import hash_password
from app.models.ground import Ground
from app.models.slot_pricing import SlotPricing
from app.models.user import User
from app.repository import ground_repository, pricing_repository, user_repository

logger = logging.getLogger(__name__)

PEAK_TIME_SLOTS = ("17:00", "17:30", "18:00", "18:30", "19:00", "19:30", "20:00")
PEAK_MULTIPLIER = Decimal("1.3")
OFF_PEAK_MULTIPLIER = Decimal("1.0")

DEMO_USERS = (
    {
        "username": "admin",
        "password": "admin123",
        "email": "admin@turfbooking.local",
        "name": "Admin User",
        "is_admin": True,
        "loyalty_points": 0,
    },
    {
        "username": "ahmed",
        "password": "password123",
        "email": "ahmed@example.com",
        "name": "Ahmed Khan",
        "is_admin": False,
        "loyalty_points": 150,
    },
)

DEMO_GROUNDS = (
    {
        "name": "Victory Sports Complex",
        "location": "Defence, Karachi",
        "city": "Karachi",
        "sports": ["football", "cricket"],
        "base_price": Decimal("2000.00"),
        "rating": Decimal("4.8"),
        "image_url": "https://images.unsplash.com/photo-1556056504-5c7696c4c28d",
    },
    {
        "name": "Elite Football Arena",
        "location": "Gulberg, Lahore",
        "city": "Lahore",
        "sports": ["football"],
        "base_price": Decimal("1800.00"),
        "rating": Decimal("4.6"),
        "image_url": "https://images.unsplash.com/photo-1577223625816-7546f13df25d",
    },
    {
        "name": "Champions Cricket Ground",
        "location": "F-10, Islamabad",
        "city": "Islamabad",
        "sports": ["cricket"],
        "base_price": Decimal("2500.00"),
        "rating": Decimal("4.9"),
        "image_url": "https://images.unsplash.com/photo-1540747913346-19e32dc3e97e",
    },
)

DEMO_OPEN_TIME = "10:00"
DEMO_CLOSE_TIME = "01:00"


def demo_time_slots() -> list[str]:
    """Every half hour from 10:00 through 00:30."""

    hours = list(range(10, 24)) + [0]
    return [f"{hour:02d}:{minute:02d}" for hour in hours for minute in (0, 30)]


def seed_demo_data(db: Session) -> bool:
    """Populate an empty database. Returns ``False`` when data already exists."""

    if user_repository.count_users(db):
        return False

    for user_data in DEMO_USERS:
        data = dict(user_data)
        password = data.pop("password")
        user_repository.create_user(db, User(password_hash=hash_password(password), **data))

    for ground_data in DEMO_GROUNDS:
        ground = ground_repository.create_ground(
            db,
            Ground(open_time=DEMO_OPEN_TIME, close_time=DEMO_CLOSE_TIME, **ground_data),
        )
        for time_slot in demo_time_slots():
            is_peak = time_slot in PEAK_TIME_SLOTS
            pricing_repository.create_rule(
                db,
                SlotPricing(
                    ground_id=ground.id,
                    time_slot=time_slot,
                    demand="high" if is_peak else "low",
                    multiplier=PEAK_MULTIPLIER if is_peak else OFF_PEAK_MULTIPLIER,
                ),
            )

    db.commit()
    logger.info(
        "Seeded %d demo users and %d demo grounds", len(DEMO_USERS), len(DEMO_GROUNDS)
    )
    return True
