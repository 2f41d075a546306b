"""Configuration settings for the turf booking service."""

import os
from decimal import Decimal
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Turf Booking Service")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./turf.db")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change_me")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
    SLOT_LIMIT: int = int(os.getenv("SLOT_LIMIT", "50"))
    LOYALTY_DISCOUNT_CAP: Decimal = Decimal(os.getenv("LOYALTY_DISCOUNT_CAP", "50"))
    SEED_DEMO_DATA: bool = _as_bool(os.getenv("SEED_DEMO_DATA", "true"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
