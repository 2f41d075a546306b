"""Entry point for the turf booking FastAPI application."""

import logging

from fastapi import FastAPI

from app.api.v1 import admin_routes, auth_routes, booking_routes, ground_routes, slot_routes
from app.core.config import settings
from app.core.database import Base, SessionLocal, engine, verify_database_connection
from app.core.error_handlers import register_exception_handlers
from app.seed import seed_demo_data

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

verify_database_connection()

# Ensure database tables exist when the application starts (for development purposes).
Base.metadata.create_all(bind=engine)

if settings.SEED_DEMO_DATA:
    with SessionLocal() as session:
        seed_demo_data(session)

app = FastAPI(title=settings.PROJECT_NAME)

register_exception_handlers(app)

API_PREFIX = "/api/turf/v1"

app.include_router(auth_routes.router, prefix=f"{API_PREFIX}/auth", tags=["auth"])
app.include_router(ground_routes.router, prefix=API_PREFIX)
app.include_router(slot_routes.router, prefix=API_PREFIX)
app.include_router(booking_routes.router, prefix=API_PREFIX)
app.include_router(admin_routes.router, prefix=API_PREFIX)


@app.get("/health")
def health_check():
    return {"status": "ok"}
