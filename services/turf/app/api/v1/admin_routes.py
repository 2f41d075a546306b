"""Admin API routes for analytics and slot pricing."""

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.security import get_current_admin
from app.dependencies import get_db
from app.schemas.admin import AdminStatsResponse
from app.schemas.booking import AdminBookingResponse
from app.schemas.slot import PricingRuleResponse, PricingUpdateRequest
from app.services.admin_service import AdminService
from app.services.pricing_service import PricingService

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("/stats", response_model=AdminStatsResponse)
def get_stats(db: Session = Depends(get_db)) -> AdminStatsResponse:
    """Revenue and booking counts across all grounds."""

    return AdminService(db).get_stats()


@router.get("/bookings", response_model=List[AdminBookingResponse])
def list_all_bookings(
    *,
    db: Session = Depends(get_db),
    ground_id: Optional[int] = Query(None, alias="groundId", description="Filter by ground"),
    status_filter: Optional[Literal["confirmed", "completed", "cancelled"]] = Query(
        None, alias="status", description="Filter by booking status"
    ),
) -> List[AdminBookingResponse]:
    """Every booking enriched with its user and ground."""

    return AdminService(db).list_bookings(ground_id=ground_id, status_filter=status_filter)


@router.get("/pricing/{ground_id}", response_model=List[PricingRuleResponse])
def list_pricing_rules(ground_id: int, db: Session = Depends(get_db)) -> List[PricingRuleResponse]:
    return PricingService(db).list_rules(ground_id)


@router.put("/pricing/{ground_id}", response_model=List[PricingRuleResponse])
def update_pricing_rules(
    ground_id: int,
    payload: PricingUpdateRequest,
    db: Session = Depends(get_db),
) -> List[PricingRuleResponse]:
    """Create or update the pricing rules of a ground."""

    return PricingService(db).update_rules(ground_id, payload)
