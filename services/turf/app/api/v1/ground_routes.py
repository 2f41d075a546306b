"""API routes for browsing grounds."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.ground import GroundResponse
from app.services.ground_service import GroundService

router = APIRouter(prefix="/grounds", tags=["grounds"])


@router.get("", response_model=List[GroundResponse])
def list_grounds(
    *,
    db: Session = Depends(get_db),
    city: Optional[str] = Query(None, description="Filter by city"),
    sport: Optional[str] = Query(None, description="Filter by supported sport"),
) -> List[GroundResponse]:
    """Retrieve all grounds optionally filtered by city or sport."""

    service = GroundService(db)
    return service.list_grounds(city=city, sport=sport)


@router.get("/{ground_id}", response_model=GroundResponse)
def get_ground(ground_id: int, db: Session = Depends(get_db)) -> GroundResponse:
    """Retrieve a ground by its identifier."""

    service = GroundService(db)
    return service.get_ground(ground_id)
