"""API routes exposing the priced slot grid of a ground."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.slot import SlotGridResponse
from app.services.ground_service import GroundService

router = APIRouter(prefix="/slots", tags=["slots"])


@router.get("/{ground_id}", response_model=SlotGridResponse)
def get_slot_grid(ground_id: int, db: Session = Depends(get_db)) -> SlotGridResponse:
    """Half-hour slots between the ground's opening and closing time with demand pricing."""

    service = GroundService(db)
    return service.get_slot_grid(ground_id)
