# backend/teesheet/routers/admin.py
"""
Admin maintenance endpoints for the tee sheet.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.teetimes import ResetResponse, TeeSlotRead
from ..services.events import emit_reset_event
from ..services.teetimes import clear_bookings_for_date, list_all_slots, reset_all_bookings

router = APIRouter(prefix="/api/admin/teetimes", tags=["admin"])


@router.get("", response_model=list[TeeSlotRead])
def list_all_teetimes(db: Session = Depends(get_db)):
    return list_all_slots(db)


@router.post("/clear", response_model=ResetResponse)
def clear_teetimes_for_date(
    target_date: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
):
    """Remove all players from one date's slots (slots are kept)."""
    removed = clear_bookings_for_date(db, target_date)
    if removed:
        emit_reset_event(removed, target_date=target_date)
    return ResetResponse(target_date=target_date, players_removed=removed)


@router.post("/reset", response_model=ResetResponse)
def reset_all_teetimes(db: Session = Depends(get_db)):
    """Remove all players from every slot on every date."""
    removed = reset_all_bookings(db)
    emit_reset_event(removed)
    return ResetResponse(players_removed=removed)
