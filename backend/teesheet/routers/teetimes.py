# backend/teesheet/routers/teetimes.py
"""
Tee-times API endpoints.

GET   /api/teetimes?date=YYYY-MM-DD   slots for a day (generated on first access)
GET   /api/teetimes/user/{user_id}    slots the user participates in
PATCH /api/teetimes/{id}/book         add players
PATCH /api/teetimes/{id}/cancel       remove the user and their guests
POST  /api/teetimes                   ad-hoc slot (admin)
PATCH /api/teetimes/{id}              field override (admin)

Domain errors propagate to the handlers registered in main.py.
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.teetimes import (
    BookRequest,
    CancelRequest,
    TeeSlotCreate,
    TeeSlotRead,
    TeeSlotUpdate,
)
from ..services.teetimes import (
    book_slot,
    cancel_slot,
    create_slot,
    get_slot,
    list_all_slots,
    list_slots_by_date,
    list_slots_by_user,
    update_slot,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/teetimes", tags=["teetimes"])


@router.get("", response_model=list[TeeSlotRead])
def list_teetimes(
    target_date: date | None = Query(None, alias="date"),
    db: Session = Depends(get_db),
):
    """Slots for a date, or every slot when no date is given."""
    try:
        if target_date is None:
            return list_all_slots(db)
        return list_slots_by_date(db, target_date)
    except SQLAlchemyError:
        logger.exception(f"Failed to fetch tee times for {target_date}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch tee times",
        )


@router.get("/user/{user_id}", response_model=list[TeeSlotRead])
def list_user_teetimes(user_id: str, db: Session = Depends(get_db)):
    return list_slots_by_user(db, user_id)


@router.get("/{slot_id}", response_model=TeeSlotRead)
def get_teetime(slot_id: str, db: Session = Depends(get_db)):
    return get_slot(db, slot_id)


@router.post("", response_model=TeeSlotRead, status_code=status.HTTP_201_CREATED)
def create_teetime(data: TeeSlotCreate, db: Session = Depends(get_db)):
    return create_slot(db, data)


@router.patch("/{slot_id}/book", response_model=TeeSlotRead)
def book_teetime(slot_id: str, data: BookRequest, db: Session = Depends(get_db)):
    return book_slot(db, slot_id, data.user_id, data.players)


@router.patch("/{slot_id}/cancel", response_model=TeeSlotRead)
def cancel_teetime(slot_id: str, data: CancelRequest, db: Session = Depends(get_db)):
    return cancel_slot(db, slot_id, data.user_id)


@router.patch("/{slot_id}", response_model=TeeSlotRead)
def update_teetime(slot_id: str, data: TeeSlotUpdate, db: Session = Depends(get_db)):
    return update_slot(db, slot_id, data)
