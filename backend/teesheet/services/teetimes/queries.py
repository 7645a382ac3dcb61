# backend/teesheet/services/teetimes/queries.py
"""
Read side of the tee sheet. Every call reads from the database; nothing is
cached in process.
"""

from datetime import date

from sqlalchemy.orm import Session, selectinload

from ...errors import SlotNotFound
from ...models import BookedPlayer, TeeSlot
from .generator import ensure_slots_for_date


def list_slots_by_date(db: Session, target_date: date) -> list[TeeSlot]:
    """All slots for target_date, generating the day first if needed."""
    ensure_slots_for_date(db, target_date)
    return (
        db.query(TeeSlot)
        .options(selectinload(TeeSlot.players))
        .filter(TeeSlot.date == target_date)
        .order_by(TeeSlot.start_minute)
        .all()
    )


def list_slots_by_user(db: Session, user_id: str) -> list[TeeSlot]:
    """Every slot, on any date, where user_id holds at least one player entry."""
    booked_slot_ids = (
        db.query(BookedPlayer.slot_id)
        .filter(BookedPlayer.user_id == user_id)
    )
    return (
        db.query(TeeSlot)
        .options(selectinload(TeeSlot.players))
        .filter(TeeSlot.id.in_(booked_slot_ids))
        .order_by(TeeSlot.date, TeeSlot.start_minute)
        .all()
    )


def list_all_slots(db: Session) -> list[TeeSlot]:
    return (
        db.query(TeeSlot)
        .options(selectinload(TeeSlot.players))
        .order_by(TeeSlot.date, TeeSlot.start_minute)
        .all()
    )


def get_slot(db: Session, slot_id: str) -> TeeSlot:
    slot = db.get(TeeSlot, slot_id)
    if not slot:
        raise SlotNotFound(slot_id)
    return slot
