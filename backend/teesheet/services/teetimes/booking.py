# backend/teesheet/services/teetimes/booking.py
"""
Booking and cancellation of tee-time slots.

Both operations run as one read-modify-write transaction on the slot:
the slot row is locked before occupancy is read, players are appended or
removed, and the transaction commits. Any precondition failure rolls back,
so a slot is never left partially updated.

Guests are attributed to the booking member: every player added in one
booking carries the member's user id, and cancelling removes them together.
"""

import logging
from typing import Sequence

from sqlalchemy.orm import Session, selectinload

from ...errors import BookingConflict, BookingValidationError, CapacityExceeded, SlotNotFound
from ...models import BookedPlayer, TeeSlot
from ...schemas.teetimes import PlayerSpec
from ..events import TeeSheetEvent, emit_slot_event

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_TYPE = "member"
DEFAULT_TRANSPORT_MODE = "riding"
DEFAULT_HOLES_PLAYING = "18"


def book_slot(
    db: Session,
    slot_id: str,
    user_id: str,
    players: Sequence[PlayerSpec],
) -> TeeSlot:
    """
    Add players to a slot on behalf of user_id.

    Checks, first failure wins:
      1. slot exists            → SlotNotFound
      2. user not yet booked    → BookingConflict
      3. enough spots remaining → CapacityExceeded
    """
    if not user_id:
        raise BookingValidationError("userId is required")
    if not players:
        raise BookingValidationError("At least one player is required")

    try:
        slot = lock_slot(db, slot_id)

        if user_id in slot.booked_by:
            raise BookingConflict("You have already booked this tee time")

        available = slot.max_players - slot.occupancy
        if len(players) > available:
            raise CapacityExceeded(requested=len(players), available=max(available, 0))

        for spec in players:
            position = slot.occupancy + 1
            slot.players.append(BookedPlayer(
                user_id=user_id,
                name=spec.name or f"Player {position}",
                player_type=spec.type or DEFAULT_PLAYER_TYPE,
                transport_mode=spec.transport_mode or DEFAULT_TRANSPORT_MODE,
                holes_playing=spec.holes_playing or DEFAULT_HOLES_PLAYING,
            ))

        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(slot)
    logger.info(
        f"Tee time {slot.id} ({slot.date.isoformat()} {slot.time}) booked by {user_id}: "
        f"{len(players)} player(s), occupancy {slot.occupancy}/{slot.max_players}"
    )
    emit_slot_event(TeeSheetEvent.BOOKED, slot, user_id, len(players))
    return slot


def cancel_slot(db: Session, slot_id: str, user_id: str) -> TeeSlot:
    """Remove user_id and every guest they registered from the slot."""
    if not user_id:
        raise BookingValidationError("userId is required")

    try:
        slot = lock_slot(db, slot_id)

        removed = [p for p in slot.players if p.user_id == user_id]
        if not removed:
            raise BookingConflict("You have not booked this tee time")

        for player in removed:
            slot.players.remove(player)
        slot.players.reorder()

        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(slot)
    logger.info(
        f"Tee time {slot.id} ({slot.date.isoformat()} {slot.time}) cancelled by {user_id}: "
        f"{len(removed)} player(s) removed"
    )
    emit_slot_event(TeeSheetEvent.CANCELLED, slot, user_id, len(removed))
    return slot


def lock_slot(db: Session, slot_id: str) -> TeeSlot:
    """Load the slot with its players under a row lock (FOR UPDATE)."""
    slot = (
        db.query(TeeSlot)
        .options(selectinload(TeeSlot.players))
        .filter(TeeSlot.id == slot_id)
        .populate_existing()
        .with_for_update()
        .first()
    )
    if not slot:
        raise SlotNotFound(slot_id)
    return slot
