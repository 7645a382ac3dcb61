# backend/teesheet/services/teetimes/admin.py
"""
Administrative slot management: ad-hoc slots and field overrides.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...errors import BookingConflict, BookingValidationError
from ...models import TeeSlot
from ...schemas.teetimes import TeeSlotCreate, TeeSlotUpdate
from .booking import lock_slot
from .config import get_tee_sheet_config, normalize_time_label, time_str_to_minutes

logger = logging.getLogger(__name__)


def _parse_time(value: str) -> tuple[int, str]:
    try:
        minute = time_str_to_minutes(value)
    except ValueError:
        raise BookingValidationError(f"Invalid tee time: {value!r}")
    return minute, normalize_time_label(value)


def create_slot(db: Session, data: TeeSlotCreate) -> TeeSlot:
    """Create a single slot outside the generated grid."""
    config = get_tee_sheet_config()
    start_minute, label = _parse_time(data.time)

    slot = TeeSlot(
        date=data.date,
        time=label,
        start_minute=start_minute,
        course=data.course or config.course,
        holes=data.holes,
        max_players=data.max_players or config.max_players,
        price=data.price if data.price is not None else config.price,
        is_premium=data.is_premium,
    )
    db.add(slot)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BookingConflict(f"A tee time already exists on {data.date.isoformat()} at {label}")

    db.refresh(slot)
    logger.info(f"Created tee time {slot.id} ({slot.date.isoformat()} {slot.time})")
    return slot


def update_slot(db: Session, slot_id: str, data: TeeSlotUpdate) -> TeeSlot:
    """Apply admin field overrides; capacity may not drop below occupancy."""
    updates = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None
    }
    if not updates:
        raise BookingValidationError("No valid fields to update")

    try:
        slot = lock_slot(db, slot_id)

        if "time" in updates:
            slot.start_minute, slot.time = _parse_time(updates.pop("time"))

        max_players = updates.get("max_players")
        if max_players is not None and max_players < slot.occupancy:
            raise BookingValidationError(
                f"maxPlayers cannot be lower than current occupancy ({slot.occupancy})"
            )

        for field, value in updates.items():
            setattr(slot, field, value)

        db.commit()
    except IntegrityError:
        db.rollback()
        raise BookingConflict("Another tee time already exists at that date and time")
    except Exception:
        db.rollback()
        raise

    db.refresh(slot)
    logger.info(f"Updated tee time {slot.id}: {sorted(data.model_dump(exclude_unset=True))}")
    return slot
