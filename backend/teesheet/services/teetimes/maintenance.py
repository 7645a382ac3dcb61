# backend/teesheet/services/teetimes/maintenance.py
"""
Booking resets. Slots are kept; only their players are removed.
Both operations are idempotent.
"""

import logging
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ...models import BookedPlayer, TeeSlot

logger = logging.getLogger(__name__)


def clear_bookings_for_date(db: Session, target_date: date) -> int:
    """
    Remove every player from target_date's slots.

    Returns:
        Number of player entries removed (0 on a repeated run).
    """
    slot_ids = select(TeeSlot.id).where(TeeSlot.date == target_date)
    try:
        result = db.execute(
            delete(BookedPlayer)
            .where(BookedPlayer.slot_id.in_(slot_ids))
            .execution_options(synchronize_session=False)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    removed = max(result.rowcount, 0)
    if removed:
        logger.info(f"Cleared {removed} player(s) from tee times on {target_date.isoformat()}")
    return removed


def reset_all_bookings(db: Session) -> int:
    """Remove every player from every slot on every date."""
    try:
        result = db.execute(
            delete(BookedPlayer).execution_options(synchronize_session=False)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    removed = max(result.rowcount, 0)
    logger.info(f"Reset all tee time bookings: {removed} player(s) removed")
    return removed


def clear_bookings_before(db: Session, cutoff: date) -> int:
    """Remove every player from slots dated before cutoff (exclusive)."""
    slot_ids = select(TeeSlot.id).where(TeeSlot.date < cutoff)
    try:
        result = db.execute(
            delete(BookedPlayer)
            .where(BookedPlayer.slot_id.in_(slot_ids))
            .execution_options(synchronize_session=False)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise

    removed = max(result.rowcount, 0)
    if removed:
        logger.info(f"Cleared {removed} player(s) from tee times before {cutoff.isoformat()}")
    return removed
