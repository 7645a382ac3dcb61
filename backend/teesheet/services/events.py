"""
backend/teesheet/services/events.py

Tee-sheet events for downstream notifiers (email, push), queued on a Redis
list. Delivery is best-effort: a failed push is logged, never raised.

Event shapes:
  teetime_booked / teetime_cancelled:
      {slot_id, date, time, course, user_id, players, occupancy, max_players}
  teetimes_reset:
      {date | null, cutoff | null, players}
"""

import json
import time
import logging
from datetime import date
from enum import Enum

from ..redis_client import redis_client

logger = logging.getLogger(__name__)

EVENTS_QUEUE = "events:p2p"


class TeeSheetEvent(str, Enum):
    BOOKED = "teetime_booked"
    CANCELLED = "teetime_cancelled"
    RESET = "teetimes_reset"


def emit_slot_event(event: TeeSheetEvent, slot, user_id: str, players: int) -> None:
    """Booking or cancellation on one slot; `players` is the number added or removed."""
    _push(event, {
        "slot_id": slot.id,
        "date": slot.date.isoformat(),
        "time": slot.time,
        "course": slot.course,
        "user_id": user_id,
        "players": players,
        "occupancy": slot.occupancy,
        "max_players": slot.max_players,
    })


def emit_reset_event(
    players: int,
    target_date: date | None = None,
    cutoff: date | None = None,
) -> None:
    """
    Bookings cleared.

    target_date: a single date was cleared
    cutoff:      every date before cutoff was cleared
    neither:     all dates were cleared
    """
    _push(TeeSheetEvent.RESET, {
        "date": target_date.isoformat() if target_date else None,
        "cutoff": cutoff.isoformat() if cutoff else None,
        "players": players,
    })


def _push(event: TeeSheetEvent, payload: dict) -> None:
    message = json.dumps({"type": event.value, **payload, "ts": int(time.time())})
    try:
        redis_client.rpush(EVENTS_QUEUE, message)
        logger.info(f"Event emitted: {event.value} → {EVENTS_QUEUE}")
    except Exception as e:
        logger.error(f"Failed to emit event {event.value}: {e}")
