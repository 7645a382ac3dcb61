"""
Daily tee sheet reset.

Periodically clears bookings on every date before today (players removed,
slots kept), so days missed while the service was down are swept on the
next run. A Redis marker per day skips runs already done; the clear itself
is idempotent, so a lost marker only costs one redundant DELETE.

Runs as an asyncio task in the app lifespan.
Uses synchronous DB and Redis (via asyncio.to_thread).
"""

import asyncio
import logging
from datetime import date

from ..config import settings
from ..database import SessionLocal
from ..redis_client import redis_client
from .events import emit_reset_event
from .teetimes.maintenance import clear_bookings_before

logger = logging.getLogger(__name__)

DONE_KEY_TTL = 2 * 86400  # two days


async def booking_reset_loop() -> None:
    """Clear expired bookings, then sleep, forever."""
    logger.info("booking_reset_loop started")

    try:
        while True:
            try:
                await asyncio.to_thread(reset_expired_bookings)
            except asyncio.CancelledError:
                logger.info("booking_reset_loop cancelled")
                raise
            except Exception:
                logger.exception("booking_reset_loop error")

            await asyncio.sleep(settings.reset_check_interval_seconds)
    except asyncio.CancelledError:
        pass


def reset_expired_bookings(today: date | None = None) -> int | None:
    """
    Clear bookings on all dates before `today` (synchronous).

    Returns:
        Number of players removed, or None if today's sweep already ran.
    """
    cutoff = today or date.today()
    done_key = f"teetimes:reset:{cutoff.isoformat()}"

    if _already_done(done_key):
        return None

    db = SessionLocal()
    try:
        removed = clear_bookings_before(db, cutoff)
    finally:
        db.close()

    try:
        redis_client.setex(done_key, DONE_KEY_TTL, "1")
    except Exception as e:
        logger.warning(f"Failed to store reset marker {done_key}: {e}")

    if removed:
        emit_reset_event(removed, cutoff=cutoff)
    logger.info(f"Daily reset before {cutoff.isoformat()}: {removed} player(s) removed")
    return removed


def _already_done(done_key: str) -> bool:
    try:
        return bool(redis_client.exists(done_key))
    except Exception as e:
        logger.warning(f"Reset marker lookup failed for {done_key}: {e}")
        return False
