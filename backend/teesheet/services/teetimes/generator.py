# backend/teesheet/services/teetimes/generator.py
"""
Slot generator: materializes a day's tee sheet on first access.

Inserts go through ON CONFLICT DO NOTHING against the (date, time) unique
constraint, so concurrent first readers of the same date cannot create
duplicates and a partially generated day is completed, not doubled.
"""

import logging
import uuid
from datetime import date

from sqlalchemy import func, insert
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models import TeeSlot
from .config import TeeSheetConfig, get_tee_sheet_config

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def ensure_slots_for_date(
    db: Session,
    target_date: date,
    config: TeeSheetConfig | None = None,
) -> int:
    """
    Create any missing slots for target_date.

    Returns:
        Number of slots inserted by this call (0 when the day already exists).
    """
    config = config or get_tee_sheet_config()

    existing = (
        db.query(func.count(TeeSlot.id))
        .filter(TeeSlot.date == target_date)
        .scalar()
    )
    if existing >= config.slots_per_day:
        return 0

    rows = [
        {
            "id": str(uuid.uuid4()),
            "date": target_date,
            "time": label,
            "start_minute": minute,
            "course": config.course,
            "holes": 18,
            "max_players": config.max_players,
            "price": config.price,
            "is_premium": False,
        }
        for minute, label in config.tee_times()
    ]

    try:
        created = _insert_missing(db, rows)
        db.commit()
    except Exception:
        db.rollback()
        raise

    if created:
        logger.info(f"Generated {created} tee times for {target_date.isoformat()}")
    return created


def _insert_missing(db: Session, rows: list[dict]) -> int:
    table = TeeSlot.__table__
    dialect = db.get_bind().dialect.name
    make_insert = _UPSERT_INSERTS.get(dialect)

    if make_insert is not None:
        stmt = make_insert(table).on_conflict_do_nothing(
            index_elements=["date", "time"],
        )
        created = 0
        for row in rows:
            result = db.execute(stmt, row)
            created += max(result.rowcount, 0)
        return created

    # Other backends: one savepoint per row, duplicates are skipped
    created = 0
    for row in rows:
        try:
            with db.begin_nested():
                db.execute(insert(table), row)
            created += 1
        except IntegrityError:
            continue
    return created
