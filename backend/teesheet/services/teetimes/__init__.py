"""
Tee-time slot management.

Generator: lazily materializes a day's slots
Booking:   book / cancel under a per-slot row lock
Queries:   slots by date, by user, all
"""

from .config import TeeSheetConfig, get_tee_sheet_config
from .generator import ensure_slots_for_date
from .booking import book_slot, cancel_slot
from .queries import get_slot, list_all_slots, list_slots_by_date, list_slots_by_user
from .admin import create_slot, update_slot
from .maintenance import clear_bookings_before, clear_bookings_for_date, reset_all_bookings

__all__ = [
    "TeeSheetConfig",
    "get_tee_sheet_config",
    "ensure_slots_for_date",
    "book_slot",
    "cancel_slot",
    "get_slot",
    "list_all_slots",
    "list_slots_by_date",
    "list_slots_by_user",
    "create_slot",
    "update_slot",
    "clear_bookings_before",
    "clear_bookings_for_date",
    "reset_all_bookings",
]
