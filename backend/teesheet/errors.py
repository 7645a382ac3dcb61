# backend/teesheet/errors.py
"""
Domain errors raised by the tee-time services.

Each class carries the HTTP status it is translated to at the request
boundary (see main.py exception handlers).
"""


class TeeSheetError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SlotNotFound(TeeSheetError):
    status_code = 404

    def __init__(self, slot_id: str):
        super().__init__("Tee time not found")
        self.slot_id = slot_id


class BookingConflict(TeeSheetError):
    """User already booked (booking) or not booked (cancellation)."""
    status_code = 409


class CapacityExceeded(TeeSheetError):
    status_code = 400

    def __init__(self, requested: int, available: int):
        spots = "spot" if available == 1 else "spots"
        super().__init__(
            f"Not enough spots available: requested {requested}, "
            f"only {available} {spots} remaining"
        )
        self.requested = requested
        self.available = available


class BookingValidationError(TeeSheetError):
    status_code = 400
