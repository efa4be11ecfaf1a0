"""
Booking status lifecycle

Statuses: pending, confirmed, completed, cancelled

Every status may be set from every other one. Transitions are explicit admin
actions only; nothing moves a booking automatically (a past confirmed booking
stays confirmed until someone marks it completed).
"""

import logging
from enum import Enum
from typing import Mapping, Optional, Union

logger = logging.getLogger(__name__)


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


STATUS_COLORS = {
    BookingStatus.CONFIRMED: "green",
    BookingStatus.PENDING: "yellow",
    BookingStatus.CANCELLED: "red",
}
DEFAULT_STATUS_COLOR = "gray"


class BookingLifecycle:
    """State machine for booking statuses. Any known status may follow any other."""

    STATES = tuple(BookingStatus)

    @staticmethod
    def parse(status: Union[str, BookingStatus]) -> BookingStatus:
        """Coerce a raw status string, raising ValueError for unknown values"""
        try:
            return BookingStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in BookingStatus)
            raise ValueError(f"Unknown booking status '{status}'. Allowed: {allowed}") from None

    @classmethod
    def can_transition(cls, current: Optional[str], requested: str) -> bool:
        """True when the requested status is a known status"""
        try:
            cls.parse(requested)
        except ValueError:
            return False
        return True

    @classmethod
    def transition(cls, current: Optional[str], requested: Union[str, BookingStatus]) -> BookingStatus:
        """Return the requested status; every known status is reachable from every other"""
        target = cls.parse(requested)
        if current != target.value:
            logger.info(f"🔄 Booking status transition: {current} → {target.value}")
        return target


def status_color(status: Optional[str]) -> str:
    """Badge color for a status; unknown and completed bookings render gray"""
    try:
        return STATUS_COLORS.get(BookingStatus(status), DEFAULT_STATUS_COLOR)
    except ValueError:
        return DEFAULT_STATUS_COLOR


def status_breakdown(counts: Mapping[str, int]) -> dict:
    """
    Build per-status counts and whole-number percentages of the total.

    Statuses missing from counts are reported as zero. Percentages are
    rounded independently, so they may not add up to exactly 100.
    """
    total = sum(counts.get(s.value, 0) for s in BookingStatus)
    breakdown = {}
    for status in BookingStatus:
        count = counts.get(status.value, 0)
        percentage = round(count * 100 / total) if total else 0
        breakdown[status.value] = {"count": count, "percentage": percentage}
    return {"total": total, "statuses": breakdown}
