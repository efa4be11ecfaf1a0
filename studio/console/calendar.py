"""Calendar controller for the admin console"""

import logging
from datetime import date
from typing import Optional, Union

from ..domain.bookings.lifecycle import BookingLifecycle
from ..domain.calendar.builder import CalendarCursor, ViewMode, studio_today
from .store import BookingDesk

logger = logging.getLogger(__name__)


class CalendarController:
    """Navigation state plus rendering of the active view from the booking desk"""

    def __init__(self, desk: BookingDesk, cursor: Optional[CalendarCursor] = None):
        self.desk = desk
        self.cursor = cursor or CalendarCursor(current=studio_today())

    @property
    def mode(self) -> ViewMode:
        return self.cursor.mode

    async def render(self, today: Optional[date] = None):
        """Fetch the active view's range through the store and build its grid"""
        start, end = self.cursor.range()
        result = await self.desk.availability(start, end)
        if result.rejected:
            logger.warning(f"⚠️ {len(result.rejected)} bookings left out of the {self.mode.value} view")
        entries = [record.to_entry() for record in result.valid]
        return self.cursor.build(entries, today)

    def next(self) -> date:
        return self.cursor.next()

    def prev(self) -> date:
        return self.cursor.prev()

    def today(self, today: Optional[date] = None) -> date:
        return self.cursor.today(today)

    def set_mode(self, mode: Union[ViewMode, str]) -> ViewMode:
        return self.cursor.set_mode(mode)

    async def set_status(self, booking_id: int, status: str):
        """Change one booking's status; the next render refetches"""
        target = BookingLifecycle.parse(status)
        return await self.desk.set_status(booking_id, target.value)
