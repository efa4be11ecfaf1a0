"""
Calendar view builder

Produces month, week and day grids from a list of calendar entries. Entries
are bucketed into days by comparing local calendar-day strings; an entry
whose start cannot be parsed is logged and left out of the render instead
of failing the whole grid.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Iterable, Optional, Union
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from ...config import CALENDAR_FIRST_HOUR, CALENDAR_LAST_HOUR, STUDIO_TIMEZONE
from ...shared.validators import parse_iso_datetime, to_studio_time
from ..bookings.lifecycle import status_color

logger = logging.getLogger(__name__)

MONTH_GRID_DAYS = 42  # 6 full weeks, regardless of month length
DISPLAY_HOURS = tuple(range(CALENDAR_FIRST_HOUR, CALENDAR_LAST_HOUR + 1))


class ViewMode(str, Enum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"


@dataclass(frozen=True)
class CalendarEntry:
    """A booking as the calendar sees it"""

    id: int
    start: Union[datetime, str]
    duration: int
    status: str
    service: str
    client: str
    location: Optional[str] = None

    @property
    def color(self) -> str:
        return status_color(self.status)

    @classmethod
    def from_booking(cls, booking) -> "CalendarEntry":
        """Build an entry from a Booking row with client and service loaded"""
        return cls(
            id=booking.id,
            start=booking.date,
            duration=booking.duration,
            status=booking.status,
            service=booking.service.name if booking.service else "Unknown service",
            client=booking.client.name if booking.client else "Unknown client",
            location=booking.location,
        )


@dataclass
class DayCell:
    day: date
    in_month: bool
    is_today: bool
    bookings: list = field(default_factory=list)


@dataclass
class HourSlot:
    hour: int
    bookings: list = field(default_factory=list)

    @property
    def label(self) -> str:
        return f"{self.hour:02d}:00"


@dataclass
class DayColumn:
    day: date
    is_today: bool
    slots: list = field(default_factory=list)


@dataclass
class MonthView:
    year: int
    month: int
    cells: list


@dataclass
class WeekView:
    start: date
    end: date
    days: list


@dataclass
class DayView:
    day: date
    is_today: bool
    slots: list


def studio_today() -> date:
    """Current calendar day in the studio time zone"""
    return datetime.now(ZoneInfo(STUDIO_TIMEZONE)).date()


def week_start(day: date) -> date:
    """Most recent Sunday on or before day"""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def month_grid_start(day: date) -> date:
    """Sunday on or before the first day of day's month"""
    return week_start(day.replace(day=1))


def entry_start(entry: CalendarEntry) -> Optional[datetime]:
    """Local start of an entry, or None when its date cannot be parsed"""
    start = entry.start
    try:
        if isinstance(start, datetime):
            return to_studio_time(start)
        return parse_iso_datetime(start)
    except (TypeError, ValueError) as e:
        logger.warning(f"⚠️ Skipping booking {entry.id} with unparseable date {start!r}: {e}")
        return None


def locate(entries: Iterable[CalendarEntry]) -> list:
    """(local start, entry) pairs; entries with an unparseable start are dropped"""
    located = []
    for entry in entries:
        start = entry_start(entry)
        if start is not None:
            located.append((start, entry))
    return located


def _on_day(located: list, day: date) -> list:
    key = day.isoformat()
    return [(start, entry) for start, entry in located if start.date().isoformat() == key]


def bookings_for_day(entries: Iterable[CalendarEntry], day: date) -> list:
    """Entries whose local calendar day matches day"""
    return [entry for _, entry in _on_day(locate(entries), day)]


def _hour_slots(day_located: list) -> list:
    slots = []
    for hour in DISPLAY_HOURS:
        slots.append(HourSlot(hour=hour, bookings=[e for start, e in day_located if start.hour == hour]))
    return slots


def build_month(cursor: date, entries: Iterable[CalendarEntry], today: Optional[date] = None) -> MonthView:
    """42-cell month grid starting on the Sunday before the first of the month"""
    today = today or studio_today()
    located = locate(entries)
    start = month_grid_start(cursor)
    cells = []
    for offset in range(MONTH_GRID_DAYS):
        day = start + timedelta(days=offset)
        cells.append(
            DayCell(
                day=day,
                in_month=day.month == cursor.month,
                is_today=day == today,
                bookings=[e for _, e in _on_day(located, day)],
            )
        )
    return MonthView(year=cursor.year, month=cursor.month, cells=cells)


def build_week(cursor: date, entries: Iterable[CalendarEntry], today: Optional[date] = None) -> WeekView:
    """Seven day columns from Sunday, each split into the display hours"""
    today = today or studio_today()
    located = locate(entries)
    start = week_start(cursor)
    days = []
    for offset in range(7):
        day = start + timedelta(days=offset)
        days.append(
            DayColumn(day=day, is_today=day == today, slots=_hour_slots(_on_day(located, day)))
        )
    return WeekView(start=start, end=start + timedelta(days=6), days=days)


def build_day(cursor: date, entries: Iterable[CalendarEntry], today: Optional[date] = None) -> DayView:
    """Display hours for a single day"""
    today = today or studio_today()
    return DayView(
        day=cursor,
        is_today=cursor == today,
        slots=_hour_slots(_on_day(locate(entries), cursor)),
    )


BUILDERS = {
    ViewMode.MONTH: build_month,
    ViewMode.WEEK: build_week,
    ViewMode.DAY: build_day,
}


@dataclass
class CalendarCursor:
    """Mutable navigation state: the anchor date and the active view mode"""

    current: date
    mode: ViewMode = ViewMode.MONTH

    def _step(self) -> relativedelta:
        if self.mode == ViewMode.MONTH:
            return relativedelta(months=1)
        if self.mode == ViewMode.WEEK:
            return relativedelta(days=7)
        return relativedelta(days=1)

    def next(self) -> date:
        # relativedelta clamps month steps to the last day of shorter months
        self.current = self.current + self._step()
        return self.current

    def prev(self) -> date:
        self.current = self.current - self._step()
        return self.current

    def today(self, today: Optional[date] = None) -> date:
        """Jump back to today without touching the view mode"""
        self.current = today or studio_today()
        return self.current

    def set_mode(self, mode: Union[ViewMode, str]) -> ViewMode:
        self.mode = ViewMode(mode)
        return self.mode

    def range(self) -> tuple:
        """Inclusive (start, end) instants covered by the active view"""
        if self.mode == ViewMode.MONTH:
            first = month_grid_start(self.current)
            last = first + timedelta(days=MONTH_GRID_DAYS - 1)
        elif self.mode == ViewMode.WEEK:
            first = week_start(self.current)
            last = first + timedelta(days=6)
        else:
            first = last = self.current
        return datetime.combine(first, time.min), datetime.combine(last, time.max)

    def build(self, entries: Iterable[CalendarEntry], today: Optional[date] = None):
        return BUILDERS[self.mode](self.current, entries, today)
