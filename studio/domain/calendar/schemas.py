"""Calendar and availability schemas"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from .builder import CalendarEntry, DayCell, DayColumn, DayView, HourSlot, MonthView, WeekView


class AvailabilityBooking(BaseModel):
    id: int
    date: datetime
    duration: int
    service: str
    client: str
    status: str


class AvailabilityResponse(BaseModel):
    bookings: list[AvailabilityBooking]


class CalendarBooking(BaseModel):
    id: int
    start: datetime
    duration: int
    status: str
    color: str
    service: str
    client: str
    location: Optional[str] = None


class HourSlotOut(BaseModel):
    hour: int
    label: str
    bookings: list[CalendarBooking]


class DayCellOut(BaseModel):
    day: date
    inMonth: bool
    isToday: bool
    bookings: list[CalendarBooking]


class DayColumnOut(BaseModel):
    day: date
    isToday: bool
    slots: list[HourSlotOut]


class CalendarResponse(BaseModel):
    """One rendered view; only the field matching the view is filled in"""

    view: str
    date: date
    rangeStart: datetime
    rangeEnd: datetime
    cells: Optional[list[DayCellOut]] = None
    days: Optional[list[DayColumnOut]] = None
    slots: Optional[list[HourSlotOut]] = None


def _booking_out(entry: CalendarEntry) -> CalendarBooking:
    return CalendarBooking(
        id=entry.id,
        start=entry.start,
        duration=entry.duration,
        status=entry.status,
        color=entry.color,
        service=entry.service,
        client=entry.client,
        location=entry.location,
    )


def _slot_out(slot: HourSlot) -> HourSlotOut:
    return HourSlotOut(hour=slot.hour, label=slot.label, bookings=[_booking_out(b) for b in slot.bookings])


def _cell_out(cell: DayCell) -> DayCellOut:
    return DayCellOut(
        day=cell.day,
        inMonth=cell.in_month,
        isToday=cell.is_today,
        bookings=[_booking_out(b) for b in cell.bookings],
    )


def _column_out(column: DayColumn) -> DayColumnOut:
    return DayColumnOut(
        day=column.day, isToday=column.is_today, slots=[_slot_out(s) for s in column.slots]
    )


def view_to_response(view, anchor: date, range_start: datetime, range_end: datetime) -> CalendarResponse:
    response = CalendarResponse(view="", date=anchor, rangeStart=range_start, rangeEnd=range_end)
    if isinstance(view, MonthView):
        response.view = "month"
        response.cells = [_cell_out(c) for c in view.cells]
    elif isinstance(view, WeekView):
        response.view = "week"
        response.days = [_column_out(d) for d in view.days]
    elif isinstance(view, DayView):
        response.view = "day"
        response.slots = [_slot_out(s) for s in view.slots]
    return response
