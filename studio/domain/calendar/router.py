"""Calendar router - availability query and rendered calendar grids"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ...database import get_db
from ...shared.validators import parse_iso_datetime
from ..bookings.repository import BookingRepository
from .builder import CalendarCursor, CalendarEntry, ViewMode, studio_today
from .schemas import AvailabilityBooking, AvailabilityResponse, CalendarResponse, view_to_response

logger = logging.getLogger(__name__)

availability_router = APIRouter(prefix="/api/availability", tags=["Availability"])
router = APIRouter(prefix="/api/calendar", tags=["Calendar"])


@availability_router.get("", response_model=AvailabilityResponse)
async def get_availability(
    start: Optional[str] = Query(None, description="ISO 8601 range start (inclusive)"),
    end: Optional[str] = Query(None, description="ISO 8601 range end (inclusive)"),
    db: Session = Depends(get_db),
):
    """Bookings whose date falls in [start, end], oldest first. No slot or conflict math."""
    if not start or not end:
        raise HTTPException(status_code=400, detail="Start and end dates are required")

    try:
        start_dt = parse_iso_datetime(start)
        end_dt = parse_iso_datetime(end)
    except ValueError as e:
        logger.warning(f"Invalid availability range {start!r} - {end!r}: {e}")
        raise HTTPException(status_code=400, detail="Start and end must be ISO 8601 dates") from e

    bookings = BookingRepository.get_bookings_by_date_range(db, start_dt, end_dt)
    return AvailabilityResponse(
        bookings=[
            AvailabilityBooking(
                id=b.id,
                date=b.date,
                duration=b.duration,
                service=b.service.name if b.service else "Unknown service",
                client=b.client.name if b.client else "Unknown client",
                status=b.status,
            )
            for b in bookings
        ]
    )


@router.get("", response_model=CalendarResponse)
async def get_calendar(
    view: ViewMode = Query(ViewMode.MONTH),
    anchor: Optional[date] = Query(None, alias="date", description="Cursor date, YYYY-MM-DD"),
    db: Session = Depends(get_db),
):
    """Render the month, week or day grid around a cursor date"""
    today = studio_today()
    cursor = CalendarCursor(current=anchor or today, mode=view)
    range_start, range_end = cursor.range()

    bookings = BookingRepository.get_bookings_by_date_range(db, range_start, range_end)
    entries = [CalendarEntry.from_booking(b) for b in bookings]
    logger.debug(f"📅 {view.value} view for {cursor.current}: {len(entries)} bookings in range")

    grid = cursor.build(entries, today)
    return view_to_response(grid, cursor.current, range_start, range_end)
