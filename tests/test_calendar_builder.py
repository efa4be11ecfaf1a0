"""
Unit tests for studio/domain/calendar/builder.py.

Every build call passes `today` explicitly so nothing depends on the clock.
"""

import logging
from datetime import date, datetime

import pytest

from studio.domain.calendar.builder import (
    DISPLAY_HOURS,
    MONTH_GRID_DAYS,
    CalendarCursor,
    CalendarEntry,
    DayView,
    MonthView,
    ViewMode,
    WeekView,
    bookings_for_day,
    build_day,
    build_month,
    build_week,
    month_grid_start,
    week_start,
)

TODAY = date(2025, 7, 10)


def entry(id=1, start=datetime(2025, 7, 15, 18, 0), status="pending"):
    return CalendarEntry(
        id=id,
        start=start,
        duration=90,
        status=status,
        service="Family Session",
        client="Leilani Kahale",
    )


def month_occurrences(view: MonthView, booking_id: int) -> list:
    return [c.day for c in view.cells for b in c.bookings if b.id == booking_id]


def week_occurrences(view: WeekView, booking_id: int) -> list:
    return [
        (d.day, s.hour)
        for d in view.days
        for s in d.slots
        for b in s.bookings
        if b.id == booking_id
    ]


# ---------------------------------------------------------------------------
# Grid anchors
# ---------------------------------------------------------------------------

class TestGridAnchors:

    def test_week_start_is_previous_sunday(self):
        assert week_start(date(2025, 7, 15)) == date(2025, 7, 13)

    def test_week_start_on_sunday_is_same_day(self):
        assert week_start(date(2025, 7, 13)) == date(2025, 7, 13)

    def test_month_grid_starts_on_sunday_before_first(self):
        assert month_grid_start(date(2025, 7, 20)) == date(2025, 6, 29)

    def test_month_starting_on_sunday_has_no_leading_days(self):
        assert month_grid_start(date(2025, 6, 10)) == date(2025, 6, 1)


# ---------------------------------------------------------------------------
# Month view
# ---------------------------------------------------------------------------

class TestMonthView:

    @pytest.mark.parametrize("cursor", [
        date(2025, 2, 1), date(2025, 6, 30), date(2025, 7, 15), date(2024, 2, 29), date(2026, 11, 1),
    ])
    def test_always_42_cells_starting_on_sunday(self, cursor):
        view = build_month(cursor, [], today=TODAY)
        assert len(view.cells) == MONTH_GRID_DAYS == 42
        assert view.cells[0].day.weekday() == 6
        assert view.cells[0].day <= cursor.replace(day=1)

    def test_in_month_and_today_flags(self):
        view = build_month(date(2025, 7, 1), [], today=TODAY)
        assert view.cells[0].day == date(2025, 6, 29)
        assert not view.cells[0].in_month
        assert view.cells[-1].day == date(2025, 8, 9)
        assert [c.day for c in view.cells if c.is_today] == [TODAY]
        assert sum(1 for c in view.cells if c.in_month) == 31

    def test_booking_appears_in_exactly_one_cell(self):
        view = build_month(date(2025, 7, 1), [entry()], today=TODAY)
        assert month_occurrences(view, 1) == [date(2025, 7, 15)]

    def test_bookings_outside_display_hours_still_show_in_month(self):
        view = build_month(date(2025, 7, 1), [entry(start=datetime(2025, 7, 15, 7, 30))], today=TODAY)
        assert month_occurrences(view, 1) == [date(2025, 7, 15)]

    def test_utc_string_is_bucketed_by_studio_day(self):
        # 04:00 UTC on the 16th is 18:00 on the 15th in Honolulu
        view = build_month(date(2025, 7, 1), [entry(start="2025-07-16T04:00:00Z")], today=TODAY)
        assert month_occurrences(view, 1) == [date(2025, 7, 15)]

    def test_unparseable_date_is_skipped_and_logged(self, caplog):
        entries = [entry(id=1), entry(id=2, start="not-a-date")]
        with caplog.at_level(logging.WARNING):
            view = build_month(date(2025, 7, 1), entries, today=TODAY)
        assert month_occurrences(view, 1) == [date(2025, 7, 15)]
        assert month_occurrences(view, 2) == []
        assert "not-a-date" in caplog.text

    def test_bookings_for_day_matches_calendar_day(self):
        entries = [entry(id=1), entry(id=2, start=datetime(2025, 7, 16, 0, 0))]
        assert [e.id for e in bookings_for_day(entries, date(2025, 7, 15))] == [1]


# ---------------------------------------------------------------------------
# Week and day views
# ---------------------------------------------------------------------------

class TestWeekAndDayViews:

    def test_display_hours_are_9_to_18_inclusive(self):
        assert DISPLAY_HOURS == tuple(range(9, 19))

    def test_week_has_seven_days_from_sunday(self):
        view = build_week(date(2025, 7, 15), [], today=TODAY)
        assert view.start == date(2025, 7, 13)
        assert view.end == date(2025, 7, 19)
        assert [d.day.weekday() for d in view.days] == [6, 0, 1, 2, 3, 4, 5]
        assert all(len(d.slots) == 10 for d in view.days)

    def test_booking_lands_in_its_hour_row(self):
        view = build_week(date(2025, 7, 15), [entry()], today=TODAY)
        assert week_occurrences(view, 1) == [(date(2025, 7, 15), 18)]

    def test_booking_outside_window_is_not_shown(self):
        early = entry(id=1, start=datetime(2025, 7, 15, 8, 0))
        late = entry(id=2, start=datetime(2025, 7, 15, 19, 0))
        view = build_week(date(2025, 7, 15), [early, late], today=TODAY)
        assert week_occurrences(view, 1) == []
        assert week_occurrences(view, 2) == []

    def test_day_view_slots_and_labels(self):
        view = build_day(date(2025, 7, 15), [entry()], today=date(2025, 7, 15))
        assert isinstance(view, DayView)
        assert view.is_today
        assert [s.label for s in view.slots][0] == "09:00"
        assert [s.label for s in view.slots][-1] == "18:00"
        assert [(s.hour, [b.id for b in s.bookings]) for s in view.slots if s.bookings] == [(18, [1])]

    def test_entry_color_follows_status(self):
        assert entry(status="pending").color == "yellow"
        assert entry(status="confirmed").color == "green"


# ---------------------------------------------------------------------------
# Cursor navigation
# ---------------------------------------------------------------------------

class TestCalendarCursor:

    def test_month_steps_clamp_to_month_end(self):
        cursor = CalendarCursor(current=date(2025, 1, 31))
        assert cursor.next() == date(2025, 2, 28)
        assert cursor.prev() == date(2025, 1, 28)

    def test_week_and_day_steps(self):
        cursor = CalendarCursor(current=date(2025, 7, 15), mode=ViewMode.WEEK)
        assert cursor.next() == date(2025, 7, 22)
        cursor.set_mode("day")
        assert cursor.prev() == date(2025, 7, 21)

    def test_today_keeps_mode(self):
        cursor = CalendarCursor(current=date(2024, 1, 1), mode=ViewMode.WEEK)
        assert cursor.today(TODAY) == TODAY
        assert cursor.mode == ViewMode.WEEK

    def test_set_mode_rejects_unknown_mode(self):
        cursor = CalendarCursor(current=TODAY)
        with pytest.raises(ValueError):
            cursor.set_mode("year")

    def test_month_range_covers_whole_grid(self):
        start, end = CalendarCursor(current=date(2025, 7, 15)).range()
        assert start == datetime(2025, 6, 29, 0, 0)
        assert end.date() == date(2025, 8, 9)
        assert end.hour == 23

    def test_day_range_is_one_day(self):
        start, end = CalendarCursor(current=date(2025, 7, 15), mode=ViewMode.DAY).range()
        assert start.date() == end.date() == date(2025, 7, 15)

    def test_build_dispatches_on_mode(self):
        cursor = CalendarCursor(current=date(2025, 7, 15), mode=ViewMode.WEEK)
        assert isinstance(cursor.build([entry()], TODAY), WeekView)
        cursor.set_mode(ViewMode.MONTH)
        assert isinstance(cursor.build([entry()], TODAY), MonthView)
