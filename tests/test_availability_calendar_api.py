"""API tests for /api/availability and /api/calendar."""

from datetime import datetime


class TestAvailability:

    def test_start_and_end_are_required(self, client):
        for params in [{}, {"start": "2025-07-01T00:00:00"}, {"end": "2025-07-31T23:59:59"}]:
            response = client.get("/api/availability", params=params)
            assert response.status_code == 400
            assert response.json()["detail"] == "Start and end dates are required"

    def test_unparseable_range_is_400(self, client):
        response = client.get("/api/availability", params={"start": "July", "end": "August"})
        assert response.status_code == 400

    def test_range_is_inclusive_and_ordered(self, client, make_booking):
        last_day = make_booking(datetime(2025, 7, 31, 17, 0))
        first_day = make_booking(datetime(2025, 7, 1, 9, 0))
        make_booking(datetime(2025, 8, 1, 10, 0))
        make_booking(datetime(2025, 6, 30, 18, 0))

        response = client.get(
            "/api/availability", params={"start": "2025-07-01T09:00:00", "end": "2025-07-31T17:00:00"}
        )
        assert response.status_code == 200
        bookings = response.json()["bookings"]
        assert [b["id"] for b in bookings] == [first_day.id, last_day.id]
        assert set(bookings[0]) == {"id", "date", "duration", "service", "client", "status"}
        assert bookings[0]["service"] == "Family Session"

    def test_utc_bounds_are_converted_to_studio_time(self, client, make_booking):
        booking = make_booking(datetime(2025, 7, 15, 18, 0))
        # 2025-07-16 04:00 UTC is 18:00 on the 15th in Honolulu
        response = client.get(
            "/api/availability", params={"start": "2025-07-16T04:00:00Z", "end": "2025-07-16T05:00:00Z"}
        )
        assert [b["id"] for b in response.json()["bookings"]] == [booking.id]

    def test_cancelled_bookings_are_listed(self, client, make_booking):
        booking = make_booking(datetime(2025, 7, 15, 18, 0), status="cancelled")
        response = client.get(
            "/api/availability", params={"start": "2025-07-15T00:00:00", "end": "2025-07-15T23:59:59"}
        )
        assert response.json()["bookings"][0]["id"] == booking.id


class TestCalendar:

    def test_month_view_defaults(self, client):
        response = client.get("/api/calendar", params={"date": "2025-07-10"})
        assert response.status_code == 200
        body = response.json()
        assert body["view"] == "month"
        assert len(body["cells"]) == 42
        assert body["cells"][0]["day"] == "2025-06-29"
        assert body["rangeStart"] == "2025-06-29T00:00:00"
        assert body["days"] is None and body["slots"] is None

    def test_month_view_includes_trailing_grid_days(self, client, make_booking):
        booking = make_booking(datetime(2025, 8, 2, 11, 0))
        cells = client.get("/api/calendar", params={"view": "month", "date": "2025-07-10"}).json()["cells"]
        cell = next(c for c in cells if c["day"] == "2025-08-02")
        assert not cell["inMonth"]
        assert [b["id"] for b in cell["bookings"]] == [booking.id]

    def test_week_view(self, client):
        body = client.get("/api/calendar", params={"view": "week", "date": "2025-07-15"}).json()
        assert [d["day"] for d in body["days"]][0] == "2025-07-13"
        assert len(body["days"]) == 7
        assert [s["hour"] for s in body["days"][0]["slots"]] == list(range(9, 19))

    def test_day_view(self, client, make_booking):
        booking = make_booking(datetime(2025, 7, 15, 9, 0), status="confirmed")
        body = client.get("/api/calendar", params={"view": "day", "date": "2025-07-15"}).json()
        assert len(body["slots"]) == 10
        first = body["slots"][0]
        assert first["label"] == "09:00"
        assert first["bookings"][0]["id"] == booking.id
        assert first["bookings"][0]["color"] == "green"

    def test_unknown_view_is_422(self, client):
        assert client.get("/api/calendar", params={"view": "year"}).status_code == 422
