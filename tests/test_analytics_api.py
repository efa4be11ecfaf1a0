"""API tests for /api/analytics."""

from datetime import datetime
from decimal import Decimal

from dateutil.relativedelta import relativedelta


class TestStats:

    def test_counts_and_current_month_revenue(self, client, make_booking):
        now = datetime.now().replace(microsecond=0)
        make_booking(now, status="confirmed", total_price=Decimal("100.00"))
        make_booking(now, status="pending", total_price=Decimal("50.00"))
        make_booking(now - relativedelta(years=1), status="confirmed", total_price=Decimal("900.00"))

        stats = client.get("/api/analytics/stats").json()
        assert stats == {
            "totalBookings": 3,
            "pendingBookings": 1,
            "confirmedBookings": 2,
            "monthlyRevenue": 100.0,
        }

    def test_empty_database(self, client):
        stats = client.get("/api/analytics/stats").json()
        assert stats["totalBookings"] == 0
        assert stats["monthlyRevenue"] == 0.0


class TestRevenue:

    def test_sums_confirmed_bookings_in_month(self, client, make_booking):
        make_booking(datetime(2025, 7, 1, 0, 0), status="confirmed", total_price=Decimal("100.00"))
        make_booking(datetime(2025, 7, 31, 20, 0), status="confirmed", total_price=Decimal("250.00"))
        make_booking(datetime(2025, 7, 10, 9, 0), status="cancelled", total_price=Decimal("999.00"))
        make_booking(datetime(2025, 7, 11, 9, 0), status="pending", total_price=Decimal("999.00"))
        make_booking(datetime(2025, 8, 1, 0, 0), status="confirmed", total_price=Decimal("999.00"))

        assert client.get("/api/analytics/revenue/2025/7").json() == {"revenue": 350.0}
        assert client.get("/api/analytics/revenue/2025/8").json() == {"revenue": 999.0}
        assert client.get("/api/analytics/revenue/2024/7").json() == {"revenue": 0.0}

    def test_invalid_month_is_400(self, client):
        assert client.get("/api/analytics/revenue/2025/13").status_code == 400


class TestStatusBreakdown:

    def test_breakdown(self, client, make_booking):
        for status in ["confirmed", "confirmed", "confirmed", "pending"]:
            make_booking(datetime(2025, 7, 15, 18, 0), status=status)

        body = client.get("/api/analytics/status-breakdown").json()
        assert body["total"] == 4
        assert body["statuses"]["confirmed"] == {"count": 3, "percentage": 75}
        assert body["statuses"]["pending"] == {"count": 1, "percentage": 25}
        assert body["statuses"]["cancelled"] == {"count": 0, "percentage": 0}


class TestClientMetrics:

    def test_counts_and_average_lifetime_value(self, client, make_client, make_booking):
        now = datetime.now().replace(microsecond=0)
        regular = make_client(
            email="regular@example.com", status="repeat", lifetime_value=Decimal("500.00"), created_at=now
        )
        older = make_client(
            email="older@example.com", lifetime_value=Decimal("100.00"), created_at=now - relativedelta(months=2)
        )
        make_booking(datetime(2025, 7, 15, 18, 0), client=regular)
        make_booking(datetime(2025, 8, 15, 18, 0), client=regular)
        make_booking(datetime(2025, 9, 15, 18, 0), client=older)

        body = client.get("/api/analytics/clients").json()
        assert body == {
            "totalClients": 2,
            "newThisMonth": 1,
            "repeatClients": 1,
            "avgLifetimeValue": 300.0,
            "byStatus": {"repeat": 1, "lead": 1},
        }

    def test_no_clients(self, client):
        body = client.get("/api/analytics/clients").json()
        assert body["totalClients"] == 0
        assert body["avgLifetimeValue"] == 0.0
