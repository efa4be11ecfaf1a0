"""Analytics service - Booking, revenue and client figures for the dashboard"""

import logging
from datetime import datetime
from typing import Optional

from dateutil.relativedelta import relativedelta
from fastapi import HTTPException
from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Booking, Client
from ..bookings.lifecycle import BookingStatus, status_breakdown
from ..bookings.repository import BookingRepository

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Read-only aggregate queries over bookings"""

    def __init__(self, db: Session):
        self.db = db

    def get_monthly_revenue(self, year: int, month: int) -> float:
        """Sum of confirmed booking totals whose date falls inside the month"""
        if not 1 <= month <= 12:
            raise HTTPException(status_code=400, detail="Month must be between 1 and 12")

        start = datetime(year, month, 1)
        end = start + relativedelta(months=1)
        total = (
            self.db.query(func.sum(Booking.total_price))
            .filter(
                Booking.date >= start,
                Booking.date < end,
                Booking.status == BookingStatus.CONFIRMED.value,
            )
            .scalar()
        )
        return float(total or 0)

    def get_booking_stats(self, now: Optional[datetime] = None) -> dict:
        now = now or datetime.now()
        counts = BookingRepository.count_by_status(self.db)
        stats = {
            "totalBookings": sum(counts.values()),
            "pendingBookings": counts.get(BookingStatus.PENDING.value, 0),
            "confirmedBookings": counts.get(BookingStatus.CONFIRMED.value, 0),
            "monthlyRevenue": self.get_monthly_revenue(now.year, now.month),
        }
        logger.info(f"📊 Booking stats: {stats}")
        return stats

    def get_status_breakdown(self) -> dict:
        return status_breakdown(BookingRepository.count_by_status(self.db))

    def get_client_metrics(self, now: Optional[datetime] = None) -> dict:
        """Client counts and average lifetime value"""
        now = now or datetime.now()
        month_start = datetime(now.year, now.month, 1)

        total = self.db.query(func.count(Client.id)).scalar() or 0
        new_this_month = (
            self.db.query(func.count(Client.id)).filter(Client.created_at >= month_start).scalar() or 0
        )
        repeat = (
            self.db.query(Booking.client_id)
            .group_by(Booking.client_id)
            .having(func.count(Booking.id) > 1)
            .count()
        )
        avg_value = self.db.query(func.avg(Client.lifetime_value)).scalar()
        by_status = dict(self.db.query(Client.status, func.count(Client.id)).group_by(Client.status).all())

        metrics = {
            "totalClients": total,
            "newThisMonth": new_this_month,
            "repeatClients": repeat,
            "avgLifetimeValue": round(float(avg_value or 0), 2),
            "byStatus": by_status,
        }
        logger.info(f"👤 Client metrics: {metrics}")
        return metrics
