"""Analytics router - FastAPI endpoints for dashboard figures"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from .service import AnalyticsService

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    return AnalyticsService(db)


@router.get("/stats")
async def get_stats(service: AnalyticsService = Depends(get_analytics_service)):
    """Total, pending and confirmed booking counts plus this month's revenue"""
    return service.get_booking_stats()


@router.get("/revenue/{year}/{month}")
async def get_revenue(year: int, month: int, service: AnalyticsService = Depends(get_analytics_service)):
    return {"revenue": service.get_monthly_revenue(year, month)}


@router.get("/status-breakdown")
async def get_status_breakdown(service: AnalyticsService = Depends(get_analytics_service)):
    return service.get_status_breakdown()


@router.get("/clients")
async def get_client_metrics(service: AnalyticsService = Depends(get_analytics_service)):
    """Total, new-this-month and repeat client counts plus average lifetime value"""
    return service.get_client_metrics()
