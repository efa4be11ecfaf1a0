"""Booking router - FastAPI endpoints for booking operations"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import BookingCreate, BookingResponse, BookingUpdate
from .service import BookingService, booking_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bookings", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


@router.get("", response_model=list[BookingResponse])
async def get_bookings(service: BookingService = Depends(get_booking_service)):
    """Get all bookings with nested client and service"""
    return [booking_to_response(b) for b in service.get_bookings()]


@router.post("", response_model=BookingResponse)
async def create_booking(data: BookingCreate, service: BookingService = Depends(get_booking_service)):
    """Create a booking; the client is resolved (or created) by email"""
    return booking_to_response(service.create_booking(data))


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(booking_id: int, service: BookingService = Depends(get_booking_service)):
    return booking_to_response(service.get_booking(booking_id))


@router.patch("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: int, data: BookingUpdate, service: BookingService = Depends(get_booking_service)
):
    """Partially update a booking, e.g. {"status": "confirmed"}"""
    return booking_to_response(service.update_booking(booking_id, data))
