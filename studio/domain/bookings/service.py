"""Booking service - Business logic for booking creation and updates"""

import logging
from decimal import Decimal

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...config import DEFAULT_BOOKING_LOCATION
from ...models import Booking
from ..catalog.repository import ServiceRepository
from ..clients.service import ClientService
from .lifecycle import BookingLifecycle, BookingStatus, status_color
from .repository import BookingRepository
from .schemas import (
    BookingClientSummary,
    BookingCreate,
    BookingResponse,
    BookingServiceSummary,
    BookingUpdate,
)

logger = logging.getLogger(__name__)

# BookingUpdate field -> Booking column
UPDATE_FIELDS = {
    "date": "date",
    "duration": "duration",
    "location": "location",
    "totalPrice": "total_price",
    "depositPaid": "deposit_paid",
    "status": "status",
    "notes": "notes",
    "addOns": "add_ons",
}
# Columns that cannot be cleared through a partial update
REQUIRED_FIELDS = {"date", "duration", "totalPrice", "depositPaid", "status"}


def booking_to_response(booking: Booking) -> BookingResponse:
    return BookingResponse(
        id=booking.id,
        clientId=booking.client_id,
        serviceId=booking.service_id,
        date=booking.date,
        duration=booking.duration,
        location=booking.location,
        totalPrice=float(booking.total_price),
        depositPaid=bool(booking.deposit_paid),
        status=booking.status,
        statusColor=status_color(booking.status),
        notes=booking.notes,
        addOns=booking.add_ons,
        createdAt=booking.created_at,
        client=BookingClientSummary.model_validate(booking.client) if booking.client else None,
        service=BookingServiceSummary(
            id=booking.service.id,
            name=booking.service.name,
            price=float(booking.service.price),
            duration=booking.service.duration,
            category=booking.service.category,
        )
        if booking.service
        else None,
    )


class BookingService:
    """Service layer for booking business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BookingRepository()
        self.services = ServiceRepository()
        self.clients = ClientService(db)

    def get_bookings(self) -> list[Booking]:
        return self.repo.get_bookings(self.db)

    def get_booking(self, booking_id: int) -> Booking:
        booking = self.repo.get_booking(self.db, booking_id)
        if not booking:
            raise HTTPException(status_code=404, detail="Booking not found")
        return booking

    def create_booking(self, data: BookingCreate) -> Booking:
        """
        Create a booking, resolving its client by email.

        Price and duration are copied from the service unless given, so later
        catalog edits never change an existing booking. Overlapping bookings
        are accepted; conflicts are left to the admin.
        """
        logger.info(f"📥 Creating booking for {data.clientEmail}, service_id: {data.serviceId}")

        service = self.services.get_service(self.db, data.serviceId)
        if not service:
            logger.warning(f"⚠️ Booking rejected, unknown service_id: {data.serviceId}")
            raise HTTPException(status_code=400, detail="Invalid service ID")

        client, created = self.clients.resolve_for_booking(
            name=data.clientName,
            email=data.clientEmail,
            phone=data.clientPhone,
            notes=data.notes,
        )

        total_price = data.totalPrice if data.totalPrice is not None else Decimal(service.price)
        client.lifetime_value = Decimal(client.lifetime_value or 0) + total_price

        try:
            booking = self.repo.create_booking(
                self.db,
                client_id=client.id,
                service_id=service.id,
                date=data.date,
                duration=data.duration or service.duration,
                location=data.location or DEFAULT_BOOKING_LOCATION,
                total_price=total_price,
                deposit_paid=bool(data.depositPaid),
                status=data.status or BookingStatus.PENDING.value,
                notes=data.notes,
                add_ons=[a.model_dump(exclude_none=True) for a in data.addOns] if data.addOns else None,
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to create booking for {data.clientEmail}: {e}")
            raise HTTPException(status_code=500, detail="Failed to create booking") from e
        logger.info(
            f"✅ Booking {booking.id} created ({booking.status}) for client {client.id}"
            f"{' (new client)' if created else ''}"
        )
        return self.get_booking(booking.id)

    def update_booking(self, booking_id: int, data: BookingUpdate) -> Booking:
        """Apply a partial update; status goes through the any-to-any lifecycle"""
        booking = self.get_booking(booking_id)

        updates = {}
        for field_name, value in data.model_dump(exclude_unset=True).items():
            if value is None and field_name in REQUIRED_FIELDS:
                continue
            if field_name == "status":
                value = BookingLifecycle.transition(booking.status, value).value
            updates[UPDATE_FIELDS[field_name]] = value

        try:
            booking = self.repo.update_booking(self.db, booking, **updates)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Failed to update booking {booking_id}: {e}")
            raise HTTPException(status_code=500, detail="Failed to update booking") from e

        return booking
