"""Booking repository - Database operations for bookings"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from ...models import Booking


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def _joined(db: Session):
        return db.query(Booking).options(joinedload(Booking.client), joinedload(Booking.service))

    @staticmethod
    def get_bookings(db: Session) -> list[Booking]:
        """Get all bookings with client and service, newest date first"""
        return BookingRepository._joined(db).order_by(Booking.date.desc()).all()

    @staticmethod
    def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
        """Get a specific booking by ID"""
        return BookingRepository._joined(db).filter(Booking.id == booking_id).first()

    @staticmethod
    def get_bookings_by_date_range(db: Session, start: datetime, end: datetime) -> list[Booking]:
        """Bookings whose start lies in [start, end], oldest first"""
        return (
            BookingRepository._joined(db)
            .filter(Booking.date >= start, Booking.date <= end)
            .order_by(Booking.date.asc(), Booking.id.asc())
            .all()
        )

    @staticmethod
    def create_booking(db: Session, **booking_data) -> Booking:
        """Create a new booking"""
        booking = Booking(**booking_data)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def update_booking(db: Session, booking: Booking, **updates) -> Booking:
        """Update a booking with provided fields; last write wins"""
        for key, value in updates.items():
            if hasattr(booking, key):
                setattr(booking, key, value)

        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def count_by_status(db: Session) -> dict:
        """Number of bookings per status"""
        rows = db.query(Booking.status, func.count(Booking.id)).group_by(Booking.status).all()
        return {status: count for status, count in rows}
