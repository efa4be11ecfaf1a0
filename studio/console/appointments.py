"""
Admin appointment entry

The form is validated locally before anything is sent; a submission missing
a required field or holding an unreadable value never reaches the API.
Admin-entered appointments are created as confirmed.
"""

import datetime as dt
import logging
from dataclasses import dataclass, fields
from typing import Optional, Union

from ..config import DEFAULT_BOOKING_LOCATION
from ..domain.bookings.lifecycle import BookingStatus
from .api import StudioAPIError
from .schemas import ServiceRecord
from .store import BookingDesk

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("client_name", "client_email", "service_id", "date", "time")


class FormValidationError(ValueError):
    """Raised before any network call when form fields are missing or malformed"""

    def __init__(self, missing_fields: list, invalid_fields: Optional[list] = None):
        self.missing_fields = list(missing_fields)
        self.invalid_fields = list(invalid_fields or [])
        problems = []
        if self.missing_fields:
            problems.append(f"Please fill in: {', '.join(self.missing_fields)}")
        if self.invalid_fields:
            problems.append(f"Please correct: {', '.join(self.invalid_fields)}")
        super().__init__("; ".join(problems))


@dataclass
class AppointmentForm:
    client_name: str = ""
    client_email: str = ""
    service_id: Optional[int] = None
    date: Optional[Union[dt.date, str]] = None
    time: str = ""
    client_phone: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    total_price: Optional[float] = None
    duration: Optional[int] = None

    @classmethod
    def for_day(cls, day: dt.date) -> "AppointmentForm":
        """Quick-create from an empty calendar cell"""
        return cls(date=day)

    def missing_fields(self) -> list:
        missing = []
        for name in REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing

    def invalid_fields(self) -> list:
        """Present fields whose values cannot be sent as-is"""
        invalid = []
        try:
            self._day()
        except (TypeError, ValueError):
            invalid.append("date")
        try:
            dt.time.fromisoformat(self.time.strip())
        except (AttributeError, ValueError):
            invalid.append("time")
        try:
            int(self.service_id)
        except (TypeError, ValueError):
            invalid.append("service_id")
        return invalid

    def validate(self) -> None:
        missing = self.missing_fields()
        if missing:
            raise FormValidationError(missing)
        invalid = self.invalid_fields()
        if invalid:
            raise FormValidationError([], invalid)

    def _day(self) -> dt.date:
        if isinstance(self.date, dt.date):
            return self.date
        return dt.date.fromisoformat(self.date.strip())

    def starts_at(self) -> dt.datetime:
        """Date and time combined into one studio-local instant"""
        return dt.datetime.combine(self._day(), dt.time.fromisoformat(self.time.strip()))

    def to_payload(self, service: Optional[ServiceRecord] = None) -> dict:
        """Request body for POST /api/bookings; price and duration fall back to the service"""
        self.validate()
        total_price = self.total_price
        if total_price is None and service is not None:
            total_price = service.price
        duration = self.duration
        if duration is None and service is not None:
            duration = service.duration

        payload = {
            "clientName": self.client_name.strip(),
            "clientEmail": self.client_email.strip(),
            "clientPhone": self.client_phone or None,
            "serviceId": int(self.service_id),
            "date": self.starts_at().isoformat(),
            "location": self.location or DEFAULT_BOOKING_LOCATION,
            "notes": self.notes or None,
            "status": BookingStatus.CONFIRMED.value,
        }
        if total_price is not None:
            payload["totalPrice"] = total_price
        if duration is not None:
            payload["duration"] = duration
        return payload

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, f.default)


class AppointmentCreator:
    """Submits AppointmentForm instances through a BookingDesk"""

    def __init__(self, desk: BookingDesk):
        self.desk = desk
        self.submitting = False
        self.error: Optional[str] = None

    async def _service_for(self, service_id: int) -> Optional[ServiceRecord]:
        services = await self.desk.services()
        for service in services.valid:
            if service.id == int(service_id):
                return service
        return None

    async def submit(self, form: AppointmentForm, service: Optional[ServiceRecord] = None) -> dict:
        """
        Validate, create the booking and invalidate dependent store keys.

        Raises:
            FormValidationError: fields missing or malformed; nothing was sent
            StudioAPIError: the API rejected the request; form values are kept
        """
        self.error = None
        try:
            form.validate()
        except FormValidationError as e:
            self.error = str(e)
            raise

        self.submitting = True
        try:
            if service is None:
                service = await self._service_for(form.service_id)
            created = await self.desk.create(form.to_payload(service))
        except StudioAPIError as e:
            self.error = e.message
            logger.error(f"❌ Appointment for {form.client_email} failed: {e.message}")
            raise
        finally:
            self.submitting = False

        logger.info(f"✅ Appointment created for {form.client_email} on {form.date} {form.time}")
        form.reset()
        return created
