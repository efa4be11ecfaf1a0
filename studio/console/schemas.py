"""
Console record schemas

Fetched JSON is parsed into typed records before anything renders it. Items
that fail validation are collected as rejections and logged, so a single
malformed booking never breaks the calendar.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Type

from pydantic import BaseModel, ValidationError, field_validator

from ..domain.calendar.builder import CalendarEntry
from ..shared.validators import parse_iso_datetime

logger = logging.getLogger(__name__)


def _local_instant(v):
    if isinstance(v, datetime):
        return v
    return parse_iso_datetime(v)


class ClientRecord(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    status: str = "lead"


class ServiceRecord(BaseModel):
    id: int
    name: str
    price: float
    duration: int
    category: str
    description: Optional[str] = None
    active: bool = True


class BookingRecord(BaseModel):
    """A booking from GET /api/bookings with its client and service nested"""

    id: int
    date: datetime
    duration: int
    status: str
    totalPrice: float = 0
    location: Optional[str] = None
    notes: Optional[str] = None
    client: Optional[ClientRecord] = None
    service: Optional[ServiceRecord] = None

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v):
        return _local_instant(v)

    def to_entry(self) -> CalendarEntry:
        return CalendarEntry(
            id=self.id,
            start=self.date,
            duration=self.duration,
            status=self.status,
            service=self.service.name if self.service else "Unknown service",
            client=self.client.name if self.client else "Unknown client",
            location=self.location,
        )


class AvailabilityRecord(BaseModel):
    """A booking from GET /api/availability, names already flattened"""

    id: int
    date: datetime
    duration: int
    service: str
    client: str
    status: str

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v):
        return _local_instant(v)

    def to_entry(self) -> CalendarEntry:
        return CalendarEntry(
            id=self.id,
            start=self.date,
            duration=self.duration,
            status=self.status,
            service=self.service,
            client=self.client,
        )


@dataclass
class Rejected:
    raw: Any
    error: str


@dataclass
class ParseResult:
    valid: list = field(default_factory=list)
    rejected: list = field(default_factory=list)


def parse_records(model: Type[BaseModel], items: Any) -> ParseResult:
    """Validate each item independently against model"""
    result = ParseResult()
    if not isinstance(items, list):
        logger.warning(f"⚠️ Expected a list of {model.__name__}, got {type(items).__name__}")
        result.rejected.append(Rejected(raw=items, error="Expected a list"))
        return result

    for item in items:
        try:
            result.valid.append(model.model_validate(item))
        except (ValidationError, ValueError) as e:
            logger.warning(f"⚠️ Rejected {model.__name__} {item!r}: {e}")
            result.rejected.append(Rejected(raw=item, error=str(e)))
    return result


def parse_bookings(payload: Any) -> ParseResult:
    return parse_records(BookingRecord, payload)


def parse_availability(payload: Any) -> ParseResult:
    """Accepts the {"bookings": [...]} envelope or a bare list"""
    if isinstance(payload, dict):
        payload = payload.get("bookings", [])
    return parse_records(AvailabilityRecord, payload)


def parse_services(payload: Any) -> ParseResult:
    return parse_records(ServiceRecord, payload)


def parse_clients(payload: Any) -> ParseResult:
    return parse_records(ClientRecord, payload)
