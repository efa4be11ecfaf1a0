"""Booking domain schemas - Pydantic models for validation"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import parse_iso_datetime, require_email
from .lifecycle import BookingLifecycle


class AddOn(BaseModel):
    """Name and price pair attached to a booking; not tied to the catalog"""

    id: Optional[str] = None
    name: str
    price: float


def _parse_instant(v):
    if isinstance(v, datetime):
        return v
    return parse_iso_datetime(v)


def _parse_status(v):
    if v is None:
        return v
    return BookingLifecycle.parse(v).value


class BookingCreate(BaseModel):
    """Schema for creating a booking (admin entry or client request)"""

    clientName: str = Field(..., min_length=1, max_length=255)
    clientEmail: str
    clientPhone: Optional[str] = None
    serviceId: int
    date: datetime
    location: Optional[str] = None
    totalPrice: Optional[Decimal] = Field(None, ge=0)
    notes: Optional[str] = None
    duration: Optional[int] = Field(None, gt=0)
    status: Optional[str] = None
    depositPaid: Optional[bool] = None
    addOns: Optional[list[AddOn]] = None

    @field_validator("clientEmail")
    @classmethod
    def validate_email(cls, v):
        return require_email(v)

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v):
        return _parse_instant(v)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return _parse_status(v)


class BookingUpdate(BaseModel):
    """Schema for partially updating a booking"""

    date: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0)
    location: Optional[str] = None
    totalPrice: Optional[Decimal] = Field(None, ge=0)
    depositPaid: Optional[bool] = None
    status: Optional[str] = None
    notes: Optional[str] = None
    addOns: Optional[list[AddOn]] = None

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v):
        if v is None:
            return v
        return _parse_instant(v)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return _parse_status(v)


class BookingClientSummary(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str]

    class Config:
        from_attributes = True


class BookingServiceSummary(BaseModel):
    id: int
    name: str
    price: float
    duration: int
    category: str

    class Config:
        from_attributes = True


class BookingResponse(BaseModel):
    """Schema for booking response, with client and service pre-joined"""

    id: int
    clientId: int
    serviceId: int
    date: datetime
    duration: int
    location: Optional[str]
    totalPrice: float
    depositPaid: bool
    status: str
    statusColor: str
    notes: Optional[str]
    addOns: Optional[list[AddOn]]
    createdAt: Optional[datetime] = None
    client: Optional[BookingClientSummary] = None
    service: Optional[BookingServiceSummary] = None
