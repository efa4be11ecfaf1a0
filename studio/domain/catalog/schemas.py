"""Service catalog schemas - Pydantic models for validation"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class ServiceAddOn(BaseModel):
    id: str
    name: str
    price: float


class ServiceCreate(BaseModel):
    """Schema for creating a bookable service"""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0)
    duration: int = Field(..., gt=0)
    category: str = Field(..., min_length=1, max_length=100)
    active: bool = True
    addOns: Optional[list[ServiceAddOn]] = None


class ServiceUpdate(BaseModel):
    """Schema for editing a service; existing bookings keep their own price and duration"""

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    duration: Optional[int] = Field(None, gt=0)
    category: Optional[str] = None
    active: Optional[bool] = None
    addOns: Optional[list[ServiceAddOn]] = None


class ServiceResponse(BaseModel):
    id: int
    name: str
    description: Optional[str]
    price: float
    duration: int
    category: str
    active: bool
    addOns: Optional[list[ServiceAddOn]] = None
