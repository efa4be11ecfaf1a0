"""Client domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import require_email

ClientStatus = Literal["lead", "qualified", "booked", "repeat", "archived"]


class ClientCreate(BaseModel):
    """Schema for creating a new client"""

    name: str = Field(..., min_length=1, max_length=255)
    email: str
    phone: Optional[str] = None
    notes: Optional[str] = None
    tags: Optional[list[str]] = None
    status: ClientStatus = "lead"

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return require_email(v)


class ClientUpdate(BaseModel):
    """Schema for updating an existing client"""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
    tags: Optional[list[str]] = None
    status: Optional[ClientStatus] = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        if v is not None:
            return require_email(v)
        return v


class ClientResponse(BaseModel):
    """Schema for client response"""

    id: int
    name: str
    email: str
    phone: Optional[str]
    notes: Optional[str]
    tags: Optional[list[str]]
    status: str
    lifetimeValue: float
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
