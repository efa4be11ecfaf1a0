"""Contact message schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import require_email

MessageStatus = Literal["unread", "read", "replied", "archived"]
MessagePriority = Literal["normal", "high", "urgent"]


class ContactMessageCreate(BaseModel):
    """Schema for a message sent from the public contact form"""

    name: str = Field(..., min_length=1, max_length=255)
    email: str
    phone: Optional[str] = None
    subject: str = Field(..., min_length=1, max_length=500)
    message: str = Field(..., min_length=1)
    priority: MessagePriority = "normal"
    source: str = "website"

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        return require_email(v)


class ContactMessageUpdate(BaseModel):
    """Schema for triaging a message in the inbox"""

    status: Optional[MessageStatus] = None
    priority: Optional[MessagePriority] = None


class ContactMessageResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str]
    subject: str
    message: str
    status: str
    priority: str
    source: str
    ipAddress: Optional[str]
    userAgent: Optional[str]
    createdAt: Optional[datetime] = None
