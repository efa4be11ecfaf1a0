"""Contract domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel


class ContractCreate(BaseModel):
    """Schema for attaching a contract to a booking"""

    bookingId: int
    templateContent: str


class ContractUpdate(BaseModel):
    """Schema for updating or signing a contract"""

    templateContent: Optional[str] = None
    signedContent: Optional[str] = None
    signatureData: Optional[str] = None  # Base64 signature image
    status: Optional[Literal["pending", "signed"]] = None


class ContractResponse(BaseModel):
    id: int
    bookingId: int
    templateContent: str
    signedContent: Optional[str]
    signatureData: Optional[str]
    signedAt: Optional[datetime]
    status: str
