"""Invoice domain schemas - Pydantic models for validation"""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field

InvoiceStatus = Literal["pending", "paid", "overdue"]


class InvoiceCreate(BaseModel):
    """Schema for invoicing a booking; amount defaults to the booking total"""

    bookingId: int
    amount: Optional[Decimal] = Field(None, ge=0)
    dueDate: Optional[datetime] = None
    invoiceNumber: Optional[str] = None
    paymentMethod: Optional[str] = None


class InvoiceUpdate(BaseModel):
    amount: Optional[Decimal] = Field(None, ge=0)
    dueDate: Optional[datetime] = None
    status: Optional[InvoiceStatus] = None
    paymentMethod: Optional[str] = None


class InvoiceResponse(BaseModel):
    id: int
    bookingId: int
    invoiceNumber: str
    amount: float
    dueDate: datetime
    paidAt: Optional[datetime]
    status: str
    isOverdue: bool
    paymentMethod: Optional[str]
    clientName: Optional[str] = None
    clientEmail: Optional[str] = None
    createdAt: Optional[datetime] = None


class InvoiceStatusTotals(BaseModel):
    count: int
    total: float


class InvoiceStats(BaseModel):
    pending: InvoiceStatusTotals
    paid: InvoiceStatusTotals
    overdue: InvoiceStatusTotals
    totalInvoices: int
    outstandingAmount: float
