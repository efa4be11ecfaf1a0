"""Invoice router - FastAPI endpoints for booking invoices"""

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...config import INVOICE_DUE_DAYS
from ...database import get_db
from ...models import Invoice
from .repository import InvoiceRepository
from .schemas import InvoiceCreate, InvoiceResponse, InvoiceStats, InvoiceStatusTotals, InvoiceUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/invoices", tags=["Invoices"])


def is_overdue(invoice: Invoice, now: Optional[datetime] = None) -> bool:
    """Overdue when flagged as such, or still pending past its due date"""
    if invoice.status == "overdue":
        return True
    now = now or datetime.now()
    return invoice.status == "pending" and invoice.due_date is not None and invoice.due_date < now


def invoice_to_response(invoice: Invoice) -> InvoiceResponse:
    client = invoice.booking.client if invoice.booking else None
    return InvoiceResponse(
        id=invoice.id,
        bookingId=invoice.booking_id,
        invoiceNumber=invoice.invoice_number,
        amount=float(invoice.amount),
        dueDate=invoice.due_date,
        paidAt=invoice.paid_at,
        status=invoice.status,
        isOverdue=is_overdue(invoice),
        paymentMethod=invoice.payment_method,
        clientName=client.name if client else None,
        clientEmail=client.email if client else None,
        createdAt=invoice.created_at,
    )


@router.get("", response_model=list[InvoiceResponse])
async def get_invoices(db: Session = Depends(get_db)):
    return [invoice_to_response(i) for i in InvoiceRepository.get_invoices(db)]


@router.get("/stats", response_model=InvoiceStats)
async def get_invoice_stats(db: Session = Depends(get_db)):
    """Counts and totals per status; pending invoices past due count as overdue"""
    now = datetime.now()
    buckets = {"pending": [0, Decimal("0")], "paid": [0, Decimal("0")], "overdue": [0, Decimal("0")]}
    invoices = InvoiceRepository.get_invoices(db)
    for invoice in invoices:
        key = "overdue" if is_overdue(invoice, now) else invoice.status
        bucket = buckets.setdefault(key, [0, Decimal("0")])
        bucket[0] += 1
        bucket[1] += Decimal(invoice.amount)

    def totals(key: str) -> InvoiceStatusTotals:
        count, total = buckets[key]
        return InvoiceStatusTotals(count=count, total=float(total))

    return InvoiceStats(
        pending=totals("pending"),
        paid=totals("paid"),
        overdue=totals("overdue"),
        totalInvoices=len(invoices),
        outstandingAmount=float(buckets["pending"][1] + buckets["overdue"][1]),
    )


@router.get("/{booking_id}", response_model=InvoiceResponse)
async def get_invoice(booking_id: int, db: Session = Depends(get_db)):
    """Get the invoice for a booking"""
    invoice = InvoiceRepository.get_invoice_by_booking(db, booking_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice_to_response(invoice)


@router.post("", response_model=InvoiceResponse)
async def create_invoice(data: InvoiceCreate, db: Session = Depends(get_db)):
    """Invoice a booking; amount defaults to the booking total, due date to INVOICE_DUE_DAYS out"""
    booking = InvoiceRepository.get_booking(db, data.bookingId)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")

    invoice_number = data.invoiceNumber or f"INV-{booking.id}-{booking.date.year}"
    if InvoiceRepository.invoice_number_exists(db, invoice_number):
        raise HTTPException(status_code=400, detail=f"Invoice {invoice_number} already exists")

    logger.info(f"🧾 Creating invoice {invoice_number} for booking {booking.id}")
    invoice = InvoiceRepository.create_invoice(
        db,
        booking_id=booking.id,
        invoice_number=invoice_number,
        amount=data.amount if data.amount is not None else booking.total_price,
        due_date=data.dueDate or datetime.now() + timedelta(days=INVOICE_DUE_DAYS),
        status="pending",
        payment_method=data.paymentMethod,
    )
    return invoice_to_response(invoice)


@router.patch("/{invoice_id}", response_model=InvoiceResponse)
async def update_invoice(invoice_id: int, data: InvoiceUpdate, db: Session = Depends(get_db)):
    """Update an invoice; marking it paid stamps paid_at"""
    invoice = InvoiceRepository.get_invoice_by_id(db, invoice_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")

    updates = {
        "amount": data.amount,
        "due_date": data.dueDate,
        "status": data.status,
        "payment_method": data.paymentMethod,
    }
    if data.status == "paid" and invoice.status != "paid":
        updates["paid_at"] = datetime.now()
        logger.info(f"💰 Invoice {invoice.invoice_number} marked paid")

    invoice = InvoiceRepository.update_invoice(db, invoice, **updates)
    return invoice_to_response(invoice)
