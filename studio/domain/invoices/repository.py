"""Invoice repository - Database operations for invoices"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Booking, Invoice


class InvoiceRepository:
    """Repository for invoice database operations"""

    @staticmethod
    def get_invoices(db: Session) -> list[Invoice]:
        """Get all invoices with their booking and client, newest first"""
        return (
            db.query(Invoice)
            .options(joinedload(Invoice.booking).joinedload(Booking.client))
            .order_by(Invoice.created_at.desc(), Invoice.id.desc())
            .all()
        )

    @staticmethod
    def get_invoice_by_booking(db: Session, booking_id: int) -> Optional[Invoice]:
        return db.query(Invoice).filter(Invoice.booking_id == booking_id).first()

    @staticmethod
    def get_invoice_by_id(db: Session, invoice_id: int) -> Optional[Invoice]:
        return db.query(Invoice).filter(Invoice.id == invoice_id).first()

    @staticmethod
    def invoice_number_exists(db: Session, invoice_number: str) -> bool:
        return db.query(Invoice.id).filter(Invoice.invoice_number == invoice_number).first() is not None

    @staticmethod
    def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def create_invoice(db: Session, **invoice_data) -> Invoice:
        invoice = Invoice(**invoice_data)
        db.add(invoice)
        db.commit()
        db.refresh(invoice)
        return invoice

    @staticmethod
    def update_invoice(db: Session, invoice: Invoice, **updates) -> Invoice:
        for key, value in updates.items():
            if value is not None and hasattr(invoice, key):
                setattr(invoice, key, value)

        db.commit()
        db.refresh(invoice)
        return invoice
