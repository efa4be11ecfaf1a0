from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    # Lookup key when resolving a booking's client; not unique
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)
    tags = Column(JSON, nullable=True)
    status = Column(String(50), default="lead", nullable=False)  # lead, qualified, booked, repeat, archived
    lifetime_value = Column(Numeric(10, 2), default=0, nullable=False)

    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    bookings = relationship("Booking", back_populates="client")


class Service(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    duration = Column(Integer, nullable=False)  # minutes
    category = Column(String(100), nullable=False)
    active = Column(Boolean, default=True)
    add_ons = Column(JSON, nullable=True)  # [{id, name, price}]

    bookings = relationship("Booking", back_populates="service")


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False)
    service_id = Column(Integer, ForeignKey("services.id"), nullable=False)
    # Single local instant; the end is derived from duration, never stored
    date = Column(DateTime, nullable=False, index=True)
    duration = Column(Integer, nullable=False)  # minutes, copied from the service at booking time
    location = Column(String(500), nullable=True)
    total_price = Column(Numeric(10, 2), nullable=False)  # copied from the service unless overridden
    deposit_paid = Column(Boolean, default=False)
    status = Column(String(20), default="pending", nullable=False)  # pending, confirmed, completed, cancelled
    notes = Column(Text, nullable=True)
    add_ons = Column(JSON, nullable=True)  # [{name, price}] - no catalog reference
    created_at = Column(DateTime, server_default=func.now())

    client = relationship("Client", back_populates="bookings")
    service = relationship("Service", back_populates="bookings")
    contract = relationship("Contract", back_populates="booking", uselist=False)
    invoice = relationship("Invoice", back_populates="booking", uselist=False)
    gallery_images = relationship("GalleryImage", back_populates="booking")


class Contract(Base):
    __tablename__ = "contracts"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False)
    template_content = Column(Text, nullable=False)
    signed_content = Column(Text, nullable=True)
    signature_data = Column(Text, nullable=True)  # Base64 signature image
    signed_at = Column(DateTime, nullable=True)
    status = Column(String(20), default="pending", nullable=False)  # pending, signed

    booking = relationship("Booking", back_populates="contract")


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False)
    invoice_number = Column(String(50), unique=True, nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    due_date = Column(DateTime, nullable=False)
    paid_at = Column(DateTime, nullable=True)
    status = Column(String(20), default="pending", nullable=False)  # pending, paid, overdue
    payment_method = Column(String(50), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    booking = relationship("Booking", back_populates="invoice")


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=True)
    subject = Column(String(500), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), default="unread", nullable=False)  # unread, read, replied, archived
    priority = Column(String(20), default="normal", nullable=False)  # normal, high, urgent
    source = Column(String(50), default="website", nullable=False)
    ip_address = Column(String(64), nullable=True)
    user_agent = Column(String(500), nullable=True)
    created_at = Column(DateTime, server_default=func.now())


class GalleryImage(Base):
    __tablename__ = "gallery_images"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=True)
    filename = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    # Externally hosted; the API stores metadata only
    url = Column(String(1000), nullable=False)
    thumbnail_url = Column(String(1000), nullable=True)
    category = Column(String(100), nullable=True)
    tags = Column(JSON, nullable=True)
    featured = Column(Boolean, default=False, nullable=False)
    uploaded_at = Column(DateTime, server_default=func.now(), nullable=False)

    booking = relationship("Booking", back_populates="gallery_images")
