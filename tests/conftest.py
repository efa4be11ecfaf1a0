"""
Shared fixtures.

The app runs against an in-memory SQLite database that lives for one test.
Every request shares the test's session through a get_db override, so rows
seeded with the factories below are visible to the API immediately.
"""

import itertools
import os

# Must be set before studio.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STUDIO_TIMEZONE"] = "Pacific/Honolulu"

from datetime import datetime  # noqa: E402
from decimal import Decimal  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from studio.database import Base, get_db  # noqa: E402
from studio.main import app  # noqa: E402
from studio.models import Booking, Client, Service  # noqa: E402

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
_seq = itertools.count(1)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_service(db):
    def _make(**overrides):
        data = {
            "name": "Family Session",
            "description": "One hour on the beach",
            "price": Decimal("350.00"),
            "duration": 90,
            "category": "portrait",
            "active": True,
        }
        data.update(overrides)
        service = Service(**data)
        db.add(service)
        db.commit()
        db.refresh(service)
        return service

    return _make


@pytest.fixture
def make_client(db):
    def _make(**overrides):
        data = {
            "name": "Leilani Kahale",
            "email": "leilani@example.com",
            "status": "lead",
            "lifetime_value": Decimal("0"),
        }
        data.update(overrides)
        client = Client(**data)
        db.add(client)
        db.commit()
        db.refresh(client)
        return client

    return _make


@pytest.fixture
def make_booking(db, make_service, make_client):
    """Insert a booking directly, bypassing the API's defaults"""

    def _make(date: datetime, status="pending", total_price=Decimal("350.00"), service=None, client=None, **extra):
        service = service or make_service()
        client = client or make_client(email=f"client{next(_seq)}@example.com")
        booking = Booking(
            client_id=client.id,
            service_id=service.id,
            date=date,
            duration=extra.pop("duration", service.duration),
            location=extra.pop("location", "Waimanalo Beach"),
            total_price=total_price,
            status=status,
            **extra,
        )
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    return _make
