"""Client service - Business logic for client operations"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Client
from .repository import ClientRepository
from .schemas import ClientCreate, ClientResponse, ClientUpdate

logger = logging.getLogger(__name__)

# Relationship status reached when a client with this status books again
NEXT_STATUS_ON_BOOKING = {
    "lead": "booked",
    "qualified": "booked",
    "booked": "repeat",
}


def client_to_response(client: Client) -> ClientResponse:
    return ClientResponse(
        id=client.id,
        name=client.name,
        email=client.email,
        phone=client.phone,
        notes=client.notes,
        tags=client.tags,
        status=client.status,
        lifetimeValue=float(client.lifetime_value or 0),
        createdAt=client.created_at,
        updatedAt=client.updated_at,
    )


class ClientService:
    """Service layer for client business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ClientRepository()

    def get_clients(self) -> list[Client]:
        return self.repo.get_clients(self.db)

    def get_client(self, client_id: int) -> Client:
        client = self.repo.get_client_by_id(self.db, client_id)
        if not client:
            raise HTTPException(status_code=404, detail="Client not found")
        return client

    def create_client(self, data: ClientCreate) -> Client:
        logger.info(f"📥 Creating client {data.email}")
        return self.repo.create_client(
            self.db,
            name=data.name,
            email=data.email,
            phone=data.phone,
            notes=data.notes,
            tags=data.tags,
            status=data.status,
            lifetime_value=Decimal("0"),
        )

    def update_client(self, client_id: int, data: ClientUpdate) -> Client:
        client = self.get_client(client_id)
        return self.repo.update_client(self.db, client, **data.model_dump(exclude_unset=True))

    def resolve_for_booking(
        self, name: str, email: str, phone: Optional[str] = None, notes: Optional[str] = None
    ) -> tuple[Client, bool]:
        """
        Find the client for a booking by email, creating one if needed.

        A new client is committed right away, so it survives even if the
        booking insert that follows fails. An existing client is touched
        (updated_at, missing phone, relationship status) but the change is
        left for the caller's commit.

        Returns:
            (client, created)
        """
        client = self.repo.get_client_by_email(self.db, email)
        if not client:
            logger.info(f"👤 No client for {email}, creating one")
            client = self.repo.create_client(
                self.db,
                name=name,
                email=email,
                phone=phone,
                notes=notes,
                status="booked",
                lifetime_value=Decimal("0"),
            )
            return client, True

        client.updated_at = datetime.now()
        if phone and not client.phone:
            client.phone = phone
        next_status = NEXT_STATUS_ON_BOOKING.get(client.status)
        if next_status:
            logger.info(f"👤 Client {client.id} status: {client.status} → {next_status}")
            client.status = next_status
        return client, False
