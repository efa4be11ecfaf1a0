"""Client router - FastAPI endpoints for client operations"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...database import get_db
from .schemas import ClientCreate, ClientResponse, ClientUpdate
from .service import ClientService, client_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/clients", tags=["Clients"])


def get_client_service(db: Session = Depends(get_db)) -> ClientService:
    """Dependency injection for ClientService"""
    return ClientService(db)


@router.get("", response_model=list[ClientResponse])
async def get_clients(service: ClientService = Depends(get_client_service)):
    """Get all clients"""
    return [client_to_response(c) for c in service.get_clients()]


@router.post("", response_model=ClientResponse)
async def create_client(data: ClientCreate, service: ClientService = Depends(get_client_service)):
    """Create a client explicitly (leads added by hand)"""
    return client_to_response(service.create_client(data))


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(client_id: int, service: ClientService = Depends(get_client_service)):
    return client_to_response(service.get_client(client_id))


@router.patch("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int, data: ClientUpdate, service: ClientService = Depends(get_client_service)
):
    """Update a client; clients are archived through status, never deleted"""
    return client_to_response(service.update_client(client_id, data))
