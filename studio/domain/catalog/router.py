"""Service catalog router - FastAPI endpoints for bookable services"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...database import get_db
from ...models import Service
from .repository import ServiceRepository
from .schemas import ServiceCreate, ServiceResponse, ServiceUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/services", tags=["Services"])


def service_to_response(service: Service) -> ServiceResponse:
    return ServiceResponse(
        id=service.id,
        name=service.name,
        description=service.description,
        price=float(service.price),
        duration=service.duration,
        category=service.category,
        active=bool(service.active),
        addOns=service.add_ons,
    )


@router.get("", response_model=list[ServiceResponse])
async def get_services(db: Session = Depends(get_db)):
    """Get active services for the booking form"""
    return [service_to_response(s) for s in ServiceRepository.get_active_services(db)]


@router.get("/all", response_model=list[ServiceResponse])
async def get_all_services(db: Session = Depends(get_db)):
    """Get every service including inactive ones"""
    return [service_to_response(s) for s in ServiceRepository.get_services(db)]


@router.post("", response_model=ServiceResponse)
async def create_service(data: ServiceCreate, db: Session = Depends(get_db)):
    """Create a new service"""
    logger.info(f"📥 Creating service '{data.name}' ({data.category})")
    service = ServiceRepository.create_service(
        db,
        name=data.name,
        description=data.description,
        price=data.price,
        duration=data.duration,
        category=data.category,
        active=data.active,
        add_ons=[a.model_dump() for a in data.addOns] if data.addOns else None,
    )
    return service_to_response(service)


@router.patch("/{service_id}", response_model=ServiceResponse)
async def update_service(service_id: int, data: ServiceUpdate, db: Session = Depends(get_db)):
    """Edit a service; bookings already made keep their snapshot of price and duration"""
    service = ServiceRepository.get_service(db, service_id)
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")

    updates = {
        "name": data.name,
        "description": data.description,
        "price": data.price,
        "duration": data.duration,
        "category": data.category,
        "active": data.active,
    }
    if data.addOns is not None:
        updates["add_ons"] = [a.model_dump() for a in data.addOns]

    service = ServiceRepository.update_service(db, service, **updates)
    return service_to_response(service)
