"""Contract router - FastAPI endpoints for booking contracts"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...database import get_db
from ...models import Contract
from .repository import ContractRepository
from .schemas import ContractCreate, ContractResponse, ContractUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contracts", tags=["Contracts"])


def contract_to_response(contract: Contract) -> ContractResponse:
    return ContractResponse(
        id=contract.id,
        bookingId=contract.booking_id,
        templateContent=contract.template_content,
        signedContent=contract.signed_content,
        signatureData=contract.signature_data,
        signedAt=contract.signed_at,
        status=contract.status,
    )


@router.get("/{booking_id}", response_model=ContractResponse)
async def get_contract(booking_id: int, db: Session = Depends(get_db)):
    """Get the contract attached to a booking"""
    contract = ContractRepository.get_contract_by_booking(db, booking_id)
    if not contract:
        raise HTTPException(status_code=404, detail="Contract not found")
    return contract_to_response(contract)


@router.post("", response_model=ContractResponse)
async def create_contract(data: ContractCreate, db: Session = Depends(get_db)):
    """Create a pending contract for an existing booking"""
    if not ContractRepository.get_booking(db, data.bookingId):
        raise HTTPException(status_code=404, detail="Booking not found")

    logger.info(f"📝 Creating contract for booking_id: {data.bookingId}")
    contract = ContractRepository.create_contract(
        db,
        booking_id=data.bookingId,
        template_content=data.templateContent,
        status="pending",
    )
    return contract_to_response(contract)


@router.patch("/{contract_id}", response_model=ContractResponse)
async def update_contract(contract_id: int, data: ContractUpdate, db: Session = Depends(get_db)):
    """Update a contract; moving it to signed stamps signed_at"""
    contract = ContractRepository.get_contract_by_id(db, contract_id)
    if not contract:
        raise HTTPException(status_code=404, detail="Contract not found")

    updates = {
        "template_content": data.templateContent,
        "signed_content": data.signedContent,
        "signature_data": data.signatureData,
        "status": data.status,
    }
    if data.status == "signed" and contract.status != "signed":
        updates["signed_at"] = datetime.now()
        logger.info(f"✍️ Contract {contract.id} signed for booking {contract.booking_id}")

    contract = ContractRepository.update_contract(db, contract, **updates)
    return contract_to_response(contract)
