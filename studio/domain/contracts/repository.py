"""Contract repository - Database operations for contracts"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Booking, Contract


class ContractRepository:
    """Repository for contract database operations"""

    @staticmethod
    def get_contract_by_booking(db: Session, booking_id: int) -> Optional[Contract]:
        return db.query(Contract).filter(Contract.booking_id == booking_id).first()

    @staticmethod
    def get_contract_by_id(db: Session, contract_id: int) -> Optional[Contract]:
        return db.query(Contract).filter(Contract.id == contract_id).first()

    @staticmethod
    def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def create_contract(db: Session, **contract_data) -> Contract:
        contract = Contract(**contract_data)
        db.add(contract)
        db.commit()
        db.refresh(contract)
        return contract

    @staticmethod
    def update_contract(db: Session, contract: Contract, **updates) -> Contract:
        for key, value in updates.items():
            if value is not None and hasattr(contract, key):
                setattr(contract, key, value)

        db.commit()
        db.refresh(contract)
        return contract
