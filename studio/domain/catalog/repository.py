"""Service catalog repository - Database operations for services"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Service


class ServiceRepository:
    """Repository for service database operations"""

    @staticmethod
    def get_services(db: Session) -> list[Service]:
        """Get every service ordered by category, then name"""
        return db.query(Service).order_by(Service.category, Service.name).all()

    @staticmethod
    def get_active_services(db: Session) -> list[Service]:
        """Get bookable services ordered by category, then name"""
        return (
            db.query(Service)
            .filter(Service.active.is_(True))
            .order_by(Service.category, Service.name)
            .all()
        )

    @staticmethod
    def get_service(db: Session, service_id: int) -> Optional[Service]:
        return db.query(Service).filter(Service.id == service_id).first()

    @staticmethod
    def create_service(db: Session, **service_data) -> Service:
        service = Service(**service_data)
        db.add(service)
        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def update_service(db: Session, service: Service, **updates) -> Service:
        for key, value in updates.items():
            if value is not None and hasattr(service, key):
                setattr(service, key, value)

        db.commit()
        db.refresh(service)
        return service
