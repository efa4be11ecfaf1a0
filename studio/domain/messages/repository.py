"""Contact message repository - Database operations for the inbox"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import ContactMessage


class ContactMessageRepository:
    """Repository for contact message database operations"""

    @staticmethod
    def get_messages(
        db: Session, status: Optional[str] = None, priority: Optional[str] = None
    ) -> list[ContactMessage]:
        """Newest first, optionally narrowed by status and priority"""
        query = db.query(ContactMessage)
        if status:
            query = query.filter(ContactMessage.status == status)
        if priority:
            query = query.filter(ContactMessage.priority == priority)
        return query.order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc()).all()

    @staticmethod
    def get_message(db: Session, message_id: int) -> Optional[ContactMessage]:
        return db.query(ContactMessage).filter(ContactMessage.id == message_id).first()

    @staticmethod
    def create_message(db: Session, **message_data) -> ContactMessage:
        message = ContactMessage(**message_data)
        db.add(message)
        db.commit()
        db.refresh(message)
        return message

    @staticmethod
    def update_message(db: Session, message: ContactMessage, **updates) -> ContactMessage:
        for key, value in updates.items():
            if value is not None and hasattr(message, key):
                setattr(message, key, value)

        db.commit()
        db.refresh(message)
        return message

    @staticmethod
    def delete_message(db: Session, message: ContactMessage) -> None:
        db.delete(message)
        db.commit()
