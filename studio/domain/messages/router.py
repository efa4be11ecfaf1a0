"""Contact message router - Public contact form and the admin inbox"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from ...database import get_db
from ...models import ContactMessage
from .repository import ContactMessageRepository
from .schemas import (
    ContactMessageCreate,
    ContactMessageResponse,
    ContactMessageUpdate,
    MessagePriority,
    MessageStatus,
)

logger = logging.getLogger(__name__)

# Public form posts here; the inbox lives under /api/contact-messages
contact_router = APIRouter(prefix="/api/contact", tags=["Contact"])
router = APIRouter(prefix="/api/contact-messages", tags=["Contact"])


def message_to_response(message: ContactMessage) -> ContactMessageResponse:
    return ContactMessageResponse(
        id=message.id,
        name=message.name,
        email=message.email,
        phone=message.phone,
        subject=message.subject,
        message=message.message,
        status=message.status,
        priority=message.priority,
        source=message.source,
        ipAddress=message.ip_address,
        userAgent=message.user_agent,
        createdAt=message.created_at,
    )


def _get_or_404(db: Session, message_id: int) -> ContactMessage:
    message = ContactMessageRepository.get_message(db, message_id)
    if not message:
        raise HTTPException(status_code=404, detail="Message not found")
    return message


@contact_router.post("", response_model=ContactMessageResponse)
async def send_message(data: ContactMessageCreate, request: Request, db: Session = Depends(get_db)):
    """Store a contact form submission as an unread message"""
    message = ContactMessageRepository.create_message(
        db,
        name=data.name,
        email=data.email,
        phone=data.phone,
        subject=data.subject,
        message=data.message,
        priority=data.priority,
        source=data.source or "website",
        status="unread",
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    logger.info(f"📥 Contact message {message.id} from {message.email} ({message.priority})")
    return message_to_response(message)


@router.get("", response_model=list[ContactMessageResponse])
async def get_messages(
    status: Optional[MessageStatus] = None,
    priority: Optional[MessagePriority] = None,
    db: Session = Depends(get_db),
):
    """Inbox listing, newest first"""
    return [message_to_response(m) for m in ContactMessageRepository.get_messages(db, status, priority)]


@router.patch("/{message_id}", response_model=ContactMessageResponse)
async def update_message(message_id: int, data: ContactMessageUpdate, db: Session = Depends(get_db)):
    message = _get_or_404(db, message_id)
    message = ContactMessageRepository.update_message(
        db, message, status=data.status, priority=data.priority
    )
    logger.info(f"🔄 Contact message {message.id} now {message.status}/{message.priority}")
    return message_to_response(message)


@router.delete("/{message_id}")
async def delete_message(message_id: int, db: Session = Depends(get_db)):
    message = _get_or_404(db, message_id)
    ContactMessageRepository.delete_message(db, message)
    logger.info(f"🗑️ Contact message {message_id} deleted")
    return {"success": True}
