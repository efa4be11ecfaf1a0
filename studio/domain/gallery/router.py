"""Gallery router - FastAPI endpoints for portfolio image metadata"""

import logging
from typing import Optional
from urllib.parse import urlparse

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...database import get_db
from ...models import GalleryImage
from .repository import GalleryRepository
from .schemas import FeaturedUpdate, GalleryImageCreate, GalleryImageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/gallery", tags=["Gallery"])


def image_to_response(image: GalleryImage) -> GalleryImageResponse:
    return GalleryImageResponse(
        id=image.id,
        bookingId=image.booking_id,
        filename=image.filename,
        originalName=image.original_name,
        url=image.url,
        thumbnailUrl=image.thumbnail_url,
        category=image.category,
        tags=image.tags,
        featured=bool(image.featured),
        uploadedAt=image.uploaded_at,
    )


def _get_or_404(db: Session, image_id: int) -> GalleryImage:
    image = GalleryRepository.get_image(db, image_id)
    if not image:
        raise HTTPException(status_code=404, detail="Image not found")
    return image


@router.get("", response_model=list[GalleryImageResponse])
async def get_images(
    featured: bool = False,
    bookingId: Optional[int] = None,
    db: Session = Depends(get_db),
):
    """All images, or only featured ones with ?featured=true"""
    images = GalleryRepository.get_images(db, featured_only=featured, booking_id=bookingId)
    return [image_to_response(i) for i in images]


@router.post("", response_model=GalleryImageResponse)
async def create_image(data: GalleryImageCreate, db: Session = Depends(get_db)):
    """Register an image by URL; filename defaults to the last path segment"""
    if data.bookingId is not None and not GalleryRepository.get_booking(db, data.bookingId):
        raise HTTPException(status_code=404, detail="Booking not found")

    filename = data.filename or urlparse(data.url).path.rstrip("/").rsplit("/", 1)[-1] or "image"
    image = GalleryRepository.create_image(
        db,
        booking_id=data.bookingId,
        filename=filename,
        original_name=data.originalName or filename,
        url=data.url,
        thumbnail_url=data.thumbnailUrl,
        category=data.category,
        tags=data.tags,
        featured=data.featured,
    )
    logger.info(f"🖼️ Gallery image {image.id} added: {image.filename}")
    return image_to_response(image)


@router.patch("/{image_id}/featured", response_model=GalleryImageResponse)
async def set_featured(image_id: int, data: FeaturedUpdate, db: Session = Depends(get_db)):
    image = GalleryRepository.set_featured(db, _get_or_404(db, image_id), data.featured)
    logger.info(f"⭐ Gallery image {image.id} featured: {image.featured}")
    return image_to_response(image)


@router.delete("/{image_id}")
async def delete_image(image_id: int, db: Session = Depends(get_db)):
    GalleryRepository.delete_image(db, _get_or_404(db, image_id))
    logger.info(f"🗑️ Gallery image {image_id} deleted")
    return {"message": "Image deleted successfully"}
