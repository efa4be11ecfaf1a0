"""Gallery repository - Database operations for image metadata"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Booking, GalleryImage


class GalleryRepository:
    """Repository for gallery image database operations"""

    @staticmethod
    def get_images(
        db: Session, featured_only: bool = False, booking_id: Optional[int] = None
    ) -> list[GalleryImage]:
        """Most recently added first"""
        query = db.query(GalleryImage)
        if featured_only:
            query = query.filter(GalleryImage.featured.is_(True))
        if booking_id is not None:
            query = query.filter(GalleryImage.booking_id == booking_id)
        return query.order_by(GalleryImage.uploaded_at.desc(), GalleryImage.id.desc()).all()

    @staticmethod
    def get_image(db: Session, image_id: int) -> Optional[GalleryImage]:
        return db.query(GalleryImage).filter(GalleryImage.id == image_id).first()

    @staticmethod
    def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
        return db.query(Booking).filter(Booking.id == booking_id).first()

    @staticmethod
    def create_image(db: Session, **image_data) -> GalleryImage:
        image = GalleryImage(**image_data)
        db.add(image)
        db.commit()
        db.refresh(image)
        return image

    @staticmethod
    def set_featured(db: Session, image: GalleryImage, featured: bool) -> GalleryImage:
        image.featured = featured
        db.commit()
        db.refresh(image)
        return image

    @staticmethod
    def delete_image(db: Session, image: GalleryImage) -> None:
        db.delete(image)
        db.commit()
