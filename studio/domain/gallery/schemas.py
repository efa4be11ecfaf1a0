"""Gallery schemas - Pydantic models for image metadata"""

from datetime import datetime
from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator


class GalleryImageCreate(BaseModel):
    """
    Schema for registering an externally hosted image.

    Only the URL is required; the router fills in missing file names.
    """

    url: str = Field(..., min_length=1, max_length=1000)
    filename: Optional[str] = None
    originalName: Optional[str] = None
    thumbnailUrl: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[list[str]] = None
    featured: bool = False
    bookingId: Optional[int] = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, v):
        parsed = urlparse(v.strip())
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("url must be an absolute http(s) URL")
        return v.strip()


class FeaturedUpdate(BaseModel):
    featured: bool


class GalleryImageResponse(BaseModel):
    id: int
    bookingId: Optional[int]
    filename: str
    originalName: str
    url: str
    thumbnailUrl: Optional[str]
    category: Optional[str]
    tags: Optional[list[str]]
    featured: bool
    uploadedAt: Optional[datetime] = None
