"""Shared validation utilities"""

import re
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..config import STUDIO_TIMEZONE

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


def normalize_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address with surrounding whitespace removed

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    if not re.match(EMAIL_PATTERN, email):
        raise ValueError("Invalid email format")

    return email


def require_email(email: Optional[str]) -> str:
    """Like normalize_email, but a missing or blank address is an error"""
    if email is None or not email.strip():
        raise ValueError("Email is required")
    return normalize_email(email)


def to_studio_time(value: datetime) -> datetime:
    """Convert an aware datetime to a naive one in the studio time zone.

    Naive values are assumed to already be studio-local and pass through.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(ZoneInfo(STUDIO_TIMEZONE)).replace(tzinfo=None)


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO 8601 string into a naive studio-local datetime.

    Accepts a trailing "Z" as well as explicit offsets.

    Raises:
        ValueError: If the string is not a valid ISO 8601 instant
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Date must be a non-empty ISO 8601 string")
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    return to_studio_time(parsed)
