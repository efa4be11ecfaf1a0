import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL")

# Studio local time zone - booking instants are stored as naive local datetimes
STUDIO_TIMEZONE = os.getenv("STUDIO_TIMEZONE", "Pacific/Honolulu")

# Calendar display window for week/day views (both hours inclusive)
CALENDAR_FIRST_HOUR = int(os.getenv("CALENDAR_FIRST_HOUR", "9"))
CALENDAR_LAST_HOUR = int(os.getenv("CALENDAR_LAST_HOUR", "18"))

# Placeholder used when an appointment is created without a location
DEFAULT_BOOKING_LOCATION = os.getenv("DEFAULT_BOOKING_LOCATION", "Location to be confirmed")

# Invoices are due this many days after creation unless a due date is given
INVOICE_DUE_DAYS = int(os.getenv("INVOICE_DUE_DAYS", "30"))

# Frontend base URL and CORS origins
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    f"{FRONTEND_URL},http://localhost:3000",
).split(",")

# Base URL the admin console talks to
STUDIO_API_URL = os.getenv("STUDIO_API_URL", "http://localhost:8000")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
