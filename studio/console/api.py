"""Async client for the studio REST API used by the admin console"""

import logging
from typing import Any, Optional

import httpx

from ..config import STUDIO_API_URL

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Something went wrong. Please try again."


class StudioAPIError(Exception):
    """Transport failure or non-2xx response; message is shown to the admin as-is"""

    def __init__(self, status_code: Optional[int], message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_message(response: httpx.Response) -> str:
    """Server-provided error text when present, generic text otherwise"""
    try:
        body = response.json()
    except ValueError:
        return GENERIC_ERROR
    if isinstance(body, dict):
        for key in ("error", "detail", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return GENERIC_ERROR


class StudioAPIClient:
    """Thin async wrapper over the booking desk endpoints.

    Every call opens its own httpx.AsyncClient and is awaited independently.
    No retries and no timeout beyond httpx's default.
    """

    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = (base_url or STUDIO_API_URL).rstrip("/")
        self.transport = transport

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        async with httpx.AsyncClient(base_url=self.base_url, transport=self.transport) as client:
            try:
                response = await client.request(method, path, **kwargs)
            except httpx.HTTPError as e:
                logger.error(f"❌ {method} {path} failed: {e}")
                raise StudioAPIError(None, GENERIC_ERROR) from e

        if response.is_error:
            message = _error_message(response)
            logger.error(f"❌ {method} {path} returned {response.status_code}: {message}")
            raise StudioAPIError(response.status_code, message)

        return response.json()

    async def fetch_bookings(self) -> Any:
        return await self._request("GET", "/api/bookings")

    async def create_booking(self, payload: dict) -> Any:
        logger.info(f"📥 Creating booking for {payload.get('clientEmail')}")
        return await self._request("POST", "/api/bookings", json=payload)

    async def update_booking(self, booking_id: int, changes: dict) -> Any:
        return await self._request("PATCH", f"/api/bookings/{booking_id}", json=changes)

    async def fetch_services(self) -> Any:
        return await self._request("GET", "/api/services")

    async def fetch_clients(self) -> Any:
        return await self._request("GET", "/api/clients")

    async def fetch_availability(self, start: str, end: str) -> Any:
        """Bookings in the inclusive [start, end] range; both ISO 8601 strings"""
        return await self._request("GET", "/api/availability", params={"start": start, "end": end})

    async def fetch_stats(self) -> Any:
        return await self._request("GET", "/api/analytics/stats")
