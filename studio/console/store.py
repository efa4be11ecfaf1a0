"""
In-process query store for the admin console

Reads go through a keyed cache; mutations never patch cached data locally.
They invalidate the affected keys and the next read refetches from the API.
"""

import logging
from datetime import datetime
from typing import Any, Awaitable, Callable, Optional

from .api import StudioAPIClient
from .schemas import ParseResult, parse_availability, parse_bookings, parse_clients, parse_services

logger = logging.getLogger(__name__)

BOOKINGS_KEY = "bookings"
SERVICES_KEY = "services"
CLIENTS_KEY = "clients"
AVAILABILITY_KEY = "availability"
ANALYTICS_KEY = "analytics"

# Keys dropped after a booking is created or updated
BOOKING_MUTATION_KEYS = (BOOKINGS_KEY, AVAILABILITY_KEY, CLIENTS_KEY, ANALYTICS_KEY)


class QueryStore:
    """Keyed cache; keys are namespaced with ':' (e.g. 'availability:<start>:<end>')"""

    def __init__(self):
        self._entries: dict = {}

    def get(self, key: str) -> Optional[Any]:
        if key in self._entries:
            logger.debug(f"✅ Store HIT: {key}")
            return self._entries[key]
        logger.debug(f"❌ Store MISS: {key}")
        return None

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value
        logger.debug(f"✅ Store SET: {key}")

    def has(self, key: str) -> bool:
        return key in self._entries

    def invalidate(self, key: str) -> int:
        """Drop key and every key nested under it; returns how many were removed"""
        prefix = f"{key}:"
        stale = [k for k in self._entries if k == key or k.startswith(prefix)]
        for k in stale:
            del self._entries[k]
        if stale:
            logger.debug(f"🔄 Store INVALIDATE {key}: {len(stale)} keys")
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> list:
        return list(self._entries)


class BookingDesk:
    """Console data access: API reads cached in a QueryStore, mutations invalidate"""

    def __init__(self, api: Optional[StudioAPIClient] = None, store: Optional[QueryStore] = None):
        self.api = api or StudioAPIClient()
        self.store = store or QueryStore()

    async def _cached(self, key: str, fetch: Callable[[], Awaitable[Any]]) -> Any:
        if self.store.has(key):
            return self.store.get(key)
        value = await fetch()
        self.store.set(key, value)
        return value

    async def _parsed(self, key: str, fetch: Callable[[], Awaitable[Any]], parse) -> ParseResult:
        async def load():
            return parse(await fetch())

        return await self._cached(key, load)

    async def bookings(self) -> ParseResult:
        return await self._parsed(BOOKINGS_KEY, self.api.fetch_bookings, parse_bookings)

    async def services(self) -> ParseResult:
        return await self._parsed(SERVICES_KEY, self.api.fetch_services, parse_services)

    async def clients(self) -> ParseResult:
        return await self._parsed(CLIENTS_KEY, self.api.fetch_clients, parse_clients)

    async def availability(self, start: datetime, end: datetime) -> ParseResult:
        start_iso, end_iso = start.isoformat(), end.isoformat()
        key = f"{AVAILABILITY_KEY}:{start_iso}:{end_iso}"
        return await self._parsed(
            key,
            lambda: self.api.fetch_availability(start_iso, end_iso),
            parse_availability,
        )

    async def stats(self) -> dict:
        return await self._cached(f"{ANALYTICS_KEY}:stats", self.api.fetch_stats)

    def invalidate_bookings(self) -> None:
        for key in BOOKING_MUTATION_KEYS:
            self.store.invalidate(key)

    async def set_status(self, booking_id: int, status: str) -> Any:
        """PATCH only the status; cached reads are invalidated, never patched"""
        updated = await self.api.update_booking(booking_id, {"status": status})
        logger.info(f"🔄 Booking {booking_id} status set to {status}")
        self.invalidate_bookings()
        return updated

    async def create(self, payload: dict) -> Any:
        created = await self.api.create_booking(payload)
        self.invalidate_bookings()
        return created
