"""In-memory hotel store — implements HotelRepository.

Holds the whole live dataset for the lifetime of the process; a restart
loses all data. Each operation is a single dict operation under a lock,
so the store is safe to share between threads and event-loop tasks.
"""

from __future__ import annotations

import logging
import threading
from uuid import UUID

from hotel_search.application.ports.hotel_repo import HotelRepository
from hotel_search.domain.entities.hotel import Hotel
from hotel_search.domain.exceptions import (
    HotelConflictError,
    HotelNotFoundError,
    NullArgumentError,
)

logger = logging.getLogger(__name__)


class InMemoryHotelRepository(HotelRepository):
    def __init__(self, hotels: list[Hotel] | None = None):
        self._hotels: dict[UUID, Hotel] = {}
        self._lock = threading.Lock()
        for hotel in hotels or []:
            self._hotels[hotel.id] = hotel

    async def get_by_id(self, hotel_id: UUID) -> Hotel | None:
        with self._lock:
            return self._hotels.get(hotel_id)

    async def get_all(self) -> list[Hotel]:
        with self._lock:
            return list(self._hotels.values())

    async def add(self, hotel: Hotel) -> Hotel:
        if hotel is None:
            raise NullArgumentError("Hotel is required.")
        with self._lock:
            if hotel.id in self._hotels:
                raise HotelConflictError(hotel.id)
            self._hotels[hotel.id] = hotel
        logger.debug("Stored hotel %s", hotel.id)
        return hotel

    async def update(self, hotel: Hotel) -> Hotel:
        if hotel is None:
            raise NullArgumentError("Hotel is required.")
        with self._lock:
            if hotel.id not in self._hotels:
                raise HotelNotFoundError(hotel.id)
            self._hotels[hotel.id] = hotel
        return hotel

    async def delete(self, hotel_id: UUID) -> bool:
        with self._lock:
            removed = self._hotels.pop(hotel_id, None)
        return removed is not None

    async def exists(self, hotel_id: UUID) -> bool:
        with self._lock:
            return hotel_id in self._hotels

    async def count(self) -> int:
        with self._lock:
            return len(self._hotels)
