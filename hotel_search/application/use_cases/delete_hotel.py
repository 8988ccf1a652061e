"""Remove a hotel by id."""

from __future__ import annotations

import logging
from uuid import UUID

from hotel_search.application.ports.hotel_repo import HotelRepository
from hotel_search.domain.exceptions import HotelNotFoundError

logger = logging.getLogger(__name__)


class DeleteHotelUseCase:
    def __init__(self, hotel_repo: HotelRepository):
        self._hotels = hotel_repo

    async def execute(self, hotel_id: UUID) -> bool:
        """Delete the hotel.

        Raises:
            HotelNotFoundError: if the hotel does not exist (or was removed
                concurrently before this call got to it).
        """
        if not await self._hotels.exists(hotel_id):
            raise HotelNotFoundError(hotel_id)

        removed = await self._hotels.delete(hotel_id)
        if not removed:
            raise HotelNotFoundError(hotel_id)

        logger.info("Deleted hotel %s", hotel_id)
        return removed
