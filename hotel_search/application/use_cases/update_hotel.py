"""UpdateHotelUseCase — re-validate and replace a stored hotel."""

from __future__ import annotations

import copy
import logging

from hotel_search.application.dto import HotelDto, UpdateHotelCommand
from hotel_search.application.ports.hotel_repo import HotelRepository
from hotel_search.domain.entities.hotel import Clock, utc_now
from hotel_search.domain.exceptions import HotelNotFoundError

logger = logging.getLogger(__name__)


class UpdateHotelUseCase:
    def __init__(self, hotel_repo: HotelRepository, clock: Clock = utc_now):
        self._hotels = hotel_repo
        self._clock = clock

    async def execute(self, command: UpdateHotelCommand) -> HotelDto:
        """Apply the command to the stored hotel.

        The stored instance is never mutated: changes are applied to a copy
        which then replaces it, so concurrent readers see either the old or
        the new hotel, never a mix.

        Raises:
            HotelNotFoundError: if no hotel has the command's id.
        """
        current = await self._hotels.get_by_id(command.id)
        if current is None:
            raise HotelNotFoundError(command.id)

        hotel = copy.copy(current)
        hotel.update(
            command.name,
            command.price_per_night,
            command.latitude,
            command.longitude,
            clock=self._clock,
        )
        updated = await self._hotels.update(hotel)
        logger.info("Updated hotel %s", updated.id)
        return HotelDto.from_entity(updated)
