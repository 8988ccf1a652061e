"""CreateHotelUseCase — validate and store a new hotel."""

from __future__ import annotations

import logging

from hotel_search.application.dto import CreateHotelCommand, HotelDto
from hotel_search.application.ports.hotel_repo import HotelRepository
from hotel_search.domain.entities.hotel import Clock, Hotel, utc_now

logger = logging.getLogger(__name__)


class CreateHotelUseCase:
    def __init__(self, hotel_repo: HotelRepository, clock: Clock = utc_now):
        self._hotels = hotel_repo
        self._clock = clock

    async def execute(self, command: CreateHotelCommand) -> HotelDto:
        hotel = Hotel.create(
            command.name,
            command.price_per_night,
            command.latitude,
            command.longitude,
            clock=self._clock,
        )
        created = await self._hotels.add(hotel)
        logger.info(
            "Created hotel %s (%s) at %s", created.id, created.name, created.location
        )
        return HotelDto.from_entity(created)
