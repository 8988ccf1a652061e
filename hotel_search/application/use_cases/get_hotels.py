"""Single hotel lookup and full listing."""

from __future__ import annotations

from uuid import UUID

from hotel_search.application.dto import HotelDto
from hotel_search.application.ports.hotel_repo import HotelRepository


class GetHotelUseCase:
    def __init__(self, hotel_repo: HotelRepository):
        self._hotels = hotel_repo

    async def execute(self, hotel_id: UUID) -> HotelDto | None:
        """Return the hotel, or None when the id is unknown (not an error)."""
        hotel = await self._hotels.get_by_id(hotel_id)
        return HotelDto.from_entity(hotel) if hotel else None


class ListHotelsUseCase:
    def __init__(self, hotel_repo: HotelRepository):
        self._hotels = hotel_repo

    async def execute(self) -> list[HotelDto]:
        hotels = await self._hotels.get_all()
        return [HotelDto.from_entity(h) for h in sorted(hotels, key=lambda h: h.created_at)]
