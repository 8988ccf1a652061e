"""Port interface for hotel persistence."""

from abc import ABC, abstractmethod
from uuid import UUID

from hotel_search.domain.entities.hotel import Hotel


class HotelRepository(ABC):
    @abstractmethod
    async def get_by_id(self, hotel_id: UUID) -> Hotel | None:
        """Return the hotel, or None if no hotel has this id."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Hotel]:
        """Return a point-in-time snapshot of all stored hotels."""
        ...

    @abstractmethod
    async def add(self, hotel: Hotel) -> Hotel:
        """Store a new hotel. Raises HotelConflictError if the id is taken."""
        ...

    @abstractmethod
    async def update(self, hotel: Hotel) -> Hotel:
        """Replace a stored hotel. Raises HotelNotFoundError if absent."""
        ...

    @abstractmethod
    async def delete(self, hotel_id: UUID) -> bool:
        """Remove a hotel; returns False if nothing was removed."""
        ...

    @abstractmethod
    async def exists(self, hotel_id: UUID) -> bool:
        ...

    @abstractmethod
    async def count(self) -> int:
        ...
