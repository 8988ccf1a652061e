"""Application-level commands, queries and result DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Generic, TypeVar
from uuid import UUID

from hotel_search.domain import geo_constants as geo
from hotel_search.domain.entities.hotel import Hotel

T = TypeVar("T")


@dataclass(frozen=True)
class CreateHotelCommand:
    name: str
    price_per_night: Decimal
    latitude: float
    longitude: float


@dataclass(frozen=True)
class UpdateHotelCommand:
    id: UUID
    name: str
    price_per_night: Decimal
    latitude: float
    longitude: float


@dataclass(frozen=True)
class SearchHotelsQuery:
    latitude: float
    longitude: float
    page: int = 1
    page_size: int = geo.DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class HotelDto:
    id: UUID
    name: str
    price_per_night: Decimal
    latitude: float
    longitude: float
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, hotel: Hotel) -> HotelDto:
        return cls(
            id=hotel.id,
            name=hotel.name,
            price_per_night=hotel.price_per_night,
            latitude=hotel.location.latitude,
            longitude=hotel.location.longitude,
            created_at=hotel.created_at,
            updated_at=hotel.updated_at,
        )


@dataclass(frozen=True)
class HotelSearchResultDto:
    id: UUID
    name: str
    price_per_night: Decimal
    distance_km: float


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    items: list[T]
    page: int
    page_size: int
    total_count: int
    total_pages: int
