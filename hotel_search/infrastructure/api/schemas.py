"""Pydantic request/response models for the HTTP API.

Only shapes and types are checked here; range rules (name length, price and
coordinate bounds, paging) live in the domain and use cases.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class HotelRequest(BaseModel):
    name: str
    price_per_night: Decimal
    latitude: float
    longitude: float


class HotelResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    price_per_night: float
    latitude: float
    longitude: float
    created_at: datetime
    updated_at: datetime | None = None


class HotelSearchResultResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    price_per_night: float
    distance_km: float


class SearchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    items: list[HotelSearchResultResponse]
    page: int
    page_size: int
    total_count: int
    total_pages: int


class ErrorResponse(BaseModel):
    detail: str
