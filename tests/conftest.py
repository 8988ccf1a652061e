"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from hotel_search.adapters.persistence.in_memory_hotel_repository import (
    InMemoryHotelRepository,
)
from hotel_search.domain.entities.hotel import Hotel

ZAGREB = (45.815, 15.982)
VIENNA = (48.208, 16.373)


@pytest.fixture
def fixed_clock():
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    return lambda: now


@pytest.fixture
def repo():
    return InMemoryHotelRepository()


@pytest.fixture
def make_hotel():
    def _make(name="Hotel", price="100", lat=ZAGREB[0], lon=ZAGREB[1]) -> Hotel:
        return Hotel.create(name, Decimal(str(price)), lat, lon)

    return _make
