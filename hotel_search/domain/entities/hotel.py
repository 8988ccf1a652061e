"""Hotel entity — the aggregate root searched by location and price."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from uuid import UUID, uuid4

from hotel_search.domain.exceptions import InvalidArgumentError, OutOfRangeError
from hotel_search.domain.value_objects.geo_location import GeoLocation

MAX_NAME_LENGTH = 200
MIN_PRICE = Decimal("0.01")
MAX_PRICE = Decimal("100000000")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Hotel:
    id: UUID
    name: str
    price_per_night: Decimal
    location: GeoLocation
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        name: str,
        price_per_night: Decimal | float | int | str,
        latitude: float,
        longitude: float,
        clock: Clock = utc_now,
    ) -> Hotel:
        """Validate inputs and build a new hotel with a fresh identity."""
        clean_name = _validate_name(name)
        price = _validate_price(price_per_night)
        location = GeoLocation.create(latitude, longitude)
        return cls(
            id=uuid4(),
            name=clean_name,
            price_per_night=price,
            location=location,
            created_at=clock(),
        )

    @classmethod
    def create_with_id(
        cls,
        hotel_id: UUID,
        name: str,
        price_per_night: Decimal | float | int | str,
        latitude: float,
        longitude: float,
        created_at: datetime,
        updated_at: datetime | None = None,
    ) -> Hotel:
        """Rebuild a hotel whose identity and timestamps are already known.

        Used when hydrating from an external store; fields are still validated.
        """
        return cls(
            id=hotel_id,
            name=_validate_name(name),
            price_per_night=_validate_price(price_per_night),
            location=GeoLocation.create(latitude, longitude),
            created_at=created_at,
            updated_at=updated_at,
        )

    def update(
        self,
        name: str,
        price_per_night: Decimal | float | int | str,
        latitude: float,
        longitude: float,
        clock: Clock = utc_now,
    ) -> None:
        # Validate everything before touching any field
        clean_name = _validate_name(name)
        price = _validate_price(price_per_night)
        location = GeoLocation.create(latitude, longitude)

        self.name = clean_name
        self.price_per_night = price
        self.location = location
        self.updated_at = clock()

    def distance_to(self, location: GeoLocation) -> float:
        return self.location.distance_to(location)


def _validate_name(name: str | None) -> str:
    if name is None or not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("Hotel name cannot be empty.")
    trimmed = name.strip()
    if len(trimmed) > MAX_NAME_LENGTH:
        raise InvalidArgumentError(
            f"Hotel name cannot exceed {MAX_NAME_LENGTH} characters."
        )
    return trimmed


def _validate_price(price: Decimal | float | int | str) -> Decimal:
    if isinstance(price, bool):
        raise InvalidArgumentError("Price per night must be a number.")
    try:
        value = price if isinstance(price, Decimal) else Decimal(str(price))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise InvalidArgumentError(f"Price per night must be a number, got {price!r}.") from e

    if not value.is_finite():
        raise OutOfRangeError(f"Price per night must be a finite number, got {price}.")
    if value < MIN_PRICE:
        raise OutOfRangeError(f"Price per night must be at least {MIN_PRICE}.")
    if value > MAX_PRICE:
        raise OutOfRangeError(f"Price per night cannot exceed {MAX_PRICE}.")
    return value
