"""Validated, immutable (lat, lon) pair."""

from __future__ import annotations

import math
from dataclasses import dataclass

from hotel_search.domain import geo_constants as geo
from hotel_search.domain.exceptions import (
    InvalidValueError,
    NullArgumentError,
    OutOfRangeError,
)


def validate_coordinates(latitude: float, longitude: float) -> None:
    """Raise if (latitude, longitude) is not a finite point on the globe.

    Raises:
        InvalidValueError: if either component is NaN or infinite.
        OutOfRangeError: if either component is outside its bounds.
    """
    if not geo.is_finite(latitude):
        raise InvalidValueError(f"Latitude must be a finite number, got {latitude}.")
    if not geo.is_finite(longitude):
        raise InvalidValueError(f"Longitude must be a finite number, got {longitude}.")
    if not geo.is_valid_latitude(latitude):
        raise OutOfRangeError(f"{geo.LATITUDE_ERROR_MESSAGE} Got {latitude}.")
    if not geo.is_valid_longitude(longitude):
        raise OutOfRangeError(f"{geo.LONGITUDE_ERROR_MESSAGE} Got {longitude}.")


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in km between two points given in degrees."""
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a slightly outside [0, 1], which makes sqrt(1 - a) NaN
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return geo.EARTH_RADIUS_KM * c


@dataclass(frozen=True, eq=False)
class GeoLocation:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        validate_coordinates(self.latitude, self.longitude)

    @classmethod
    def create(cls, latitude: float, longitude: float) -> GeoLocation:
        return cls(latitude=float(latitude), longitude=float(longitude))

    def distance_to(self, other: GeoLocation | None) -> float:
        """Calculate distance in km to another point using the Haversine formula."""
        if other is None:
            raise NullArgumentError("Destination location is required.")
        if other is self:
            return 0.0
        return haversine_km(self.latitude, self.longitude, other.latitude, other.longitude)

    def equals(self, other: object) -> bool:
        """True when both components differ by at most the equality tolerance."""
        if other is self:
            return True
        if not isinstance(other, GeoLocation):
            return False
        tol = geo.COORDINATE_EQUALITY_TOLERANCE
        return (
            abs(self.latitude - other.latitude) <= tol
            and abs(self.longitude - other.longitude) <= tol
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoLocation):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # Quantized to the equality tolerance so equal points share a hash
        scale = round(1.0 / geo.COORDINATE_EQUALITY_TOLERANCE)
        return hash((round(self.latitude * scale), round(self.longitude * scale)))

    def __str__(self) -> str:
        return f"({self.latitude:.7f}, {self.longitude:.7f})"
