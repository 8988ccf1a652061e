"""HotelSearchPolicy — bounding-box pre-filter, Haversine filter, price/distance ranking."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from hotel_search.domain import geo_constants as geo
from hotel_search.domain.entities.hotel import Hotel
from hotel_search.domain.exceptions import OutOfRangeError
from hotel_search.domain.value_objects.geo_location import (
    haversine_km,
    validate_coordinates,
)


@dataclass(frozen=True)
class HotelSearchResultItem:
    """One ranked hit: the hotel and its exact distance from the query point."""

    hotel: Hotel
    distance_km: float


@dataclass(frozen=True)
class BoundingBox:
    """Lat/lon rectangle; min_lon > max_lon means it wraps across ±180°."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @property
    def crosses_antimeridian(self) -> bool:
        return self.min_lon > self.max_lon


def search_hotels(
    hotels: Iterable[Hotel],
    latitude: float,
    longitude: float,
    radius_km: float | None = None,
    *,
    price_weight: float = geo.PRICE_WEIGHT,
    distance_weight: float = geo.DISTANCE_WEIGHT,
) -> list[HotelSearchResultItem]:
    """Find hotels within *radius_km* of the query point, best match first.

    Pipeline:
      1. Bounding box pre-filter (cheap comparisons, may admit corner extras).
      2. Exact Haversine distance for survivors, drop those beyond the radius.
      3. Rank by weighted normalized price + distance, lower score first.

    Args:
        hotels: hotels to search, typically a store snapshot.
        latitude: query latitude in degrees.
        longitude: query longitude in degrees.
        radius_km: search radius; None means a global search.

    Returns:
        Ranked list of HotelSearchResultItem (empty if nothing matches).

    Raises:
        OutOfRangeError: if the query point or radius is invalid.
    """
    validate_coordinates(latitude, longitude)

    effective_radius = geo.DEFAULT_SEARCH_RADIUS_KM if radius_km is None else radius_km
    if not geo.is_finite(effective_radius) or effective_radius <= 0:
        raise OutOfRangeError(f"Search radius must be a positive number, got {radius_km}.")

    box = calculate_bounding_box(latitude, longitude, effective_radius)

    candidates: list[HotelSearchResultItem] = []
    for hotel in hotels:
        if not is_in_bounding_box(hotel.location.latitude, hotel.location.longitude, box):
            continue
        distance = haversine_km(
            latitude, longitude, hotel.location.latitude, hotel.location.longitude
        )
        if distance <= effective_radius:
            candidates.append(HotelSearchResultItem(hotel=hotel, distance_km=distance))

    if len(candidates) <= 1:
        return candidates

    return sort_by_price_and_distance(
        candidates, price_weight=price_weight, distance_weight=distance_weight
    )


def calculate_bounding_box(
    center_lat: float, center_lon: float, radius_km: float
) -> BoundingBox:
    """Bounding box guaranteed to contain every point within *radius_km*.

    Latitude delta is radius / km-per-degree. Longitude delta starts from
    radius / (km-per-degree * cos(lat)) and is widened to the exact spherical
    bound asin(sin(d) / cos(lat)), which the simple ratio undershoots for large
    radii. Near a pole, or when the box reaches over one, every longitude is
    accepted. A box running past ±180° is wrapped so that min_lon > max_lon.
    """
    delta_lat = radius_km / geo.KM_PER_DEGREE_LAT
    min_lat = center_lat - delta_lat
    max_lat = center_lat + delta_lat

    cos_lat = math.cos(math.radians(center_lat))
    touches_pole = min_lat <= geo.MIN_LATITUDE or max_lat >= geo.MAX_LATITUDE

    if cos_lat <= geo.POLAR_COSINE_THRESHOLD or touches_pole:
        delta_lon = geo.POLAR_LONGITUDE_RANGE
    else:
        delta_lon = radius_km / (geo.KM_PER_DEGREE_LAT * cos_lat)
        ratio = math.sin(math.radians(delta_lat)) / cos_lat
        if ratio >= 1.0:
            delta_lon = geo.POLAR_LONGITUDE_RANGE
        else:
            delta_lon = max(delta_lon, math.degrees(math.asin(ratio)))

    min_lat = max(min_lat, geo.MIN_LATITUDE)
    max_lat = min(max_lat, geo.MAX_LATITUDE)

    if delta_lon >= geo.POLAR_LONGITUDE_RANGE:
        return BoundingBox(min_lat, max_lat, geo.MIN_LONGITUDE, geo.MAX_LONGITUDE)

    min_lon = center_lon - delta_lon
    max_lon = center_lon + delta_lon
    if min_lon < geo.MIN_LONGITUDE:
        min_lon += 360.0
    if max_lon > geo.MAX_LONGITUDE:
        max_lon -= 360.0

    return BoundingBox(min_lat, max_lat, min_lon, max_lon)


def is_in_bounding_box(latitude: float, longitude: float, box: BoundingBox) -> bool:
    if latitude < box.min_lat or latitude > box.max_lat:
        return False

    if box.crosses_antimeridian:
        # Box wraps around ±180°: inside if in either the eastern or western part
        return longitude >= box.min_lon or longitude <= box.max_lon
    return box.min_lon <= longitude <= box.max_lon


def sort_by_price_and_distance(
    items: list[HotelSearchResultItem],
    *,
    price_weight: float = geo.PRICE_WEIGHT,
    distance_weight: float = geo.DISTANCE_WEIGHT,
) -> list[HotelSearchResultItem]:
    """Sort by weighted min-max normalized price and distance (ascending).

    A zero range (all values equal) normalizes to 0. Equal scores fall back
    to hotel id order so results are reproducible.
    """
    prices = [float(item.hotel.price_per_night) for item in items]
    distances = [item.distance_km for item in items]

    min_price, max_price = min(prices), max(prices)
    min_distance, max_distance = min(distances), max(distances)
    price_range = max_price - min_price
    distance_range = max_distance - min_distance

    def score(index: int) -> float:
        normalized_price = (
            (prices[index] - min_price) / price_range if price_range > 0 else 0.0
        )
        normalized_distance = (
            (distances[index] - min_distance) / distance_range
            if distance_range > 0
            else 0.0
        )
        return normalized_price * price_weight + normalized_distance * distance_weight

    order = sorted(
        range(len(items)),
        key=lambda i: (score(i), str(items[i].hotel.id)),
    )
    return [items[i] for i in order]
