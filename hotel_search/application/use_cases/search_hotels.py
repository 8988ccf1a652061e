"""SearchHotelsUseCase — rank the whole store by price/distance and page it."""

from __future__ import annotations

import logging
import math

from hotel_search.application.dto import (
    HotelSearchResultDto,
    PagedResult,
    SearchHotelsQuery,
)
from hotel_search.application.ports.hotel_repo import HotelRepository
from hotel_search.domain import geo_constants as geo
from hotel_search.domain.exceptions import OutOfRangeError
from hotel_search.domain.policies.hotel_search import search_hotels
from hotel_search.domain.value_objects.geo_location import validate_coordinates

logger = logging.getLogger(__name__)


class SearchHotelsUseCase:
    """Orchestrates store snapshot → search policy → pagination → DTOs."""

    def __init__(
        self,
        hotel_repo: HotelRepository,
        price_weight: float = geo.PRICE_WEIGHT,
        distance_weight: float = geo.DISTANCE_WEIGHT,
        max_page_size: int = geo.MAX_PAGE_SIZE,
    ):
        self._hotels = hotel_repo
        self._price_weight = price_weight
        self._distance_weight = distance_weight
        self._max_page_size = max_page_size

    async def execute(self, query: SearchHotelsQuery) -> PagedResult[HotelSearchResultDto]:
        """Search all hotels around the query point (no radius limit).

        Pagination: skip (page - 1) * page_size, take page_size;
        total_pages = ceil(total_count / page_size).

        Raises:
            OutOfRangeError: invalid coordinates, page < 1 or page_size
                outside [1, max_page_size]. Checked before the store is read.
        """
        validate_coordinates(query.latitude, query.longitude)
        if query.page < 1:
            raise OutOfRangeError("Page must be greater than 0.")
        if not 1 <= query.page_size <= self._max_page_size:
            raise OutOfRangeError(
                f"Page size must be between 1 and {self._max_page_size}."
            )

        hotels = await self._hotels.get_all()
        if not hotels:
            logger.debug("Search on empty store")
            return PagedResult(
                items=[],
                page=query.page,
                page_size=query.page_size,
                total_count=0,
                total_pages=0,
            )

        ranked = search_hotels(
            hotels,
            query.latitude,
            query.longitude,
            radius_km=None,
            price_weight=self._price_weight,
            distance_weight=self._distance_weight,
        )

        total_count = len(ranked)
        total_pages = math.ceil(total_count / query.page_size)
        start = (query.page - 1) * query.page_size
        page_items = ranked[start:start + query.page_size]

        logger.debug(
            "Search (%f, %f): %d hits, page %d/%d",
            query.latitude, query.longitude, total_count, query.page, total_pages,
        )

        return PagedResult(
            items=[
                HotelSearchResultDto(
                    id=item.hotel.id,
                    name=item.hotel.name,
                    price_per_night=item.hotel.price_per_night,
                    distance_km=round(item.distance_km, 2),
                )
                for item in page_items
            ],
            page=query.page,
            page_size=query.page_size,
            total_count=total_count,
            total_pages=total_pages,
        )
