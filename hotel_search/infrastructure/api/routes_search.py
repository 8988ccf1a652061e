"""Search endpoint — hotels ranked by price and distance from a point."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from hotel_search.application.dto import SearchHotelsQuery
from hotel_search.application.use_cases.search_hotels import SearchHotelsUseCase
from hotel_search.config import Settings
from hotel_search.infrastructure.api.dependencies import get_search_hotels_uc, get_settings
from hotel_search.infrastructure.api.schemas import ErrorResponse, SearchResponse

router = APIRouter(prefix="/search", tags=["search"], responses={400: {"model": ErrorResponse}})


@router.get("", response_model=SearchResponse)
async def search_hotels(
    latitude: float = Query(...),
    longitude: float = Query(...),
    page: int = Query(1),
    page_size: int | None = Query(None),
    uc: SearchHotelsUseCase = Depends(get_search_hotels_uc),
    settings: Settings = Depends(get_settings),
):
    """Rank every hotel by combined price/distance score, cheapest-and-closest first."""
    result = await uc.execute(
        SearchHotelsQuery(
            latitude=latitude,
            longitude=longitude,
            page=page,
            page_size=page_size if page_size is not None else settings.default_page_size,
        )
    )
    return SearchResponse.model_validate(result)
