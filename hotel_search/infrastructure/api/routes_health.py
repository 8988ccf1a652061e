"""Health check endpoint."""

from fastapi import APIRouter, Depends

from hotel_search.application.ports.hotel_repo import HotelRepository
from hotel_search.infrastructure.api.dependencies import get_hotel_repo

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(repo: HotelRepository = Depends(get_hotel_repo)):
    """Report API status and how many hotels the store holds."""
    return {
        "status": "ok",
        "hotels": await repo.count(),
        "service": "Hotel Search API",
    }
