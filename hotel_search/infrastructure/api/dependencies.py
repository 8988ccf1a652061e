"""FastAPI dependency injection — wires the shared store into use cases."""

from __future__ import annotations

from fastapi import Depends, Request

from hotel_search.application.ports.hotel_repo import HotelRepository
from hotel_search.application.use_cases.create_hotel import CreateHotelUseCase
from hotel_search.application.use_cases.delete_hotel import DeleteHotelUseCase
from hotel_search.application.use_cases.get_hotels import GetHotelUseCase, ListHotelsUseCase
from hotel_search.application.use_cases.search_hotels import SearchHotelsUseCase
from hotel_search.application.use_cases.update_hotel import UpdateHotelUseCase
from hotel_search.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_hotel_repo(request: Request) -> HotelRepository:
    # One store per application, created in create_app()
    return request.app.state.hotel_repo


def get_create_hotel_uc(repo: HotelRepository = Depends(get_hotel_repo)) -> CreateHotelUseCase:
    return CreateHotelUseCase(repo)


def get_update_hotel_uc(repo: HotelRepository = Depends(get_hotel_repo)) -> UpdateHotelUseCase:
    return UpdateHotelUseCase(repo)


def get_delete_hotel_uc(repo: HotelRepository = Depends(get_hotel_repo)) -> DeleteHotelUseCase:
    return DeleteHotelUseCase(repo)


def get_hotel_uc(repo: HotelRepository = Depends(get_hotel_repo)) -> GetHotelUseCase:
    return GetHotelUseCase(repo)


def get_list_hotels_uc(repo: HotelRepository = Depends(get_hotel_repo)) -> ListHotelsUseCase:
    return ListHotelsUseCase(repo)


def get_search_hotels_uc(
    repo: HotelRepository = Depends(get_hotel_repo),
    settings: Settings = Depends(get_settings),
) -> SearchHotelsUseCase:
    return SearchHotelsUseCase(
        repo,
        price_weight=settings.price_weight,
        distance_weight=settings.distance_weight,
        max_page_size=settings.max_page_size,
    )
