"""Hotel endpoints — CRUD over the in-memory store."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from hotel_search.application.dto import CreateHotelCommand, UpdateHotelCommand
from hotel_search.application.use_cases.create_hotel import CreateHotelUseCase
from hotel_search.application.use_cases.delete_hotel import DeleteHotelUseCase
from hotel_search.application.use_cases.get_hotels import GetHotelUseCase, ListHotelsUseCase
from hotel_search.application.use_cases.update_hotel import UpdateHotelUseCase
from hotel_search.infrastructure.api.dependencies import (
    get_create_hotel_uc,
    get_delete_hotel_uc,
    get_hotel_uc,
    get_list_hotels_uc,
    get_update_hotel_uc,
)
from hotel_search.infrastructure.api.schemas import ErrorResponse, HotelRequest, HotelResponse

router = APIRouter(
    prefix="/hotels",
    tags=["hotels"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.post("", response_model=HotelResponse, status_code=status.HTTP_201_CREATED)
async def create_hotel(
    body: HotelRequest,
    request: Request,
    response: Response,
    uc: CreateHotelUseCase = Depends(get_create_hotel_uc),
):
    hotel = await uc.execute(
        CreateHotelCommand(
            name=body.name,
            price_per_night=body.price_per_night,
            latitude=body.latitude,
            longitude=body.longitude,
        )
    )
    response.headers["Location"] = str(request.url_for("get_hotel", hotel_id=str(hotel.id)))
    return HotelResponse.model_validate(hotel)


@router.get("", response_model=list[HotelResponse])
async def list_hotels(uc: ListHotelsUseCase = Depends(get_list_hotels_uc)):
    """List all hotels, oldest first."""
    return [HotelResponse.model_validate(h) for h in await uc.execute()]


@router.get("/{hotel_id}", response_model=HotelResponse)
async def get_hotel(hotel_id: UUID, uc: GetHotelUseCase = Depends(get_hotel_uc)):
    hotel = await uc.execute(hotel_id)
    if hotel is None:
        raise HTTPException(status_code=404, detail="Hotel not found")
    return HotelResponse.model_validate(hotel)


@router.put("/{hotel_id}", response_model=HotelResponse)
async def update_hotel(
    hotel_id: UUID,
    body: HotelRequest,
    uc: UpdateHotelUseCase = Depends(get_update_hotel_uc),
):
    hotel = await uc.execute(
        UpdateHotelCommand(
            id=hotel_id,
            name=body.name,
            price_per_night=body.price_per_night,
            latitude=body.latitude,
            longitude=body.longitude,
        )
    )
    return HotelResponse.model_validate(hotel)


@router.delete("/{hotel_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_hotel(hotel_id: UUID, uc: DeleteHotelUseCase = Depends(get_delete_hotel_uc)):
    await uc.execute(hotel_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
