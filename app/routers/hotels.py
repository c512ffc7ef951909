from fastapi import APIRouter

from app.dependencies import HotelDep
from app.schemas.hotel import Hotel, Review
from app.schemas.responses import ReviewAddedResponse

router = APIRouter(prefix="/api/hotels", tags=["hotels"])


@router.get("", response_model=list[Hotel])
async def list_hotels(service: HotelDep) -> list[Hotel]:
    return await service.list_hotels()


@router.get("/{hotel_id}", response_model=Hotel)
async def get_hotel(hotel_id: str, service: HotelDep) -> Hotel:
    return await service.get_hotel(hotel_id)


@router.post("/{hotel_id}/reviews", response_model=ReviewAddedResponse, status_code=201)
async def add_review(hotel_id: str, review: Review, service: HotelDep) -> ReviewAddedResponse:
    added = await service.add_review(hotel_id, review)
    return ReviewAddedResponse(message="Review added", review=added)
