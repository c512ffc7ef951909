from fastapi import APIRouter

from app.dependencies import BookingDep, CurrentUserDep
from app.schemas.booking import Booking, BookingRequest
from app.schemas.responses import BookingCreatedResponse

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.post("", response_model=BookingCreatedResponse, status_code=201)
async def create_booking(
    request: BookingRequest, user: CurrentUserDep, service: BookingDep,
) -> BookingCreatedResponse:
    booking = await service.create_booking(user, request)
    return BookingCreatedResponse(message="Booking saved successfully", rate=booking.rate)


@router.get("", response_model=list[Booking])
async def list_bookings(user: CurrentUserDep, service: BookingDep) -> list[Booking]:
    return await service.list_bookings(user)
