from typing import Annotated

from fastapi import Depends, Header, Request

from app.schemas.user import User
from app.services.auth import AuthService
from app.services.bookings import BookingService
from app.services.feedback import FeedbackService
from app.services.hotels import HotelService
from app.services.identity import IdentityResolver


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_hotel_service(request: Request) -> HotelService:
    return request.app.state.hotel_service


def get_feedback_service(request: Request) -> FeedbackService:
    return request.app.state.feedback_service


def get_booking_service(request: Request) -> BookingService:
    return request.app.state.booking_service


def get_identity_resolver(request: Request) -> IdentityResolver:
    return request.app.state.identity_resolver


AuthDep = Annotated[AuthService, Depends(get_auth_service)]
HotelDep = Annotated[HotelService, Depends(get_hotel_service)]
FeedbackDep = Annotated[FeedbackService, Depends(get_feedback_service)]
BookingDep = Annotated[BookingService, Depends(get_booking_service)]
IdentityDep = Annotated[IdentityResolver, Depends(get_identity_resolver)]


async def get_current_user(
    resolver: IdentityDep,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    return await resolver.resolve(authorization)


CurrentUserDep = Annotated[User, Depends(get_current_user)]
