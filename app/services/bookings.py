import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.db import BOOKINGS, with_str_id
from app.exceptions.custom import (
    HotelNotFoundError,
    InvalidInputError,
    MissingFieldsError,
    RoomTypeNotFoundError,
)
from app.mappers.room_rate import compute_rate
from app.schemas.booking import Booking, BookingRequest
from app.schemas.user import User
from app.services.hotels import HotelService

logger = logging.getLogger(__name__)

_REQUIRED_TEXT_FIELDS = ("hotelName", "roomType")


class BookingService:
    def __init__(self, db: AsyncIOMotorDatabase, hotels: HotelService):
        self._bookings = db[BOOKINGS]
        self._hotels = hotels

    async def create_booking(self, user: User, request: BookingRequest) -> Booking:
        """Price and store a booking for ``user``.

        Nothing is written unless the hotel and room type exist and the
        request is complete.
        """
        missing = [f for f in _REQUIRED_TEXT_FIELDS if not getattr(request, f).strip()]
        if missing:
            raise MissingFieldsError(missing)
        if request.numGuests <= 0:
            raise InvalidInputError("numGuests must be a positive integer")
        if request.checkOutDate <= request.checkInDate:
            raise InvalidInputError("checkOutDate must be after checkInDate")

        hotel = await self._hotels.find_by_name(request.hotelName)
        if hotel is None:
            raise HotelNotFoundError()

        room = hotel.find_room(request.roomType)
        if room is None:
            raise RoomTypeNotFoundError()

        rate = compute_rate(request.roomType, room.rate, request.numGuests)

        doc = {
            **request.model_dump(exclude_none=True),
            "hotelAddress": hotel.address,
            "userId": user.id,
            "userName": user.name,
            "userEmail": user.email,
            "userPhone": user.phone,
            "rate": rate,
        }
        result = await self._bookings.insert_one(doc)
        logger.info(
            "Booking %s saved for user %s at %s (%s x%d, rate=%s)",
            result.inserted_id, user.id, hotel.name, room.type, request.numGuests, rate,
        )
        return Booking(**with_str_id({**doc, "_id": result.inserted_id}))

    async def list_bookings(self, user: User) -> list[Booking]:
        docs = await self._bookings.find({"userId": user.id}).to_list(length=None)
        return [Booking(**with_str_id(doc)) for doc in docs]
