import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.db import HOTELS, parse_object_id, with_str_id
from app.exceptions.custom import HotelNotFoundError
from app.schemas.hotel import Hotel, Review

logger = logging.getLogger(__name__)


class HotelService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self._hotels = db[HOTELS]

    async def list_hotels(self) -> list[Hotel]:
        docs = await self._hotels.find({}).to_list(length=None)
        return [Hotel(**with_str_id(doc)) for doc in docs]

    async def get_hotel(self, hotel_id: str) -> Hotel:
        return Hotel(**with_str_id(await self._load(hotel_id)))

    async def find_by_name(self, name: str) -> Hotel | None:
        doc = await self._hotels.find_one({"name": name})
        return Hotel(**with_str_id(doc)) if doc else None

    async def add_review(self, hotel_id: str, review: Review) -> Review:
        """Append a review to the hotel's list and persist the whole document."""
        doc = await self._load(hotel_id)
        doc.setdefault("reviews", []).append(review.model_dump())
        await self._hotels.replace_one({"_id": doc["_id"]}, doc)
        logger.info("Review by %s added to hotel %s", review.reviewer, hotel_id)
        return review

    async def _load(self, hotel_id: str) -> dict:
        oid = parse_object_id(hotel_id)
        doc = await self._hotels.find_one({"_id": oid}) if oid else None
        if doc is None:
            raise HotelNotFoundError()
        return doc
