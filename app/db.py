import logging

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase

logger = logging.getLogger(__name__)

USERS = "users"
HOTELS = "hotels"
FEEDBACKS = "feedbacks"
BOOKINGS = "bookings"


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    await db[USERS].create_index("email", unique=True)
    await db[USERS].create_index("username", unique=True)
    await db[BOOKINGS].create_index("userId")
    logger.info("MongoDB indexes ensured")


def parse_object_id(value: str) -> ObjectId | None:
    """Return the ObjectId for a path/claim value, or None if malformed."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def with_str_id(doc: dict) -> dict:
    """Copy of a raw document with ``_id`` rendered as a string."""
    out = dict(doc)
    out["_id"] = str(out["_id"])
    return out
