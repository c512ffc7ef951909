import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.db import FEEDBACKS, with_str_id
from app.schemas.feedback import Feedback, FeedbackRequest
from app.schemas.user import User

logger = logging.getLogger(__name__)


class FeedbackService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self._feedbacks = db[FEEDBACKS]

    async def list_feedback(self) -> list[Feedback]:
        docs = await self._feedbacks.find({}).to_list(length=None)
        return [Feedback(**with_str_id(doc)) for doc in docs]

    async def add_feedback(self, user: User, request: FeedbackRequest) -> Feedback:
        doc = {"name": user.name, "feedback": request.feedback, "ratings": request.ratings}
        result = await self._feedbacks.insert_one(doc)
        logger.info("Feedback saved from %s", user.username)
        return Feedback(**with_str_id({**doc, "_id": result.inserted_id}))
