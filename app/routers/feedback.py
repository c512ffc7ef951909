from fastapi import APIRouter

from app.dependencies import CurrentUserDep, FeedbackDep
from app.schemas.feedback import Feedback, FeedbackRequest

router = APIRouter(prefix="/api/feedback", tags=["feedback"])


@router.get("", response_model=list[Feedback])
async def list_feedback(service: FeedbackDep) -> list[Feedback]:
    return await service.list_feedback()


@router.post("", response_model=Feedback, status_code=201)
async def add_feedback(
    request: FeedbackRequest, user: CurrentUserDep, service: FeedbackDep,
) -> Feedback:
    return await service.add_feedback(user, request)
