from pydantic import BaseModel, ConfigDict, Field


class FeedbackRequest(BaseModel):
    feedback: str = Field(min_length=1)
    ratings: float


class Feedback(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    feedback: str
    ratings: float
