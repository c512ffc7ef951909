from pydantic import BaseModel

from app.schemas.hotel import Review


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    message: str
    token: str
    name: str


class ReviewAddedResponse(BaseModel):
    message: str
    review: Review


class BookingCreatedResponse(BaseModel):
    message: str
    rate: int | float
