from pydantic import BaseModel, ConfigDict, Field


class RoomType(BaseModel):
    type: str
    rate: int | float
    availability: bool


class Review(BaseModel):
    reviewer: str = Field(min_length=1)
    comment: str = Field(min_length=1)
    rating: float


class Hotel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    address: str
    roomTypes: list[RoomType] = []
    rating: float
    reviews: list[Review] = []
    vacancy: bool
    images: list[str] = []

    def find_room(self, room_type: str) -> RoomType | None:
        return next((room for room in self.roomTypes if room.type == room_type), None)
