from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BookingRequest(BaseModel):
    hotelName: str
    roomType: str
    numGuests: int
    checkInDate: datetime
    checkOutDate: datetime
    specialRequests: str | None = None

    @field_validator("checkInDate", "checkOutDate")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Dates sent without an offset are read as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Booking(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    hotelName: str
    hotelAddress: str
    userId: str
    userName: str
    userEmail: str
    userPhone: str
    checkInDate: datetime
    checkOutDate: datetime
    numGuests: int
    roomType: str
    specialRequests: str | None = None
    rate: int | float
