import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from app.config import Settings
from app.db import ensure_indexes
from app.exceptions.custom import HotelBookingError
from app.exceptions.handlers import (
    hotel_booking_error_handler,
    persistence_error_handler,
    request_validation_error_handler,
    unexpected_error_handler,
)
from app.routers.auth import router as auth_router
from app.routers.bookings import router as bookings_router
from app.routers.feedback import router as feedback_router
from app.routers.hotels import router as hotels_router
from app.services.auth import AuthService
from app.services.bookings import BookingService
from app.services.feedback import FeedbackService
from app.services.hotels import HotelService
from app.services.identity import IdentityResolver
from app.services.security import TokenService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    client = AsyncIOMotorClient(settings.mongo_uri)
    try:
        db = client[settings.mongo_db_name]
        await ensure_indexes(db)
        logger.info("MongoDB connected (database=%s)", settings.mongo_db_name)

        tokens = TokenService(
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expire_minutes=settings.access_token_expire_minutes,
        )
        hotels = HotelService(db)

        app.state.token_service = tokens
        app.state.identity_resolver = IdentityResolver(db, tokens)
        app.state.auth_service = AuthService(db, tokens, bcrypt_rounds=settings.bcrypt_rounds)
        app.state.hotel_service = hotels
        app.state.feedback_service = FeedbackService(db)
        app.state.booking_service = BookingService(db, hotels)

        yield
    finally:
        client.close()


app = FastAPI(title="Hotel Booking API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(HotelBookingError, hotel_booking_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(PyMongoError, persistence_error_handler)
app.add_exception_handler(Exception, unexpected_error_handler)

app.include_router(auth_router)
app.include_router(hotels_router)
app.include_router(feedback_router)
app.include_router(bookings_router)


def run() -> None:
    settings = Settings()
    uvicorn.run("app.main:app", host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())
