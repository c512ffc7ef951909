import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from .custom import HotelBookingError

logger = logging.getLogger(__name__)


async def hotel_booking_error_handler(request: Request, exc: HotelBookingError) -> JSONResponse:
    logger.info(
        "%s %s rejected (status=%s): %s",
        request.method, request.url.path, exc.status_code, exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = [".".join(str(p) for p in err["loc"] if p != "body") for err in exc.errors()]
    logger.info("%s %s invalid body: %s", request.method, request.url.path, fields)
    missing = any(err["type"] == "missing" for err in exc.errors())
    message = "Missing required fields" if missing else "Invalid request body"
    return JSONResponse(status_code=400, content={"message": message, "fields": fields})


async def persistence_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error("MongoDB error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})
