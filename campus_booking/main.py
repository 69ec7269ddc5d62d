import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from campus_booking import config
from campus_booking.db import SessionLocal, init_database
from campus_booking.dependencies import memory_storage
from campus_booking.errors import BookingServiceError, InternalError, TimeConflict
from campus_booking.routers import auth, bookings, dashboard, departments, resources
from campus_booking.routers.serializers import booking_json
from campus_booking.seed import seed_storage
from campus_booking.storage.sql import SqlStorage

config.configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    "lifespan for initing storage"
    if config.STORAGE_BACKEND == "memory":
        if config.SEED_ON_STARTUP:
            seed_storage(memory_storage)
    else:
        init_database()
        if config.SEED_ON_STARTUP:
            db = SessionLocal()
            try:
                seed_storage(SqlStorage(db))
            finally:
                db.close()
    logger.info(f"Storage backend: {config.STORAGE_BACKEND}")
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Campus resource booker",
    description="Booking of university labs, halls and courts based on FastAPI.",
    version="0.1.0",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    },
)


@app.exception_handler(BookingServiceError)
async def booking_error_handler(request: Request, exc: BookingServiceError):
    body = exc.to_dict()
    if isinstance(exc, TimeConflict):
        body["conflicts"] = [booking_json(b) for b in exc.conflicts]
    return JSONResponse(status_code=exc.status_code, content=body)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


app.include_router(auth.router)
app.include_router(departments.router)
app.include_router(resources.router)
app.include_router(bookings.router)
app.include_router(dashboard.router)
