from datetime import date, datetime, time, timedelta
from typing import List, Optional
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from campus_booking.dependencies import get_locks, get_storage
from campus_booking.errors import BookingNotFound, ResourceNotFound, ValidationError
from campus_booking.models.user import User
from campus_booking.routers.serializers import booking_detail
from campus_booking.schemas.booking import (
    BookingCreate,
    BookingDetail,
    BookingResponse,
    BookingStatusUpdate,
)
from campus_booking.storage.base import Storage
from campus_booking.utils.auth import get_current_user
from campus_booking.utils.booking_service import create_booking as book_resource
from campus_booking.utils.locks import ResourceLocks

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/bookings",
    tags=["bookings"],
)


@router.get(
    "",
    response_model=List[BookingDetail],
    summary="List bookings",
    description="Bookings filtered by user, resource and day, each with its resource.",
)
def get_bookings(
    user: Optional[str] = None,
    resource: Optional[str] = None,
    date: Optional[date] = None,
    storage: Storage = Depends(get_storage),
):
    """
    Retrieve bookings. Filters combine.

    - **user**: only bookings made by this user id.
    - **resource**: only bookings for this resource id.
    - **date**: only bookings lying entirely within this UTC day (YYYY-MM-DD).
    """
    if user:
        bookings = storage.bookings_by_user(user)
    elif resource:
        bookings = storage.bookings_by_resource(resource)
    elif date:
        day_start = datetime.combine(date, time.min)
        bookings = storage.bookings_by_date_range(day_start, day_start + timedelta(days=1))
    else:
        bookings = storage.list_bookings()

    if resource:
        bookings = [b for b in bookings if b.resource_id == resource]
    if date:
        day_start = datetime.combine(date, time.min)
        day_end = day_start + timedelta(days=1)
        bookings = [b for b in bookings if b.start_time >= day_start and b.end_time <= day_end]

    # Includes deactivated resources, matching the single-booking route
    resources = {rid: storage.get_resource(rid) for rid in {b.resource_id for b in bookings}}
    logger.debug(f"Retrieved {len(bookings)} bookings")
    return [booking_detail(b, resources.get(b.resource_id)) for b in bookings]


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
    description="Book a resource for an interval. The booking starts out pending.",
)
def create_booking(
    booking: BookingCreate,
    storage: Storage = Depends(get_storage),
    locks: ResourceLocks = Depends(get_locks),
    current_user: User = Depends(get_current_user),
):
    """
    Create a booking after checking working hours and conflicts.

    - **resourceId**: resource to book.
    - **userId**: booking owner, defaults to the session user.
    - **startTime** / **endTime**: interval, ISO 8601; naive values are read as UTC.
    - **purpose**: why the resource is needed.
    - **attendees**: head count, at most the resource capacity.

    Responds 409 with the conflicting bookings when the slot is taken.
    """
    user_id = booking.user_id or current_user.id
    logger.debug(f"Creating booking for user: {user_id}, resource_id: {booking.resource_id}")

    if booking.user_id and storage.get_user(booking.user_id) is None:
        raise ValidationError("User not found")

    resource = storage.get_resource(booking.resource_id)
    if resource is None or not resource.is_active:
        raise ResourceNotFound()
    if booking.attendees > resource.capacity:
        logger.error(f"Resource capacity insufficient: {resource.capacity} < {booking.attendees}")
        raise ValidationError("Resource capacity insufficient")

    return book_resource(
        storage,
        locks,
        resource_id=booking.resource_id,
        user_id=user_id,
        start_time=booking.start_time,
        end_time=booking.end_time,
        purpose=booking.purpose,
        attendees=booking.attendees,
    )


@router.get("/{booking_id}", response_model=BookingDetail, summary="Get a booking by ID")
def get_booking(booking_id: str, storage: Storage = Depends(get_storage)):
    """
    Retrieve a specific booking by ID.
    """
    booking = storage.get_booking(booking_id)
    if not booking:
        logger.error(f"Booking not found: {booking_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking_detail(booking, storage.get_resource(booking.resource_id))


@router.patch("/{booking_id}/status", response_model=BookingResponse, summary="Set booking status")
def update_booking_status(
    booking_id: str,
    status_update: BookingStatusUpdate,
    storage: Storage = Depends(get_storage),
):
    """
    Set a booking's status directly. No transition rules are enforced.
    """
    booking = storage.update_booking_status(booking_id, status_update.status.value)
    if not booking:
        logger.error(f"Booking not found: {booking_id}")
        raise BookingNotFound()
    logger.info(f"Booking {booking_id} set to {status_update.status.value}")
    return booking


@router.delete("/{booking_id}", summary="Cancel a booking")
def cancel_booking(booking_id: str, storage: Storage = Depends(get_storage)):
    """
    Cancel a booking. The record is kept with status `cancelled`.
    """
    if not storage.cancel_booking(booking_id):
        logger.error(f"Booking not found: {booking_id}")
        raise BookingNotFound()
    logger.info(f"Cancelled booking: {booking_id}")
    return {"detail": "Booking cancelled successfully"}
