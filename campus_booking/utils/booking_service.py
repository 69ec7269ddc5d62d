import logging
from datetime import datetime

from campus_booking.models.booking import Booking
from campus_booking.storage.base import Storage
from campus_booking.utils.locks import ResourceLocks
from campus_booking.utils.validation import validate_booking

logger = logging.getLogger(__name__)


def create_booking(
    storage: Storage,
    locks: ResourceLocks,
    resource_id: str,
    user_id: str,
    start_time: datetime,
    end_time: datetime,
    purpose: str,
    attendees: int,
) -> Booking:
    """
    Validate and insert a booking while holding the resource's lock.

    Raises the validator's error when the interval cannot be booked.
    """
    with locks.hold(resource_id):
        storage.lock_resource(resource_id)
        check = validate_booking(storage, resource_id, start_time, end_time)
        if not check.valid:
            logger.warning(f"Rejected booking for resource {resource_id}: {check.error.detail}")
            raise check.error

        booking = storage.create_booking(
            resource_id=resource_id,
            user_id=user_id,
            start_time=start_time,
            end_time=end_time,
            purpose=purpose,
            attendees=attendees,
        )
    logger.info(f"Created booking {booking.id} for resource {resource_id}, {start_time} to {end_time}")
    return booking
