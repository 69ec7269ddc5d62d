"""
Booking validation: working-hours containment and overlap detection.

``validate_booking`` never raises for business outcomes. It returns a
``BookingCheck`` whose ``error`` is the exception the caller should raise
(or render) when the check fails.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from campus_booking.errors import (
    BookingServiceError,
    OutsideWorkingHours,
    ResourceNotFound,
    TimeConflict,
)
from campus_booking.models.booking import Booking, BookingStatus
from campus_booking.models.resource import Resource
from campus_booking.storage.base import Storage
from campus_booking.utils.timeutils import minutes_since_midnight

logger = logging.getLogger(__name__)


@dataclass
class BookingCheck:
    valid: bool
    error: Optional[BookingServiceError] = None
    conflicts: List[Booking] = field(default_factory=list)

    @classmethod
    def ok(cls):
        return cls(valid=True)

    @classmethod
    def fail(cls, error, conflicts=None):
        return cls(valid=False, error=error, conflicts=list(conflicts or []))


def within_working_hours(resource: Resource, start_time: datetime, end_time: datetime) -> bool:
    """
    True when [start_time, end_time] fits the resource's daily window.

    Resources without working hours accept any interval. For the others the
    interval has to start and end on the same UTC day, and both ends are
    compared at minute precision with the window bounds included.
    """
    if not resource.has_working_hours:
        return True
    if start_time.date() != end_time.date():
        return False
    window_start = minutes_since_midnight(resource.working_hours_start)
    window_end = minutes_since_midnight(resource.working_hours_end)
    return (
        window_start <= minutes_since_midnight(start_time)
        and minutes_since_midnight(end_time) <= window_end
    )


def overlaps(booking: Booking, start_time: datetime, end_time: datetime) -> bool:
    """Closed-interval overlap; intervals touching at a single instant count."""
    existing_start, existing_end = booking.start_time, booking.end_time
    return (
        existing_start <= start_time <= existing_end
        or existing_start <= end_time <= existing_end
        or (start_time <= existing_start and existing_end <= end_time)
    )


def find_conflicts(storage: Storage, resource_id: str, start_time: datetime, end_time: datetime):
    existing = storage.bookings_by_resource(
        resource_id, exclude_status=BookingStatus.CANCELLED.value
    )
    return [b for b in existing if overlaps(b, start_time, end_time)]


def validate_booking(storage: Storage, resource_id: str, start_time: datetime, end_time: datetime) -> BookingCheck:
    resource = storage.get_resource(resource_id)
    if resource is None or not resource.is_active:
        logger.debug(f"Validation failed, no active resource {resource_id}")
        return BookingCheck.fail(ResourceNotFound())

    if not within_working_hours(resource, start_time, end_time):
        logger.debug(
            f"Validation failed for resource {resource_id}: {start_time} to {end_time} "
            f"outside {resource.working_hours_start}-{resource.working_hours_end}"
        )
        return BookingCheck.fail(
            OutsideWorkingHours(resource.working_hours_start, resource.working_hours_end)
        )

    conflicts = find_conflicts(storage, resource_id, start_time, end_time)
    if conflicts:
        logger.debug(f"Validation failed for resource {resource_id}: {len(conflicts)} conflicting bookings")
        return BookingCheck.fail(TimeConflict(conflicts), conflicts)

    return BookingCheck.ok()
