from datetime import datetime
from typing import Dict

from campus_booking.models.booking import BookingStatus, ResourceStatus
from campus_booking.storage.base import Storage
from campus_booking.utils.status import resource_status


def dashboard_stats(storage: Storage, user_id: str, now: datetime) -> Dict[str, int]:
    """Resource counts per derived status, plus the user's bookings that have not ended."""
    counts = {
        ResourceStatus.AVAILABLE: 0,
        ResourceStatus.BOOKED: 0,
        ResourceStatus.ONGOING: 0,
    }
    for resource in storage.list_resources():
        derived = resource_status(storage, resource.id, now)
        if derived in counts:
            counts[derived] += 1

    my_bookings = sum(
        1
        for b in storage.bookings_by_user(user_id)
        if b.status != BookingStatus.CANCELLED.value and b.end_time >= now
    )

    return {
        "available": counts[ResourceStatus.AVAILABLE],
        "booked": counts[ResourceStatus.BOOKED],
        "ongoing": counts[ResourceStatus.ONGOING],
        "my_bookings": my_bookings,
    }
