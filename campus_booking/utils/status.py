from datetime import datetime

from campus_booking.models.booking import BookingStatus, ResourceStatus
from campus_booking.storage.base import Storage


def resource_status(storage: Storage, resource_id: str, now: datetime) -> ResourceStatus:
    """
    Derive a resource's status at ``now`` from its confirmed bookings.

    ``ongoing`` if one is running (end exclusive), ``booked`` if one starts
    later, otherwise ``available``. ``maintenance`` is never returned.
    """
    confirmed = storage.bookings_by_resource(resource_id, status=BookingStatus.CONFIRMED.value)
    if any(b.start_time <= now < b.end_time for b in confirmed):
        return ResourceStatus.ONGOING
    if any(b.start_time > now for b in confirmed):
        return ResourceStatus.BOOKED
    return ResourceStatus.AVAILABLE
