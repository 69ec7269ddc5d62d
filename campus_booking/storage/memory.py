import logging
import threading
from datetime import datetime
from typing import Dict, List, Optional

from campus_booking.models._common import new_id, utcnow
from campus_booking.models.booking import Booking, BookingStatus
from campus_booking.models.department import Department
from campus_booking.models.resource import (
    DEFAULT_WORKING_HOURS_END,
    DEFAULT_WORKING_HOURS_START,
    Resource,
)
from campus_booking.models.user import User
from campus_booking.storage.base import Storage

logger = logging.getLogger(__name__)


class MemoryStorage(Storage):
    """
    Process-local store keeping every entity in a dict keyed by id.

    Requests run on a thread pool, so every read works on a snapshot taken
    under ``_lock`` and every write holds it.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self.users: Dict[str, User] = {}
        self.departments: Dict[str, Department] = {}
        self.resources: Dict[str, Resource] = {}
        self.bookings: Dict[str, Booking] = {}

    def _values(self, mapping):
        with self._lock:
            return list(mapping.values())

    def _put(self, mapping, obj):
        with self._lock:
            mapping[obj.id] = obj
        return obj

    # Users
    def get_user(self, user_id):
        return self.users.get(user_id)

    def get_user_by_username(self, username):
        return next((u for u in self._values(self.users) if u.username == username), None)

    def get_user_by_email(self, email):
        return next((u for u in self._values(self.users) if u.email == email), None)

    def create_user(self, **fields):
        fields.setdefault("profile_image", None)
        return self._put(self.users, User(id=new_id(), created_at=utcnow(), **fields))

    # Departments
    def list_departments(self):
        return self._values(self.departments)

    def get_department(self, department_id):
        return self.departments.get(department_id)

    def create_department(self, **fields):
        fields.setdefault("description", None)
        return self._put(self.departments, Department(id=new_id(), **fields))

    # Resources
    def list_resources(self):
        return [r for r in self._values(self.resources) if r.is_active]

    def get_resource(self, resource_id):
        return self.resources.get(resource_id)

    def list_resources_by_department(self, department_id):
        return [r for r in self.list_resources() if r.department_id == department_id]

    def list_resources_by_type(self, resource_type):
        return [r for r in self.list_resources() if r.type == resource_type]

    def create_resource(self, **fields):
        fields.setdefault("equipment", None)
        fields.setdefault("description", None)
        fields.setdefault("requires_approval", False)
        fields.setdefault("has_working_hours", True)
        fields.setdefault("working_hours_start", DEFAULT_WORKING_HOURS_START)
        fields.setdefault("working_hours_end", DEFAULT_WORKING_HOURS_END)
        fields.setdefault("is_active", True)
        return self._put(self.resources, Resource(id=new_id(), created_at=utcnow(), **fields))

    def update_resource(self, resource_id, **changes):
        with self._lock:
            resource = self.resources.get(resource_id)
            if resource is None:
                return None
            for key, value in changes.items():
                setattr(resource, key, value)
        return resource

    # Bookings
    def list_bookings(self):
        return self._values(self.bookings)

    def get_booking(self, booking_id):
        return self.bookings.get(booking_id)

    def bookings_by_user(self, user_id):
        return [b for b in self._values(self.bookings) if b.user_id == user_id]

    def bookings_by_resource(self, resource_id, status=None, exclude_status=None):
        return [
            b
            for b in self._values(self.bookings)
            if b.resource_id == resource_id
            and (status is None or b.status == status)
            and (exclude_status is None or b.status != exclude_status)
        ]

    def bookings_by_date_range(self, start: datetime, end: datetime) -> List[Booking]:
        return [
            b for b in self._values(self.bookings) if b.start_time >= start and b.end_time <= end
        ]

    def create_booking(self, **fields):
        booking = self._put(
            self.bookings,
            Booking(
                id=new_id(),
                status=BookingStatus.PENDING.value,
                approved_by=None,
                approved_at=None,
                created_at=utcnow(),
                **fields,
            ),
        )
        logger.debug(f"Stored booking {booking.id} for resource {booking.resource_id}")
        return booking

    def update_booking_status(self, booking_id, status) -> Optional[Booking]:
        with self._lock:
            booking = self.bookings.get(booking_id)
            if booking is None:
                return None
            booking.status = status
        return booking

    def cancel_booking(self, booking_id):
        return self.update_booking_status(booking_id, BookingStatus.CANCELLED.value) is not None
