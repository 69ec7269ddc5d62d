"""
Store interface consumed by the booking core.

The validator, status deriver and dashboard aggregator only ever call
``get_resource``, ``list_resources``, ``bookings_by_resource`` and
``bookings_by_user``; everything else here exists for the HTTP layer and
seeding. Lookups return ``None`` for a missing identifier.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from campus_booking.models.booking import Booking
from campus_booking.models.department import Department
from campus_booking.models.resource import Resource
from campus_booking.models.user import User


class Storage(ABC):
    # Users
    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def create_user(self, **fields) -> User: ...

    # Departments
    @abstractmethod
    def list_departments(self) -> List[Department]: ...

    @abstractmethod
    def get_department(self, department_id: str) -> Optional[Department]: ...

    @abstractmethod
    def create_department(self, **fields) -> Department: ...

    # Resources
    @abstractmethod
    def list_resources(self) -> List[Resource]:
        """Active resources only."""

    @abstractmethod
    def get_resource(self, resource_id: str) -> Optional[Resource]:
        """Any resource, active or not."""

    @abstractmethod
    def list_resources_by_department(self, department_id: str) -> List[Resource]: ...

    @abstractmethod
    def list_resources_by_type(self, resource_type: str) -> List[Resource]: ...

    @abstractmethod
    def create_resource(self, **fields) -> Resource: ...

    @abstractmethod
    def update_resource(self, resource_id: str, **changes) -> Optional[Resource]: ...

    # Bookings
    @abstractmethod
    def list_bookings(self) -> List[Booking]: ...

    @abstractmethod
    def get_booking(self, booking_id: str) -> Optional[Booking]: ...

    @abstractmethod
    def bookings_by_user(self, user_id: str) -> List[Booking]: ...

    @abstractmethod
    def bookings_by_resource(
        self,
        resource_id: str,
        status: Optional[str] = None,
        exclude_status: Optional[str] = None,
    ) -> List[Booking]: ...

    @abstractmethod
    def bookings_by_date_range(self, start: datetime, end: datetime) -> List[Booking]:
        """Bookings lying entirely inside ``[start, end]``."""

    @abstractmethod
    def create_booking(self, **fields) -> Booking: ...

    @abstractmethod
    def update_booking_status(self, booking_id: str, status: str) -> Optional[Booking]: ...

    @abstractmethod
    def cancel_booking(self, booking_id: str) -> bool: ...

    def lock_resource(self, resource_id: str) -> None:
        """Hold a backend-level lock on the resource until the next write commits."""
