import logging
from sqlalchemy import select
from sqlalchemy.orm import Session

from campus_booking.models.booking import Booking, BookingStatus
from campus_booking.models.department import Department
from campus_booking.models.resource import Resource
from campus_booking.models.user import User
from campus_booking.storage.base import Storage

logger = logging.getLogger(__name__)


class SqlStorage(Storage):
    """Store backed by a SQLAlchemy session; every write commits."""

    def __init__(self, db: Session):
        self.db = db

    def _add(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    # Users
    def get_user(self, user_id):
        return self.db.get(User, user_id)

    def get_user_by_username(self, username):
        return self.db.query(User).filter(User.username == username).first()

    def get_user_by_email(self, email):
        return self.db.query(User).filter(User.email == email).first()

    def create_user(self, **fields):
        return self._add(User(**fields))

    # Departments
    def list_departments(self):
        return self.db.query(Department).order_by(Department.name).all()

    def get_department(self, department_id):
        return self.db.get(Department, department_id)

    def create_department(self, **fields):
        return self._add(Department(**fields))

    # Resources
    def _active_resources(self):
        return self.db.query(Resource).filter(Resource.is_active.is_(True))

    def list_resources(self):
        return self._active_resources().order_by(Resource.name).all()

    def get_resource(self, resource_id):
        return self.db.get(Resource, resource_id)

    def list_resources_by_department(self, department_id):
        return (
            self._active_resources()
            .filter(Resource.department_id == department_id)
            .order_by(Resource.name)
            .all()
        )

    def list_resources_by_type(self, resource_type):
        return (
            self._active_resources()
            .filter(Resource.type == resource_type)
            .order_by(Resource.name)
            .all()
        )

    def create_resource(self, **fields):
        return self._add(Resource(**fields))

    def update_resource(self, resource_id, **changes):
        resource = self.get_resource(resource_id)
        if resource is None:
            return None
        for key, value in changes.items():
            setattr(resource, key, value)
        self.db.commit()
        self.db.refresh(resource)
        return resource

    # Bookings
    def list_bookings(self):
        return self.db.query(Booking).order_by(Booking.start_time).all()

    def get_booking(self, booking_id):
        return self.db.get(Booking, booking_id)

    def bookings_by_user(self, user_id):
        return (
            self.db.query(Booking)
            .filter(Booking.user_id == user_id)
            .order_by(Booking.start_time)
            .all()
        )

    def bookings_by_resource(self, resource_id, status=None, exclude_status=None):
        query = self.db.query(Booking).filter(Booking.resource_id == resource_id)
        if status is not None:
            query = query.filter(Booking.status == status)
        if exclude_status is not None:
            query = query.filter(Booking.status != exclude_status)
        return query.order_by(Booking.start_time).all()

    def bookings_by_date_range(self, start, end):
        return (
            self.db.query(Booking)
            .filter(Booking.start_time >= start, Booking.end_time <= end)
            .order_by(Booking.start_time)
            .all()
        )

    def create_booking(self, **fields):
        booking = self._add(Booking(status=BookingStatus.PENDING.value, **fields))
        logger.debug(f"Stored booking {booking.id} for resource {booking.resource_id}")
        return booking

    def update_booking_status(self, booking_id, status):
        booking = self.get_booking(booking_id)
        if booking is None:
            return None
        booking.status = status
        self.db.commit()
        self.db.refresh(booking)
        return booking

    def cancel_booking(self, booking_id):
        return self.update_booking_status(booking_id, BookingStatus.CANCELLED.value) is not None

    def lock_resource(self, resource_id):
        # FOR UPDATE is dropped by SQLite, which serialises writers on its own.
        self.db.execute(
            select(Resource.id).where(Resource.id == resource_id).with_for_update()
        ).first()
