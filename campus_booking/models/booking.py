import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from campus_booking.db import Base
from campus_booking.models._common import new_id, utcnow


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    # ongoing and completed are accepted values but no operation moves a booking into them
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ResourceStatus(str, enum.Enum):
    AVAILABLE = "available"
    BOOKED = "booked"
    ONGOING = "ongoing"
    # Never derived; only reachable by editing data directly.
    MAINTENANCE = "maintenance"


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=new_id)
    resource_id = Column(String(36), ForeignKey("resources.id"), index=True, nullable=False)
    user_id = Column(String(36), ForeignKey("users.id"), index=True, nullable=False)
    start_time = Column(DateTime, nullable=False)
    end_time = Column(DateTime, nullable=False)
    status = Column(String, default=BookingStatus.PENDING.value, nullable=False)
    purpose = Column(String, nullable=False)
    attendees = Column(Integer, nullable=False)
    approved_by = Column(String(36), ForeignKey("users.id"), nullable=True)
    approved_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow)

    resource = relationship("Resource", back_populates="bookings")
    user = relationship("User", back_populates="bookings", foreign_keys=[user_id])
