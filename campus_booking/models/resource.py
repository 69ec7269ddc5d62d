from datetime import time
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Time, JSON, ForeignKey
from sqlalchemy.orm import relationship
from campus_booking.db import Base
from campus_booking.models._common import new_id, utcnow


DEFAULT_WORKING_HOURS_START = time(9, 0)
DEFAULT_WORKING_HOURS_END = time(15, 0)


class Resource(Base):
    __tablename__ = "resources"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, index=True, nullable=False)
    type = Column(String, index=True, nullable=False)
    department_id = Column(String(36), ForeignKey("departments.id"), nullable=False)
    capacity = Column(Integer, nullable=False)
    equipment = Column(JSON, nullable=True)
    description = Column(String, nullable=True)
    location = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    requires_approval = Column(Boolean, default=False, nullable=False)
    # start/end only apply when has_working_hours is set
    has_working_hours = Column(Boolean, default=True, nullable=False)
    working_hours_start = Column(Time, default=DEFAULT_WORKING_HOURS_START, nullable=False)
    working_hours_end = Column(Time, default=DEFAULT_WORKING_HOURS_END, nullable=False)
    created_at = Column(DateTime, default=utcnow)

    department = relationship("Department", back_populates="resources")
    bookings = relationship("Booking", back_populates="resource")
