from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from campus_booking.db import Base
from campus_booking.models._common import new_id, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    department = Column(String, nullable=False)
    profile_image = Column(String, nullable=True)
    created_at = Column(DateTime, default=utcnow)

    bookings = relationship("Booking", back_populates="user", foreign_keys="Booking.user_id")
