from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from campus_booking.db import Base
from campus_booking.models._common import new_id


class Department(Base):
    __tablename__ = "departments"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, unique=True, nullable=False)
    code = Column(String, unique=True, index=True, nullable=False)
    description = Column(String, nullable=True)
    icon = Column(String, nullable=False)
    color = Column(String, nullable=False)

    resources = relationship("Resource", back_populates="department")
