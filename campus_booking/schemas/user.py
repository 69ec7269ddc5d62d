from datetime import datetime
from typing import Optional
from campus_booking.schemas.base import CamelModel


class UserResponse(CamelModel):
    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    department: str
    profile_image: Optional[str] = None
    created_at: Optional[datetime] = None
