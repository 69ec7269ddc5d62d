from typing import Optional
from campus_booking.schemas.base import CamelModel


class DepartmentResponse(CamelModel):
    id: str
    name: str
    code: str
    description: Optional[str] = None
    icon: str
    color: str
