from datetime import datetime, time
from typing import List, Optional
from pydantic import Field, model_validator
from campus_booking.models.booking import ResourceStatus
from campus_booking.models.resource import DEFAULT_WORKING_HOURS_END, DEFAULT_WORKING_HOURS_START
from campus_booking.schemas.base import CamelModel
from campus_booking.schemas.department import DepartmentResponse


# Columns that may be cleared with an explicit null on update
NULLABLE_RESOURCE_FIELDS = {"equipment", "description"}


def check_working_window(model):
    start, end = model.working_hours_start, model.working_hours_end
    if start is not None and end is not None and start >= end:
        raise ValueError("workingHoursStart must be before workingHoursEnd")
    return model


class ResourceBase(CamelModel):
    name: str
    type: str
    department_id: str
    capacity: int = Field(gt=0)
    equipment: Optional[List[str]] = None
    description: Optional[str] = None
    location: str
    requires_approval: bool = False
    has_working_hours: bool = True
    working_hours_start: time = DEFAULT_WORKING_HOURS_START
    working_hours_end: time = DEFAULT_WORKING_HOURS_END


class ResourceCreate(ResourceBase):
    @model_validator(mode="after")
    def check_window(self):
        return check_working_window(self)


class ResourceUpdate(CamelModel):
    name: Optional[str] = None
    type: Optional[str] = None
    capacity: Optional[int] = Field(default=None, gt=0)
    equipment: Optional[List[str]] = None
    description: Optional[str] = None
    location: Optional[str] = None
    is_active: Optional[bool] = None
    requires_approval: Optional[bool] = None
    has_working_hours: Optional[bool] = None
    working_hours_start: Optional[time] = None
    working_hours_end: Optional[time] = None

    @model_validator(mode="after")
    def check_window(self):
        nulled = sorted(
            name for name in self.model_fields_set - NULLABLE_RESOURCE_FIELDS
            if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return check_working_window(self)


class ResourceResponse(ResourceBase):
    id: str
    is_active: bool
    created_at: Optional[datetime] = None


class ResourceDetail(ResourceResponse):
    department: Optional[DepartmentResponse] = None
    status: ResourceStatus
