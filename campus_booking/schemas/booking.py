from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator, model_validator
from campus_booking.models.booking import BookingStatus
from campus_booking.schemas.base import CamelModel
from campus_booking.schemas.resource import ResourceResponse
from campus_booking.utils.timeutils import to_utc_naive


class BookingCreate(CamelModel):
    resource_id: str
    user_id: Optional[str] = None
    start_time: datetime
    end_time: datetime
    purpose: str = Field(min_length=1)
    attendees: int = Field(gt=0)

    @field_validator("start_time", "end_time")
    def normalise_to_utc(cls, value):
        return to_utc_naive(value)

    @model_validator(mode="after")
    def check_interval(self):
        if self.start_time >= self.end_time:
            raise ValueError("startTime must be before endTime")
        return self


class BookingStatusUpdate(CamelModel):
    status: BookingStatus


class BookingResponse(CamelModel):
    id: str
    resource_id: str
    user_id: str
    start_time: datetime
    end_time: datetime
    status: BookingStatus
    purpose: str
    attendees: int
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class BookingDetail(BookingResponse):
    resource: Optional[ResourceResponse] = None
