from datetime import date, datetime, time, timedelta
from typing import List, Optional
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from campus_booking.dependencies import get_now, get_storage
from campus_booking.errors import ValidationError
from campus_booking.models.booking import BookingStatus
from campus_booking.models.user import User
from campus_booking.routers.serializers import resource_detail
from campus_booking.schemas.booking import BookingResponse
from campus_booking.schemas.resource import ResourceCreate, ResourceDetail, ResourceUpdate
from campus_booking.storage.base import Storage
from campus_booking.utils.auth import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/resources",
    tags=["resources"],
)


@router.get(
    "",
    response_model=List[ResourceDetail],
    summary="List resources",
    description="Active resources with their department and current status.",
)
def get_resources(
    department: Optional[str] = None,
    type: Optional[str] = None,
    storage: Storage = Depends(get_storage),
    now: datetime = Depends(get_now),
):
    """
    Retrieve active resources, optionally narrowed down.

    - **department**: department id to filter on.
    - **type**: resource type tag to filter on (e.g. computer_lab).
    """
    if department:
        resources = storage.list_resources_by_department(department)
    elif type:
        resources = storage.list_resources_by_type(type)
    else:
        resources = storage.list_resources()

    departments = {d.id: d for d in storage.list_departments()}
    logger.debug(f"Retrieved {len(resources)} resources")
    return [resource_detail(storage, r, now, departments) for r in resources]


@router.post("", response_model=ResourceDetail, status_code=status.HTTP_201_CREATED)
def create_resource(
    resource: ResourceCreate,
    storage: Storage = Depends(get_storage),
    now: datetime = Depends(get_now),
    current_user: User = Depends(get_current_user),
):
    """
    Create a new bookable resource.
    """
    if storage.get_department(resource.department_id) is None:
        raise ValidationError("Department not found")
    db_resource = storage.create_resource(**resource.model_dump())
    logger.info(f"User {current_user.username} created resource {db_resource.id} ({db_resource.name})")
    return resource_detail(storage, db_resource, now)


@router.get("/{resource_id}", response_model=ResourceDetail)
def get_resource(
    resource_id: str,
    storage: Storage = Depends(get_storage),
    now: datetime = Depends(get_now),
):
    """
    Retrieve a specific resource by ID, including inactive ones.
    """
    resource = storage.get_resource(resource_id)
    if not resource:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")
    return resource_detail(storage, resource, now)


@router.patch("/{resource_id}", response_model=ResourceDetail)
def update_resource(
    resource_id: str,
    resource_update: ResourceUpdate,
    storage: Storage = Depends(get_storage),
    now: datetime = Depends(get_now),
    current_user: User = Depends(get_current_user),
):
    """
    Partially update a resource, e.g. deactivate it with `{"isActive": false}`.
    """
    resource = storage.get_resource(resource_id)
    if not resource:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")

    update_data = resource_update.model_dump(exclude_unset=True)
    window_start = update_data.get("working_hours_start", resource.working_hours_start)
    window_end = update_data.get("working_hours_end", resource.working_hours_end)
    if window_start >= window_end:
        raise ValidationError("workingHoursStart must be before workingHoursEnd")

    resource = storage.update_resource(resource_id, **update_data)
    logger.info(f"User {current_user.username} updated resource {resource_id}: {sorted(update_data)}")
    return resource_detail(storage, resource, now)


@router.get(
    "/{resource_id}/availability",
    response_model=List[BookingResponse],
    summary="Bookings of a resource on a day",
)
def get_availability(
    resource_id: str,
    date: Optional[date] = None,
    storage: Storage = Depends(get_storage),
):
    """
    List the non-cancelled bookings of a resource starting on the given UTC day.

    - **date**: day to check, formatted YYYY-MM-DD. Required.
    """
    if date is None:
        raise ValidationError("Date parameter is required")
    if storage.get_resource(resource_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Resource not found")

    day_start = datetime.combine(date, time.min)
    day_end = day_start + timedelta(days=1)
    bookings = storage.bookings_by_resource(resource_id, exclude_status=BookingStatus.CANCELLED.value)
    day_bookings = [b for b in bookings if day_start <= b.start_time < day_end]
    logger.debug(f"Found {len(day_bookings)} bookings for resource {resource_id} on {date}")
    return day_bookings
