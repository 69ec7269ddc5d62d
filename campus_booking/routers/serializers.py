from campus_booking.schemas.booking import BookingDetail, BookingResponse
from campus_booking.schemas.department import DepartmentResponse
from campus_booking.schemas.resource import ResourceDetail, ResourceResponse
from campus_booking.storage.base import Storage
from campus_booking.utils.status import resource_status


def resource_detail(storage: Storage, resource, now, departments=None) -> ResourceDetail:
    """Resource enriched with its department and derived status."""
    if departments is None:
        department = storage.get_department(resource.department_id)
    else:
        department = departments.get(resource.department_id)
    return ResourceDetail(
        **ResourceResponse.model_validate(resource).model_dump(),
        department=DepartmentResponse.model_validate(department) if department else None,
        status=resource_status(storage, resource.id, now),
    )


def booking_detail(booking, resource=None) -> BookingDetail:
    return BookingDetail(
        **BookingResponse.model_validate(booking).model_dump(),
        resource=ResourceResponse.model_validate(resource) if resource else None,
    )


def booking_json(booking) -> dict:
    return BookingResponse.model_validate(booking).model_dump(mode="json", by_alias=True)
