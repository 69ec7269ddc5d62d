from typing import List
from fastapi import APIRouter, Depends
from campus_booking.dependencies import get_storage
from campus_booking.schemas.department import DepartmentResponse
from campus_booking.storage.base import Storage


router = APIRouter(
    prefix="/api/departments",
    tags=["departments"],
)


@router.get("", response_model=List[DepartmentResponse])
def get_departments(storage: Storage = Depends(get_storage)):
    """
    Retrieve all departments.
    """
    return storage.list_departments()
