from fastapi import APIRouter, Depends
from campus_booking.models.user import User
from campus_booking.schemas.user import UserResponse
from campus_booking.utils.auth import get_current_user


router = APIRouter(
    prefix="/api/auth",
    tags=["auth"],
)


@router.get("/me", response_model=UserResponse)
def read_current_user(current_user: User = Depends(get_current_user)):
    """
    Return the session user without the password.
    """
    return current_user
