import logging
from datetime import datetime
from fastapi import APIRouter, Depends
from campus_booking.dependencies import get_now, get_storage
from campus_booking.models.user import User
from campus_booking.schemas.dashboard import DashboardStats
from campus_booking.storage.base import Storage
from campus_booking.utils.auth import get_current_user
from campus_booking.utils.dashboard import dashboard_stats

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/dashboard",
    tags=["dashboard"],
)


@router.get("/stats", response_model=DashboardStats, summary="Dashboard counters")
def get_dashboard_stats(
    storage: Storage = Depends(get_storage),
    current_user: User = Depends(get_current_user),
    now: datetime = Depends(get_now),
):
    """
    Count active resources per derived status and the current user's bookings
    that have not ended yet.
    """
    stats = dashboard_stats(storage, current_user.id, now)
    logger.debug(f"Dashboard stats for {current_user.username}: {stats}")
    return stats
