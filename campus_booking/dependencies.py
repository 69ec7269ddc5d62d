from datetime import datetime
from fastapi import Depends
from sqlalchemy.orm import Session
from campus_booking import config
from campus_booking.db import get_db
from campus_booking.models._common import utcnow
from campus_booking.storage.base import Storage
from campus_booking.storage.memory import MemoryStorage
from campus_booking.storage.sql import SqlStorage
from campus_booking.utils.locks import ResourceLocks


memory_storage = MemoryStorage()
resource_locks = ResourceLocks()


def get_storage(db: Session = Depends(get_db)) -> Storage:
    """Storage backend selected by STORAGE_BACKEND."""
    if config.STORAGE_BACKEND == "memory":
        return memory_storage
    return SqlStorage(db)


def get_locks() -> ResourceLocks:
    return resource_locks


def get_now() -> datetime:
    """Wall-clock time the status of a resource is derived against."""
    return utcnow()
