from fastapi import Depends
from passlib.context import CryptContext
from campus_booking import config
from campus_booking.dependencies import get_storage
from campus_booking.errors import Unauthenticated
from campus_booking.storage.base import Storage

# Password hashing
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password):
    """Hash a password for storage."""
    return pwd_context.hash(password)


def get_current_user(storage: Storage = Depends(get_storage)):
    """
    Resolve the session user.

    There is no login flow: every request acts as the configured demo user,
    and a store without that user is treated as unauthenticated.
    """
    user = storage.get_user_by_username(config.DEMO_USERNAME)
    if user is None:
        raise Unauthenticated()
    return user
