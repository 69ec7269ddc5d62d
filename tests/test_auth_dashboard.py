import warnings

from fastapi import status
from fastapi.testclient import TestClient
from pydantic import PydanticDeprecatedSince20

from campus_booking.dependencies import get_storage
from campus_booking.main import app
from campus_booking.models.booking import BookingStatus
from campus_booking.schemas.base import CamelModel
from campus_booking.seed import DEPARTMENTS, RESOURCES, seed_storage
from campus_booking.storage.memory import MemoryStorage
from campus_booking.utils.auth import pwd_context

from tests.conf_tests import (  # pylint: disable=unused-import
    add_booking,
    at,
    clear_db,
    client,
    frozen_now,
    sql_data,
    sql_storage,
    test_db,
)


# pylint: disable-next=redefined-outer-name
def test_me_returns_demo_user_without_password(sql_data):
    _, _, _, _, user = sql_data
    response = client.get("/api/auth/me")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == user.id
    assert data["username"] == "sarah.chen"
    assert data["firstName"] == "Sarah"
    assert "password" not in data


def test_me_unauthenticated():
    response = client.get("/api/auth/me")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Not authenticated"


# pylint: disable-next=redefined-outer-name
def test_departments(sql_data):
    _, department, _, _, _ = sql_data
    response = client.get("/api/departments")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == [
        {
            "id": department.id,
            "name": "Computer Science",
            "code": "CS",
            "description": None,
            "icon": "fas fa-desktop",
            "color": "blue",
        }
    ]


# pylint: disable-next=redefined-outer-name
def test_dashboard_stats(sql_data, frozen_now):
    storage, _, lab, court, user = sql_data
    add_booking(storage, lab, user, at(10), at(11))
    add_booking(storage, court, user, at(9), at(10), status=BookingStatus.PENDING.value)
    add_booking(storage, court, user, at(16), at(17), status=BookingStatus.CANCELLED.value)

    response = client.get("/api/dashboard/stats")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"available": 1, "booked": 0, "ongoing": 1, "myBookings": 1}
    assert client.get("/api/dashboard/stats").json() == response.json()


def test_dashboard_stats_unauthenticated():
    response = client.get("/api/dashboard/stats")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_seed_storage_loads_reference_data_once():
    storage = MemoryStorage()
    assert seed_storage(storage)
    assert not seed_storage(storage)

    assert len(storage.list_departments()) == len(DEPARTMENTS)
    assert len(storage.list_resources()) == len(RESOURCES)
    court = storage.list_resources_by_type("sports_court")[0]
    assert court.has_working_hours is False
    lab = storage.list_resources_by_type("computer_lab")[0]
    assert lab.has_working_hours is True

    user = storage.get_user_by_username("sarah.chen")
    assert user.email == "sarah.chen@university.edu"
    assert pwd_context.verify("demo-password", user.password)


def test_unexpected_error_is_rendered_as_internal_error():
    def broken_storage():
        raise RuntimeError("store unavailable")

    app.dependency_overrides[get_storage] = broken_storage
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/api/departments")
    finally:
        app.dependency_overrides.pop(get_storage, None)
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "Internal server error"}


def test_schemas_use_current_pydantic_config():
    with warnings.catch_warnings():
        warnings.simplefilter("error", PydanticDeprecatedSince20)

        class CamelSample(CamelModel):
            some_field: int

    assert CamelSample(someField=1).model_dump(by_alias=True) == {"someField": 1}
