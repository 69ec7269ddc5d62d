from fastapi import status

from campus_booking.models.booking import BookingStatus

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


def new_resource_data(department_id, **extra):
    data = {
        "name": "Seminar Hall A",
        "type": "seminar_hall",
        "departmentId": department_id,
        "capacity": 50,
        "equipment": ["Projector"],
        "location": "Academic Block, Floor 1",
    }
    data.update(extra)
    return data


# Tests
# pylint: disable-next=redefined-outer-name
def test_get_resources_with_status(sql_data, frozen_now):
    storage, department, lab, court, user = sql_data
    add_booking(storage, lab, user, at(10), at(11))
    add_booking(storage, court, user, at(18), at(19))

    response = client.get("/api/resources")
    assert response.status_code == status.HTTP_200_OK
    data = {r["name"]: r for r in response.json()}
    assert data["LabA"]["status"] == "ongoing"
    assert data["Basketball Court"]["status"] == "booked"
    assert data["LabA"]["department"]["code"] == department.code
    assert data["LabA"]["hasWorkingHours"] is True
    assert data["LabA"]["workingHoursStart"] == "09:00:00"
    assert data["Basketball Court"]["hasWorkingHours"] is False


# pylint: disable-next=redefined-outer-name
def test_get_resources_pending_bookings_leave_available(sql_data, frozen_now):
    storage, _, lab, _, user = sql_data
    add_booking(storage, lab, user, at(10), at(11), status=BookingStatus.PENDING.value)
    data = {r["name"]: r for r in client.get("/api/resources").json()}
    assert data["LabA"]["status"] == "available"


# pylint: disable-next=redefined-outer-name
def test_get_resources_filters(sql_data, frozen_now):
    _, department, _, _, _ = sql_data
    by_type = client.get("/api/resources?type=sports_court").json()
    assert [r["name"] for r in by_type] == ["Basketball Court"]

    by_department = client.get(f"/api/resources?department={department.id}").json()
    assert len(by_department) == 2
    assert client.get("/api/resources?department=unknown").json() == []


# pylint: disable-next=redefined-outer-name
def test_get_resource_success(sql_data, frozen_now):
    _, _, lab, _, _ = sql_data
    response = client.get(f"/api/resources/{lab.id}")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == lab.id
    assert data["capacity"] == 30
    assert data["equipment"] == ["Computers", "Projector"]
    assert data["status"] == "available"


def test_get_resource_not_found():
    response = client.get("/api/resources/9999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Resource not found"


# pylint: disable-next=redefined-outer-name
def test_create_resource_success(sql_data):
    _, department, _, _, _ = sql_data
    response = client.post("/api/resources", json=new_resource_data(department.id))
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["name"] == "Seminar Hall A"
    assert data["isActive"] is True
    assert data["hasWorkingHours"] is True
    assert data["workingHoursEnd"] == "15:00:00"
    assert len(client.get("/api/resources").json()) == 3


def test_create_resource_unauthenticated():
    response = client.post("/api/resources", json=new_resource_data("any"))
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


# pylint: disable-next=redefined-outer-name
def test_create_resource_invalid(sql_data):
    _, department, _, _, _ = sql_data
    response = client.post("/api/resources", json=new_resource_data(department.id, capacity=0))
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.post(
        "/api/resources",
        json=new_resource_data(department.id, workingHoursStart="16:00", workingHoursEnd="10:00"),
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST

    response = client.post("/api/resources", json=new_resource_data("unknown"))
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Department not found"


# pylint: disable-next=redefined-outer-name
def test_deactivate_resource(sql_data):
    _, _, lab, _, _ = sql_data
    response = client.patch(f"/api/resources/{lab.id}", json={"isActive": False})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["isActive"] is False

    names = [r["name"] for r in client.get("/api/resources").json()]
    assert "LabA" not in names
    # still reachable by id
    assert client.get(f"/api/resources/{lab.id}").status_code == status.HTTP_200_OK

    booking = {
        "resourceId": lab.id,
        "startTime": at(12).isoformat(),
        "endTime": at(13).isoformat(),
        "purpose": "Lab",
        "attendees": 5,
    }
    assert client.post("/api/bookings", json=booking).status_code == status.HTTP_404_NOT_FOUND


# pylint: disable-next=redefined-outer-name
def test_partial_update_resource(sql_data):
    _, _, lab, _, _ = sql_data
    response = client.patch(f"/api/resources/{lab.id}", json={"workingHoursEnd": "18:00"})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["workingHoursEnd"] == "18:00:00"
    assert data["workingHoursStart"] == "09:00:00"
    assert data["name"] == "LabA"


# pylint: disable-next=redefined-outer-name
def test_partial_update_resource_bad_window(sql_data):
    _, _, lab, _, _ = sql_data
    response = client.patch(f"/api/resources/{lab.id}", json={"workingHoursStart": "16:00"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


# pylint: disable-next=redefined-outer-name
def test_update_resource_not_found(sql_data):
    response = client.patch("/api/resources/9999", json={"name": "Nothing"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


# pylint: disable-next=redefined-outer-name
def test_availability(sql_data):
    storage, _, lab, _, user = sql_data
    morning = add_booking(storage, lab, user, at(10), at(11))
    add_booking(storage, lab, user, at(12), at(13), status=BookingStatus.CANCELLED.value)
    add_booking(storage, lab, user, at(10, day=11), at(11, day=11))

    response = client.get(f"/api/resources/{lab.id}/availability?date=2024-01-10")
    assert response.status_code == status.HTTP_200_OK
    assert [b["id"] for b in response.json()] == [morning.id]


# pylint: disable-next=redefined-outer-name
def test_availability_requires_date(sql_data):
    _, _, lab, _, _ = sql_data
    response = client.get(f"/api/resources/{lab.id}/availability")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Date parameter is required"


def test_availability_unknown_resource():
    response = client.get("/api/resources/9999/availability?date=2024-01-10")
    assert response.status_code == status.HTTP_404_NOT_FOUND


# pylint: disable-next=redefined-outer-name
def test_update_resource_rejects_null_for_required_fields(sql_data):
    _, _, lab, _, _ = sql_data
    for field in ("workingHoursStart", "name", "capacity", "isActive"):
        response = client.patch(f"/api/resources/{lab.id}", json={field: None})
        assert response.status_code == status.HTTP_400_BAD_REQUEST, field

    data = client.get(f"/api/resources/{lab.id}").json()
    assert data["name"] == "LabA"
    assert data["workingHoursStart"] == "09:00:00"


# pylint: disable-next=redefined-outer-name
def test_update_resource_clears_optional_fields(sql_data):
    _, _, lab, _, _ = sql_data
    response = client.patch(f"/api/resources/{lab.id}", json={"equipment": None})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["equipment"] is None
