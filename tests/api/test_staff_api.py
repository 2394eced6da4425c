import pytest


@pytest.mark.parametrize(
    "method,path",
    [
        ("get", "/staff"),
        ("get", "/staff/schedules?staffId=1"),
        ("get", "/staff/shifts?startDate=2026-01-05&endDate=2026-01-05"),
        ("post", "/staff/shifts/generate"),
        ("get", "/staff/time-off"),
        ("get", "/staff/availability?date=2026-01-05"),
    ],
)
def test_requires_session(client, method, path):
    res = getattr(client, method)(path)

    assert res.status_code == 401
    assert res.get_json() == {"error": "Unauthorized"}


def test_staff_crud(auth_client):
    res = auth_client.post(
        "/staff",
        json={
            "userId": 4,
            "employeeId": "EMP-003",
            "position": "INTERN",
            "department": "Dispensary",
            "hireDate": "2026-03-01",
            "certifications": ["First Aid"],
        },
    )
    assert res.status_code == 201
    created = res.get_json()
    assert created["user"]["firstName"] == "An"
    assert created["certifications"] == ["First Aid"]

    res = auth_client.put(f"/staff/{created['id']}", json={"department": "Front Counter"})
    assert res.get_json()["department"] == "Front Counter"

    res = auth_client.delete(f"/staff/{created['id']}")
    assert res.get_json() == {"message": "Staff member deactivated successfully"}
    assert [s["employeeId"] for s in auth_client.get("/staff").get_json()] == ["EMP-002", "EMP-001"]
    assert len(auth_client.get("/staff?includeInactive=true").get_json()) == 3


def test_create_staff_missing_fields(auth_client):
    res = auth_client.post("/staff", json={"userId": 4})

    assert res.status_code == 400
    assert res.get_json() == {"error": "Missing required fields"}


def test_unknown_staff_is_404(auth_client):
    res = auth_client.get("/staff/99")

    assert res.status_code == 404
    assert res.get_json() == {"error": "Staff member not found"}


def test_schedule_routes(auth_client):
    assert auth_client.get("/staff/schedules").status_code == 400

    res = auth_client.post(
        "/staff/schedules",
        json={"staffId": 1, "dayOfWeek": 1, "startTime": "09:00", "endTime": "17:00"},
    )
    assert res.status_code == 201
    schedule = res.get_json()
    assert schedule["dayOfWeek"] == 1

    res = auth_client.post(
        "/staff/schedules",
        json={"staffId": 1, "dayOfWeek": 9, "startTime": "09:00", "endTime": "17:00"},
    )
    assert res.get_json() == {"error": "Day of week must be between 0 and 6"}

    res = auth_client.put(f"/staff/schedules/{schedule['id']}", json={"endTime": "8pm"})
    assert res.get_json() == {"error": "Invalid time format. Use HH:MM format"}

    listed = auth_client.get("/staff/schedules?staffId=1").get_json()
    assert [sc["startTime"] for sc in listed] == ["09:00"]
