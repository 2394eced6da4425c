def _schedule(auth_client, staff_id=1, day=1):
    auth_client.post(
        "/staff/schedules",
        json={"staffId": staff_id, "dayOfWeek": day, "startTime": "09:00", "endTime": "17:00"},
    )


def test_generate_requires_both_dates(auth_client):
    res = auth_client.post("/staff/shifts/generate", json={"startDate": "2026-01-05"})

    assert res.status_code == 400
    assert res.get_json() == {"error": "Start date and end date are required"}


def test_generate_with_bad_range_is_400(auth_client):
    res = auth_client.post("/staff/shifts/generate", json={"startDate": "2026-01-10", "endDate": "2026-01-05"})

    assert res.status_code == 400


def test_generate_then_regenerate(auth_client):
    _schedule(auth_client)
    body = {"startDate": "2026-01-04T00:00:00.000Z", "endDate": "2026-01-10"}

    first = auth_client.post("/staff/shifts/generate", json=body).get_json()
    assert first["message"] == "Shifts generated successfully"
    assert first["count"] == 1
    assert first["shifts"][0]["date"] == "2026-01-05"
    assert first["shifts"][0]["startTime"] == "2026-01-05T09:00:00"
    assert first["shifts"][0]["status"] == "SCHEDULED"

    second = auth_client.post("/staff/shifts/generate", json=body).get_json()
    assert second["count"] == 0
    assert second["shifts"] == []


def test_generate_failure_is_500(auth_client, repos, monkeypatch):
    _schedule(auth_client)

    def boom(**kwargs):
        raise RuntimeError("db down")

    monkeypatch.setattr(repos.shifts, "create_if_absent", boom)
    res = auth_client.post("/staff/shifts/generate", json={"startDate": "2026-01-05", "endDate": "2026-01-05"})

    assert res.status_code == 500
    assert res.get_json() == {"error": "Internal server error"}


def test_list_requires_range(auth_client):
    res = auth_client.get("/staff/shifts?startDate=2026-01-05")

    assert res.status_code == 400


def test_manual_shift_lifecycle(auth_client):
    res = auth_client.post(
        "/staff/shifts",
        json={
            "staffId": 2,
            "date": "2026-01-06",
            "startTime": "2026-01-06T12:00:00",
            "endTime": "2026-01-06T20:00:00",
        },
    )
    assert res.status_code == 201
    shift = res.get_json()
    assert shift["staff"]["employeeId"] == "EMP-002"

    dup = auth_client.post(
        "/staff/shifts",
        json={
            "staffId": 2,
            "date": "2026-01-06",
            "startTime": "2026-01-06T08:00:00",
            "endTime": "2026-01-06T10:00:00",
        },
    )
    assert dup.status_code == 400

    assert auth_client.post(f"/staff/shifts/{shift['id']}/clock-in").get_json()["status"] == "IN_PROGRESS"
    done = auth_client.post(f"/staff/shifts/{shift['id']}/clock-out").get_json()
    assert done["status"] == "COMPLETED"
    assert done["actualEndTime"] is not None

    res = auth_client.patch(f"/staff/shifts/{shift['id']}/status", json={"status": "CANCELLED"})
    assert res.get_json()["status"] == "CANCELLED"

    listed = auth_client.get("/staff/shifts?startDate=2026-01-01&endDate=2026-01-31&staffId=2").get_json()
    assert [s["id"] for s in listed] == [shift["id"]]


def test_status_update_of_missing_shift(auth_client):
    res = auth_client.patch("/staff/shifts/77/status", json={"status": "COMPLETED"})

    assert res.status_code == 404
