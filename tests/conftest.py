from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from types import SimpleNamespace
from typing import Any, Mapping, Optional

import pytest
from werkzeug.security import generate_password_hash

from safemeds.container import wire
from safemeds.core.enums import ShiftStatus, StaffPosition, TimeOffStatus, TimeOffType
from safemeds.main import create_app
from safemeds.schedules.model import StaffSchedule
from safemeds.shifts.model import Shift
from safemeds.staff.model import NewStaff, StaffMember
from safemeds.time_off.model import TimeOffRequest
from safemeds.users.model import User


class InMemoryUsers:
    def __init__(self, users: list[User] = ()):
        self.users = {u.user_id: u for u in users}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users.get(int(user_id))

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)


class InMemoryStaff:
    def __init__(self, users: InMemoryUsers):
        self._users = users
        self.staff: dict[int, StaffMember] = {}
        self._id = 0

    def create(self, data: NewStaff) -> int:
        self._id += 1
        user = self._users.get_by_id(data.user_id)
        self.staff[self._id] = StaffMember(
            staff_id=self._id,
            user_id=data.user_id,
            employee_id=data.employee_id,
            position=data.position,
            department=data.department,
            hire_date=data.hire_date,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            salary=data.salary,
            emergency_contact=data.emergency_contact,
            emergency_phone=data.emergency_phone,
            certifications=tuple(data.certifications),
            specializations=tuple(data.specializations),
            notes=data.notes,
        )
        return self._id

    def get_by_id(self, staff_id: int) -> Optional[StaffMember]:
        return self.staff.get(int(staff_id))

    def get_by_employee_id(self, employee_id: str) -> Optional[StaffMember]:
        return next((s for s in self.staff.values() if s.employee_id == employee_id), None)

    def list_staff(self, *, include_inactive: bool = False):
        items = [s for s in self.staff.values() if include_inactive or s.is_active]
        return sorted(items, key=lambda s: (s.last_name, s.first_name))

    def update(self, staff_id: int, changes: Mapping[str, Any]) -> bool:
        current = self.staff.get(int(staff_id))
        if not current:
            return False
        changes = dict(changes)
        for name in ("certifications", "specializations"):
            if name in changes:
                changes[name] = tuple(changes[name])
        self.staff[int(staff_id)] = replace(current, **changes)
        return True


class InMemorySchedules:
    def __init__(self, staff: InMemoryStaff):
        self._staff = staff
        self.schedules: dict[int, StaffSchedule] = {}
        self._id = 0

    def create(self, *, staff_id, day_of_week, start_time, end_time, break_start=None, break_end=None) -> int:
        self._id += 1
        self.schedules[self._id] = StaffSchedule(
            schedule_id=self._id,
            staff_id=int(staff_id),
            day_of_week=int(day_of_week),
            start_time=start_time,
            end_time=end_time,
            break_start=break_start,
            break_end=break_end,
        )
        return self._id

    def get_by_id(self, schedule_id: int) -> Optional[StaffSchedule]:
        return self.schedules.get(int(schedule_id))

    def list_for_staff(self, staff_id: int):
        items = [sc for sc in self.schedules.values() if sc.staff_id == int(staff_id) and sc.is_active]
        return sorted(items, key=lambda sc: (sc.day_of_week, sc.start_time))

    def list_active_for_day(self, day_of_week: int):
        out = []
        for sc in sorted(self.schedules.values(), key=lambda sc: (sc.staff_id, sc.schedule_id)):
            staff = self._staff.get_by_id(sc.staff_id)
            if sc.day_of_week == int(day_of_week) and sc.is_active and staff and staff.is_active:
                out.append(sc)
        return out

    def update(self, schedule_id: int, changes: Mapping[str, Any]) -> bool:
        current = self.schedules.get(int(schedule_id))
        if not current:
            return False
        self.schedules[int(schedule_id)] = replace(current, **dict(changes))
        return True


class InMemoryShifts:
    def __init__(self, staff: InMemoryStaff):
        self._staff = staff
        self.shifts: dict[int, Shift] = {}
        self._id = 0

    def create_if_absent(self, *, staff_id, shift_date, start_time, end_time, notes=None) -> Optional[Shift]:
        if self.get_for_staff_on(staff_id=staff_id, shift_date=shift_date):
            return None
        self._id += 1
        staff = self._staff.get_by_id(staff_id)
        shift = Shift(
            shift_id=self._id,
            staff_id=int(staff_id),
            shift_date=shift_date,
            start_time=start_time,
            end_time=end_time,
            notes=notes,
            employee_id=staff.employee_id if staff else "",
            first_name=staff.first_name if staff else "",
            last_name=staff.last_name if staff else "",
        )
        self.shifts[self._id] = shift
        return shift

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        return self.shifts.get(int(shift_id))

    def get_for_staff_on(self, *, staff_id: int, shift_date: date) -> Optional[Shift]:
        return next(
            (s for s in self.shifts.values() if s.staff_id == int(staff_id) and s.shift_date == shift_date),
            None,
        )

    def list_range(self, *, start: date, end: date, staff_id: Optional[int] = None):
        items = [
            s
            for s in self.shifts.values()
            if start <= s.shift_date <= end and (staff_id is None or s.staff_id == int(staff_id))
        ]
        return sorted(items, key=lambda s: (s.shift_date, s.start_time))

    def update_status(self, *, shift_id, status: ShiftStatus, actual_start_time=None, actual_end_time=None) -> bool:
        current = self.shifts.get(int(shift_id))
        if not current:
            return False
        self.shifts[int(shift_id)] = replace(
            current,
            status=status,
            actual_start_time=actual_start_time or current.actual_start_time,
            actual_end_time=actual_end_time or current.actual_end_time,
        )
        return True


class InMemoryTimeOff:
    def __init__(self, staff: InMemoryStaff):
        self._staff = staff
        self.requests: dict[int, TimeOffRequest] = {}
        self._id = 0

    def create(self, *, staff_id, start_date, end_date, reason, type: TimeOffType, notes=None) -> int:
        self._id += 1
        staff = self._staff.get_by_id(staff_id)
        self.requests[self._id] = TimeOffRequest(
            request_id=self._id,
            staff_id=int(staff_id),
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            type=type,
            notes=notes,
            employee_id=staff.employee_id if staff else "",
            first_name=staff.first_name if staff else "",
            last_name=staff.last_name if staff else "",
            created_at=datetime(2026, 1, 1, 8, 0),
        )
        return self._id

    def get_by_id(self, request_id: int) -> Optional[TimeOffRequest]:
        return self.requests.get(int(request_id))

    def list_requests(self, *, staff_id=None, status: Optional[TimeOffStatus] = None):
        items = [
            r
            for r in self.requests.values()
            if (staff_id is None or r.staff_id == int(staff_id)) and (status is None or r.status == status)
        ]
        items.sort(key=lambda r: r.request_id, reverse=True)
        items.sort(key=lambda r: r.start_date)
        return items

    def list_approved_covering(self, d: date):
        return [r for r in self.requests.values() if r.status == TimeOffStatus.APPROVED and r.covers(d)]

    def decide(self, *, request_id, status: TimeOffStatus, approved_by, notes=None) -> bool:
        current = self.requests.get(int(request_id))
        if not current or current.status != TimeOffStatus.PENDING:
            return False
        self.requests[int(request_id)] = replace(
            current,
            status=status,
            approved_by=int(approved_by),
            approved_at=datetime(2026, 1, 2, 9, 0),
            notes=notes if notes is not None else current.notes,
        )
        return True


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 5, 8, 30, 0)


@pytest.fixture
def repos():
    users = InMemoryUsers(
        [
            User(1, "Admin", "Demo", "admin@safemeds.local", "admin", generate_password_hash("admin123")),
            User(2, "Linh", "Tran", "linh@safemeds.local", "ltran", generate_password_hash("pw123456")),
            User(3, "Minh", "Pham", "minh@safemeds.local", "mpham", generate_password_hash("pw123456")),
            User(4, "An", "Nguyen", "an@safemeds.local", "anguyen", generate_password_hash("pw123456")),
        ]
    )
    staff = InMemoryStaff(users)
    staff.create(NewStaff(2, "EMP-001", StaffPosition.PHARMACIST, "Dispensary", date(2024, 8, 19)))
    staff.create(NewStaff(3, "EMP-002", StaffPosition.PHARMACY_TECHNICIAN, "Dispensary", date(2025, 1, 6)))

    return SimpleNamespace(
        users=users,
        staff=staff,
        schedules=InMemorySchedules(staff),
        shifts=InMemoryShifts(staff),
        time_off=InMemoryTimeOff(staff),
    )


@pytest.fixture
def container(repos):
    return wire(
        users_repo=repos.users,
        staff_repo=repos.staff,
        schedules_repo=repos.schedules,
        shifts_repo=repos.shifts,
        time_off_repo=repos.time_off,
    )


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    with client.session_transaction() as sess:
        sess["user_id"] = 1
    return client
