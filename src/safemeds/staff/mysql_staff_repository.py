from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import StaffPosition
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, json_list
from .model import UPDATABLE_FIELDS, NewStaff, StaffMember
from .repository import StaffRepository

_SELECT = """
    SELECT s.staff_id, s.user_id, s.employee_id, s.position, s.department, s.hire_date,
           s.salary, s.is_active, s.emergency_contact, s.emergency_phone,
           s.certifications, s.specializations, s.notes, s.created_at, s.updated_at,
           u.first_name, u.last_name, u.email, u.phone
    FROM staff s
    JOIN users u ON u.user_id = s.user_id
"""


def to_staff(r: dict) -> StaffMember:
    return StaffMember(
        staff_id=int(r["staff_id"]),
        user_id=int(r["user_id"]),
        employee_id=r["employee_id"],
        position=StaffPosition(r["position"]),
        department=r["department"],
        hire_date=r["hire_date"],
        first_name=r["first_name"],
        last_name=r["last_name"],
        email=r.get("email") or "",
        phone=r.get("phone"),
        salary=r.get("salary"),
        is_active=bool(r.get("is_active", True)),
        emergency_contact=r.get("emergency_contact"),
        emergency_phone=r.get("emergency_phone"),
        certifications=tuple(json_list(r.get("certifications"))),
        specializations=tuple(json_list(r.get("specializations"))),
        notes=r.get("notes"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _column_value(name: str, value: Any) -> Any:
    if name in {"certifications", "specializations"}:
        return json.dumps(list(value or []))
    if name == "position":
        return StaffPosition(value).value
    if name == "is_active":
        return 1 if value else 0
    return value


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, data: NewStaff) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff(
                    user_id, employee_id, position, department, hire_date, salary,
                    emergency_contact, emergency_phone, certifications, specializations, notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(data.user_id),
                    data.employee_id,
                    data.position.value,
                    data.department,
                    data.hire_date,
                    data.salary,
                    data.emergency_contact,
                    data.emergency_phone,
                    json.dumps(list(data.certifications)),
                    json.dumps(list(data.specializations)),
                    data.notes,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, staff_id: int) -> Optional[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE s.staff_id=%s", (int(staff_id),))
            r = fetchone(cur)
            return to_staff(r) if r else None

    def get_by_employee_id(self, employee_id: str) -> Optional[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE s.employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return to_staff(r) if r else None

    def list_staff(self, *, include_inactive: bool = False) -> Sequence[StaffMember]:
        where = "" if include_inactive else " WHERE s.is_active=1"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + where + " ORDER BY u.last_name ASC, u.first_name ASC")
            return [to_staff(r) for r in fetchall(cur)]

    def update(self, staff_id: int, changes: Mapping[str, Any]) -> bool:
        names = [n for n in UPDATABLE_FIELDS if n in changes]
        if not names:
            return self.get_by_id(staff_id) is not None

        assignments = ", ".join(f"{n}=%s" for n in names)
        params = [_column_value(n, changes[n]) for n in names]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE staff SET {assignments} WHERE staff_id=%s",
                tuple(params + [int(staff_id)]),
            )
            if cur.rowcount > 0:
                return True
            # MySQL reports 0 affected rows when values are unchanged.
            cur.execute("SELECT 1 AS found FROM staff WHERE staff_id=%s", (int(staff_id),))
            return fetchone(cur) is not None
