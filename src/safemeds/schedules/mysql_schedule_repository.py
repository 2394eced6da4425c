from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, hhmm
from .model import UPDATABLE_FIELDS, StaffSchedule
from .repository import ScheduleRepository

_SELECT = """
    SELECT sc.schedule_id, sc.staff_id, sc.day_of_week, sc.start_time, sc.end_time,
           sc.break_start, sc.break_end, sc.is_active, sc.created_at, sc.updated_at
    FROM staff_schedules sc
"""


def to_schedule(r: dict) -> StaffSchedule:
    return StaffSchedule(
        schedule_id=int(r["schedule_id"]),
        staff_id=int(r["staff_id"]),
        day_of_week=int(r["day_of_week"]),
        start_time=hhmm(r["start_time"]),
        end_time=hhmm(r["end_time"]),
        break_start=hhmm(r.get("break_start")),
        break_end=hhmm(r.get("break_end")),
        is_active=bool(r.get("is_active", True)),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        staff_id: int,
        day_of_week: int,
        start_time: str,
        end_time: str,
        break_start: Optional[str] = None,
        break_end: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff_schedules(staff_id, day_of_week, start_time, end_time, break_start, break_end)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(staff_id), int(day_of_week), start_time, end_time, break_start, break_end),
            )
            return int(cur.lastrowid)

    def get_by_id(self, schedule_id: int) -> Optional[StaffSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE sc.schedule_id=%s", (int(schedule_id),))
            r = fetchone(cur)
            return to_schedule(r) if r else None

    def list_for_staff(self, staff_id: int) -> Sequence[StaffSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE sc.staff_id=%s AND sc.is_active=1 ORDER BY sc.day_of_week ASC, sc.start_time ASC",
                (int(staff_id),),
            )
            return [to_schedule(r) for r in fetchall(cur)]

    def list_active_for_day(self, day_of_week: int) -> Sequence[StaffSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT
                + """
                JOIN staff s ON s.staff_id = sc.staff_id
                WHERE sc.day_of_week=%s AND sc.is_active=1 AND s.is_active=1
                ORDER BY sc.staff_id ASC, sc.schedule_id ASC
                """,
                (int(day_of_week),),
            )
            return [to_schedule(r) for r in fetchall(cur)]

    def update(self, schedule_id: int, changes: Mapping[str, Any]) -> bool:
        names = [n for n in UPDATABLE_FIELDS if n in changes]
        if not names:
            return self.get_by_id(schedule_id) is not None

        assignments = ", ".join(f"{n}=%s" for n in names)
        params = [(1 if changes[n] else 0) if n == "is_active" else changes[n] for n in names]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE staff_schedules SET {assignments} WHERE schedule_id=%s",
                tuple(params + [int(schedule_id)]),
            )
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM staff_schedules WHERE schedule_id=%s", (int(schedule_id),))
            return fetchone(cur) is not None
