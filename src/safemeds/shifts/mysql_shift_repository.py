from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.enums import ShiftStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from .model import Shift
from .repository import ShiftRepository

_SELECT = """
    SELECT sh.shift_id, sh.staff_id, sh.shift_date, sh.start_time, sh.end_time, sh.status,
           sh.notes, sh.actual_start_time, sh.actual_end_time, sh.created_at, sh.updated_at,
           s.employee_id, u.first_name, u.last_name
    FROM shifts sh
    JOIN staff s ON s.staff_id = sh.staff_id
    JOIN users u ON u.user_id = s.user_id
"""


def to_shift(r: dict) -> Shift:
    return Shift(
        shift_id=int(r["shift_id"]),
        staff_id=int(r["staff_id"]),
        shift_date=r["shift_date"],
        start_time=r["start_time"],
        end_time=r["end_time"],
        status=ShiftStatus(r["status"]),
        notes=r.get("notes"),
        actual_start_time=r.get("actual_start_time"),
        actual_end_time=r.get("actual_end_time"),
        employee_id=r.get("employee_id") or "",
        first_name=r.get("first_name") or "",
        last_name=r.get("last_name") or "",
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_if_absent(
        self,
        *,
        staff_id: int,
        shift_date: date,
        start_time: datetime,
        end_time: datetime,
        notes: Optional[str] = None,
    ) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            # uq_shift_staff_date turns a concurrent duplicate into ER_DUP_ENTRY.
            try:
                cur.execute(
                    """
                    INSERT INTO shifts(staff_id, shift_date, start_time, end_time, status, notes)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (int(staff_id), shift_date, start_time, end_time, ShiftStatus.SCHEDULED.value, notes),
                )
            except IntegrityError as e:
                if is_duplicate_key(e):
                    return None
                raise

            cur.execute(_SELECT + " WHERE sh.shift_id=%s", (int(cur.lastrowid),))
            r = fetchone(cur)
            return to_shift(r) if r else None

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE sh.shift_id=%s", (int(shift_id),))
            r = fetchone(cur)
            return to_shift(r) if r else None

    def get_for_staff_on(self, *, staff_id: int, shift_date: date) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE sh.staff_id=%s AND sh.shift_date=%s", (int(staff_id), shift_date))
            r = fetchone(cur)
            return to_shift(r) if r else None

    def list_range(self, *, start: date, end: date, staff_id: Optional[int] = None) -> Sequence[Shift]:
        clauses = ["sh.shift_date BETWEEN %s AND %s"]
        params: list[object] = [start, end]
        if staff_id is not None:
            clauses.append("sh.staff_id=%s")
            params.append(int(staff_id))

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f" WHERE {where} ORDER BY sh.shift_date ASC, sh.start_time ASC",
                tuple(params),
            )
            return [to_shift(r) for r in fetchall(cur)]

    def update_status(
        self,
        *,
        shift_id: int,
        status: ShiftStatus,
        actual_start_time: Optional[datetime] = None,
        actual_end_time: Optional[datetime] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE shifts
                SET status=%s,
                    actual_start_time=COALESCE(%s, actual_start_time),
                    actual_end_time=COALESCE(%s, actual_end_time)
                WHERE shift_id=%s
                """,
                (status.value, actual_start_time, actual_end_time, int(shift_id)),
            )
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM shifts WHERE shift_id=%s", (int(shift_id),))
            return fetchone(cur) is not None
