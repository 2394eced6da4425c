from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import TimeOffStatus, TimeOffType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TimeOffRequest
from .repository import TimeOffRepository

_SELECT = """
    SELECT r.request_id, r.staff_id, r.start_date, r.end_date, r.reason, r.type, r.status,
           r.approved_by, r.approved_at, r.notes, r.created_at, r.updated_at,
           s.employee_id, u.first_name, u.last_name
    FROM time_off_requests r
    JOIN staff s ON s.staff_id = r.staff_id
    JOIN users u ON u.user_id = s.user_id
"""


def to_request(r: dict) -> TimeOffRequest:
    return TimeOffRequest(
        request_id=int(r["request_id"]),
        staff_id=int(r["staff_id"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        reason=r["reason"],
        type=TimeOffType(r["type"]),
        status=TimeOffStatus(r["status"]),
        approved_by=r.get("approved_by"),
        approved_at=r.get("approved_at"),
        notes=r.get("notes"),
        employee_id=r.get("employee_id") or "",
        first_name=r.get("first_name") or "",
        last_name=r.get("last_name") or "",
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLTimeOffRepository(TimeOffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        staff_id: int,
        start_date: date,
        end_date: date,
        reason: str,
        type: TimeOffType,
        notes: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_off_requests(staff_id, start_date, end_date, reason, type, status, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (int(staff_id), start_date, end_date, reason, type.value, TimeOffStatus.PENDING.value, notes),
            )
            return int(cur.lastrowid)

    def get_by_id(self, request_id: int) -> Optional[TimeOffRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE r.request_id=%s", (int(request_id),))
            r = fetchone(cur)
            return to_request(r) if r else None

    def list_requests(
        self,
        *,
        staff_id: Optional[int] = None,
        status: Optional[TimeOffStatus] = None,
    ) -> Sequence[TimeOffRequest]:
        clauses = ["1=1"]
        params: list[object] = []
        if staff_id is not None:
            clauses.append("r.staff_id=%s")
            params.append(int(staff_id))
        if status is not None:
            clauses.append("r.status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f" WHERE {where} ORDER BY r.start_date ASC, r.created_at DESC",
                tuple(params),
            )
            return [to_request(r) for r in fetchall(cur)]

    def list_approved_covering(self, d: date) -> Sequence[TimeOffRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + " WHERE r.status=%s AND r.start_date<=%s AND r.end_date>=%s ORDER BY r.start_date ASC",
                (TimeOffStatus.APPROVED.value, d, d),
            )
            return [to_request(r) for r in fetchall(cur)]

    def decide(
        self,
        *,
        request_id: int,
        status: TimeOffStatus,
        approved_by: int,
        notes: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_off_requests
                SET status=%s, approved_by=%s, approved_at=NOW(), notes=COALESCE(%s, notes)
                WHERE request_id=%s AND status=%s
                """,
                (status.value, int(approved_by), notes, int(request_id), TimeOffStatus.PENDING.value),
            )
            return cur.rowcount > 0
