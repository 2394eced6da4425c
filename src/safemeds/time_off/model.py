from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import TimeOffStatus, TimeOffType


@dataclass(frozen=True)
class TimeOffRequest:
    """Yêu cầu nghỉ phép; start_date..end_date is inclusive."""

    request_id: int
    staff_id: int
    start_date: date
    end_date: date
    reason: str
    type: TimeOffType
    status: TimeOffStatus = TimeOffStatus.PENDING
    approved_by: Optional[int] = None
    approved_at: Optional[datetime] = None
    notes: Optional[str] = None
    employee_id: str = ""
    first_name: str = ""
    last_name: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def covers(self, d: date) -> bool:
        return self.start_date <= d <= self.end_date
