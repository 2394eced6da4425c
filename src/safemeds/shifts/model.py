from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ShiftStatus


@dataclass(frozen=True)
class Shift:
    """Thực thể miền (domain): Ca làm cụ thể theo ngày.

    At most one shift exists per staff member and calendar day.
    """

    shift_id: int
    staff_id: int
    shift_date: date
    start_time: datetime
    end_time: datetime
    status: ShiftStatus = ShiftStatus.SCHEDULED
    notes: Optional[str] = None
    actual_start_time: Optional[datetime] = None
    actual_end_time: Optional[datetime] = None
    employee_id: str = ""
    first_name: str = ""
    last_name: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
