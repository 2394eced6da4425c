from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class StaffSchedule:
    """Lịch làm việc lặp lại hằng tuần.

    day_of_week uses 0 for Sunday through 6 for Saturday; times are HH:MM wall-clock strings.
    """

    schedule_id: int
    staff_id: int
    day_of_week: int
    start_time: str
    end_time: str
    break_start: Optional[str] = None
    break_end: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


UPDATABLE_FIELDS = ("start_time", "end_time", "break_start", "break_end", "is_active")
