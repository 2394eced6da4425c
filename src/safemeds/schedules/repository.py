from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import StaffSchedule


class ScheduleRepository(Protocol):
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
        """Returns schedule_id."""

        raise NotImplementedError

    def get_by_id(self, schedule_id: int) -> Optional[StaffSchedule]:
        raise NotImplementedError

    def list_for_staff(self, staff_id: int) -> Sequence[StaffSchedule]:
        """Active schedules of one staff member, ordered by day of week."""

        raise NotImplementedError

    def list_active_for_day(self, day_of_week: int) -> Sequence[StaffSchedule]:
        """Active schedules for a weekday whose owning staff member is also active."""

        raise NotImplementedError

    def update(self, schedule_id: int, changes: Mapping[str, Any]) -> bool:
        raise NotImplementedError
