from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_day_of_week, require_hhmm
from ..core.exceptions import NotFoundError, ValidationError
from ..staff.repository import StaffRepository
from .model import StaffSchedule
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


def _normalize(value: Optional[str]) -> Optional[str]:
    if value is None or value == "":
        return None
    require_hhmm(value)
    return parse_hhmm(value).strftime("%H:%M")


def _check_window(start: str, end: str, break_start: Optional[str], break_end: Optional[str]) -> None:
    # Zero-padded HH:MM strings compare in clock order.
    if end <= start:
        raise ValidationError("End time must be after start time")
    if (break_start is None) != (break_end is None):
        raise ValidationError("Break start and break end must be given together")
    if break_start is not None:
        if break_end <= break_start:
            raise ValidationError("Break end must be after break start")
        if break_start < start or break_end > end:
            raise ValidationError("Break must fall within the scheduled hours")


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository, staff: StaffRepository):
        self._schedules = schedules
        self._staff = staff

    def create_schedule(
        self,
        *,
        staff_id: int,
        day_of_week: Any,
        start_time: str,
        end_time: str,
        break_start: Optional[str] = None,
        break_end: Optional[str] = None,
    ) -> StaffSchedule:
        day = require_day_of_week(day_of_week)
        require_hhmm(start_time, end_time)
        start, end = _normalize(start_time), _normalize(end_time)
        b_start, b_end = _normalize(break_start), _normalize(break_end)
        _check_window(start, end, b_start, b_end)

        if not self._staff.get_by_id(int(staff_id)):
            raise ValidationError("Staff member not found")

        schedule_id = self._schedules.create(
            staff_id=int(staff_id),
            day_of_week=day,
            start_time=start,
            end_time=end,
            break_start=b_start,
            break_end=b_end,
        )
        logger.info("Created schedule %s for staff %s on day %s", schedule_id, staff_id, day)
        return self.get_schedule(schedule_id)

    def get_schedule(self, schedule_id: int) -> StaffSchedule:
        schedule = self._schedules.get_by_id(int(schedule_id))
        if not schedule:
            raise NotFoundError("Schedule not found")
        return schedule

    def list_for_staff(self, staff_id: int) -> Sequence[StaffSchedule]:
        return self._schedules.list_for_staff(int(staff_id))

    def list_active_for_day(self, day_of_week: int) -> Sequence[StaffSchedule]:
        return self._schedules.list_active_for_day(require_day_of_week(day_of_week))

    def update_schedule(self, schedule_id: int, changes: Mapping[str, Any]) -> StaffSchedule:
        current = self.get_schedule(schedule_id)

        clean: dict[str, Any] = {}
        for name in ("start_time", "end_time", "break_start", "break_end"):
            if name in changes:
                value = _normalize(changes[name])
                if value is None and name in {"start_time", "end_time"}:
                    raise ValidationError("Invalid time format. Use HH:MM format")
                clean[name] = value
        if changes.get("is_active") is not None:
            clean["is_active"] = bool(changes["is_active"])

        _check_window(
            clean.get("start_time", current.start_time),
            clean.get("end_time", current.end_time),
            clean.get("break_start", current.break_start),
            clean.get("break_end", current.break_end),
        )

        if not self._schedules.update(int(schedule_id), clean):
            raise NotFoundError("Schedule not found")
        return self.get_schedule(schedule_id)
