from __future__ import annotations

from datetime import date

from ..common.datetime_utils import day_of_week
from ..schedules.repository import ScheduleRepository
from ..shifts.repository import ShiftRepository
from ..staff.repository import StaffRepository
from ..time_off.repository import TimeOffRepository
from .model import StaffAvailability


class AvailabilityService:
    """Read-only report of who can still be put on a shift for a given date."""

    def __init__(
        self,
        staff: StaffRepository,
        schedules: ScheduleRepository,
        shifts: ShiftRepository,
        time_off: TimeOffRepository,
    ):
        self._staff = staff
        self._schedules = schedules
        self._shifts = shifts
        self._time_off = time_off

    def for_date(self, d: date) -> list[StaffAvailability]:
        schedules = {}
        for sc in self._schedules.list_active_for_day(day_of_week(d)):
            schedules.setdefault(sc.staff_id, sc)

        shifts = {}
        for sh in self._shifts.list_range(start=d, end=d):
            shifts.setdefault(sh.staff_id, sh)

        time_off = {}
        for req in self._time_off.list_approved_covering(d):
            time_off.setdefault(req.staff_id, req)

        return [
            StaffAvailability(
                staff=s,
                schedule=schedules.get(s.staff_id),
                shift=shifts.get(s.staff_id),
                time_off=time_off.get(s.staff_id),
            )
            for s in self._staff.list_staff(include_inactive=False)
        ]
