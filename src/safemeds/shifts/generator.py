"""Materialize dated shifts from recurring weekly schedules.

For every day in the requested range the generator looks up the active
schedules for that weekday (owning staff active too) and asks the shift
store to create a shift for the staff member on that day if there is none
yet. Creation goes through ``ShiftRepository.create_if_absent`` so two
overlapping runs cannot both insert for the same staff member and day.

Days are processed in order and every shift is committed as it is created:
if the store fails partway, earlier days keep their shifts and the error
propagates to the caller.
"""

from __future__ import annotations

import logging
from datetime import date

from ..common.datetime_utils import combine, day_of_week, iter_days
from ..core.constants import MAX_GENERATION_DAYS
from ..core.exceptions import ValidationError
from ..schedules.repository import ScheduleRepository
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftGenerator:
    def __init__(
        self,
        schedules: ScheduleRepository,
        shifts: ShiftRepository,
        *,
        max_days: int = MAX_GENERATION_DAYS,
    ):
        self._schedules = schedules
        self._shifts = shifts
        self._max_days = int(max_days)

    def generate(self, start_date: date, end_date: date) -> list[Shift]:
        """Create missing shifts for [start_date, end_date]; returns only the new ones."""
        if start_date > end_date:
            raise ValidationError("Start date cannot be after end date")
        span = (end_date - start_date).days + 1
        if span > self._max_days:
            raise ValidationError(f"Date range cannot exceed {self._max_days} days")

        created: list[Shift] = []
        skipped = 0
        for d in iter_days(start_date, end_date):
            for schedule in self._schedules.list_active_for_day(day_of_week(d)):
                shift = self._shifts.create_if_absent(
                    staff_id=schedule.staff_id,
                    shift_date=d,
                    start_time=combine(d, schedule.start_time),
                    end_time=combine(d, schedule.end_time),
                )
                if shift is None:
                    skipped += 1
                    continue
                created.append(shift)

        logger.info(
            "Generated %d shifts for %s..%s (%d already present)",
            len(created),
            start_date,
            end_date,
            skipped,
        )
        return created
