from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_enum
from ..core.enums import ShiftStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..staff.repository import StaffRepository
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftService:
    """Manual shift management: create, list, status updates, clock-in/out."""

    def __init__(self, shifts: ShiftRepository, staff: StaffRepository):
        self._shifts = shifts
        self._staff = staff

    def create_shift(
        self,
        *,
        staff_id: int,
        shift_date: date,
        start_time: datetime,
        end_time: datetime,
        notes: Optional[str] = None,
    ) -> Shift:
        if end_time <= start_time:
            raise ValidationError("End time must be after start time")
        if not self._staff.get_by_id(int(staff_id)):
            raise ValidationError("Staff member not found")

        shift = self._shifts.create_if_absent(
            staff_id=int(staff_id),
            shift_date=shift_date,
            start_time=start_time,
            end_time=end_time,
            notes=(notes or "").strip() or None,
        )
        if shift is None:
            raise ValidationError("A shift already exists for this staff member on this date")
        logger.info("Created shift %s for staff %s on %s", shift.shift_id, staff_id, shift_date)
        return shift

    def list_shifts(self, *, start: date, end: date, staff_id: Optional[int] = None) -> Sequence[Shift]:
        if start > end:
            raise ValidationError("Start date cannot be after end date")
        return self._shifts.list_range(start=start, end=end, staff_id=staff_id)

    def get_shift(self, shift_id: int) -> Shift:
        shift = self._shifts.get_by_id(int(shift_id))
        if not shift:
            raise NotFoundError("Shift not found")
        return shift

    def update_status(
        self,
        shift_id: int,
        status: str,
        *,
        actual_start_time: Optional[datetime] = None,
        actual_end_time: Optional[datetime] = None,
    ) -> Shift:
        new_status = require_enum(ShiftStatus, status, "status")
        if actual_start_time and actual_end_time and actual_end_time < actual_start_time:
            raise ValidationError("Actual end time cannot be before actual start time")

        ok = self._shifts.update_status(
            shift_id=int(shift_id),
            status=new_status,
            actual_start_time=actual_start_time,
            actual_end_time=actual_end_time,
        )
        if not ok:
            raise NotFoundError("Shift not found")
        logger.info("Shift %s -> %s", shift_id, new_status.value)
        return self.get_shift(shift_id)

    def clock_in(self, shift_id: int, *, now: Optional[datetime] = None) -> Shift:
        shift = self.get_shift(shift_id)
        if shift.actual_start_time is not None:
            raise ValidationError("Shift already clocked in")
        return self.update_status(shift_id, ShiftStatus.IN_PROGRESS.value, actual_start_time=now or now_local())

    def clock_out(self, shift_id: int, *, now: Optional[datetime] = None) -> Shift:
        shift = self.get_shift(shift_id)
        if shift.actual_start_time is None:
            raise ValidationError("Shift has not been clocked in")
        if shift.actual_end_time is not None:
            raise ValidationError("Shift already clocked out")
        now = now or now_local()
        if now < shift.actual_start_time:
            raise ValidationError("Actual end time cannot be before actual start time")
        return self.update_status(shift_id, ShiftStatus.COMPLETED.value, actual_end_time=now)
