from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import ShiftStatus
from .model import Shift


class ShiftRepository(Protocol):
    def create_if_absent(
        self,
        *,
        staff_id: int,
        shift_date: date,
        start_time: datetime,
        end_time: datetime,
        notes: Optional[str] = None,
    ) -> Optional[Shift]:
        """Insert a shift unless one already exists for (staff_id, shift_date).

        Must be atomic: the check and the insert cannot be split across calls.
        Returns the new shift, or None when the staff member already has one that day.
        """

        raise NotImplementedError

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def get_for_staff_on(self, *, staff_id: int, shift_date: date) -> Optional[Shift]:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date, staff_id: Optional[int] = None) -> Sequence[Shift]:
        """Shifts with start <= shift_date <= end, ordered by date then start time."""

        raise NotImplementedError

    def update_status(
        self,
        *,
        shift_id: int,
        status: ShiftStatus,
        actual_start_time: Optional[datetime] = None,
        actual_end_time: Optional[datetime] = None,
    ) -> bool:
        """Set status; actual times are only overwritten when given."""

        raise NotImplementedError
