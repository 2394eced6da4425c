from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..schedules.model import StaffSchedule
from ..shifts.model import Shift
from ..staff.model import StaffMember
from ..time_off.model import TimeOffRequest


@dataclass(frozen=True)
class StaffAvailability:
    staff: StaffMember
    schedule: Optional[StaffSchedule]
    shift: Optional[Shift]
    time_off: Optional[TimeOffRequest]

    @property
    def has_schedule(self) -> bool:
        return self.schedule is not None

    @property
    def has_shift(self) -> bool:
        return self.shift is not None

    @property
    def has_time_off(self) -> bool:
        return self.time_off is not None

    @property
    def is_available(self) -> bool:
        """Scheduled for the weekday, not yet on a shift, and not on approved leave."""
        return self.has_schedule and not self.has_shift and not self.has_time_off
