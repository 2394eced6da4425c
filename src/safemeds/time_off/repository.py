from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import TimeOffStatus, TimeOffType
from .model import TimeOffRequest


class TimeOffRepository(Protocol):
    def create(
        self,
        *,
        staff_id: int,
        start_date: date,
        end_date: date,
        reason: str,
        type: TimeOffType,
        notes: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, request_id: int) -> Optional[TimeOffRequest]:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        staff_id: Optional[int] = None,
        status: Optional[TimeOffStatus] = None,
    ) -> Sequence[TimeOffRequest]:
        """Ordered by start date, newest request first within a day."""

        raise NotImplementedError

    def list_approved_covering(self, d: date) -> Sequence[TimeOffRequest]:
        raise NotImplementedError

    def decide(
        self,
        *,
        request_id: int,
        status: TimeOffStatus,
        approved_by: int,
        notes: Optional[str] = None,
    ) -> bool:
        """Record an approval decision; only PENDING requests may be decided."""

        raise NotImplementedError
