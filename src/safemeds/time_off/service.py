from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import require_enum, require_non_empty
from ..core.enums import TimeOffStatus, TimeOffType
from ..core.exceptions import NotFoundError, ValidationError
from ..staff.repository import StaffRepository
from .model import TimeOffRequest
from .repository import TimeOffRepository

logger = logging.getLogger(__name__)


class TimeOffService:
    def __init__(self, requests: TimeOffRepository, staff: StaffRepository):
        self._requests = requests
        self._staff = staff

    def create_request(
        self,
        *,
        staff_id: int,
        start_date: date,
        end_date: date,
        reason: str,
        type: str,
        notes: Optional[str] = None,
        today: Optional[date] = None,
    ) -> TimeOffRequest:
        today = today or now_local().date()
        if start_date > end_date:
            raise ValidationError("Start date cannot be after end date")
        if start_date < today:
            raise ValidationError("Start date cannot be in the past")

        reason = require_non_empty(reason, "Reason")
        kind = require_enum(TimeOffType, type, "type")
        if not self._staff.get_by_id(int(staff_id)):
            raise ValidationError("Staff member not found")

        request_id = self._requests.create(
            staff_id=int(staff_id),
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            type=kind,
            notes=(notes or "").strip() or None,
        )
        logger.info("Time-off request %s created for staff %s (%s..%s)", request_id, staff_id, start_date, end_date)
        return self.get_request(request_id)

    def get_request(self, request_id: int) -> TimeOffRequest:
        req = self._requests.get_by_id(int(request_id))
        if not req:
            raise NotFoundError("Time off request not found")
        return req

    def list_requests(
        self,
        *,
        staff_id: Optional[int] = None,
        status: Optional[str] = None,
    ) -> Sequence[TimeOffRequest]:
        wanted = require_enum(TimeOffStatus, status, "status") if status else None
        return self._requests.list_requests(staff_id=staff_id, status=wanted)

    def approve(self, request_id: int, *, approver_id: int, notes: Optional[str] = None) -> TimeOffRequest:
        return self._decide(request_id, TimeOffStatus.APPROVED, approver_id=approver_id, notes=notes)

    def reject(self, request_id: int, *, approver_id: int, notes: Optional[str] = None) -> TimeOffRequest:
        return self._decide(request_id, TimeOffStatus.REJECTED, approver_id=approver_id, notes=notes)

    def _decide(
        self,
        request_id: int,
        status: TimeOffStatus,
        *,
        approver_id: int,
        notes: Optional[str],
    ) -> TimeOffRequest:
        req = self.get_request(request_id)
        if req.status != TimeOffStatus.PENDING:
            raise ValidationError("Request has already been processed")

        ok = self._requests.decide(
            request_id=int(request_id),
            status=status,
            approved_by=int(approver_id),
            notes=(notes or "").strip() or None,
        )
        if not ok:
            raise ValidationError("Request has already been processed")
        logger.info("Time-off request %s %s by user %s", request_id, status.value.lower(), approver_id)
        return self.get_request(request_id)
