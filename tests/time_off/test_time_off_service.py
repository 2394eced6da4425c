from __future__ import annotations

from datetime import date

import pytest

from safemeds.core.enums import TimeOffStatus, TimeOffType
from safemeds.core.exceptions import NotFoundError, ValidationError
from safemeds.time_off.service import TimeOffService

TODAY = date(2026, 1, 5)


def _svc(repos) -> TimeOffService:
    return TimeOffService(repos.time_off, repos.staff)


def _request(svc, **overrides):
    data = dict(
        staff_id=1,
        start_date=date(2026, 1, 12),
        end_date=date(2026, 1, 14),
        reason="Family visit",
        type="VACATION",
        today=TODAY,
    )
    data.update(overrides)
    return svc.create_request(**data)


def test_new_request_is_pending(repos):
    req = _request(_svc(repos))

    assert req.status == TimeOffStatus.PENDING
    assert req.type == TimeOffType.VACATION
    assert req.covers(date(2026, 1, 14))
    assert not req.covers(date(2026, 1, 15))


def test_start_after_end(repos):
    with pytest.raises(ValidationError, match="Start date cannot be after end date"):
        _request(_svc(repos), start_date=date(2026, 1, 15))


def test_start_in_past(repos):
    with pytest.raises(ValidationError, match="Start date cannot be in the past"):
        _request(_svc(repos), start_date=date(2026, 1, 4))


def test_request_starting_today_is_allowed(repos):
    assert _request(_svc(repos), start_date=TODAY).start_date == TODAY


def test_unknown_type(repos):
    with pytest.raises(ValidationError):
        _request(_svc(repos), type="HOLIDAY")


def test_approve_records_approver(repos):
    svc = _svc(repos)
    req = _request(svc)

    approved = svc.approve(req.request_id, approver_id=1, notes="Enjoy")

    assert approved.status == TimeOffStatus.APPROVED
    assert approved.approved_by == 1
    assert approved.approved_at is not None
    assert approved.notes == "Enjoy"


def test_decided_request_cannot_be_decided_again(repos):
    svc = _svc(repos)
    req = _request(svc)
    svc.reject(req.request_id, approver_id=1)

    with pytest.raises(ValidationError, match="already been processed"):
        svc.approve(req.request_id, approver_id=1)


def test_missing_request(repos):
    with pytest.raises(NotFoundError):
        _svc(repos).approve(404, approver_id=1)


def test_list_requests_filters(repos):
    svc = _svc(repos)
    first = _request(svc)
    _request(svc, staff_id=2, start_date=date(2026, 1, 6), end_date=date(2026, 1, 6))
    svc.approve(first.request_id, approver_id=1)

    assert [r.staff_id for r in svc.list_requests()] == [2, 1]
    assert [r.request_id for r in svc.list_requests(status="APPROVED")] == [first.request_id]
    assert len(svc.list_requests(staff_id=2)) == 1
    with pytest.raises(ValidationError):
        svc.list_requests(status="MAYBE")
