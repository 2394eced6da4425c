from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from safemeds.common.datetime_utils import day_of_week, iter_days
from safemeds.core.exceptions import ValidationError
from safemeds.shifts.generator import ShiftGenerator

MONDAY = date(2026, 1, 5)
SUNDAY = date(2026, 1, 4)
SATURDAY = date(2026, 1, 10)


def _weekly(repos):
    # staff 1: Mon/Wed/Fri 09-17, staff 2: Tue 12-20
    for day in (1, 3, 5):
        repos.schedules.create(staff_id=1, day_of_week=day, start_time="09:00", end_time="17:00")
    repos.schedules.create(staff_id=2, day_of_week=2, start_time="12:00", end_time="20:00")


def test_monday_schedule_produces_one_shift_at_schedule_times(repos):
    repos.schedules.create(staff_id=1, day_of_week=1, start_time="09:00", end_time="17:00")
    gen = ShiftGenerator(repos.schedules, repos.shifts)

    created = gen.generate(SUNDAY, MONDAY)

    assert len(created) == 1
    shift = created[0]
    assert shift.staff_id == 1
    assert shift.shift_date == MONDAY
    assert shift.start_time == datetime(2026, 1, 5, 9, 0)
    assert shift.end_time == datetime(2026, 1, 5, 17, 0)


def test_second_run_over_same_range_creates_nothing(repos):
    _weekly(repos)
    gen = ShiftGenerator(repos.schedules, repos.shifts)

    first = gen.generate(SUNDAY, SATURDAY)
    second = gen.generate(SUNDAY, SATURDAY)

    assert len(first) == 4
    assert second == []
    assert len(repos.shifts.shifts) == 4


def test_every_scheduled_day_has_exactly_one_shift(repos):
    _weekly(repos)
    start, end = SUNDAY, SUNDAY + timedelta(days=20)
    gen = ShiftGenerator(repos.schedules, repos.shifts)

    gen.generate(start, end)
    gen.generate(start + timedelta(days=3), end)

    for d in iter_days(start, end):
        for sc in repos.schedules.list_active_for_day(day_of_week(d)):
            matching = [s for s in repos.shifts.shifts.values() if s.staff_id == sc.staff_id and s.shift_date == d]
            assert len(matching) == 1


def test_existing_shift_is_kept_and_not_returned(repos):
    repos.schedules.create(staff_id=1, day_of_week=1, start_time="09:00", end_time="17:00")
    manual = repos.shifts.create_if_absent(
        staff_id=1,
        shift_date=MONDAY,
        start_time=datetime(2026, 1, 5, 7, 0),
        end_time=datetime(2026, 1, 5, 12, 0),
    )

    created = ShiftGenerator(repos.schedules, repos.shifts).generate(MONDAY, MONDAY)

    assert created == []
    assert repos.shifts.get_for_staff_on(staff_id=1, shift_date=MONDAY) == manual


def test_inactive_schedules_and_inactive_staff_are_skipped(repos):
    sc_id = repos.schedules.create(staff_id=1, day_of_week=1, start_time="09:00", end_time="17:00")
    repos.schedules.update(sc_id, {"is_active": False})
    repos.schedules.create(staff_id=2, day_of_week=1, start_time="12:00", end_time="20:00")
    repos.staff.update(2, {"is_active": False})

    created = ShiftGenerator(repos.schedules, repos.shifts).generate(MONDAY, MONDAY)

    assert created == []


def test_start_after_end_is_rejected(repos):
    with pytest.raises(ValidationError):
        ShiftGenerator(repos.schedules, repos.shifts).generate(MONDAY, SUNDAY)


def test_range_longer_than_limit_is_rejected(repos):
    gen = ShiftGenerator(repos.schedules, repos.shifts, max_days=7)
    with pytest.raises(ValidationError):
        gen.generate(SUNDAY, SUNDAY + timedelta(days=7))


class FailingOnDate:
    """Shift store that breaks on one date to simulate a database outage."""

    def __init__(self, inner, fail_on: date):
        self._inner = inner
        self._fail_on = fail_on

    def create_if_absent(self, **kwargs):
        if kwargs["shift_date"] == self._fail_on:
            raise RuntimeError("connection lost")
        return self._inner.create_if_absent(**kwargs)


def test_failure_midway_keeps_earlier_days_and_propagates(repos):
    _weekly(repos)
    wednesday = date(2026, 1, 7)
    gen = ShiftGenerator(repos.schedules, FailingOnDate(repos.shifts, wednesday))

    with pytest.raises(RuntimeError):
        gen.generate(SUNDAY, SATURDAY)

    kept = sorted(s.shift_date for s in repos.shifts.shifts.values())
    assert kept == [MONDAY, date(2026, 1, 6)]
