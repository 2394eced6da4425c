from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .availability.service import AvailabilityService
from .database.connection import DatabaseConnection, DBConfig
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService
from .shifts.generator import ShiftGenerator
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService
from .staff.mysql_staff_repository import MySQLStaffRepository
from .staff.repository import StaffRepository
from .staff.service import StaffService
from .time_off.mysql_time_off_repository import MySQLTimeOffRepository
from .time_off.repository import TimeOffRepository
from .time_off.service import TimeOffService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    staff_repo: StaffRepository
    schedules_repo: ScheduleRepository
    shifts_repo: ShiftRepository
    time_off_repo: TimeOffRepository

    auth_service: AuthService
    staff_service: StaffService
    schedule_service: ScheduleService
    shift_service: ShiftService
    shift_generator: ShiftGenerator
    time_off_service: TimeOffService
    availability_service: AvailabilityService


def wire(
    *,
    users_repo: UserRepository,
    staff_repo: StaffRepository,
    schedules_repo: ScheduleRepository,
    shifts_repo: ShiftRepository,
    time_off_repo: TimeOffRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build services on top of the given repositories (MySQL or in-memory)."""
    return Container(
        conn=conn,
        users_repo=users_repo,
        staff_repo=staff_repo,
        schedules_repo=schedules_repo,
        shifts_repo=shifts_repo,
        time_off_repo=time_off_repo,
        auth_service=AuthService(users_repo),
        staff_service=StaffService(staff_repo, users_repo),
        schedule_service=ScheduleService(schedules_repo, staff_repo),
        shift_service=ShiftService(shifts_repo, staff_repo),
        shift_generator=ShiftGenerator(schedules_repo, shifts_repo),
        time_off_service=TimeOffService(time_off_repo, staff_repo),
        availability_service=AvailabilityService(staff_repo, schedules_repo, shifts_repo, time_off_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        staff_repo=MySQLStaffRepository(conn),
        schedules_repo=MySQLScheduleRepository(conn),
        shifts_repo=MySQLShiftRepository(conn),
        time_off_repo=MySQLTimeOffRepository(conn),
    )
