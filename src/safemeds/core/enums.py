from __future__ import annotations

from enum import Enum


class StaffPosition(str, Enum):
    """Chức danh của nhân viên nhà thuốc."""

    PHARMACIST = "PHARMACIST"
    PHARMACY_TECHNICIAN = "PHARMACY_TECHNICIAN"
    CASHIER = "CASHIER"
    MANAGER = "MANAGER"
    SUPERVISOR = "SUPERVISOR"
    INTERN = "INTERN"
    VOLUNTEER = "VOLUNTEER"


class ShiftStatus(str, Enum):
    """Trạng thái ca làm đã biết.

    Only the values are fixed here; which transitions are allowed is not.
    """

    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class TimeOffType(str, Enum):
    VACATION = "VACATION"
    SICK_LEAVE = "SICK_LEAVE"
    PERSONAL_DAY = "PERSONAL_DAY"
    BEREAVEMENT = "BEREAVEMENT"
    MATERNITY_PATERNITY = "MATERNITY_PATERNITY"
    UNPAID_LEAVE = "UNPAID_LEAVE"
    OTHER = "OTHER"


class TimeOffStatus(str, Enum):
    """Trạng thái luồng duyệt yêu cầu nghỉ."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
