from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.validators import require_enum, require_non_empty
from ..core.enums import StaffPosition
from ..core.exceptions import NotFoundError, ValidationError
from ..users.repository import UserRepository
from .model import UPDATABLE_FIELDS, NewStaff, StaffMember
from .repository import StaffRepository

logger = logging.getLogger(__name__)


def _salary(value: Any) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError("Salary must be a number")
    if amount < 0:
        raise ValidationError("Salary cannot be negative")
    return amount


def _str_list(values: Optional[Iterable[Any]], field_name: str) -> list[str]:
    if values is None:
        return []
    if isinstance(values, str) or not isinstance(values, (list, tuple)):
        raise ValidationError(f"{field_name} must be a list")
    return [str(v).strip() for v in values if str(v).strip()]


class StaffService:
    def __init__(self, staff: StaffRepository, users: UserRepository):
        self._staff = staff
        self._users = users

    def create_staff(
        self,
        *,
        user_id: int,
        employee_id: str,
        position: str,
        department: str,
        hire_date: date,
        salary: Any = None,
        emergency_contact: Optional[str] = None,
        emergency_phone: Optional[str] = None,
        certifications: Optional[Iterable[str]] = None,
        specializations: Optional[Iterable[str]] = None,
        notes: Optional[str] = None,
    ) -> StaffMember:
        if not self._users.get_by_id(int(user_id)):
            raise ValidationError("User not found")

        employee_id = require_non_empty(employee_id, "Employee ID")
        if self._staff.get_by_employee_id(employee_id):
            raise ValidationError("Employee ID already exists")

        data = NewStaff(
            user_id=int(user_id),
            employee_id=employee_id,
            position=require_enum(StaffPosition, position, "position"),
            department=require_non_empty(department, "Department"),
            hire_date=hire_date,
            salary=_salary(salary),
            emergency_contact=(emergency_contact or "").strip() or None,
            emergency_phone=(emergency_phone or "").strip() or None,
            certifications=_str_list(certifications, "Certifications"),
            specializations=_str_list(specializations, "Specializations"),
            notes=(notes or "").strip() or None,
        )
        staff_id = self._staff.create(data)
        logger.info("Created staff %s (employee %s)", staff_id, employee_id)
        return self.get_staff(staff_id)

    def list_staff(self, *, include_inactive: bool = False) -> Sequence[StaffMember]:
        return self._staff.list_staff(include_inactive=include_inactive)

    def get_staff(self, staff_id: int) -> StaffMember:
        staff = self._staff.get_by_id(int(staff_id))
        if not staff:
            raise NotFoundError("Staff member not found")
        return staff

    def update_staff(self, staff_id: int, changes: Mapping[str, Any]) -> StaffMember:
        clean: dict[str, Any] = {}
        for name in UPDATABLE_FIELDS:
            if name not in changes or changes[name] is None:
                continue
            value = changes[name]
            if name == "position":
                value = require_enum(StaffPosition, value, "position")
            elif name == "department":
                value = require_non_empty(value, "Department")
            elif name == "salary":
                value = _salary(value)
            elif name == "is_active":
                value = bool(value)
            elif name in {"certifications", "specializations"}:
                value = _str_list(value, name.capitalize())
            clean[name] = value

        if not self._staff.update(int(staff_id), clean):
            raise NotFoundError("Staff member not found")
        return self.get_staff(staff_id)

    def deactivate_staff(self, staff_id: int) -> None:
        if not self._staff.update(int(staff_id), {"is_active": False}):
            raise NotFoundError("Staff member not found")
        logger.info("Deactivated staff %s", staff_id)
