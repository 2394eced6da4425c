from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import StaffPosition


@dataclass(frozen=True)
class StaffMember:
    """Thực thể miền (domain): Nhân viên, joined with the owning user's name and contact."""

    staff_id: int
    user_id: int
    employee_id: str
    position: StaffPosition
    department: str
    hire_date: date
    first_name: str
    last_name: str
    email: str = ""
    phone: Optional[str] = None
    salary: Optional[Decimal] = None
    is_active: bool = True
    emergency_contact: Optional[str] = None
    emergency_phone: Optional[str] = None
    certifications: tuple[str, ...] = ()
    specializations: tuple[str, ...] = ()
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class NewStaff:
    user_id: int
    employee_id: str
    position: StaffPosition
    department: str
    hire_date: date
    salary: Optional[Decimal] = None
    emergency_contact: Optional[str] = None
    emergency_phone: Optional[str] = None
    certifications: list[str] = field(default_factory=list)
    specializations: list[str] = field(default_factory=list)
    notes: Optional[str] = None


# Columns a partial update may touch.
UPDATABLE_FIELDS = (
    "position",
    "department",
    "salary",
    "is_active",
    "emergency_contact",
    "emergency_phone",
    "certifications",
    "specializations",
    "notes",
)
