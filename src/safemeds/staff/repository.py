from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import NewStaff, StaffMember


class StaffRepository(Protocol):
    def create(self, data: NewStaff) -> int:
        raise NotImplementedError

    def get_by_id(self, staff_id: int) -> Optional[StaffMember]:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[StaffMember]:
        raise NotImplementedError

    def list_staff(self, *, include_inactive: bool = False) -> Sequence[StaffMember]:
        """Ordered by last name, then first name."""

        raise NotImplementedError

    def update(self, staff_id: int, changes: Mapping[str, Any]) -> bool:
        """Apply a partial update; keys are limited to model.UPDATABLE_FIELDS."""

        raise NotImplementedError
