from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import to_iso
from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """One person in the directory.

    Pure data object; the store hands out copies, never its own instances.
    """

    id: str
    name: str
    email: str
    role: Role
    created_at: datetime
    updated_at: datetime
    phone: str = ""
    user_id: Optional[str] = None
    created_by: Optional[str] = None

    def with_changes(self, *, updated_at: datetime, **changes: Any) -> "Employee":
        return replace(self, updated_at=updated_at, **changes)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "role": self.role.value,
            "created_at": to_iso(self.created_at),
            "updated_at": to_iso(self.updated_at),
            "created_by": self.created_by,
        }


@dataclass(frozen=True)
class EmployeeDraft:
    """Fields supplied when creating a record (identifier/timestamps are assigned by the store)."""

    name: str
    email: str
    role: Role = Role.EMPLOYEE
    phone: str = ""
    user_id: Optional[str] = None
    created_by: Optional[str] = None


UPDATABLE_FIELDS = frozenset({"name", "email", "phone", "role"})


@dataclass(frozen=True)
class DirectoryStats:
    total: int
    shown: int
    admins: int
    employees: int

    def to_dict(self) -> dict:
        return {"total": self.total, "shown": self.shown, "admins": self.admins, "employees": self.employees}
