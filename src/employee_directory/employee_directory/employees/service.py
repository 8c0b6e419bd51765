from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..core.enums import OrderBy, Role
from ..core.exceptions import NotFoundError, ValidationError
from ..users.repository import PrincipalRepository
from .model import DirectoryStats, Employee, EmployeeDraft
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

ALL_ROLES = "all"


class EmployeeService:
    """Use case: list and maintain employee records (admin grid, portal)."""

    def __init__(self, employees: EmployeeRepository, principals: Optional[PrincipalRepository] = None):
        self._employees = employees
        self._principals = principals

    async def list(self, *, order_by: OrderBy | str = OrderBy.CREATED_AT) -> list[Employee]:
        try:
            key = OrderBy(order_by)
        except ValueError:
            raise ValidationError(f"Cannot order by {order_by!r}")
        return list(await self._employees.list(order_by=key))

    async def get(self, employee_id: str) -> Employee:
        employee = await self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    async def get_for_user(self, user_id: str) -> Employee:
        employee = await self._employees.get_by_user_id(user_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    async def insert(self, fields: Mapping[str, Any], *, created_by: Optional[str] = None) -> Employee:
        """Store a new record. Field rules are the form's job; only the role is normalised here."""
        draft = EmployeeDraft(
            name=str(fields.get("name") or "").strip(),
            email=str(fields.get("email") or "").strip(),
            phone=str(fields.get("phone") or "").strip(),
            role=Role.parse(fields.get("role") or Role.EMPLOYEE.value),
            user_id=fields.get("user_id"),
            created_by=created_by,
        )
        employee = await self._employees.insert(draft)
        logger.info("inserted employee %s", employee.id)
        return employee

    async def update(self, employee_id: str, fields: Mapping[str, Any]) -> Employee:
        changes = dict(fields)
        if "role" in changes:
            changes["role"] = Role.parse(changes["role"])
        for key in ("name", "email", "phone"):
            if isinstance(changes.get(key), str):
                changes[key] = changes[key].strip()

        updated = await self._employees.update(employee_id, changes)
        if not updated:
            raise NotFoundError("Employee not found")
        logger.info("updated employee %s", employee_id)
        return updated

    async def delete(self, employee_id: str) -> Employee:
        employee = await self._employees.get_by_id(employee_id)
        if not employee or not await self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")

        # the login goes together with the directory entry
        if employee.user_id and self._principals is not None:
            await self._principals.delete_by_user_id(employee.user_id)
        logger.info("deleted employee %s", employee_id)
        return employee

    async def delete_by_email(self, email: str) -> Employee:
        employee = await self._employees.get_by_email(email)
        if not employee:
            raise NotFoundError("Employee not found")
        return await self.delete(employee.id)

    async def team_for(self) -> list[Employee]:
        """Portal listing: everyone, ordered by name."""
        return await self.list(order_by=OrderBy.NAME)

    @staticmethod
    def search(employees: Sequence[Employee], term: str = "", role: str = ALL_ROLES) -> list[Employee]:
        """Grid filter: substring match on name/email/role plus an optional role filter."""
        needle = (term or "").strip().lower()
        role_filter = (role or ALL_ROLES).strip().lower()
        wanted = None if role_filter == ALL_ROLES else Role.parse(role_filter)

        out: list[Employee] = []
        for e in employees:
            if wanted is not None and e.role != wanted:
                continue
            if needle and not (
                needle in e.name.lower() or needle in e.email.lower() or needle in e.role.value
            ):
                continue
            out.append(e)
        return out

    @staticmethod
    def stats(all_employees: Sequence[Employee], shown: Sequence[Employee]) -> DirectoryStats:
        admins = sum(1 for e in all_employees if e.role == Role.ADMIN)
        return DirectoryStats(
            total=len(all_employees),
            shown=len(shown),
            admins=admins,
            employees=len(all_employees) - admins,
        )
