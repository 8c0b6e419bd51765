from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..core.enums import OrderBy, Role
from ..database.memory_store import InMemoryDatabase, db_call
from .model import UPDATABLE_FIELDS, Employee, EmployeeDraft
from .repository import EmployeeRepository


def _sort_key(order_by: OrderBy):
    if order_by == OrderBy.NAME:
        return lambda e: (e.name.lower(), e.id)
    return lambda e: (e.created_at, e.id)


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self, db: InMemoryDatabase):
        self._db = db

    def _find_index(self, employee_id: str) -> int:
        for i, e in enumerate(self._db.employees):
            if e.id == employee_id:
                return i
        return -1

    async def list(self, *, order_by: OrderBy = OrderBy.CREATED_AT) -> Sequence[Employee]:
        async with db_call(self._db) as db:
            # Employee is frozen, so a new list is enough for a snapshot
            return sorted(db.employees, key=_sort_key(OrderBy(order_by)))

    async def get_by_id(self, employee_id: str) -> Optional[Employee]:
        async with db_call(self._db) as db:
            return next((e for e in db.employees if e.id == employee_id), None)

    async def get_by_email(self, email: str) -> Optional[Employee]:
        needle = (email or "").strip().lower()
        async with db_call(self._db) as db:
            return next((e for e in db.employees if e.email.lower() == needle), None)

    async def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        async with db_call(self._db) as db:
            return next((e for e in db.employees if user_id and e.user_id == user_id), None)

    async def insert(self, draft: EmployeeDraft) -> Employee:
        async with db_call(self._db) as db:
            stamp = now_utc()
            employee = Employee(
                id=db.next_id("emp"),
                user_id=draft.user_id,
                name=draft.name,
                email=draft.email,
                phone=draft.phone or "",
                role=Role.parse(draft.role),
                created_at=stamp,
                updated_at=stamp,
                created_by=draft.created_by,
            )
            db.employees.append(employee)
            return employee

    async def update(self, employee_id: str, changes: Mapping[str, Any]) -> Optional[Employee]:
        async with db_call(self._db) as db:
            index = self._find_index(employee_id)
            if index < 0:
                return None

            patch = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
            if "role" in patch:
                patch["role"] = Role.parse(patch["role"])
            if "phone" in patch:
                patch["phone"] = patch["phone"] or ""

            updated = db.employees[index].with_changes(updated_at=now_utc(), **patch)
            db.employees[index] = updated
            return updated

    async def delete_by_id(self, employee_id: str) -> bool:
        async with db_call(self._db) as db:
            index = self._find_index(employee_id)
            if index < 0:
                return False
            del db.employees[index]
            return True
