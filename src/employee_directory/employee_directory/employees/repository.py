from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import OrderBy
from .model import Employee, EmployeeDraft


class EmployeeRepository(Protocol):
    """Repository interface for employee records.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    async def list(self, *, order_by: OrderBy = OrderBy.CREATED_AT) -> Sequence[Employee]:
        raise NotImplementedError

    async def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    async def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    async def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        raise NotImplementedError

    async def insert(self, draft: EmployeeDraft) -> Employee:
        raise NotImplementedError

    async def update(self, employee_id: str, changes: Mapping[str, Any]) -> Optional[Employee]:
        """Return the updated record, or ``None`` when the id is unknown."""

        raise NotImplementedError

    async def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError
