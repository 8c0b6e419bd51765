from __future__ import annotations

from typing import Optional

from ..common.validators import validate_email, validate_name, validate_phone, validate_role
from ..employees.model import Employee
from ..store import RecordStore, StoreResult
from .base import FormController, SuccessCallback


class UpdateEmployeeForm(FormController):
    """Edits the selected record; the password is not editable here."""

    validators = {
        "name": validate_name,
        "email": validate_email,
        "phone": validate_phone,
        "role": validate_role,
    }
    initial = {"name": "", "email": "", "phone": "", "role": ""}
    success_message = "Employee updated successfully!"

    def __init__(
        self,
        store: RecordStore,
        selected: Optional[Employee] = None,
        *,
        on_success: Optional[SuccessCallback] = None,
    ):
        super().__init__(store, on_success=on_success)
        self.selected: Optional[Employee] = None
        self.select(selected)

    def select(self, employee: Optional[Employee]) -> None:
        """Prefill from ``employee`` and clear messages left from a previous selection."""
        self.selected = employee
        self.errors = {}
        self.banner = ""
        self.success = ""
        if employee is None:
            self.values = dict(self.initial)
            return
        self.values = {
            "name": employee.name,
            "email": employee.email,
            "phone": employee.phone or "",
            "role": employee.role.value,
        }

    async def submit(self) -> bool:
        if self.selected is None:
            self.success = ""
            self.banner = "No employee selected"
            return False
        return await super().submit()

    async def _commit(self) -> StoreResult:
        return await self._store.update(
            self.selected.id,
            {k: self.values[k] for k in ("name", "email", "phone", "role")},
        )

    def _on_committed(self, data: Employee) -> Employee:
        self.selected = data
        return data
