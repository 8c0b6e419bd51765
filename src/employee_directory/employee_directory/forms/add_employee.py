from __future__ import annotations

from typing import Optional

from ..common.validators import (
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
    validate_role,
)
from ..core.enums import Role
from ..store import RecordStore, StoreResult
from .base import FormController, SuccessCallback


class AddEmployeeForm(FormController):
    """Creates a login and its employee record in one submission."""

    validators = {
        "name": validate_name,
        "email": validate_email,
        "phone": validate_phone,
        "role": validate_role,
        "password": validate_password,
    }
    initial = {"name": "", "email": "", "phone": "", "role": Role.EMPLOYEE.value, "password": ""}
    success_message = "Employee added successfully!"

    def __init__(
        self,
        store: RecordStore,
        *,
        created_by: Optional[str] = None,
        on_success: Optional[SuccessCallback] = None,
    ):
        super().__init__(store, on_success=on_success)
        self.created_by = created_by

    async def _commit(self) -> StoreResult:
        v = self.values
        return await self._store.sign_up(
            v["email"].strip(),
            v["password"],
            v["name"].strip(),
            Role.parse(v["role"]),
            phone=v["phone"].strip(),
            created_by=self.created_by,
        )

    def _on_committed(self, data):
        self.reset()
        return data["employee"]
