from __future__ import annotations

from typing import Optional

from ..common.validators import FieldViolation
from ..core.enums import FieldError
from ..store import StoreResult
from .base import FormController


def _required(label: str):
    def check(raw: Optional[str]) -> Optional[FieldViolation]:
        if not (raw or "").strip():
            return FieldViolation(FieldError.REQUIRED, f"{label} is required")
        return None

    return check


class LoginForm(FormController):
    """Sign-in only checks presence; strength rules apply when the password is created."""

    validators = {"email": _required("Email"), "password": _required("Password")}
    initial = {"email": "", "password": ""}
    success_message = "Signed in"

    async def _commit(self) -> StoreResult:
        return await self._store.sign_in(self.values["email"].strip(), self.values["password"])

    def _on_committed(self, data):
        self.values["password"] = ""
        return data
