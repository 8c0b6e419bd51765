from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import SessionState
from ..employees.model import Employee


@dataclass(frozen=True)
class Principal:
    """Authenticated identity, linked to its employee record via ``user_id``.

    Note: Only the password hash is kept; plain passwords never leave the sign-up call.
    """

    user_id: str
    email: str
    password_hash: str

    def to_dict(self) -> dict:
        return {"id": self.user_id, "email": self.email}


@dataclass(frozen=True)
class AuthSession:
    """Sign-in state of the running instance: anonymous or authenticated."""

    state: SessionState = SessionState.ANONYMOUS
    principal: Optional[Principal] = None
    employee: Optional[Employee] = None

    @property
    def is_authenticated(self) -> bool:
        return self.state == SessionState.AUTHENTICATED


ANONYMOUS = AuthSession()
