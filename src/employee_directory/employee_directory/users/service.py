from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty
from ..core.enums import Role, SessionState
from ..core.exceptions import AlreadyExistsError, AuthenticationError
from ..employees.model import Employee, EmployeeDraft
from ..employees.repository import EmployeeRepository
from .model import ANONYMOUS, AuthSession, Principal
from .repository import PrincipalRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: sign up, sign in and sign out.

    Holds the single sign-in session of the running instance:
    anonymous -> (sign_in) -> authenticated -> (sign_out) -> anonymous.
    A failed sign-in leaves the session untouched.
    """

    def __init__(self, principals: PrincipalRepository, employees: EmployeeRepository):
        self._principals = principals
        self._employees = employees
        self._session: AuthSession = ANONYMOUS

    @property
    def session(self) -> AuthSession:
        return self._session

    async def sign_in(self, email: str, password: str) -> AuthSession:
        principal = await self._principals.get_by_email(email)
        if not principal:
            logger.warning("sign-in rejected: unknown email")
            raise AuthenticationError("Invalid login credentials")

        try:
            ok = check_password_hash(principal.password_hash, password or "")
        except ValueError:
            # unknown hash method in a stored value
            ok = False

        if not ok:
            logger.warning("sign-in rejected for %s", principal.user_id)
            raise AuthenticationError("Invalid login credentials")

        employee = await self._employees.get_by_user_id(principal.user_id)
        self._session = AuthSession(state=SessionState.AUTHENTICATED, principal=principal, employee=employee)
        logger.info("signed in %s", principal.user_id)
        return self._session

    async def sign_out(self) -> AuthSession:
        if self._session.is_authenticated:
            logger.info("signed out %s", self._session.principal.user_id)
        self._session = ANONYMOUS
        return self._session

    def end_session_for(self, user_id: Optional[str]) -> None:
        """Drop the session when the principal behind it was removed."""
        if user_id and self._session.is_authenticated and self._session.principal.user_id == user_id:
            logger.info("session of removed principal %s ended", user_id)
            self._session = ANONYMOUS

    async def sign_up(
        self,
        *,
        email: str,
        password: str,
        name: str,
        role: Role | str,
        phone: str = "",
        created_by: Optional[str] = None,
    ) -> tuple[Principal, Employee]:
        """Create a principal and its employee record together.

        If the employee insert fails the principal is removed again, so callers
        never observe one without the other.
        """
        email = require_non_empty(email, "Email")
        role = Role.parse(role)

        if await self._principals.get_by_email(email):
            raise AlreadyExistsError("User already exists")

        principal = await self._principals.create(email=email, password_hash=generate_password_hash(password))
        try:
            employee = await self._employees.insert(
                EmployeeDraft(
                    name=name.strip(),
                    email=principal.email,
                    phone=(phone or "").strip(),
                    role=role,
                    user_id=principal.user_id,
                    created_by=created_by or principal.user_id,
                )
            )
        except Exception:
            await self._principals.delete_by_user_id(principal.user_id)
            raise

        logger.info("signed up %s as %s (%s)", principal.user_id, employee.id, role.value)
        return principal, employee
