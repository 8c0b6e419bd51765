"""Data-access contract consumed by the forms and controllers.

Every operation is a coroutine returning a :class:`StoreResult`. Domain
failures come back as a :class:`StoreError` instead of being raised, so a
caller only has to look at ``result.error``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Mapping, Optional, TypeVar

from .core.constants import GENERIC_ERROR_MESSAGE
from .core.enums import OrderBy, Role
from .core.exceptions import (
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .employees.model import Employee
from .employees.service import EmployeeService
from .users.model import AuthSession
from .users.service import AuthService

logger = logging.getLogger(__name__)

T = TypeVar("T")

NOT_FOUND = "not_found"
ALREADY_EXISTS = "already_exists"
INVALID_CREDENTIALS = "invalid_credentials"
FORBIDDEN = "forbidden"
VALIDATION = "validation"
UNEXPECTED = "unexpected"

_ERROR_CODES: tuple[tuple[type[DomainError], str], ...] = (
    (NotFoundError, NOT_FOUND),
    (AlreadyExistsError, ALREADY_EXISTS),
    (AuthenticationError, INVALID_CREDENTIALS),
    (AuthorizationError, FORBIDDEN),
    (ValidationError, VALIDATION),
)


@dataclass(frozen=True)
class StoreError:
    code: str
    message: str


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    data: Optional[T] = None
    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _error_for(exc: DomainError) -> StoreError:
    for exc_type, code in _ERROR_CODES:
        if isinstance(exc, exc_type):
            return StoreError(code=code, message=str(exc))
    return StoreError(code=UNEXPECTED, message=str(exc) or GENERIC_ERROR_MESSAGE)


class RecordStore:
    """Facade over the employee and auth services with result-or-error returns."""

    def __init__(self, employees: EmployeeService, auth: AuthService):
        self._employees = employees
        self._auth = auth

    @property
    def session(self) -> AuthSession:
        return self._auth.session

    async def _run(self, op: str, call: Awaitable[T]) -> StoreResult[T]:
        try:
            return StoreResult(data=await call)
        except DomainError as e:
            logger.warning("%s failed: %s", op, e)
            return StoreResult(error=_error_for(e))
        except Exception:
            logger.exception("%s failed unexpectedly", op)
            return StoreResult(error=StoreError(code=UNEXPECTED, message=GENERIC_ERROR_MESSAGE))

    async def list(self, order_by: OrderBy | str = OrderBy.CREATED_AT) -> StoreResult[list[Employee]]:
        return await self._run("list", self._employees.list(order_by=order_by))

    async def get(self, employee_id: str) -> StoreResult[Employee]:
        return await self._run("get", self._employees.get(employee_id))

    async def get_for_user(self, user_id: str) -> StoreResult[Employee]:
        return await self._run("get_for_user", self._employees.get_for_user(user_id))

    async def insert(self, fields: Mapping[str, Any], *, created_by: Optional[str] = None) -> StoreResult[Employee]:
        return await self._run("insert", self._employees.insert(fields, created_by=created_by))

    async def update(self, employee_id: str, fields: Mapping[str, Any]) -> StoreResult[Employee]:
        return await self._run("update", self._employees.update(employee_id, fields))

    async def delete(self, employee_id: str) -> StoreResult[None]:
        async def _delete() -> None:
            removed = await self._employees.delete(employee_id)
            self._auth.end_session_for(removed.user_id)

        return await self._run("delete", _delete())

    async def delete_by_email(self, email: str) -> StoreResult[None]:
        async def _delete_by_email() -> None:
            removed = await self._employees.delete_by_email(email)
            self._auth.end_session_for(removed.user_id)

        return await self._run("delete_by_email", _delete_by_email())

    async def team(self) -> StoreResult[list[Employee]]:
        return await self._run("team", self._employees.team_for())

    async def sign_up(
        self,
        email: str,
        password: str,
        name: str,
        role: Role | str = Role.EMPLOYEE,
        *,
        phone: str = "",
        created_by: Optional[str] = None,
    ) -> StoreResult[dict]:
        async def _sign_up() -> dict:
            principal, employee = await self._auth.sign_up(
                email=email,
                password=password,
                name=name,
                role=role,
                phone=phone,
                created_by=created_by,
            )
            return {"user": principal, "employee": employee}

        return await self._run("sign_up", _sign_up())

    async def sign_in(self, email: str, password: str) -> StoreResult[dict]:
        async def _sign_in() -> dict:
            session = await self._auth.sign_in(email, password)
            return {"user": session.principal, "employee": session.employee}

        return await self._run("sign_in", _sign_in())

    async def sign_out(self) -> StoreResult[None]:
        async def _sign_out() -> None:
            await self._auth.sign_out()

        return await self._run("sign_out", _sign_out())
