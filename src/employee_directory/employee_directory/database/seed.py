from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import now_utc
from ..core.enums import Role
from ..employees.model import Employee
from ..users.model import Principal
from .memory_store import InMemoryDatabase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedAccount:
    user_id: str
    employee_id: str
    name: str
    email: str
    password: str
    phone: str
    role: Role


DEMO_ACCOUNTS = (
    SeedAccount("admin-001", "emp-001", "Admin User", "admin@miracle.com", "Admin@123456", "+1 555 010 0100", Role.ADMIN),
    SeedAccount("emp1-001", "emp-002", "John Smith", "employee1@miracle.com", "Employee@123", "+1 555 010 0101", Role.EMPLOYEE),
    SeedAccount("emp2-001", "emp-003", "Jane Doe", "employee2@miracle.com", "Employee@123", "+1 555 010 0102", Role.EMPLOYEE),
)


def ensure_demo_accounts(db: InMemoryDatabase) -> None:
    """Insert the demo principals/employees that are not present yet."""
    created_at = now_utc()
    for account in DEMO_ACCOUNTS:
        key = account.email.lower()
        if key in db.principals:
            continue
        db.principals[key] = Principal(
            user_id=account.user_id,
            email=account.email,
            password_hash=generate_password_hash(account.password),
        )
        db.employees.append(
            Employee(
                id=account.employee_id,
                user_id=account.user_id,
                name=account.name,
                email=account.email,
                phone=account.phone,
                role=account.role,
                created_at=created_at,
                updated_at=created_at,
            )
        )
    logger.info("demo accounts ready (employees=%d)", len(db.employees))
