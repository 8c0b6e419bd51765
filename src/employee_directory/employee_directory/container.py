from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_STORE_LATENCY_MS
from .database.memory_store import InMemoryDatabase
from .database.seed import ensure_demo_accounts
from .employees.memory_employee_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .store import RecordStore
from .users.memory_user_repository import InMemoryPrincipalRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    db: InMemoryDatabase

    employees_repo: InMemoryEmployeeRepository
    principals_repo: InMemoryPrincipalRepository

    auth_service: AuthService
    employee_service: EmployeeService
    store: RecordStore


def build_container(
    *,
    latency_ms: tuple[int, int] = DEFAULT_STORE_LATENCY_MS,
    seed: bool = True,
) -> Container:
    """Build one store and everything that uses it.

    The database lives as long as the returned container; nothing is kept at
    module level, so every container (e.g. one per test) starts from the seed.
    """
    db = InMemoryDatabase(latency_ms=latency_ms)
    if seed:
        ensure_demo_accounts(db)

    employees_repo = InMemoryEmployeeRepository(db)
    principals_repo = InMemoryPrincipalRepository(db)

    auth_service = AuthService(principals_repo, employees_repo)
    employee_service = EmployeeService(employees_repo, principals_repo)
    store = RecordStore(employee_service, auth_service)

    return Container(
        db=db,
        employees_repo=employees_repo,
        principals_repo=principals_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        store=store,
    )
