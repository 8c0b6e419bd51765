from __future__ import annotations

import asyncio

from src.employee_directory.employee_directory.core.enums import OrderBy, Role
from src.employee_directory.employee_directory.store import ALREADY_EXISTS, NOT_FOUND, VALIDATION


def test_seed_store_has_three_records(store):
    result = asyncio.run(store.list())

    assert result.error is None
    assert [e.email for e in result.data] == [
        "admin@miracle.com",
        "employee1@miracle.com",
        "employee2@miracle.com",
    ]


def test_insert_then_list_includes_new_record(store):
    async def scenario():
        inserted = await store.insert(
            {"name": "Ann Lee", "email": "ann@x.com", "password": "Secret1!", "role": "employee"}
        )
        listed = await store.list()
        return inserted, listed

    inserted, listed = asyncio.run(scenario())

    assert inserted.error is None
    emp = inserted.data
    assert emp.id.startswith("emp-")
    assert emp.created_at is not None and emp.updated_at is not None
    assert len(listed.data) == 4
    new = next(e for e in listed.data if e.id == emp.id)
    assert new.role == Role.EMPLOYEE
    assert new.name == "Ann Lee"


def test_insert_assigns_unique_ids(store):
    async def scenario():
        a = await store.insert({"name": "Ann Lee", "email": "ann@x.com"})
        b = await store.insert({"name": "Ann Lee", "email": "ann@x.com"})
        return a.data, b.data

    a, b = asyncio.run(scenario())
    assert a.id != b.id


def test_insert_normalises_role_and_rejects_unknown(store):
    async def scenario():
        ok = await store.insert({"name": "Ann Lee", "email": "ann@x.com", "role": "Admin"})
        bad = await store.insert({"name": "Bo Ray", "email": "bo@x.com", "role": "manager"})
        return ok, bad

    ok, bad = asyncio.run(scenario())
    assert ok.data.role == Role.ADMIN
    assert bad.error.code == VALIDATION


def test_update_changes_only_supplied_fields(store):
    async def scenario():
        before = (await store.list()).data[1]
        updated = await store.update(before.id, {"name": "X"})
        after = next(e for e in (await store.list()).data if e.id == before.id)
        return before, updated, after

    before, updated, after = asyncio.run(scenario())

    assert updated.error is None
    assert after.name == "X"
    assert after.email == before.email
    assert after.phone == before.phone
    assert after.role == before.role
    assert after.id == before.id
    assert after.created_at == before.created_at
    assert after.updated_at >= before.updated_at


def test_update_ignores_identifier_and_creation_time(store):
    async def scenario():
        before = (await store.list()).data[0]
        result = await store.update(before.id, {"id": "emp-hacked", "created_at": None, "role": "EMPLOYEE"})
        return before, result.data

    before, after = asyncio.run(scenario())
    assert after.id == before.id
    assert after.created_at == before.created_at
    assert after.role == Role.EMPLOYEE


def test_update_unknown_id_is_not_found(store):
    result = asyncio.run(store.update("emp-missing", {"name": "X"}))
    assert result.data is None
    assert result.error.code == NOT_FOUND


def test_delete_removes_record(store):
    async def scenario():
        result = await store.delete("emp-002")
        listed = await store.list()
        return result, listed

    result, listed = asyncio.run(scenario())
    assert result.error is None
    assert "emp-002" not in [e.id for e in listed.data]


def test_delete_twice_reports_not_found(store):
    async def scenario():
        await store.delete("emp-002")
        return await store.delete("emp-002")

    assert asyncio.run(scenario()).error.code == NOT_FOUND


def test_delete_by_email_resolves_to_identifier(store):
    async def scenario():
        result = await store.delete_by_email("EMPLOYEE2@miracle.com")
        listed = await store.list()
        return result, listed

    result, listed = asyncio.run(scenario())
    assert result.error is None
    assert "emp-003" not in [e.id for e in listed.data]


def test_deleted_employee_can_no_longer_sign_in(store):
    async def scenario():
        await store.delete("emp-002")
        return await store.sign_in("employee1@miracle.com", "Employee@123")

    assert asyncio.run(scenario()).error is not None


def test_list_twice_returns_equal_records(store):
    async def scenario():
        return await store.list(), await store.list()

    first, second = asyncio.run(scenario())
    assert first.data == second.data
    assert first.data is not second.data


def test_list_is_a_snapshot(store):
    async def scenario():
        snapshot = (await store.list()).data
        snapshot.clear()
        return await store.list()

    assert len(asyncio.run(scenario()).data) == 3


def test_list_orders_by_name(store):
    async def scenario():
        await store.insert({"name": "aaron Blake", "email": "aaron@x.com"})
        return await store.list(OrderBy.NAME)

    names = [e.name for e in asyncio.run(scenario()).data]
    assert names == ["aaron Blake", "Admin User", "Jane Doe", "John Smith"]


def test_list_rejects_unknown_order(store):
    assert asyncio.run(store.list("salary")).error.code == VALIDATION


def test_sign_up_creates_principal_and_employee(store):
    async def scenario():
        created = await store.sign_up("ann@x.com", "Secret1!", "Ann Lee", "Employee", created_by="admin-001")
        listed = await store.list()
        return created, listed

    created, listed = asyncio.run(scenario())
    assert created.error is None
    user, employee = created.data["user"], created.data["employee"]
    assert employee.user_id == user.user_id
    assert employee.created_by == "admin-001"
    assert employee.role == Role.EMPLOYEE
    assert len(listed.data) == 4


def test_sign_up_existing_email_already_exists(store):
    result = asyncio.run(store.sign_up("Admin@Miracle.com", "Secret1!", "Other Admin", "admin"))
    assert result.error.code == ALREADY_EXISTS
    assert len(asyncio.run(store.list()).data) == 3
