from __future__ import annotations

import asyncio

from src.employee_directory.employee_directory.core.constants import GENERIC_ERROR_MESSAGE
from src.employee_directory.employee_directory.core.enums import Role
from src.employee_directory.employee_directory.forms.add_employee import AddEmployeeForm
from src.employee_directory.employee_directory.forms.login import LoginForm
from src.employee_directory.employee_directory.forms.update_employee import UpdateEmployeeForm
from src.employee_directory.employee_directory.store import StoreError, StoreResult


class ExplodingStore:
    """Fake store whose calls fail the way an unreliable backend would."""

    def __init__(self):
        self.calls = 0

    async def sign_up(self, *args, **kwargs):
        self.calls += 1
        raise RuntimeError("connection reset")

    async def update(self, *args, **kwargs):
        self.calls += 1
        return StoreResult(error=StoreError(code="unexpected", message="db exploded"))


def _fill_valid(form):
    form.update_fields(
        {"name": "Ann Lee", "email": "ann@x.com", "phone": "9876543210", "role": "employee", "password": "Secret1!"}
    )


def test_keystroke_sets_and_clears_field_error(store):
    form = AddEmployeeForm(store)

    form.set_field("name", "a")
    assert "name" in form.errors

    form.set_field("name", "Ann")
    assert "name" not in form.errors


def test_invalid_submit_never_reaches_store():
    fake = ExplodingStore()
    form = AddEmployeeForm(fake)
    form.update_fields({"name": "1bob", "email": "bad", "password": "abcdefgh"})

    assert asyncio.run(form.submit()) is False
    assert set(form.errors) == {"name", "email", "password"}
    assert fake.calls == 0


def test_add_employee_success_notifies_and_resets(store):
    seen = []
    form = AddEmployeeForm(store, created_by="admin-001", on_success=seen.append)
    _fill_valid(form)

    assert asyncio.run(form.submit()) is True
    assert form.success == "Employee added successfully!"
    assert form.values["name"] == ""
    assert form.values["role"] == Role.EMPLOYEE.value
    assert seen[0].email == "ann@x.com"
    assert seen[0].created_by == "admin-001"
    assert len(asyncio.run(store.list()).data) == 4


def test_add_employee_accepts_async_callback(store):
    seen = []

    async def refresh(employee):
        seen.append(employee.id)

    form = AddEmployeeForm(store, on_success=refresh)
    _fill_valid(form)

    assert asyncio.run(form.submit()) is True
    assert len(seen) == 1


def test_add_existing_email_shows_banner(store):
    form = AddEmployeeForm(store)
    _fill_valid(form)
    form.set_field("email", "admin@miracle.com")

    assert asyncio.run(form.submit()) is False
    assert form.banner == "User already exists"
    assert form.errors == {}
    assert form.values["email"] == "admin@miracle.com"


def test_unexpected_store_exception_shows_generic_banner():
    form = AddEmployeeForm(ExplodingStore())
    _fill_valid(form)

    assert asyncio.run(form.submit()) is False
    assert form.banner == GENERIC_ERROR_MESSAGE
    assert form.loading is False


def test_update_form_prefills_from_selection(store):
    employee = asyncio.run(store.get("emp-002")).data
    form = UpdateEmployeeForm(store, employee)

    assert form.values == {
        "name": "John Smith",
        "email": "employee1@miracle.com",
        "phone": employee.phone,
        "role": "employee",
    }


def test_update_form_without_selection(store):
    form = UpdateEmployeeForm(store)

    assert asyncio.run(form.submit()) is False
    assert form.banner == "No employee selected"


def test_update_form_commits_changes(store):
    employee = asyncio.run(store.get("emp-002")).data
    refreshed = []
    form = UpdateEmployeeForm(store, employee, on_success=refreshed.append)
    form.set_field("name", "John Smyth")
    form.set_field("role", "Admin")

    assert asyncio.run(form.submit()) is True
    stored = asyncio.run(store.get("emp-002")).data
    assert stored.name == "John Smyth"
    assert stored.role == Role.ADMIN
    assert stored.email == employee.email
    assert refreshed == [stored]
    assert form.selected == stored


def test_update_form_blocks_bad_phone(store):
    employee = asyncio.run(store.get("emp-002")).data
    form = UpdateEmployeeForm(store, employee)
    form.set_field("phone", "12345")

    assert asyncio.run(form.submit()) is False
    assert "phone" in form.errors
    assert asyncio.run(store.get("emp-002")).data.phone == employee.phone


def test_update_form_store_failure_uses_generic_banner(store):
    employee = asyncio.run(store.get("emp-002")).data
    form = UpdateEmployeeForm(ExplodingStore(), employee)

    assert asyncio.run(form.submit()) is False
    assert form.banner == GENERIC_ERROR_MESSAGE


def test_login_form(store):
    form = LoginForm(store)
    form.update_fields({"email": "admin@miracle.com", "password": "wrong"})
    assert asyncio.run(form.submit()) is False
    assert form.banner == "Invalid login credentials"

    form.set_field("password", "Admin@123456")
    assert asyncio.run(form.submit()) is True
    assert store.session.is_authenticated
    assert form.values["password"] == ""


def test_set_field_keeps_values_as_text(store):
    form = AddEmployeeForm(store)

    assert form.set_field("phone", 9876543210) is None
    assert form.values["phone"] == "9876543210"

    form.set_field("email", None)
    assert form.values["email"] == ""
    assert "email" in form.errors
