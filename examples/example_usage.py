"""Example: drive the forms and the store directly (no Flask).

Controllers are a thin layer; the same forms and store work from plain asyncio.
"""

import asyncio

from src.employee_directory.employee_directory.container import build_container
from src.employee_directory.employee_directory.forms.add_employee import AddEmployeeForm


async def main():
    store = build_container().store

    await store.sign_in("admin@miracle.com", "Admin@123456")
    form = AddEmployeeForm(store, created_by=store.session.principal.user_id)
    form.update_fields({"name": "Ann Lee", "email": "ann@x.com", "password": "Secret1!"})
    if not await form.submit():
        print(form.errors or form.banner)

    result = await store.list()
    for employee in result.data:
        print(employee.id, employee.name, employee.role.value)


if __name__ == "__main__":
    asyncio.run(main())
