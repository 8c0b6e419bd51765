from __future__ import annotations

import logging

from flask import Flask, request, session

from ..common.http import admin_required, fail, login_required, ok, request_data, status_for
from ..container import Container
from ..core.enums import OrderBy
from ..core.exceptions import ValidationError
from ..forms.add_employee import AddEmployeeForm
from ..forms.update_employee import UpdateEmployeeForm
from .service import ALL_ROLES, EmployeeService

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    async def admin_employees():
        term = request.args.get("q", "")
        role = request.args.get("role", ALL_ROLES)
        order = request.args.get("order", OrderBy.CREATED_AT.value)

        result = await store.list(order)
        if result.error:
            return fail(result.error.message, status_for(result.error.code))

        try:
            shown = EmployeeService.search(result.data, term, role)
        except ValidationError as e:
            return fail(str(e), 400)

        return ok(
            employees=[e.to_dict() for e in shown],
            stats=EmployeeService.stats(result.data, shown).to_dict(),
        )

    @app.route("/admin/employees", methods=["POST"], endpoint="add_employee")
    @admin_required
    async def add_employee():
        form = AddEmployeeForm(store, created_by=session.get("user_id"))
        form.update_fields(request_data(request))

        added = []
        form.on_success = added.append
        if not await form.submit():
            if form.errors:
                return fail("Please fix the highlighted fields", 400, errors=form.errors)
            return fail(form.banner, status_for(form.error_code))

        return ok(201, message=form.success, employee=added[0].to_dict())

    @app.route("/admin/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @admin_required
    async def get_employee(employee_id: str):
        result = await store.get(employee_id)
        if result.error:
            return fail(result.error.message, status_for(result.error.code))
        return ok(employee=result.data.to_dict())

    @app.route("/admin/employees/<employee_id>", methods=["PUT", "PATCH"], endpoint="update_employee")
    @admin_required
    async def update_employee(employee_id: str):
        selected = await store.get(employee_id)
        if selected.error:
            return fail(selected.error.message, status_for(selected.error.code))

        # fields left out of the request keep their current values
        form = UpdateEmployeeForm(store, selected.data)
        form.update_fields(request_data(request))

        if not await form.submit():
            if form.errors:
                return fail("Please fix the highlighted fields", 400, errors=form.errors)
            return fail(form.banner, status_for(form.error_code))

        if form.selected.id == session.get("employee_id"):
            session["name"] = form.selected.name
            session["role"] = form.selected.role.value
        return ok(message=form.success, employee=form.selected.to_dict())

    @app.route("/admin/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    async def delete_employee(employee_id: str):
        if employee_id == session.get("employee_id"):
            return fail("You cannot delete your own account", 403)

        result = await store.delete(employee_id)
        if result.error:
            return fail(result.error.message, status_for(result.error.code))
        logger.info("employee %s deleted by %s", employee_id, session.get("user_id"))
        return ok(message="Employee deleted.")

    @app.route("/portal", methods=["GET"], endpoint="portal")
    @login_required
    async def portal():
        profile = await store.get_for_user(session["user_id"])
        if profile.error:
            return fail(profile.error.message, status_for(profile.error.code))

        team = await store.team()
        if team.error:
            return fail(team.error.message, status_for(team.error.code))

        return ok(profile=profile.data.to_dict(), team=[e.to_dict() for e in team.data])
