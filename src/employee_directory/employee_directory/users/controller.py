from __future__ import annotations

import logging

from flask import Flask, request, session

from ..common.http import fail, login_required, ok, request_data, status_for
from ..container import Container
from ..forms.login import LoginForm

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    store = container.store

    @app.route("/login", methods=["POST"], endpoint="login")
    async def login():
        form = LoginForm(store)
        form.update_fields(request_data(request))

        if not await form.submit():
            if form.errors:
                return fail("Please fix the highlighted fields", 400, errors=form.errors)
            return fail(form.banner, status_for(form.error_code))

        s = store.session
        employee = s.employee
        session.clear()
        session["user_id"] = s.principal.user_id
        session["email"] = s.principal.email
        session["employee_id"] = employee.id if employee else None
        session["name"] = employee.name if employee else s.principal.email
        session["role"] = employee.role.value if employee else None

        return ok(
            message="Signed in successfully!",
            user=s.principal.to_dict(),
            employee=employee.to_dict() if employee else None,
        )

    @app.route("/logout", methods=["POST"], endpoint="logout")
    async def logout():
        await store.sign_out()
        session.clear()
        return ok(message="Signed out.")

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    async def me():
        result = await store.get_for_user(session["user_id"])
        if result.error:
            return fail(result.error.message, status_for(result.error.code))
        return ok(employee=result.data.to_dict())
