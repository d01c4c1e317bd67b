from __future__ import annotations

from dataclasses import asdict

from flask import Flask, g, session

from ..common.web import make_guards, ok, payload
from ..container import Container
from ..core.enums import Role


def _employee_row(account) -> dict:
    return {
        "username": account.username,
        "hourlyRate": account.hourly_rate,
        "shiftStart": account.shift_start,
        "shiftEnd": account.shift_end,
    }


def register(app: Flask, container: Container) -> None:
    login_required, admin_required = make_guards(container)

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = payload()
        s_user = container.auth_service.authenticate(
            data.get("username", ""),
            data.get("password", ""),
            data.get("role", ""),
        )
        session.clear()
        session["username"] = s_user.username
        session["role"] = s_user.role.value
        return ok(username=s_user.username, role=s_user.role.value)

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok()

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        current = g.current_user
        data = {"username": current.username, "role": current.role.value}
        if current.role == Role.EMPLOYEE:
            status = container.punch_service.status(current)
            data["shiftInfo"] = current.shift_info
            data["punch"] = {**asdict(status), "state": status.state.value}
        return ok(**data)

    @app.route("/admin/employees", methods=["GET"], endpoint="list_employees")
    @admin_required
    def list_employees():
        employees = container.account_service.list_employees(current=g.current_user)
        return ok(employees=[_employee_row(a) for a in employees])

    @app.route("/admin/employees", methods=["POST"], endpoint="add_employee")
    @admin_required
    def add_employee():
        data = payload()
        account = container.account_service.add_employee(
            current=g.current_user,
            username=data.get("username", ""),
            password=data.get("password", ""),
            hourly_rate=data.get("hourlyRate"),
            shift_start=data.get("shiftStart", ""),
            shift_end=data.get("shiftEnd", ""),
        )
        return ok(employee=_employee_row(account)), 201

    @app.route("/admin/employees/<username>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(username: str):
        removed = container.account_service.delete_employee(current=g.current_user, username=username)
        return ok(removedLogs=removed)
