from __future__ import annotations

from flask import Flask, g

from ..common.datetime_utils import format_hours
from ..common.web import make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container)

    @app.route("/punch/in", methods=["POST"], endpoint="punch_in")
    @login_required
    def punch_in():
        punch = container.punch_service.punch_in(g.current_user)
        return ok(message=f"You punched in at {punch.punch_in}.", punchIn=punch.punch_in)

    @app.route("/punch/out", methods=["POST"], endpoint="punch_out")
    @login_required
    def punch_out():
        entry = container.punch_service.punch_out(g.current_user)
        hours = format_hours(entry.minutes_worked)
        return ok(
            message=f"You punched out at {entry.punch_out}. Total worked: {hours} hours.",
            entry=entry.to_dict(),
        )

    @app.route("/me/history", methods=["GET"], endpoint="me_history")
    @login_required
    def me_history():
        rows = container.payroll_report_service.history_rows(current=g.current_user)
        return ok(history=rows)
