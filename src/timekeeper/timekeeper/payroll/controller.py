from __future__ import annotations

from flask import Flask, g

from ..common.web import make_guards, ok, payload
from ..container import Container
from ..core.constants import EXPORT_FILENAME


def register(app: Flask, container: Container) -> None:
    _, admin_required = make_guards(container)

    @app.route("/admin/logs", methods=["GET"], endpoint="admin_logs")
    @admin_required
    def admin_logs():
        return ok(logs=container.payroll_report_service.list_logs(current=g.current_user))

    @app.route("/admin/pay-settings", methods=["GET"], endpoint="get_pay_settings")
    @admin_required
    def get_pay_settings():
        settings = container.pay_settings_service.get()
        return ok(startDays=list(settings.start_days))

    @app.route("/admin/pay-settings", methods=["POST"], endpoint="save_pay_settings")
    @admin_required
    def save_pay_settings():
        data = payload()
        settings = container.pay_settings_service.save_start_days(
            current=g.current_user,
            value=data.get("startDays", ""),
        )
        return ok(message="Pay period settings saved.", startDays=list(settings.start_days))

    @app.route("/admin/summary", methods=["GET"], endpoint="admin_summary")
    @admin_required
    def admin_summary():
        rows = container.payroll_report_service.generate_summary(current=g.current_user)
        return ok(summary=[r.to_dict() for r in rows])

    @app.route("/admin/summary.csv", methods=["GET"], endpoint="admin_summary_csv")
    @admin_required
    def admin_summary_csv():
        csv_text = container.payroll_report_service.export_summary_csv(current=g.current_user)
        return app.response_class(
            csv_text.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
        )
