from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date, today_local
from ..common.http import date_arg, domain_error_response, ok, unexpected_error_response
from ..common.serializers import history_json, monthly_report_json, snapshot_json
from ..container import Container
from ..core.constants import ALL_CLASSES
from ..core.enums import DayFilter
from ..core.exceptions import DomainError, ValidationError


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    def _monthly_from_args():
        today = today_local()
        try:
            year = int(request.args.get("year") or today.year)
            month = int(request.args.get("month") or today.month)
            day_filter = DayFilter(request.args.get("day") or DayFilter.ALL.value)
        except ValueError:
            raise ValidationError("Parâmetros do relatório inválidos") from None
        class_name = request.args.get("class") or ALL_CLASSES
        return reports.monthly_report(year, month, class_name, day_filter)

    @app.route("/api/dashboard", methods=["GET"], endpoint="api_dashboard")
    def api_dashboard():
        try:
            snapshot = reports.daily_snapshot(date_arg(), request.args.get("class") or ALL_CLASSES)
            return ok({"snapshot": snapshot_json(snapshot)})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("building dashboard")

    @app.route("/api/reports/monthly", methods=["GET"], endpoint="api_monthly_report")
    def api_monthly_report():
        try:
            return ok({"report": monthly_report_json(_monthly_from_args())})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("building monthly report")

    @app.route("/api/reports/monthly.csv", methods=["GET"], endpoint="api_monthly_report_csv")
    def api_monthly_report_csv():
        try:
            report = _monthly_from_args()
            filename = f"presenca_{report.year:04d}_{report.month:02d}.csv"
            return app.response_class(
                reports.monthly_report_csv(report),
                mimetype="text/csv",
                headers={"Content-Disposition": f"attachment; filename={filename}"},
            )
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("exporting monthly report")

    @app.route("/api/students/<int:student_id>/history", methods=["GET"], endpoint="api_student_history")
    def api_student_history(student_id: int):
        try:
            end = date_arg("end")
            start_s = request.args.get("start")
            start = parse_iso_date(start_s) if start_s else end.replace(month=1, day=1)
            history = reports.attendance_history(student_id, start, end)
            return ok({"history": history_json(history)})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("building attendance history")
