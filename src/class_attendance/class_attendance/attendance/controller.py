from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_iso_date
from ..common.http import (
    bool_field,
    date_field,
    domain_error_response,
    int_field,
    json_body,
    ok,
    unexpected_error_response,
)
from ..common.serializers import attendance_json
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    ledger = container.ledger

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance")
    def api_attendance():
        """Single attendance event: {studentId, date, present, day?}.

        A client-sent day tag is ignored; the server classifies the date.
        """

        try:
            data = json_body()
            student_id = int_field(data, "studentId", "Aluno")
            class_date = date_field(data)
            present = bool_field(data, "present")

            record = ledger.set_presence(student_id, class_date, present)
            message = "Presença marcada!" if present else "Presença desmarcada."
            return ok({"message": message, "attendance": attendance_json(record)})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("updating attendance")

    @app.route("/api/dismissal", methods=["POST"], endpoint="api_dismissal")
    def api_dismissal():
        try:
            data = json_body()
            student_id = int_field(data, "studentId", "Aluno")
            class_date = date_field(data)
            responsible = data.get("responsibleName")

            record = ledger.record_dismissal(student_id, responsible, class_date)
            return ok(
                {
                    "message": f"Saída registrada para {record.dismissed_by}.",
                    "attendance": attendance_json(record),
                }
            )
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("recording dismissal")

    @app.route("/api/attendance/<int:student_id>/<date_s>", methods=["GET"], endpoint="api_attendance_on")
    def api_attendance_on(student_id: int, date_s: str):
        try:
            record = ledger.attendance_on(student_id, parse_iso_date(date_s))
            return ok({"attendance": attendance_json(record)})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("reading attendance")
