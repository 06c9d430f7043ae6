from __future__ import annotations

from flask import Flask, request

from ..calendar.classifier import require_class_day
from ..common.http import (
    date_field,
    domain_error_response,
    json_body,
    ok,
    unexpected_error_response,
)
from ..common.serializers import attendance_json, student_json
from ..container import Container
from ..core.constants import ALL_CLASSES
from ..core.enums import StudentType
from ..core.exceptions import DomainError, ValidationError

_WIRE_TO_FIELD = {
    "name": "name",
    "class": "class_name",
    "age": "age",
    "guardianName": "guardian_name",
    "phone": "phone",
}


def _roster_fields(data: dict, *, partial: bool = False) -> dict:
    """Translate wire keys; a partial update keeps only the keys sent."""
    return {field: data.get(wire) for wire, field in _WIRE_TO_FIELD.items() if not partial or wire in data}


def register(app: Flask, container: Container) -> None:
    students = container.student_service

    @app.route("/api/students", methods=["GET"], endpoint="api_students")
    def api_students():
        try:
            type_arg = request.args.get("type")
            try:
                student_type = StudentType(type_arg) if type_arg else None
            except ValueError:
                raise ValidationError("Tipo de aluno inválido") from None

            found = students.search(
                request.args.get("q", ""),
                class_name=request.args.get("class", ALL_CLASSES),
                student_type=student_type,
            )
            return ok({"students": [student_json(s) for s in found]})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("listing students")

    @app.route("/api/students", methods=["POST"], endpoint="api_students_create")
    def api_students_create():
        try:
            student = students.create_member(**_roster_fields(json_body()))
            return ok({"message": f"{student.name} foi adicionado como Membro.", "student": student_json(student)}, 201)
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("creating student")

    @app.route("/api/visitors", methods=["POST"], endpoint="api_visitors_create")
    def api_visitors_create():
        """Register a visitor and mark presence on the enrollment date."""

        try:
            data = json_body()
            class_date = date_field(data)
            require_class_day(class_date)

            student = students.create_visitor(**_roster_fields(data))
            record = container.ledger.mark_present(student.student_id, class_date)
            return ok(
                {
                    "message": f"{student.name} foi adicionado como Visitante e sua presença foi marcada.",
                    "student": student_json(student),
                    "attendance": attendance_json(record),
                },
                201,
            )
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("enrolling visitor")

    @app.route("/api/students/<int:student_id>", methods=["GET"], endpoint="api_student_detail")
    def api_student_detail(student_id: int):
        try:
            student = students.get(student_id)
            records = container.attendance_repo.list_for_student(student.student_id)
            return ok({"student": student_json(student, records)})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("loading student")

    @app.route("/api/students/<int:student_id>", methods=["PUT"], endpoint="api_student_update")
    def api_student_update(student_id: int):
        try:
            data = json_body()
            student = students.update_student(student_id, type=data.get("type"), **_roster_fields(data, partial=True))
            return ok({"message": f"{student.name} foi atualizado com sucesso.", "student": student_json(student)})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("updating student")

    @app.route("/api/students/<int:student_id>/member", methods=["POST"], endpoint="api_student_make_member")
    def api_student_make_member(student_id: int):
        try:
            student = students.make_member(student_id)
            return ok({"message": f"{student.name} agora é um membro!", "student": student_json(student)})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("promoting student")

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="api_student_delete")
    def api_student_delete(student_id: int):
        try:
            student = students.get(student_id)
            students.delete_student(student_id)
            return ok({"message": f"{student.name} foi excluído."})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            return unexpected_error_response("deleting student")
